"""Estimate overlapping business hours across several zones."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from app.services.convert_service import ConversionError
from app.utils.time_windows import TimeWindow, business_window, common_overlap
from core.tz.resolver import ResolutionError, TimezoneResolver, default_resolver, load_zone

DEFAULT_BUSINESS_HOURS = (9, 17)
MIN_ZONES = 2


@dataclass
class ZoneHours:
    """One zone's working window, shown in the display zone."""

    name: str
    zone_id: str
    window: TimeWindow

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "zone_id": self.zone_id,
            "start": self.window.start.isoformat(),
            "end": self.window.end.isoformat(),
        }


@dataclass
class MeetingPlan:
    display_zone: str
    business_hours: Tuple[int, int]
    zones: List[ZoneHours] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)
    overlap: Optional[TimeWindow] = None

    def to_dict(self) -> Dict:
        return {
            "display_zone": self.display_zone,
            "business_hours": list(self.business_hours),
            "zones": [item.to_dict() for item in self.zones],
            "errors": dict(self.errors),
            "overlap": None
            if self.overlap is None
            else {"start": self.overlap.start.isoformat(), "end": self.overlap.end.isoformat()},
        }


def split_zone_list(text: str) -> List[str]:
    """Split "NYC, London, Tokyo" into trimmed, non-empty names."""
    return [name.strip() for name in text.split(",") if name.strip()]


def plan_meeting(
    names: Sequence[str],
    display_zone: str,
    now: Optional[dt.datetime] = None,
    business_hours: Tuple[int, int] = DEFAULT_BUSINESS_HOURS,
    resolver: Optional[TimezoneResolver] = None,
) -> MeetingPlan:
    """Lay each zone's working day side by side and intersect them.

    Each zone contributes ``business_hours`` on its own current local date.
    Names that fail to resolve are reported in ``errors`` and skipped.
    """
    resolver = resolver or default_resolver()
    names = [name.strip() for name in names if name.strip()]
    if len(names) < MIN_ZONES:
        raise ConversionError(f"Enter at least {MIN_ZONES} zones")
    start_hour, end_hour = business_hours
    if not (0 <= start_hour < end_hour <= 24):
        raise ConversionError(f"Invalid business hours {start_hour}-{end_hour}")

    display = load_zone(display_zone)
    instant = now or dt.datetime.now(dt.timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=dt.timezone.utc)

    plan = MeetingPlan(display_zone=display_zone, business_hours=business_hours)
    for name in names:
        try:
            zone_id = resolver.resolve(name)
        except ResolutionError as exc:
            plan.errors[name] = str(exc)
            continue
        zone = load_zone(zone_id)
        local_day = instant.astimezone(zone).date()
        window = business_window(zone, local_day, start_hour, end_hour)
        plan.zones.append(ZoneHours(name=name, zone_id=zone_id, window=window.astimezone(display)))

    overlap = common_overlap(item.window for item in plan.zones) if len(plan.zones) >= MIN_ZONES else None
    plan.overlap = overlap.astimezone(display) if overlap else None
    return plan


def _clock(value: dt.datetime) -> str:
    hour = value.hour % 12 or 12
    return f"{hour}:{value:%M %p}"


def format_meeting(plan: MeetingPlan) -> str:
    start_hour, end_hour = plan.business_hours
    lines = [f"Business Hours ({start_hour}:00 - {end_hour}:00 local), shown in {plan.display_zone}:", ""]
    for item in plan.zones:
        start, end = item.window.start, item.window.end
        lines.append(f"{item.name:<15}: {start:%a} {_clock(start)} - {end:%a} {_clock(end)}")
    for name, message in plan.errors.items():
        lines.append(f"!  {name}: {message}")
    lines.append("")
    if plan.overlap is None:
        lines.append("No overlapping business hours.")
    else:
        start, end = plan.overlap.start, plan.overlap.end
        lines.append(f"Overlap: {start:%a} {_clock(start)} - {end:%a} {_clock(end)}")
    return "\n".join(lines)
