"""Render the configured zones as a table of clocks."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from core.tz.resolver import load_zone
from storage.zones import Zone


@dataclass
class ClockRow:
    """One line of the clock table."""

    name: str
    zone_id: str
    time: str
    date: str
    offset: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "zone_id": self.zone_id,
            "time": self.time,
            "date": self.date,
            "offset": self.offset,
        }


def format_offset(value: dt.datetime) -> str:
    """Return the UTC offset as "+05:30" / "-07:00"."""
    offset = value.utcoffset() or dt.timedelta(0)
    sign = "-" if offset < dt.timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def clock_rows(zones: Sequence[Zone], now: Optional[dt.datetime] = None) -> List[ClockRow]:
    """Show every zone at ``now`` (defaults to the current instant)."""
    instant = now or dt.datetime.now(dt.timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=dt.timezone.utc)
    rows: List[ClockRow] = []
    for zone in zones:
        local = instant.astimezone(load_zone(zone.zone_id))
        rows.append(
            ClockRow(
                name=zone.name,
                zone_id=zone.zone_id,
                time=local.strftime("%H:%M:%S"),
                date=local.strftime("%a, %b %d"),
                offset=format_offset(local),
            )
        )
    return rows


def format_clock_line(row: ClockRow) -> str:
    return f"{row.name:<15}  {row.time}  {row.date}  (UTC{row.offset})"
