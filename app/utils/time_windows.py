"""Business-hour windows and their overlaps across time zones.

A meeting planner needs to compare "9 to 5 in Tokyo" with "9 to 5 in Berlin".
Each local working day is turned into a closed-open UTC interval so windows
from different zones can be intersected directly, then rendered back in
whatever zone the user is looking at.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable, Optional
from zoneinfo import ZoneInfo


def _ensure_timezone(value: dt.datetime) -> dt.datetime:
    """Normalise a datetime object so that it is explicitly expressed in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


@dataclass(frozen=True)
class TimeWindow:
    """Closed-open UTC interval, e.g. one zone's working hours on one day."""

    start: dt.datetime
    end: dt.datetime

    @property
    def duration(self) -> float:
        """Return the window length in seconds, clamped at zero for inverted ranges."""
        return max(0.0, (self.end - self.start).total_seconds())

    def intersects(self, other: "TimeWindow") -> bool:
        """Return True when two windows overlap in time."""
        return not (self.end <= other.start or other.end <= self.start)

    def intersection(self, other: "TimeWindow") -> Optional["TimeWindow"]:
        """Return the overlapping segment between windows, or None when disjoint."""
        if not self.intersects(other):
            return None
        return TimeWindow(start=max(self.start, other.start), end=min(self.end, other.end))

    def astimezone(self, tz: dt.tzinfo) -> "TimeWindow":
        return TimeWindow(start=self.start.astimezone(tz), end=self.end.astimezone(tz))


def make_window(start: dt.datetime, end: dt.datetime) -> TimeWindow:
    """Build a well-ordered, UTC-aligned time window."""
    start = _ensure_timezone(start)
    end = _ensure_timezone(end)
    if start > end:
        start, end = end, start
    return TimeWindow(start=start, end=end)


def business_window(zone: ZoneInfo, day: dt.date, start_hour: int, end_hour: int) -> TimeWindow:
    """Return ``start_hour``-``end_hour`` local time on ``day`` in ``zone`` as a UTC window."""
    start = dt.datetime(day.year, day.month, day.day, start_hour, tzinfo=zone)
    if end_hour >= 24:
        end = dt.datetime(day.year, day.month, day.day, tzinfo=zone) + dt.timedelta(days=1)
    else:
        end = dt.datetime(day.year, day.month, day.day, end_hour, tzinfo=zone)
    return make_window(start, end)


def common_overlap(windows: Iterable[TimeWindow]) -> Optional[TimeWindow]:
    """Intersect every window; None when any pair is disjoint or nothing was given."""
    overlap: Optional[TimeWindow] = None
    for index, window in enumerate(windows):
        if index == 0:
            overlap = window
            continue
        if overlap is None:
            return None
        overlap = overlap.intersection(window)
    if overlap is None or overlap.duration == 0:
        return None
    return overlap
