"""Parse short time expressions into concrete datetimes.

Users type things like "3pm", "tomorrow noon", "next tue 10:30am" or
"in 2 hours". Every expression is resolved against a caller-supplied reference
instant, so parsing never reads the wall clock and is fully deterministic.

Each rule is a small function returning ``None`` when the text is not its
shape. ``parse_time`` walks the rules in order and only raises once every rule
has declined. Results keep the reference's tzinfo: wall-clock components are
set on the reference date (or a date derived from it) in the reference's zone.
"""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

DEFAULT_HOUR = 9

# Tried in order before the regex fallback; strptime matches %p case-insensitively.
CLOCK_FORMATS = ("%I%p", "%I:%M%p", "%H:%M", "%H")
CLOCK_PATTERN = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)?$")
MINUTES_PATTERN = re.compile(r":\d{2}\s*(?:am|pm)?$")

RELATIVE_PATTERN = re.compile(r"^in\s+(\d+)\s*([a-z]+)$")
DAY_RELATIVE_PATTERN = re.compile(r"^(tomorrow|yesterday)(?:\s+(?:at\s+)?(.+))?$")
NEXT_WEEKDAY_PATTERN = re.compile(r"^next\s+([a-z]+)(?:\s+(?:at\s+)?(.+))?$")
ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:\s+(?:at\s+)?(.+))?$")
MONTH_DATE_PATTERN = re.compile(
    r"^([a-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?(?:,?\s+(\d{4}))?(?:,?\s+(?:at\s+)?(.+))?$"
)
NUMERIC_DATE_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})(?:/(\d{4}))?(?:\s+(?:at\s+)?(.+))?$")

_WHITESPACE = re.compile(r"\s+")

UNITS: Dict[str, str] = {
    "hour": "hour",
    "hours": "hour",
    "minute": "minute",
    "minutes": "minute",
    "min": "minute",
    "mins": "minute",
    "day": "day",
    "days": "day",
}

WEEKDAYS: Dict[str, int] = {
    "monday": 0,
    "mon": 0,
    "tuesday": 1,
    "tue": 1,
    "tues": 1,
    "wednesday": 2,
    "wed": 2,
    "thursday": 3,
    "thu": 3,
    "thur": 3,
    "thurs": 3,
    "friday": 4,
    "fri": 4,
    "saturday": 5,
    "sat": 5,
    "sunday": 6,
    "sun": 6,
}

MONTHS: Dict[str, int] = {
    "january": 1,
    "jan": 1,
    "february": 2,
    "feb": 2,
    "march": 3,
    "mar": 3,
    "april": 4,
    "apr": 4,
    "may": 5,
    "june": 6,
    "jun": 6,
    "july": 7,
    "jul": 7,
    "august": 8,
    "aug": 8,
    "september": 9,
    "sep": 9,
    "sept": 9,
    "october": 10,
    "oct": 10,
    "november": 11,
    "nov": 11,
    "december": 12,
    "dec": 12,
}


class ParseError(ValueError):
    """Raised when no rule can turn the input into a time."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


@dataclass(frozen=True)
class ParsedTime:
    """A resolved instant plus the input it came from."""

    time: dt.datetime
    original: str
    rule: str


def _normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text.strip().lower())


def _at_clock(base: dt.datetime, hour: int, minute: int = 0) -> dt.datetime:
    return base.replace(hour=hour, minute=minute, second=0, microsecond=0)


def _on_date(reference: dt.datetime, year: int, month: int, day: int) -> Optional[dt.datetime]:
    """Move ``reference`` to another calendar date, or None for impossible dates."""
    try:
        return reference.replace(year=year, month=month, day=day)
    except ValueError:
        return None


def _with_optional_time(base: dt.datetime, suffix: Optional[str]) -> Optional[dt.datetime]:
    """Anchor a clock-time suffix to ``base``'s date; no suffix means 09:00."""
    if not suffix:
        return _at_clock(base, DEFAULT_HOUR)
    return parse_clock_time(suffix, base)


def parse_clock_time(text: str, base: dt.datetime) -> Optional[dt.datetime]:
    """Parse "3pm", "3:30pm", "15:04", "3" or "15" onto ``base``'s date."""
    text = _normalize(text)
    if text == "noon":
        return _at_clock(base, 12)
    if text == "midnight":
        return _at_clock(base, 0)

    if ":" in text and not MINUTES_PATTERN.search(text):
        return None

    for fmt in CLOCK_FORMATS:
        try:
            parsed = dt.datetime.strptime(text, fmt)
        except ValueError:
            continue
        return _at_clock(base, parsed.hour, parsed.minute)

    match = CLOCK_PATTERN.match(text)
    if not match:
        return None
    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    meridiem = match.group(3)
    if meridiem == "pm" and hour < 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0
    if not (0 <= hour < 24 and 0 <= minute < 60):
        return None
    return _at_clock(base, hour, minute)


def _parse_keyword(text: str, reference: dt.datetime) -> Optional[dt.datetime]:
    if text == "now":
        return reference
    if text == "noon":
        return _at_clock(reference, 12)
    if text == "midnight":
        return _at_clock(reference, 0)
    return None


def _add_elapsed(reference: dt.datetime, delta: dt.timedelta) -> dt.datetime:
    """Add absolute elapsed time, so DST transitions shift the wall clock."""
    if reference.tzinfo is None:
        return reference + delta
    return (reference.astimezone(dt.timezone.utc) + delta).astimezone(reference.tzinfo)


def _parse_relative(text: str, reference: dt.datetime) -> Optional[dt.datetime]:
    """Handle "in <N> <unit>" for hours, minutes and days."""
    match = RELATIVE_PATTERN.match(text)
    if not match:
        return None
    unit = UNITS.get(match.group(2))
    if unit is None:
        return None
    amount = int(match.group(1))
    try:
        if unit == "day":
            return reference + dt.timedelta(days=amount)
        if unit == "hour":
            return _add_elapsed(reference, dt.timedelta(hours=amount))
        return _add_elapsed(reference, dt.timedelta(minutes=amount))
    except OverflowError:
        return None


def _parse_day_relative(text: str, reference: dt.datetime) -> Optional[dt.datetime]:
    match = DAY_RELATIVE_PATTERN.match(text)
    if not match:
        return None
    days = 1 if match.group(1) == "tomorrow" else -1
    return _with_optional_time(reference + dt.timedelta(days=days), match.group(2))


def _parse_next_weekday(text: str, reference: dt.datetime) -> Optional[dt.datetime]:
    """Handle "next <weekday> [time]"; the target is always after today."""
    match = NEXT_WEEKDAY_PATTERN.match(text)
    if not match:
        return None
    target = WEEKDAYS.get(match.group(1))
    if target is None:
        return None
    delta = target - reference.weekday()
    if delta <= 0:
        delta += 7
    return _with_optional_time(reference + dt.timedelta(days=delta), match.group(2))


def _parse_explicit_date(text: str, reference: dt.datetime) -> Optional[dt.datetime]:
    """Handle "2026-01-20", "jan 20", "february 14, 2027" and "3/15", each with an optional time."""
    match = ISO_DATE_PATTERN.match(text)
    if match:
        year, month, day = (int(match.group(i)) for i in (1, 2, 3))
        suffix = match.group(4)
    else:
        match = MONTH_DATE_PATTERN.match(text)
        if match and match.group(1) in MONTHS:
            month = MONTHS[match.group(1)]
            day = int(match.group(2))
            year = int(match.group(3)) if match.group(3) else reference.year
            suffix = match.group(4)
        else:
            match = NUMERIC_DATE_PATTERN.match(text)
            if not match:
                return None
            month, day = int(match.group(1)), int(match.group(2))
            year = int(match.group(3)) if match.group(3) else reference.year
            suffix = match.group(4)

    base = _on_date(reference, year, month, day)
    if base is None:
        return None
    return _with_optional_time(base, suffix)


SubParser = Callable[[str, dt.datetime], Optional[dt.datetime]]

RULES: Tuple[Tuple[str, SubParser], ...] = (
    ("keyword", _parse_keyword),
    ("relative", _parse_relative),
    ("day_relative", _parse_day_relative),
    ("next_weekday", _parse_next_weekday),
    ("clock", parse_clock_time),
    ("date", _parse_explicit_date),
)


def parse_time(text: str, reference: dt.datetime) -> ParsedTime:
    """Resolve ``text`` against ``reference``, trying each rule in order."""
    normalized = _normalize(text)
    if not normalized:
        raise ParseError("empty time string", text)
    for rule, sub_parser in RULES:
        result = sub_parser(normalized, reference)
        if result is not None:
            return ParsedTime(time=result, original=normalized, rule=rule)
    raise ParseError(f"could not parse time: {normalized}", text)
