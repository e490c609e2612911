"""Convert "<time> <zone> to <zone>" queries between time zones."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Dict, List, Optional

from core.tparse.parser import ParseError, parse_time
from core.tz.resolver import ResolutionError, TimezoneResolver, default_resolver, load_zone

SEPARATOR = " to "
USAGE = "Use format '3pm NYC to Berlin'"


class ConversionError(ValueError):
    """Raised for conversion or meeting queries that are not well formed."""


@dataclass
class ConversionResult:
    source_name: str
    source_zone: str
    source_time: dt.datetime
    target_name: str
    target_zone: str
    target_time: dt.datetime
    rule: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "source_name": self.source_name,
            "source_zone": self.source_zone,
            "source_time": self.source_time.isoformat(),
            "target_name": self.target_name,
            "target_zone": self.target_zone,
            "target_time": self.target_time.isoformat(),
            "rule": self.rule,
            "summary": format_conversion(self),
        }


def format_time(value: dt.datetime) -> str:
    """Render as "3:04 PM Mon Jan 02"."""
    hour = value.hour % 12 or 12
    return f"{hour}:{value:%M %p %a %b %d}"


def format_conversion(result: ConversionResult) -> str:
    return (
        f"{format_time(result.source_time)} in {result.source_name}  →  "
        f"{format_time(result.target_time)} in {result.target_name}"
    )


def _split_query(query: str) -> List[str]:
    parts = query.split(SEPARATOR)
    if len(parts) != 2:
        raise ConversionError(USAGE)
    source, target = (part.strip() for part in parts)
    if not target:
        raise ConversionError("Specify a target zone")
    return [source, target]


def convert(
    query: str,
    now: Optional[dt.datetime] = None,
    resolver: Optional[TimezoneResolver] = None,
) -> ConversionResult:
    """Parse and convert a query such as "tomorrow 3pm NYC to Berlin".

    The source part is split at the longest leading time expression that
    parses; the remaining words name the source zone.
    """
    resolver = resolver or default_resolver()
    query = query.strip()
    if not query:
        raise ConversionError("Empty input")
    source_part, target_name = _split_query(query)

    words = source_part.split()
    if len(words) < 2:
        raise ConversionError("Specify time and source zone")

    instant = now or dt.datetime.now(dt.timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=dt.timezone.utc)

    target_zone = resolver.resolve(target_name)
    for split in range(len(words) - 1, 0, -1):
        time_text = " ".join(words[:split])
        source_name = " ".join(words[split:])
        try:
            source_zone = resolver.resolve(source_name)
        except ResolutionError:
            if split == 1:
                raise
            continue
        reference = instant.astimezone(load_zone(source_zone))
        try:
            parsed = parse_time(time_text, reference)
        except ParseError:
            continue
        return ConversionResult(
            source_name=source_name,
            source_zone=source_zone,
            source_time=parsed.time,
            target_name=target_name,
            target_zone=target_zone,
            target_time=parsed.time.astimezone(load_zone(target_zone)),
            rule=parsed.rule,
        )
    raise ConversionError(f"Invalid time format '{words[0]}'")
