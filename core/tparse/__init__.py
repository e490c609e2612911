"""Natural-language and clock-time expression parsing."""

from .parser import ParseError, ParsedTime, parse_clock_time, parse_time

__all__ = ["ParseError", "ParsedTime", "parse_clock_time", "parse_time"]
