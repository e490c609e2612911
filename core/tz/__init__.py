"""City, alias and IANA-key resolution to timezone identifiers."""

from .resolver import ResolutionError, TimezoneResolver, load_zone, resolve

__all__ = ["ResolutionError", "TimezoneResolver", "load_zone", "resolve"]
