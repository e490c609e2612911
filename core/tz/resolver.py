"""Resolve free-text location names to canonical IANA timezone identifiers.

Resolution is layered so that the common case stays a dictionary hit:

1. normalise the query (lowercase, trimmed, underscores read as spaces)
2. ``local`` -> the process' own zone
3. alias table ("nyc" -> "new york")
4. generated city table ("new york" -> "America/New_York")
5. guess IANA keys from the raw query ("Asia/Tokyo", "Europe/" + "Berlin", ...)
6. substring suggestions for the error message

Only the final, failing path pays for the suggestion scan.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Dict, List, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

import tzlocal

from core.tz.aliases import ALIASES
from core.tz.cities_generated import CITIES

logger = logging.getLogger(__name__)

LOCAL_QUERY = "local"
FALLBACK_LOCAL_ZONE = "UTC"
REGION_PREFIXES = ("America/", "Europe/", "Asia/", "Africa/", "Australia/", "Pacific/")
MAX_SUGGESTIONS = 3

_WHITESPACE = re.compile(r"\s+")


class ResolutionError(ValueError):
    """Raised when a location cannot be mapped to a timezone."""

    def __init__(self, query: str, suggestions: Optional[List[str]] = None, message: Optional[str] = None):
        self.query = query
        self.suggestions = list(suggestions or [])
        if message is None:
            if self.suggestions:
                message = f"unknown location '{query}'. Did you mean: {', '.join(self.suggestions)}?"
            else:
                message = f"unknown location: {query}"
        super().__init__(message)


def normalize_query(query: str) -> str:
    """Lowercase, trim and read underscores as spaces."""
    text = query.strip().lower().replace("_", " ")
    return _WHITESPACE.sub(" ", text).strip()


@lru_cache(maxsize=1)
def _zone_index() -> Dict[str, str]:
    """Lowercase key -> canonical key for every zone the database ships."""
    return {key.lower(): key for key in available_timezones()}


def is_known_zone(key: str) -> bool:
    """Return True when the tz database accepts ``key`` verbatim."""
    if not key:
        return False
    try:
        ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def load_zone(zone_id: str) -> ZoneInfo:
    """Return the tz database rules for ``zone_id``."""
    if not is_known_zone(zone_id):
        raise ResolutionError(zone_id, message=f"unknown timezone: {zone_id}")
    return ZoneInfo(zone_id)


def local_zone_name() -> str:
    """Return the IANA name of the zone this process runs in."""
    try:
        name = tzlocal.get_localzone_name()
    except (LookupError, ValueError) as exc:
        logger.warning("Could not detect local timezone (%s); using %s", exc, FALLBACK_LOCAL_ZONE)
        return FALLBACK_LOCAL_ZONE
    if not name or not is_known_zone(name):
        logger.warning("Local timezone %r is not in the tz database; using %s", name, FALLBACK_LOCAL_ZONE)
        return FALLBACK_LOCAL_ZONE
    return name


class TimezoneResolver:
    """Map city names, aliases, abbreviations and IANA keys to zone identifiers."""

    def __init__(
        self,
        aliases: Mapping[str, str] = ALIASES,
        cities: Mapping[str, str] = CITIES,
        max_suggestions: int = MAX_SUGGESTIONS,
    ):
        self.aliases = aliases
        self.cities = cities
        self.max_suggestions = max_suggestions

    def resolve(self, query: str) -> str:
        """Return the canonical zone id for ``query`` or raise ResolutionError."""
        normalized = normalize_query(query)
        if not normalized:
            raise ResolutionError(query, message="empty location")

        if normalized == LOCAL_QUERY:
            return local_zone_name()

        name = self.aliases.get(normalized, normalized)
        zone = self.cities.get(name)
        if zone:
            logger.debug("Resolved %r via city table (%s -> %s)", query, name, zone)
            return zone

        guessed = self._guess_iana(query.strip())
        if guessed:
            logger.debug("Resolved %r via tz database guess -> %s", query, guessed)
            return guessed

        raise ResolutionError(query.strip(), self.suggest(normalized))

    def _candidates(self, raw: str) -> List[str]:
        underscored = raw.replace(" ", "_")
        candidates = [raw, underscored]
        candidates.extend(prefix + underscored for prefix in REGION_PREFIXES)
        return candidates

    def _guess_iana(self, raw: str) -> Optional[str]:
        """Try the raw query and region-prefixed variants against the tz database."""
        index = _zone_index()
        for candidate in self._candidates(raw):
            key = index.get(candidate.lower())
            if key:
                return key
            if is_known_zone(candidate):
                return candidate
        return None

    def suggest(self, normalized: str) -> List[str]:
        """Return up to ``max_suggestions`` alias/city keys containing the query."""
        if not normalized:
            return []
        suggestions: List[str] = []
        for table in (self.aliases, self.cities):
            for key in sorted(table):
                if normalized in key and key not in suggestions:
                    suggestions.append(key)
                    if len(suggestions) >= self.max_suggestions:
                        return suggestions
        return suggestions


@lru_cache(maxsize=1)
def default_resolver() -> TimezoneResolver:
    return TimezoneResolver()


def resolve(query: str) -> str:
    """Resolve ``query`` with the bundled alias and city tables."""
    return default_resolver().resolve(query)
