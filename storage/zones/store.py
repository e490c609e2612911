"""Load and save the configured clocks as YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml
from pydantic import ValidationError

from app.schemas.config import AeonConfig, ConfigZone
from core.tz.resolver import ResolutionError, TimezoneResolver, is_known_zone, local_zone_name
from .models import LOCAL_LOCATION, Zone

logger = logging.getLogger(__name__)


class ZoneStore:
    """Zone list persisted to a single YAML file (``~/.aeon.yaml`` by default)."""

    def __init__(self, path: Path, resolver: TimezoneResolver, defaults: Sequence[Dict[str, Any]] = ()):
        self.path = path
        self.resolver = resolver
        self.defaults = [ConfigZone.model_validate(item) for item in defaults]

    def _read(self) -> Optional[AeonConfig]:
        if not self.path.exists():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = yaml.safe_load(handle) or {}
            return AeonConfig.model_validate(payload)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as exc:
            logger.warning("Ignoring unreadable zone config %s: %s", self.path, exc)
            return None

    def to_zone(self, entry: ConfigZone) -> Optional[Zone]:
        """Turn one config entry into a Zone, or None when its location is unknown."""
        if entry.location.lower() == LOCAL_LOCATION.lower():
            return Zone(name=entry.name, zone_id=local_zone_name(), local=True)
        if is_known_zone(entry.location):
            return Zone(name=entry.name, zone_id=entry.location)
        try:
            return Zone(name=entry.name, zone_id=self.resolver.resolve(entry.location))
        except ResolutionError as exc:
            logger.warning("Skipping zone %r: %s", entry.name, exc)
            return None

    def load(self) -> List[Zone]:
        """Return the configured zones, falling back to the defaults when none load."""
        config = self._read()
        entries = config.zones if config and config.zones else self.defaults
        zones = [zone for zone in (self.to_zone(entry) for entry in entries) if zone is not None]
        if not zones and entries is not self.defaults:
            zones = [zone for zone in (self.to_zone(entry) for entry in self.defaults) if zone is not None]
        return zones

    def save(self, zones: Sequence[Zone]) -> None:
        """Write ``zones`` back to disk, replacing the previous list."""
        config = AeonConfig(zones=[ConfigZone(**zone.to_dict()) for zone in zones])
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(config.model_dump(), handle, sort_keys=False)
        logger.debug("Saved %d zones to %s", len(zones), self.path)
