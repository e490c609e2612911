"""Add, remove and list the clocks shown by the clock view."""

from __future__ import annotations

from typing import List

from app.deps import get_app_state
from core.tz.resolver import LOCAL_QUERY, normalize_query
from storage.zones import Zone


class ZoneConflictError(ValueError):
    """Raised when a zone change would leave the list inconsistent."""


def list_zones() -> List[Zone]:
    return list(get_app_state().zones)


def add_zone(name: str) -> Zone:
    """Resolve ``name`` and append it; the same zone id may only appear once."""
    state = get_app_state()
    name = name.strip()
    zone_id = state.resolver.resolve(name)
    if any(existing.zone_id == zone_id for existing in state.zones):
        raise ZoneConflictError(f"zone '{name}' already added")
    zone = Zone(name=name, zone_id=zone_id, local=normalize_query(name) == LOCAL_QUERY)
    state.zones.append(zone)
    state.store.save(state.zones)
    return zone


def remove_zone(name: str) -> Zone:
    """Remove the zone displayed as ``name`` (case-insensitive); the last zone stays."""
    state = get_app_state()
    wanted = name.strip().lower()
    for index, zone in enumerate(state.zones):
        if zone.name.lower() == wanted:
            break
    else:
        raise ZoneConflictError(f"no zone named '{name}'")
    if len(state.zones) <= 1:
        raise ZoneConflictError("cannot remove the last zone")
    removed = state.zones.pop(index)
    state.store.save(state.zones)
    return removed
