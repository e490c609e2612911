"""YAML-backed persistence for the user's list of clocks."""

from .models import LOCAL_LOCATION, Zone
from .store import ZoneStore

__all__ = ["LOCAL_LOCATION", "Zone", "ZoneStore"]
