from __future__ import annotations

import pytest
import yaml

from app.services.zone_service import ZoneConflictError, add_zone, list_zones, remove_zone
from core.tz.resolver import ResolutionError


def saved_names(state):
    payload = yaml.safe_load(state.store.path.read_text(encoding="utf-8"))
    return [entry["name"] for entry in payload["zones"]]


def test_defaults_are_listed(app_state):
    assert [zone.name for zone in list_zones()] == ["Local", "UTC"]


def test_add_zone_persists(app_state):
    zone = add_zone(" Tokyo ")
    assert zone.name == "Tokyo"
    assert zone.zone_id == "Asia/Tokyo"
    assert saved_names(app_state) == ["Local", "UTC", "Tokyo"]


def test_add_duplicate_zone_is_rejected(app_state):
    add_zone("Tokyo")
    with pytest.raises(ZoneConflictError, match="already added"):
        add_zone("asia/tokyo")


def test_add_unknown_zone_raises(app_state):
    with pytest.raises(ResolutionError):
        add_zone("Atlantis")
    assert len(list_zones()) == 2


def test_remove_zone_is_case_insensitive(app_state):
    add_zone("Tokyo")
    removed = remove_zone("TOKYO")
    assert removed.zone_id == "Asia/Tokyo"
    assert saved_names(app_state) == ["Local", "UTC"]


def test_remove_missing_zone(app_state):
    with pytest.raises(ZoneConflictError, match="no zone named"):
        remove_zone("Paris")


def test_last_zone_cannot_be_removed(app_state):
    remove_zone("UTC")
    with pytest.raises(ZoneConflictError, match="last zone"):
        remove_zone("Local")


def test_local_zone_is_saved_symbolically(app_state):
    remove_zone("Local")
    zone = add_zone("Local")
    assert zone.local
    assert zone.zone_id == "Europe/Berlin"
    payload = yaml.safe_load(app_state.store.path.read_text(encoding="utf-8"))
    assert payload["zones"][-1] == {"name": "Local", "location": "Local"}
