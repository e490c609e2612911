from __future__ import annotations

import logging

import pytest
import yaml

from core.tz import resolver as resolver_module
from core.tz.resolver import TimezoneResolver
from storage.zones import LOCAL_LOCATION, Zone, ZoneStore

DEFAULTS = [{"name": "Local", "location": "Local"}, {"name": "UTC", "location": "UTC"}]


@pytest.fixture(autouse=True)
def fixed_local_zone(monkeypatch):
    monkeypatch.setattr(resolver_module.tzlocal, "get_localzone_name", lambda: "Europe/Berlin")


@pytest.fixture
def store(tmp_path):
    return ZoneStore(tmp_path / "aeon.yaml", TimezoneResolver(), DEFAULTS)


def test_missing_file_uses_defaults(store):
    zones = store.load()
    assert zones == [
        Zone(name="Local", zone_id="Europe/Berlin", local=True),
        Zone(name="UTC", zone_id="UTC"),
    ]


def test_round_trip_keeps_local_symbolic(store):
    zones = [
        Zone(name="Home", zone_id="Europe/Berlin", local=True),
        Zone(name="NYC", zone_id="America/New_York"),
    ]
    store.save(zones)
    payload = yaml.safe_load(store.path.read_text(encoding="utf-8"))
    assert payload == {
        "zones": [
            {"name": "Home", "location": LOCAL_LOCATION},
            {"name": "NYC", "location": "America/New_York"},
        ]
    }
    assert store.load() == zones


def test_locations_are_resolved_when_not_zone_ids(store):
    store.path.write_text("zones:\n  - name: Office\n    location: nyc\n", encoding="utf-8")
    assert store.load() == [Zone(name="Office", zone_id="America/New_York")]


def test_unknown_locations_are_skipped(store, caplog):
    store.path.write_text(
        "zones:\n  - name: Lost\n    location: Atlantis\n  - name: Tokyo\n    location: Asia/Tokyo\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING):
        zones = store.load()
    assert zones == [Zone(name="Tokyo", zone_id="Asia/Tokyo")]
    assert "Lost" in caplog.text


def test_all_unknown_falls_back_to_defaults(store):
    store.path.write_text("zones:\n  - name: Lost\n    location: Atlantis\n", encoding="utf-8")
    assert [zone.name for zone in store.load()] == ["Local", "UTC"]


@pytest.mark.parametrize(
    "content",
    [
        "zones: [unclosed\n",
        "zones:\n  - name: ''\n    location: UTC\n",
        "zones: 42\n",
        "",
    ],
)
def test_unreadable_config_uses_defaults(store, content):
    store.path.write_text(content, encoding="utf-8")
    assert [zone.name for zone in store.load()] == ["Local", "UTC"]


def test_undecodable_config_uses_defaults(store):
    store.path.write_bytes(b"zones:\n  - name: \xff\xfe\n    location: UTC\n")
    assert [zone.name for zone in store.load()] == ["Local", "UTC"]
