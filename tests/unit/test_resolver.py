from __future__ import annotations

import pytest

from core.tz import resolver as resolver_module
from core.tz.aliases import ALIASES
from core.tz.cities_generated import CITIES
from core.tz.resolver import (
    ResolutionError,
    TimezoneResolver,
    is_known_zone,
    load_zone,
    normalize_query,
    resolve,
)


def test_normalize_query():
    assert normalize_query("  New_York ") == "new york"
    assert normalize_query("SAO   PAULO") == "sao paulo"


def test_alias_resolves_through_city_table():
    assert resolve("nyc") == "America/New_York"
    assert resolve("the bay") == "America/Los_Angeles"
    assert resolve("ldn") == "Europe/London"


def test_resolution_ignores_case_and_underscores():
    expected = resolve("nyc")
    for query in ("NYC", "Nyc", "new_york", "New York", "  new   york  ", "NEW_YORK"):
        assert resolve(query) == expected


def test_city_lookup_includes_ascii_variants():
    assert resolve("Berlin") == "Europe/Berlin"
    assert resolve("São Paulo") == "America/Sao_Paulo"
    assert resolve("sao_paulo") == "America/Sao_Paulo"
    assert resolve("Zürich") == resolve("zurich") == "Europe/Zurich"


def test_fully_qualified_keys_resolve_without_city_entry():
    assert resolve("Asia/Tokyo") == "Asia/Tokyo"
    assert resolve("asia/tokyo") == "Asia/Tokyo"
    assert resolve("UTC") == "UTC"


def test_region_prefix_guess_finds_unlisted_cities():
    assert "yakutsk" not in CITIES
    assert resolve("Yakutsk") == "Asia/Yakutsk"
    assert resolve("port of spain") == "America/Port_of_Spain"


def test_abbreviation_aliases():
    assert resolve("PST") == "America/Los_Angeles"
    assert resolve("jst") == "Asia/Tokyo"


def test_injected_tables_are_used():
    custom = TimezoneResolver(aliases={"hq": "gotham"}, cities={"gotham": "America/New_York"})
    assert custom.resolve("HQ") == "America/New_York"
    with pytest.raises(ResolutionError):
        custom.resolve("nyc")


def test_local_bypasses_tables(monkeypatch):
    monkeypatch.setattr(resolver_module.tzlocal, "get_localzone_name", lambda: "Asia/Kolkata")
    empty = TimezoneResolver(aliases={}, cities={})
    assert empty.resolve("Local") == "Asia/Kolkata"
    assert empty.resolve("local") == "Asia/Kolkata"


def test_local_falls_back_to_utc_when_undetectable(monkeypatch):
    def boom():
        raise LookupError("no zone configured")

    monkeypatch.setattr(resolver_module.tzlocal, "get_localzone_name", boom)
    assert resolve("Local") == "UTC"


def test_local_resolves_to_a_database_key():
    assert is_known_zone(resolve("Local"))


def test_unknown_location_without_suggestions():
    with pytest.raises(ResolutionError) as excinfo:
        resolve("asdfghjkl")
    assert excinfo.value.suggestions == []
    assert str(excinfo.value) == "unknown location: asdfghjkl"


def test_unknown_location_with_suggestions():
    with pytest.raises(ResolutionError) as excinfo:
        resolve("york")
    assert "new york" in excinfo.value.suggestions
    assert "Did you mean" in str(excinfo.value)


def test_suggestions_are_capped():
    with pytest.raises(ResolutionError) as excinfo:
        resolve("an")
    assert len(excinfo.value.suggestions) == 3
    assert all("an" in item for item in excinfo.value.suggestions)


def test_suggestion_cap_is_configurable():
    wide = TimezoneResolver(max_suggestions=5)
    assert len(wide.suggest("an")) == 5


def test_empty_query_fails():
    with pytest.raises(ResolutionError, match="empty location"):
        resolve("   ")


def test_load_zone_rejects_unknown_keys():
    assert load_zone("Europe/Paris").key == "Europe/Paris"
    with pytest.raises(ResolutionError):
        load_zone("Nowhere/Special")
    assert not is_known_zone("../etc/passwd")


def test_every_alias_points_at_a_city():
    for alias, city in ALIASES.items():
        assert city in CITIES, alias


def test_every_resolver_output_loads():
    for zone_id in set(CITIES.values()):
        assert is_known_zone(zone_id), zone_id
    for alias in ALIASES:
        load_zone(resolve(alias))


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CITIES["atlantis"] = "Atlantic/Azores"  # type: ignore[index]
    with pytest.raises(TypeError):
        ALIASES["atl"] = "atlantis"  # type: ignore[index]
