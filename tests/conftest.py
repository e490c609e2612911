from __future__ import annotations

import datetime as dt

import pytest

from app.deps import get_app_state
from core.tz import resolver as resolver_module

REFERENCE = dt.datetime(2026, 1, 16, 14, 30, tzinfo=dt.timezone.utc)  # a Friday


@pytest.fixture
def reference() -> dt.datetime:
    return REFERENCE


@pytest.fixture
def app_state(tmp_path, monkeypatch):
    monkeypatch.setenv("AEON_CONFIG", str(tmp_path / "aeon.yaml"))
    monkeypatch.setenv("AEON_DISPLAY_ZONE", "UTC")
    monkeypatch.setattr(resolver_module.tzlocal, "get_localzone_name", lambda: "Europe/Berlin")
    get_app_state.cache_clear()
    state = get_app_state()
    yield state
    get_app_state.cache_clear()
