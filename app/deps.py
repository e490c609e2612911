from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Tuple

import yaml
from dotenv import load_dotenv

from core.tz.resolver import MAX_SUGGESTIONS, ResolutionError, TimezoneResolver, local_zone_name
from storage.zones import Zone, ZoneStore

ROOT = Path(__file__).resolve().parent.parent
USER_CONFIG_NAME = ".aeon.yaml"
FALLBACK_ZONES = [{"name": "Local", "location": "Local"}, {"name": "UTC", "location": "UTC"}]

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def user_config_path() -> Path:
    override = os.getenv("AEON_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / USER_CONFIG_NAME


@dataclass
class AppState:
    defaults_cfg: Dict
    resolver: TimezoneResolver
    store: ZoneStore
    display_zone: str
    business_hours: Tuple[int, int]
    api_cfg: Dict
    zones: List[Zone] = field(default_factory=list)


def _pick_display_zone(resolver: TimezoneResolver) -> str:
    requested = os.getenv("AEON_DISPLAY_ZONE")
    if not requested:
        return local_zone_name()
    try:
        return resolver.resolve(requested)
    except ResolutionError as exc:
        logger.warning("AEON_DISPLAY_ZONE ignored: %s", exc)
        return local_zone_name()


@lru_cache(maxsize=1)
def get_app_state() -> AppState:
    load_dotenv(ROOT / ".env")
    defaults_cfg = _load_yaml(ROOT / "config" / "defaults.yaml")

    resolver_cfg = defaults_cfg.get("resolver", {})
    resolver = TimezoneResolver(max_suggestions=int(resolver_cfg.get("max_suggestions", MAX_SUGGESTIONS)))
    store = ZoneStore(user_config_path(), resolver, defaults_cfg.get("zones") or FALLBACK_ZONES)

    hours_cfg = defaults_cfg.get("business_hours", {})
    business_hours = (int(hours_cfg.get("start", 9)), int(hours_cfg.get("end", 17)))

    return AppState(
        defaults_cfg=defaults_cfg,
        resolver=resolver,
        store=store,
        display_zone=_pick_display_zone(resolver),
        business_hours=business_hours,
        api_cfg=defaults_cfg.get("api", {}),
        zones=store.load(),
    )


def get_resolver() -> TimezoneResolver:
    return get_app_state().resolver


def get_store() -> ZoneStore:
    return get_app_state().store


def get_zones() -> List[Zone]:
    return get_app_state().zones
