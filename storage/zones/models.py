"""Dataclasses describing the clocks a user has configured."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

LOCAL_LOCATION = "Local"


@dataclass(frozen=True)
class Zone:
    """A named clock backed by a canonical timezone id."""

    name: str
    zone_id: str
    local: bool = False

    @property
    def location(self) -> str:
        """Value written back to the config file."""
        return LOCAL_LOCATION if self.local else self.zone_id

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "location": self.location}
