from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from app.schemas.common import ZoneItem


class AddZoneRequest(BaseModel):
    name: str = Field(..., min_length=1, description="City, alias or IANA key")


class ZoneListResponse(BaseModel):
    zones: List[ZoneItem]
