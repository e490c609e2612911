from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str
    suggestions: List[str] = Field(default_factory=list)


class ZoneItem(BaseModel):
    name: str
    zone_id: str
    local: bool = False


class WindowItem(BaseModel):
    start: str
    end: str


class ResolveResponse(BaseModel):
    query: str
    zone_id: str
    utc_offset: Optional[str] = None
