from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.schemas.common import WindowItem


class ParseRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Expression such as 'next tue 10:30am'")
    zone: Optional[str] = Field(None, description="Zone the expression is read in; defaults to the display zone")


class ParseResponse(BaseModel):
    text: str
    zone_id: str
    time: str
    rule: str


class ConvertRequest(BaseModel):
    query: str = Field(..., min_length=1, description="e.g. '3pm NYC to Berlin'")


class ConvertResponse(BaseModel):
    source_name: str
    source_zone: str
    source_time: str
    target_name: str
    target_zone: str
    target_time: str
    rule: str
    summary: str


class MeetingRequest(BaseModel):
    zones: List[str] = Field(..., min_length=2)
    display_zone: Optional[str] = None


class MeetingZone(BaseModel):
    name: str
    zone_id: str
    start: str
    end: str


class MeetingResponse(BaseModel):
    display_zone: str
    business_hours: List[int]
    zones: List[MeetingZone]
    errors: Dict[str, str] = Field(default_factory=dict)
    overlap: Optional[WindowItem] = None


class ClockRowItem(BaseModel):
    name: str
    zone_id: str
    time: str
    date: str
    offset: str


class ClockResponse(BaseModel):
    rows: List[ClockRowItem]
