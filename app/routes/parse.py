from __future__ import annotations

import datetime as dt

from fastapi import APIRouter

from app.deps import get_app_state
from app.schemas.conversion import ParseRequest, ParseResponse
from core.tparse.parser import parse_time
from core.tz.resolver import load_zone

router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
def parse_endpoint(payload: ParseRequest) -> ParseResponse:
    state = get_app_state()
    zone_id = state.resolver.resolve(payload.zone) if payload.zone else state.display_zone
    reference = dt.datetime.now(load_zone(zone_id))
    parsed = parse_time(payload.text, reference)
    return ParseResponse(text=parsed.original, zone_id=zone_id, time=parsed.time.isoformat(), rule=parsed.rule)
