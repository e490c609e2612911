from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Query

from app.deps import get_resolver
from app.schemas.common import ResolveResponse
from app.services.clock_service import format_offset
from core.tz.resolver import load_zone

router = APIRouter()


@router.get("/resolve", response_model=ResolveResponse)
def resolve_endpoint(q: str = Query(..., min_length=1)) -> ResolveResponse:
    zone_id = get_resolver().resolve(q)
    now = dt.datetime.now(load_zone(zone_id))
    return ResolveResponse(query=q, zone_id=zone_id, utc_offset=format_offset(now))
