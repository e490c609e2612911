from __future__ import annotations

from fastapi import APIRouter, status

from app.schemas.common import ZoneItem
from app.schemas.conversion import ClockResponse, ClockRowItem
from app.schemas.zones import AddZoneRequest, ZoneListResponse
from app.services.clock_service import clock_rows
from app.services.zone_service import add_zone, list_zones, remove_zone

router = APIRouter()


def _item(zone) -> ZoneItem:
    return ZoneItem(name=zone.name, zone_id=zone.zone_id, local=zone.local)


@router.get("/zones", response_model=ZoneListResponse)
def zones_endpoint() -> ZoneListResponse:
    return ZoneListResponse(zones=[_item(zone) for zone in list_zones()])


@router.post("/zones", response_model=ZoneItem, status_code=status.HTTP_201_CREATED)
def add_zone_endpoint(payload: AddZoneRequest) -> ZoneItem:
    return _item(add_zone(payload.name))


@router.delete("/zones/{name}", response_model=ZoneItem)
def remove_zone_endpoint(name: str) -> ZoneItem:
    return _item(remove_zone(name))


@router.get("/clock", response_model=ClockResponse)
def clock_endpoint() -> ClockResponse:
    return ClockResponse(rows=[ClockRowItem(**row.to_dict()) for row in clock_rows(list_zones())])
