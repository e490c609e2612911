from __future__ import annotations

from fastapi import APIRouter

from app.deps import get_app_state
from app.schemas.conversion import MeetingRequest, MeetingResponse
from app.services.meeting_service import plan_meeting

router = APIRouter()


@router.post("/meeting", response_model=MeetingResponse)
def meeting_endpoint(payload: MeetingRequest) -> MeetingResponse:
    state = get_app_state()
    display_zone = state.resolver.resolve(payload.display_zone) if payload.display_zone else state.display_zone
    plan = plan_meeting(
        payload.zones,
        display_zone,
        business_hours=state.business_hours,
        resolver=state.resolver,
    )
    return MeetingResponse(**plan.to_dict())
