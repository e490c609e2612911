from __future__ import annotations

from fastapi import APIRouter

from app.deps import get_resolver
from app.schemas.conversion import ConvertRequest, ConvertResponse
from app.services.convert_service import convert

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert_endpoint(payload: ConvertRequest) -> ConvertResponse:
    result = convert(payload.query, resolver=get_resolver())
    return ConvertResponse(**result.to_dict())
