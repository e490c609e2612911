from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.schemas.common import ErrorDetail
from app.services.convert_service import ConversionError
from app.services.zone_service import ZoneConflictError
from core.tparse.parser import ParseError
from core.tz.resolver import ResolutionError


def _error(status_code: int, message: str, suggestions=None) -> JSONResponse:
    detail = ErrorDetail(message=message, suggestions=list(suggestions or []))
    return JSONResponse(status_code=status_code, content={"detail": detail.model_dump()})


def create_app() -> FastAPI:
    app = FastAPI(title="aeon API", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    @app.exception_handler(ResolutionError)
    def resolution_error(_request: Request, exc: ResolutionError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc), exc.suggestions)

    @app.exception_handler(ParseError)
    def parse_error(_request: Request, exc: ParseError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(ConversionError)
    def conversion_error(_request: Request, exc: ConversionError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(ZoneConflictError)
    def zone_conflict(_request: Request, exc: ZoneConflictError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    from app.routes import convert, meeting, parse, resolve, zones  # noqa: WPS433

    app.include_router(resolve.router)
    app.include_router(parse.router)
    app.include_router(convert.router)
    app.include_router(meeting.router)
    app.include_router(zones.router)
    return app


app = create_app()
