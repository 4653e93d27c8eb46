"""FastAPI application exposing journey generation."""

from __future__ import annotations

import logging
import os
import uuid

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from journey.adapters.tool_factory import describe_active_tools
from journey.api.schemas import ErrorResponse, HealthResponse, JourneyCreateRequest, JourneyResponse
from journey.domain.exceptions import GeometryError, NoCandidateError, UnreachableAreaError
from journey.infrastructure.cache import isochrone_cache, place_cache
from journey.infrastructure.logging import StructuredLogger
from journey.security.key_manager import get_key_manager
from journey.services.journey_presenter import directions_waypoints, present_journey
from journey.services.journey_service import generate_journey
from journey.shared.exceptions import ProviderError

_api_logger = logging.getLogger("journey.api")

load_dotenv()

app = FastAPI(
    title="journey",
    version="1.0.0",
    docs_url="/docs" if os.getenv("ENABLE_DOCS", "false").lower() == "true" else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

_STATUS_BY_ERROR: tuple[tuple[type[Exception], int], ...] = (
    (NoCandidateError, 404),
    (UnreachableAreaError, 422),
    (GeometryError, 422),
    (ProviderError, 502),
)


def _error_response(exc: Exception, status_code: int, trace_id: str) -> JSONResponse:
    safe_msg = get_key_manager().scrub_text(str(exc))
    _api_logger.warning("journey request %s failed: %s: %s", trace_id, type(exc).__name__, safe_msg)
    body = ErrorResponse(error_type=type(exc).__name__, detail=safe_msg, trace_id=trace_id)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.get("/providers")
def providers():
    return {
        "tools": describe_active_tools(),
        "cache": {
            "isochrone": isochrone_cache.stats,
            "places": place_cache.stats,
        },
    }


@app.post(
    "/journeys",
    response_model=JourneyResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def create_journey(req: JourneyCreateRequest):
    trace_id = str(uuid.uuid4())[:8]
    try:
        request = req.to_request()
    except ValidationError as exc:
        return _error_response(exc, 422, trace_id)

    try:
        journey = await generate_journey(request, logger=StructuredLogger(trace_id=trace_id))
    except tuple(err for err, _ in _STATUS_BY_ERROR) as exc:
        status_code = next(code for err, code in _STATUS_BY_ERROR if isinstance(exc, err))
        return _error_response(exc, status_code, trace_id)

    return JourneyResponse(
        journey=journey.model_dump(mode="json"),
        geojson=present_journey(journey),
        waypoints=directions_waypoints(journey),
        trace_id=trace_id,
    )
