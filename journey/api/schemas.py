"""API request/response models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from journey.domain.models import Coordinate
from journey.services.journey_service import JourneyRequest


class JourneyCreateRequest(BaseModel):
    origin: tuple[float, float] = Field(description="Starting point as [lon, lat]")
    is_one_way: bool = Field(default=True, description="False halves the outbound time budget")
    duration_minutes: int = Field(default=30, ge=1, le=120, description="Total travel time")
    category: str = Field(default="coffee", min_length=1, max_length=64, description="Destination category")
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible journey")

    def to_request(self) -> JourneyRequest:
        return JourneyRequest(
            origin=Coordinate.from_pair(self.origin),
            is_one_way=self.is_one_way,
            duration_minutes=self.duration_minutes,
            category=self.category,
            seed=self.seed,
        )


class JourneyResponse(BaseModel):
    journey: dict[str, Any]
    geojson: dict[str, Any]
    waypoints: dict[str, list[float]]
    trace_id: str = Field(default="")


class ErrorResponse(BaseModel):
    error_type: str
    detail: str
    trace_id: str = Field(default="")


class HealthResponse(BaseModel):
    status: str = "ok"
