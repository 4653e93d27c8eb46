"""Provider abstraction protocols and I/O schemas."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from journey.domain.enums import TravelMode
from journey.domain.models import BoundaryFeature, Candidate, Coordinate
from journey.shared.exceptions import ProviderError


class IsochroneInput(BaseModel):
    origin: Coordinate
    mode: TravelMode = TravelMode.CYCLING
    minutes: float = Field(gt=0.0, description="Outbound time budget in minutes")


class PlaceSearchInput(BaseModel):
    category: str = Field(min_length=1, description="Opaque category filter, e.g. 'coffee'")
    proximity: Coordinate
    bbox: Optional[tuple[float, float, float, float]] = Field(
        default=None, description="west, south, east, north"
    )
    limit: int = Field(default=10, ge=1, le=50)


@runtime_checkable
class IsochroneTool(Protocol):
    async def fetch_isochrone(self, params: IsochroneInput) -> list[BoundaryFeature]: ...


@runtime_checkable
class PlaceTool(Protocol):
    async def search_places(self, params: PlaceSearchInput) -> list[Candidate]: ...


__all__ = [
    "IsochroneInput",
    "PlaceSearchInput",
    "IsochroneTool",
    "PlaceTool",
    "ProviderError",
]
