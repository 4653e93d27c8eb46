"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from shapely.geometry import Polygon

from journey.domain.enums import TravelMode


class Coordinate(BaseModel):
    """WGS-84 position, longitude first."""

    model_config = ConfigDict(frozen=True)

    lon: float = Field(ge=-180.0, le=180.0)
    lat: float = Field(ge=-90.0, le=90.0)

    @classmethod
    def from_pair(cls, pair) -> "Coordinate":
        lon, lat = pair[0], pair[1]
        return cls(lon=float(lon), lat=float(lat))

    def as_pair(self) -> list[float]:
        return [self.lon, self.lat]

    def __str__(self) -> str:
        return f"{self.lon},{self.lat}"


class BoundaryFeature(BaseModel):
    """One raw boundary line as returned by a reachable-area provider."""

    model_config = ConfigDict(frozen=True)

    coordinates: tuple[Coordinate, ...]

    @classmethod
    def from_pairs(cls, pairs) -> "BoundaryFeature":
        return cls(coordinates=tuple(Coordinate.from_pair(p) for p in pairs))


class Contour(BaseModel):
    """Closed, simple polygon ring (first vertex repeated at the end)."""

    model_config = ConfigDict(frozen=True)

    ring: tuple[Coordinate, ...]

    @model_validator(mode="after")
    def _check_closed(self) -> "Contour":
        if len(self.ring) < 4:
            raise ValueError("a contour ring needs at least three distinct vertices")
        if self.ring[0] != self.ring[-1]:
            raise ValueError("a contour ring must be closed")
        return self

    @property
    def vertices(self) -> tuple[Coordinate, ...]:
        """Ring without the closing vertex."""
        return self.ring[:-1]

    def bounds(self) -> tuple[float, float, float, float]:
        """(west, south, east, north)"""
        lons = [c.lon for c in self.ring]
        lats = [c.lat for c in self.ring]
        return min(lons), min(lats), max(lons), max(lats)

    def to_shapely(self) -> Polygon:
        return Polygon([(c.lon, c.lat) for c in self.ring])


class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate
    place_name: str
    category: str = ""
    id: Optional[str] = None
    address: str = ""


class Journey(BaseModel):
    """Result of one generation request. Built only once every part is known."""

    model_config = ConfigDict(frozen=True)

    origin_point: Coordinate
    contour_ring: Contour
    bearing: float = Field(ge=0.0, lt=360.0)
    bearing_point: Coordinate
    destination_point: Coordinate
    destination_poi: Candidate
    travel_mode: TravelMode = TravelMode.CYCLING
    budget_minutes: float = Field(gt=0.0)

    @model_validator(mode="after")
    def _destination_matches_poi(self) -> "Journey":
        if self.destination_point != self.destination_poi.coordinate:
            raise ValueError("destination_point must be the chosen candidate's coordinate")
        return self
