"""Offline isochrone: a regular ring sized by mode speed and time budget."""

from __future__ import annotations

import math

from journey.domain.constants import KM_PER_DEGREE_LAT, MODE_SPEED_KMH
from journey.domain.models import BoundaryFeature, Coordinate
from journey.shared.exceptions import ProviderResponseError
from journey.tools.interfaces import IsochroneInput

_VERTICES = 24


def reach_radius_km(params: IsochroneInput) -> float:
    speed = MODE_SPEED_KMH.get(params.mode)
    if speed is None:
        raise ProviderResponseError("mock_isochrone", f"Unknown travel mode: {params.mode}")
    return speed * params.minutes / 60


def build_ring(origin: Coordinate, radius_km: float, vertices: int = _VERTICES) -> list[Coordinate]:
    dlat = radius_km / KM_PER_DEGREE_LAT
    dlon = radius_km / (KM_PER_DEGREE_LAT * math.cos(math.radians(origin.lat)))
    ring = []
    for i in range(vertices):
        angle = math.radians(i * 360.0 / vertices)
        ring.append(Coordinate(lon=origin.lon + math.sin(angle) * dlon, lat=origin.lat + math.cos(angle) * dlat))
    ring.append(ring[0])
    return ring


async def fetch_isochrone(params: IsochroneInput) -> list[BoundaryFeature]:
    ring = build_ring(params.origin, reach_radius_km(params))
    half = len(ring) // 2
    # two fragments, the way contour tracing splits long boundaries
    return [
        BoundaryFeature(coordinates=tuple(ring[: half + 1])),
        BoundaryFeature(coordinates=tuple(ring[half:])),
    ]
