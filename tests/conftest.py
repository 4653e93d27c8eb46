"""pytest global fixtures: environment isolation and synthetic geodata."""

from __future__ import annotations

import math

import pytest

from journey.domain.models import BoundaryFeature, Candidate, Coordinate

SEATTLE_ORIGIN = Coordinate(lon=-122.2685, lat=47.5505)


@pytest.fixture(autouse=True)
def no_real_apis(monkeypatch):
    """Never reach Mapbox from tests."""
    for name in (
        "MAPBOX_ACCESS_TOKEN",
        "STRICT_EXTERNAL_DATA",
        "TOOL_ALLOWLIST",
        "JOURNEY_TRAVEL_MODE",
        "JOURNEY_CANDIDATE_LIMIT",
        "JOURNEY_MAX_ATTEMPTS",
        "TOOL_HTTP_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    from journey.infrastructure.cache import isochrone_cache, place_cache
    from journey.security.key_manager import get_key_manager

    get_key_manager().reload("MAPBOX_ACCESS_TOKEN")
    isochrone_cache.clear()
    place_cache.clear()
    yield
    isochrone_cache.clear()
    place_cache.clear()


def hexagon_pairs(center: Coordinate, dlon: float = 0.06, dlat: float = 0.04) -> list[tuple[float, float]]:
    """Closed hexagon, first vertex due north of ``center``, clockwise."""
    pairs = []
    for i in range(6):
        angle = math.radians(i * 60)
        pairs.append((center.lon + dlon * math.sin(angle), center.lat + dlat * math.cos(angle)))
    pairs.append(pairs[0])
    return pairs


@pytest.fixture
def origin() -> Coordinate:
    return SEATTLE_ORIGIN


@pytest.fixture
def hexagon(origin) -> list[tuple[float, float]]:
    return hexagon_pairs(origin)


@pytest.fixture
def hexagon_features(hexagon) -> list[BoundaryFeature]:
    return [BoundaryFeature.from_pairs(hexagon[:4]), BoundaryFeature.from_pairs(hexagon[3:])]


@pytest.fixture
def coffee_inside(origin) -> Candidate:
    return Candidate(
        id="c1",
        coordinate=Coordinate(lon=origin.lon + 0.01, lat=origin.lat + 0.005),
        place_name="Hillman City Coffee House",
        category="coffee",
    )


@pytest.fixture
def coffee_outside(origin) -> Candidate:
    return Candidate(
        id="c2",
        coordinate=Coordinate(lon=origin.lon + 0.2, lat=origin.lat),
        place_name="Far Away Espresso",
        category="coffee",
    )


class FakeIsochroneTool:
    def __init__(self, features):
        self.features = features
        self.calls = []

    async def fetch_isochrone(self, params):
        self.calls.append(params)
        return list(self.features)


class FakePlaceTool:
    def __init__(self, candidates):
        self.candidates = candidates
        self.calls = []

    async def search_places(self, params):
        self.calls.append(params)
        return list(self.candidates)


@pytest.fixture
def fake_tools():
    return FakeIsochroneTool, FakePlaceTool
