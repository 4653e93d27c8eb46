"""Offline isochrone and place adapters."""

from __future__ import annotations

import asyncio

import pytest

from journey.adapters.isochrone import mock as mock_isochrone
from journey.adapters.places import mock as mock_places
from journey.domain.enums import TravelMode
from journey.planner.distance import distance_km
from journey.planner.geometry import assemble_polygon, contains
from journey.tools.interfaces import IsochroneInput, PlaceSearchInput


def test_mock_isochrone_fragments_assemble_around_origin(origin):
    features = asyncio.run(mock_isochrone.fetch_isochrone(IsochroneInput(origin=origin, minutes=30)))

    assert len(features) == 2
    contour = assemble_polygon(features)
    assert contains(contour, origin)
    assert len(contour.vertices) == 24


@pytest.mark.parametrize("mode, minutes, expected_km", [
    (TravelMode.CYCLING, 30, 7.5),
    (TravelMode.WALKING, 60, 5.0),
    (TravelMode.DRIVING, 15, 10.0),
])
def test_mock_isochrone_radius_follows_mode_speed(origin, mode, minutes, expected_km):
    params = IsochroneInput(origin=origin, mode=mode, minutes=minutes)
    assert mock_isochrone.reach_radius_km(params) == pytest.approx(expected_km)

    features = asyncio.run(mock_isochrone.fetch_isochrone(params))
    north = features[0].coordinates[0]
    assert distance_km(origin, north) == pytest.approx(expected_km, rel=0.01)


def test_mock_places_filter_by_category_and_sort_by_proximity(origin):
    params = PlaceSearchInput(category="Coffee", proximity=origin, limit=5)
    results = asyncio.run(mock_places.search_places(params))

    assert 0 < len(results) <= 5
    assert all("coffee" in r.category for r in results)
    distances = [distance_km(origin, r.coordinate) for r in results]
    assert distances == sorted(distances)


def test_mock_places_respect_bbox(origin):
    bbox = (origin.lon - 0.02, origin.lat - 0.02, origin.lon + 0.02, origin.lat + 0.02)
    results = asyncio.run(
        mock_places.search_places(PlaceSearchInput(category="bubble tea", proximity=origin, bbox=bbox))
    )
    for r in results:
        assert bbox[0] <= r.coordinate.lon <= bbox[2]
        assert bbox[1] <= r.coordinate.lat <= bbox[3]


def test_mock_places_unknown_category_is_empty(origin):
    params = PlaceSearchInput(category="ice rink", proximity=origin)
    assert asyncio.run(mock_places.search_places(params)) == []
