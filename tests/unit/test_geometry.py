"""Geometry utilities: ring assembly, bearings, ray casting, containment."""

from __future__ import annotations

import random

import pytest
from shapely.geometry import Point

from journey.domain.exceptions import GeometryError, NoIntersectionError
from journey.domain.models import BoundaryFeature, Candidate, Contour, Coordinate
from journey.planner.geometry import (
    assemble_polygon,
    contains,
    points_within_polygon,
    ray_intersect,
    sample_bearing,
)

SQUARE = [(-1.0, -1.0), (-1.0, 1.0), (1.0, 1.0), (1.0, -1.0), (-1.0, -1.0)]


def _square() -> Contour:
    return Contour(ring=tuple(Coordinate(lon=x, lat=y) for x, y in SQUARE))


def _pairs(contour: Contour) -> list[tuple[float, float]]:
    return [(c.lon, c.lat) for c in contour.vertices]


def _is_rotation(result: list, expected: list) -> bool:
    if len(result) != len(expected) or expected[0] not in result:
        return False
    start = result.index(expected[0])
    return result[start:] + result[:start] == expected


def test_single_closed_feature_is_kept_as_is():
    contour = assemble_polygon([BoundaryFeature.from_pairs(SQUARE)])
    assert [(c.lon, c.lat) for c in contour.ring] == SQUARE


def test_unordered_fragments_close_into_the_same_loop(hexagon):
    fragments = [hexagon[4:], hexagon[:3], hexagon[2:5]]
    contour = assemble_polygon([BoundaryFeature.from_pairs(f) for f in fragments])

    assert contour.ring[0] == contour.ring[-1]
    assert _is_rotation(_pairs(contour), hexagon[:-1])


def test_ring_follows_the_first_fragment_direction(hexagon):
    reversed_loop = list(reversed(hexagon))
    fragments = [reversed_loop[:4], hexagon[:4]]
    contour = assemble_polygon([BoundaryFeature.from_pairs(f) for f in fragments])

    assert _is_rotation(_pairs(contour), reversed_loop[:-1])


def test_gap_between_fragments_is_rejected(hexagon):
    with pytest.raises(GeometryError):
        assemble_polygon([BoundaryFeature.from_pairs(hexagon[:3]), BoundaryFeature.from_pairs(hexagon[4:])])


def test_two_disjoint_rings_are_rejected():
    shifted = [(x + 5.0, y) for x, y in SQUARE]
    with pytest.raises(GeometryError):
        assemble_polygon([BoundaryFeature.from_pairs(SQUARE), BoundaryFeature.from_pairs(shifted)])


def test_self_intersecting_ring_is_rejected():
    bowtie = [(0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0)]
    with pytest.raises(GeometryError):
        assemble_polygon([BoundaryFeature.from_pairs(bowtie)])


def test_empty_and_single_point_inputs_are_rejected():
    with pytest.raises(GeometryError):
        assemble_polygon([])
    with pytest.raises(GeometryError):
        assemble_polygon([BoundaryFeature.from_pairs([(0.0, 0.0), (0.0, 0.0)])])


def test_sample_bearing_is_seeded_and_in_range():
    first = [sample_bearing(random.Random(42)) for _ in range(3)]
    assert first[0] == first[1] == first[2]

    rng = random.Random(7)
    draws = [sample_bearing(rng) for _ in range(2000)]
    assert all(0.0 <= b < 360.0 for b in draws)
    assert min(draws) < 10.0 and max(draws) > 350.0


@pytest.mark.parametrize("bearing", [0.0, 90.0, 180.0, 270.0, 359.999] + [i * 7.5 for i in range(48)])
def test_ray_point_lies_on_ring(origin, hexagon, bearing):
    contour = Contour(ring=tuple(Coordinate(lon=x, lat=y) for x, y in hexagon))
    hit = ray_intersect(origin, bearing, contour)

    assert contour.to_shapely().exterior.distance(Point(hit.lon, hit.lat)) < 1e-9


def test_ray_through_vertex_returns_that_vertex(origin, hexagon):
    contour = Contour(ring=tuple(Coordinate(lon=x, lat=y) for x, y in hexagon))
    assert ray_intersect(origin, 0.0, contour) == contour.ring[0]


def test_ray_cardinal_directions_at_equator():
    origin = Coordinate(lon=0.0, lat=0.0)
    contour = _square()

    expected = {0.0: (0.0, 1.0), 90.0: (1.0, 0.0), 180.0: (0.0, -1.0), 270.0: (-1.0, 0.0)}
    for bearing, (lon, lat) in expected.items():
        hit = ray_intersect(origin, bearing, contour)
        assert hit.lon == pytest.approx(lon, abs=1e-12)
        assert hit.lat == pytest.approx(lat, abs=1e-12)

    assert ray_intersect(origin, 45.0, contour) == Coordinate(lon=1.0, lat=1.0)


def test_ray_from_outside_the_ring_fails():
    with pytest.raises(NoIntersectionError):
        ray_intersect(Coordinate(lon=3.0, lat=0.0), 90.0, _square())


def test_points_within_polygon_is_boundary_inclusive_and_ordered():
    contour = _square()
    inside = Coordinate(lon=0.5, lat=0.5)
    outside = Coordinate(lon=1.5, lat=0.0)
    on_edge = Coordinate(lon=1.0, lat=0.25)
    vertex = Coordinate(lon=-1.0, lat=-1.0)

    kept = points_within_polygon([on_edge, outside, inside, vertex], contour)

    assert kept == [on_edge, inside, vertex]
    assert contains(contour, on_edge)
    assert not contains(contour, outside)


def test_points_within_polygon_filters_candidates_by_key():
    contour = _square()
    near = Candidate(coordinate=Coordinate(lon=0.1, lat=0.1), place_name="Near", category="coffee")
    far = Candidate(coordinate=Coordinate(lon=4.0, lat=4.0), place_name="Far", category="coffee")

    assert points_within_polygon([far, near], contour, key=lambda c: c.coordinate) == [near]
