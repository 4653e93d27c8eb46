"""Planar geometry over reachable-area contours.

Coordinates are treated on a local equirectangular plane around the origin:
a degree of longitude is shortened by ``cos(lat)``. Contours span a few
kilometres, so the distortion is negligible for picking a bearing point.
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional

from shapely.geometry import LinearRing, LineString, Point, Polygon
from shapely.ops import linemerge
from shapely.prepared import prep

from journey.domain.exceptions import GeometryError, NoIntersectionError
from journey.domain.models import BoundaryFeature, Contour, Coordinate

EPSILON = 1e-12
_AREA_EPSILON = 1e-14


def _distinct_points(feature: BoundaryFeature) -> list[tuple[float, float]]:
    points: list[tuple[float, float]] = []
    for coord in feature.coordinates:
        pt = (coord.lon, coord.lat)
        if not points or points[-1] != pt:
            points.append(pt)
    return points


def _orient_like(coords: list[tuple[float, float]], first: tuple, second: tuple) -> list[tuple[float, float]]:
    # linemerge may flip direction while joining fragments
    for a, b in zip(coords, coords[1:]):
        if (a, b) == (first, second):
            return coords
        if (a, b) == (second, first):
            return list(reversed(coords))
    return coords


def assemble_polygon(features: Sequence[BoundaryFeature]) -> Contour:
    """Join unordered boundary fragments into one closed, simple ring.

    The ring keeps the direction of the first fragment. Raises
    ``GeometryError`` when the fragments leave a gap, form more than one
    ring, cross themselves or enclose no area.
    """
    if not features:
        raise GeometryError("no boundary features to assemble")

    lines: list[LineString] = []
    for idx, feature in enumerate(features):
        points = _distinct_points(feature)
        if len(points) < 2:
            raise GeometryError(f"boundary feature {idx} has fewer than two distinct points")
        lines.append(LineString(points))

    merged = linemerge(lines)
    if merged.geom_type != "LineString":
        raise GeometryError(
            f"boundary features do not form a single ring ({len(merged.geoms)} separate pieces)"
        )
    if not merged.is_closed:
        raise GeometryError("boundary features leave a gap; the ring does not close")

    coords = [(float(x), float(y)) for x, y in merged.coords]
    if len(coords) < 4:
        raise GeometryError("boundary ring is degenerate")

    ring = LinearRing(coords)
    if not ring.is_simple:
        raise GeometryError("boundary ring intersects itself")
    if Polygon(ring).area <= _AREA_EPSILON:
        raise GeometryError("boundary ring encloses no area")

    first_line = lines[0].coords
    coords = _orient_like(coords, tuple(first_line[0]), tuple(first_line[1]))
    return Contour(ring=tuple(Coordinate(lon=x, lat=y) for x, y in coords))


def sample_bearing(rng: random.Random) -> float:
    """Uniform bearing in [0, 360) drawn from ``rng``."""
    return (rng.random() * 360.0) % 360.0


def contains(contour: Contour, point: Coordinate) -> bool:
    """Boundary-inclusive containment."""
    return contour.to_shapely().covers(Point(point.lon, point.lat))


def ray_intersect(origin: Coordinate, bearing: float, contour: Contour) -> Coordinate:
    """First point where the ray from ``origin`` along ``bearing`` meets the ring."""
    if not contains(contour, origin):
        raise NoIntersectionError(f"origin {origin} lies outside the contour")

    theta = math.radians(bearing % 360.0)
    scale = max(math.cos(math.radians(origin.lat)), EPSILON)
    dx, dy = math.sin(theta) / scale, math.cos(theta)

    hits: list[tuple[float, int, float]] = []
    ring = contour.ring
    for index in range(len(ring) - 1):
        p, q = ring[index], ring[index + 1]
        ex, ey = q.lon - p.lon, q.lat - p.lat
        denom = dx * ey - dy * ex
        if abs(denom) < EPSILON:
            continue  # parallel
        wx, wy = p.lon - origin.lon, p.lat - origin.lat
        t = (wx * ey - wy * ex) / denom
        s = (wx * dy - wy * dx) / denom
        if t <= EPSILON or s < -EPSILON or s > 1.0 + EPSILON:
            continue
        hits.append((t, index, min(max(s, 0.0), 1.0)))

    if not hits:
        raise NoIntersectionError(f"bearing {bearing:.3f} from {origin} does not cross the contour")

    _, index, s = min(hits)
    p, q = ring[index], ring[index + 1]
    if s <= EPSILON:
        return p
    if s >= 1.0 - EPSILON:
        return q
    return Coordinate(lon=p.lon + s * (q.lon - p.lon), lat=p.lat + s * (q.lat - p.lat))


def points_within_polygon(
    points: Iterable[Any],
    contour: Contour,
    key: Optional[Callable[[Any], Coordinate]] = None,
) -> list[Any]:
    """Keep the items lying inside ``contour`` (edges included), in input order."""
    prepared = prep(contour.to_shapely())
    kept: list[Any] = []
    for item in points:
        coord = key(item) if key is not None else item
        if prepared.covers(Point(coord.lon, coord.lat)):
            kept.append(item)
    return kept


__all__ = [
    "EPSILON",
    "assemble_polygon",
    "contains",
    "points_within_polygon",
    "ray_intersect",
    "sample_bearing",
]
