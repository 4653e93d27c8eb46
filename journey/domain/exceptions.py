"""Domain semantic exceptions."""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base domain exception."""


class GeometryError(DomainError):
    """Boundary features could not be assembled into one simple ring."""


class NoIntersectionError(GeometryError):
    """A bearing ray does not cross the ring boundary."""


class UnreachableAreaError(DomainError):
    """No usable reachable-area boundary for the requested budget and mode."""


class NoCandidateError(DomainError):
    """No category-matching candidate inside the reachable area."""

    def __init__(self, category: str, bearing_point: Any, bounds: tuple[float, float, float, float]):
        self.category = category
        self.bearing_point = bearing_point
        self.bounds = bounds
        west, south, east, north = bounds
        super().__init__(
            f"No '{category}' candidate inside the reachable area "
            f"(near {bearing_point}, bbox={west:.5f},{south:.5f},{east:.5f},{north:.5f})"
        )
