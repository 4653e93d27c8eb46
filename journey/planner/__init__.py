"""Deterministic journey geometry and generation."""

from journey.planner.engine import JourneyEngine, effective_budget
from journey.planner.geometry import (
    assemble_polygon,
    contains,
    points_within_polygon,
    ray_intersect,
    sample_bearing,
)

__all__ = [
    "JourneyEngine",
    "assemble_polygon",
    "contains",
    "effective_budget",
    "points_within_polygon",
    "ray_intersect",
    "sample_bearing",
]
