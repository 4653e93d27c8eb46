"""Random reachable-destination generator."""

from journey.domain.models import Candidate, Contour, Coordinate, Journey
from journey.planner.engine import JourneyEngine

__all__ = ["Candidate", "Contour", "Coordinate", "Journey", "JourneyEngine"]
