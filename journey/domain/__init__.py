"""Domain package exports."""

from journey.domain.constants import (
    DEFAULT_CANDIDATE_LIMIT,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TRAVEL_MODE,
    MODE_SPEED_KMH,
)
from journey.domain.enums import TravelMode
from journey.domain.exceptions import (
    DomainError,
    GeometryError,
    NoCandidateError,
    NoIntersectionError,
    UnreachableAreaError,
)
from journey.domain.models import BoundaryFeature, Candidate, Contour, Coordinate, Journey

__all__ = [
    "BoundaryFeature",
    "Candidate",
    "Contour",
    "Coordinate",
    "Journey",
    "TravelMode",
    "DomainError",
    "GeometryError",
    "NoCandidateError",
    "NoIntersectionError",
    "UnreachableAreaError",
    "DEFAULT_CANDIDATE_LIMIT",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TRAVEL_MODE",
    "MODE_SPEED_KMH",
]
