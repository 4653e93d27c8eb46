"""Service layer public exports."""

from journey.services.journey_presenter import directions_waypoints, present_journey
from journey.services.journey_service import JourneyRequest, build_engine, generate_journey

__all__ = [
    "JourneyRequest",
    "build_engine",
    "directions_waypoints",
    "generate_journey",
    "present_journey",
]
