"""Domain enums."""

from enum import Enum


class TravelMode(str, Enum):
    WALKING = "walking"
    CYCLING = "cycling"
    DRIVING = "driving"
