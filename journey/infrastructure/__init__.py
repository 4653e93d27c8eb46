"""Infrastructure services and cross-cutting utilities."""

from journey.infrastructure.cache import ResponseCache, isochrone_cache, place_cache, request_fingerprint
from journey.infrastructure.logging import StructuredLogger

__all__ = [
    "ResponseCache",
    "request_fingerprint",
    "isochrone_cache",
    "place_cache",
    "StructuredLogger",
]
