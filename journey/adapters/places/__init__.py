"""Destination candidate (place) adapters."""

from journey.adapters.places.mock import search_places as mock_search_places
from journey.adapters.places.real import search_places as real_search_places

__all__ = ["mock_search_places", "real_search_places"]
