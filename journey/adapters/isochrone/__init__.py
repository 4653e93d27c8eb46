"""Reachable-area (isochrone) adapters."""

from journey.adapters.isochrone.mock import fetch_isochrone as mock_fetch_isochrone
from journey.adapters.isochrone.real import fetch_isochrone as real_fetch_isochrone

__all__ = ["mock_fetch_isochrone", "real_fetch_isochrone"]
