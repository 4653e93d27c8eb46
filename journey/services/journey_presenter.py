"""Presentation payloads for a finished journey (GeoJSON + routing waypoints)."""

from __future__ import annotations

from typing import Any, Optional

from journey.domain.models import Coordinate, Journey
from journey.planner.distance import distance_km


def _marker(coord: Coordinate, descriptor: str, place_name: Optional[str] = None) -> dict[str, Any]:
    properties: dict[str, Any] = {
        "marker": descriptor.lower(),
        "label": f"{descriptor} Point",
        "coordinates_text": ",".join(str(v) for v in coord.as_pair()),
    }
    if place_name:
        properties["place_name"] = place_name
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": coord.as_pair()},
        "properties": properties,
    }


def present_journey(journey: Journey) -> dict[str, Any]:
    """FeatureCollection with the reachable ring and origin/bearing/destination markers."""
    ring = {
        "type": "Feature",
        "geometry": {
            "type": "Polygon",
            "coordinates": [[c.as_pair() for c in journey.contour_ring.ring]],
        },
        "properties": {
            "marker": "ring",
            "travel_mode": journey.travel_mode.value,
            "budget_minutes": journey.budget_minutes,
        },
    }
    destination = _marker(journey.destination_point, "Destination", journey.destination_poi.place_name)
    destination["properties"]["straight_line_km"] = round(
        distance_km(journey.origin_point, journey.destination_point), 2
    )
    bearing = _marker(journey.bearing_point, "Bearing")
    bearing["properties"]["bearing"] = round(journey.bearing, 3)
    return {
        "type": "FeatureCollection",
        "features": [
            _marker(journey.origin_point, "Origin"),
            ring,
            bearing,
            destination,
        ],
    }


def directions_waypoints(journey: Journey) -> dict[str, list[float]]:
    """Origin/destination pair for seeding an external directions widget."""
    return {
        "origin": journey.origin_point.as_pair(),
        "destination": journey.destination_point.as_pair(),
    }


__all__ = ["directions_waypoints", "present_journey"]
