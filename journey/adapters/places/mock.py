"""Mock place adapter loading local JSON data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from journey.domain.models import Candidate, Coordinate
from journey.planner.distance import distance_km
from journey.shared.exceptions import ProviderResponseError
from journey.tools.interfaces import PlaceSearchInput

DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "places_v1.json"
_cache: Optional[list[dict]] = None


def _load_data() -> list[dict]:
    global _cache
    if _cache is not None:
        return _cache
    if not DATA_FILE.exists():
        raise ProviderResponseError("mock_places", f"Data file not found: {DATA_FILE}")
    with open(DATA_FILE, encoding="utf-8") as f:
        _cache = json.load(f)
    return _cache


def _tags(raw: dict) -> set[str]:
    return {tag.strip().lower() for tag in str(raw.get("category", "")).split(",") if tag.strip()}


def _in_bbox(coord: Coordinate, bbox: Optional[tuple[float, float, float, float]]) -> bool:
    if bbox is None:
        return True
    west, south, east, north = bbox
    return west <= coord.lon <= east and south <= coord.lat <= north


def _to_candidate(raw: dict) -> Candidate:
    return Candidate(
        id=raw["id"],
        coordinate=Coordinate(lon=raw["lon"], lat=raw["lat"]),
        place_name=f"{raw['name']}, {raw['address']}" if raw.get("address") else raw["name"],
        category=raw.get("category", ""),
        address=raw.get("address", ""),
    )


async def search_places(params: PlaceSearchInput) -> list[Candidate]:
    query = params.category.strip().lower()
    results: list[Candidate] = []
    for raw in _load_data():
        if query not in _tags(raw):
            continue
        candidate = _to_candidate(raw)
        if not _in_bbox(candidate.coordinate, params.bbox):
            continue
        results.append(candidate)
    results.sort(key=lambda c: distance_km(params.proximity, c.coordinate))
    return results[: params.limit]
