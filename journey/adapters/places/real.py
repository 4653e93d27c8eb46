"""Mapbox Geocoding API adapter for points of interest.

Environment: MAPBOX_ACCESS_TOKEN
Docs: https://docs.mapbox.com/api/search/geocoding-v5/
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from journey.config.settings import resolve_http_timeout
from journey.domain.models import Candidate, Coordinate
from journey.infrastructure.cache import place_cache, request_fingerprint
from journey.security.http_client import SecureHttpClient
from journey.security.key_manager import get_key_manager
from journey.shared.exceptions import ProviderError, ProviderResponseError
from journey.tools.interfaces import PlaceSearchInput

_BASE_URL = "https://api.mapbox.com/geocoding/v5/mapbox.places/{query}.json"
# the forward geocoder caps results at 10
_MAX_LIMIT = 10

_http = SecureHttpClient(tool_name="mapbox_places", max_retries=1, timeout=resolve_http_timeout())


def _get_token() -> str:
    token = get_key_manager().get_mapbox_token(required=False)
    if not token:
        raise ProviderError("mapbox_places", "MAPBOX_ACCESS_TOKEN is not set")
    return token


def _feature_to_candidate(raw: dict[str, Any], fallback_category: str) -> Candidate:
    center = raw.get("center") or (raw.get("geometry") or {}).get("coordinates")
    if not isinstance(center, list) or len(center) < 2:
        raise ProviderResponseError("mapbox_places", f"feature {raw.get('id')} has no coordinates")
    properties = raw.get("properties") or {}
    return Candidate(
        id=raw.get("id"),
        coordinate=Coordinate.from_pair(center),
        place_name=str(raw.get("place_name") or raw.get("text") or "Unnamed place"),
        category=str(properties.get("category") or fallback_category),
        address=str(properties.get("address") or ""),
    )


def parse_candidates(data: dict[str, Any], category: str) -> list[Candidate]:
    features = data.get("features")
    if not isinstance(features, list):
        message = data.get("message") or "response has no features"
        raise ProviderResponseError("mapbox_places", str(message))
    try:
        return [_feature_to_candidate(raw, category) for raw in features if isinstance(raw, dict)]
    except (TypeError, ValueError) as exc:
        raise ProviderResponseError("mapbox_places", f"bad feature: {exc}") from None


async def search_places(params: PlaceSearchInput) -> list[Candidate]:
    """Points of interest matching ``params.category`` near the proximity point."""
    request_params: dict[str, str] = {
        "types": "poi",
        "proximity": f"{params.proximity.lon},{params.proximity.lat}",
        "limit": str(min(params.limit, _MAX_LIMIT)),
    }
    if params.bbox is not None:
        request_params["bbox"] = ",".join(f"{v:.6f}" for v in params.bbox)

    url = _BASE_URL.format(query=quote(params.category, safe=""))
    cache_key = request_fingerprint(url, request_params)
    cached = place_cache.lookup(cache_key)
    if cached is not None:
        return cached

    data = await _http.get(url, params={**request_params, "access_token": _get_token()})
    candidates = parse_candidates(data, params.category)
    place_cache.store(cache_key, candidates)
    return candidates
