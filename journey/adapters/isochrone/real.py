"""Mapbox Isochrone API adapter.

Environment: MAPBOX_ACCESS_TOKEN
Docs: https://docs.mapbox.com/api/navigation/isochrone/

Contours are requested as lines (``polygons=false``) and assembled into a
ring by the planner.
"""

from __future__ import annotations

from typing import Any

from journey.config.settings import resolve_http_timeout
from journey.domain.constants import MAX_BUDGET_MINUTES
from journey.domain.models import BoundaryFeature
from journey.infrastructure.cache import isochrone_cache, request_fingerprint
from journey.security.http_client import SecureHttpClient
from journey.security.key_manager import get_key_manager
from journey.shared.exceptions import ProviderError, ProviderResponseError
from journey.tools.interfaces import IsochroneInput

_BASE_URL = "https://api.mapbox.com/isochrone/v1/mapbox/{profile}/{lon},{lat}"

_http = SecureHttpClient(tool_name="mapbox_isochrone", max_retries=1, timeout=resolve_http_timeout())


def _get_token() -> str:
    token = get_key_manager().get_mapbox_token(required=False)
    if not token:
        raise ProviderError("mapbox_isochrone", "MAPBOX_ACCESS_TOKEN is not set")
    return token


def contour_minutes(minutes: float) -> int:
    """Whole minutes for the API; budgets beyond its range are refused, not shortened."""
    if minutes > MAX_BUDGET_MINUTES:
        raise ProviderResponseError(
            "mapbox_isochrone", f"budget of {minutes:g} minutes exceeds the {MAX_BUDGET_MINUTES} minute maximum"
        )
    return max(1, int(round(minutes)))


def _lines_from_geometry(geometry: dict[str, Any]) -> list[list]:
    kind = geometry.get("type")
    coords = geometry.get("coordinates")
    if not isinstance(coords, list):
        raise ProviderResponseError("mapbox_isochrone", f"{kind} geometry has no coordinates")
    if kind == "LineString":
        return [coords]
    if kind == "MultiLineString":
        return list(coords)
    if kind == "Polygon":
        return [coords[0]] if coords else []
    raise ProviderResponseError("mapbox_isochrone", f"unsupported contour geometry: {kind}")


def parse_features(data: dict[str, Any]) -> list[BoundaryFeature]:
    features = data.get("features")
    if not isinstance(features, list):
        message = data.get("message") or "response has no features"
        raise ProviderResponseError("mapbox_isochrone", str(message))

    result: list[BoundaryFeature] = []
    for feature in features:
        geometry = feature.get("geometry") if isinstance(feature, dict) else None
        if not isinstance(geometry, dict):
            raise ProviderResponseError("mapbox_isochrone", "feature without geometry")
        for line in _lines_from_geometry(geometry):
            try:
                result.append(BoundaryFeature.from_pairs(line))
            except (TypeError, ValueError, IndexError) as exc:
                raise ProviderResponseError("mapbox_isochrone", f"bad contour coordinates: {exc}") from None
    return result


async def fetch_isochrone(params: IsochroneInput) -> list[BoundaryFeature]:
    """Reachable-area contour lines for one origin, mode and budget."""
    url = _BASE_URL.format(profile=params.mode.value, lon=params.origin.lon, lat=params.origin.lat)
    query = {"contours_minutes": str(contour_minutes(params.minutes)), "polygons": "false"}
    cache_key = request_fingerprint(url, query)
    cached = isochrone_cache.lookup(cache_key)
    if cached is not None:
        return cached

    data = await _http.get(url, params={**query, "access_token": _get_token()})
    features = parse_features(data)
    isochrone_cache.store(cache_key, features)
    return features
