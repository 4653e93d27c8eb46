"""Concrete provider selection and wiring."""

from __future__ import annotations

import importlib
import logging
import os
from types import ModuleType

from journey.adapters.isochrone import mock as mock_isochrone
from journey.adapters.places import mock as mock_places
from journey.config.settings import strict_external_data_enabled
from journey.security.key_manager import MAPBOX_TOKEN_NAME, get_key_manager
from journey.security.redact import redact_sensitive
from journey.shared.exceptions import ProviderError

_logger = logging.getLogger("journey.tools")
_DEFAULT_ALLOWLIST = {"isochrone", "places"}


def _has_mapbox_token() -> bool:
    return get_key_manager().has_key(MAPBOX_TOKEN_NAME)


def _tool_allowlist() -> set[str]:
    values = {item.strip().lower() for item in os.getenv("TOOL_ALLOWLIST", "").split(",") if item.strip()}
    return values or set(_DEFAULT_ALLOWLIST)


def _select(tool_name: str, mock_module: ModuleType, real_module_path: str) -> ModuleType:
    """Mapbox adapter when a token is configured, otherwise the offline one."""
    if tool_name not in _tool_allowlist():
        raise ProviderError(tool_name, f"Tool blocked by TOOL_ALLOWLIST: {tool_name}")

    strict = strict_external_data_enabled()
    if not _has_mapbox_token():
        if strict:
            raise ProviderError(tool_name, f"STRICT_EXTERNAL_DATA=true requires {MAPBOX_TOKEN_NAME}")
        return mock_module

    try:
        return importlib.import_module(real_module_path)
    except ImportError as exc:
        reason = redact_sensitive(str(exc))
        if strict:
            raise ProviderError(tool_name, f"Failed to load mapbox adapter: {reason}") from None
        _logger.warning("Failed to load mapbox %s adapter, fallback to mock: %s", tool_name, reason)
        return mock_module


def get_isochrone_tool() -> ModuleType:
    return _select("isochrone", mock_isochrone, "journey.adapters.isochrone.real")


def get_place_tool() -> ModuleType:
    return _select("places", mock_places, "journey.adapters.places.real")


def describe_active_tools() -> dict[str, str]:
    provider = "mapbox" if _has_mapbox_token() else "mock"
    return {
        "isochrone": provider,
        "places": provider,
        "strict_external_data": "true" if strict_external_data_enabled() else "false",
    }


__all__ = ["get_isochrone_tool", "get_place_tool", "describe_active_tools"]
