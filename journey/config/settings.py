"""Environment-driven settings and provider snapshot helpers."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from journey.domain.constants import DEFAULT_CANDIDATE_LIMIT, DEFAULT_MAX_ATTEMPTS, DEFAULT_TRAVEL_MODE
from journey.domain.enums import TravelMode

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def _int_env(name: str, default: int, *, minimum: int = 1) -> int:
    raw = str(os.getenv(name) or "").strip()
    try:
        value = int(raw) if raw else default
    except ValueError:
        value = default
    return max(minimum, value)


def _float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name) or "").strip()
    try:
        value = float(raw) if raw else default
    except ValueError:
        value = default
    return value if value > 0 else default


def strict_external_data_enabled() -> bool:
    return _is_enabled(os.getenv("STRICT_EXTERNAL_DATA"))


def resolve_provider() -> str:
    return "mapbox" if _is_configured(os.getenv("MAPBOX_ACCESS_TOKEN")) else "mock"


def resolve_travel_mode() -> TravelMode:
    raw = str(os.getenv("JOURNEY_TRAVEL_MODE") or "").strip().lower()
    try:
        return TravelMode(raw) if raw else DEFAULT_TRAVEL_MODE
    except ValueError:
        return DEFAULT_TRAVEL_MODE


def resolve_http_timeout() -> float:
    return _float_env("TOOL_HTTP_TIMEOUT_SECONDS", 10.0)


class EngineSettings(BaseModel):
    travel_mode: TravelMode = Field(default=DEFAULT_TRAVEL_MODE)
    candidate_limit: int = Field(default=DEFAULT_CANDIDATE_LIMIT, ge=1, le=50)
    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)


def load_engine_settings() -> EngineSettings:
    return EngineSettings(
        travel_mode=resolve_travel_mode(),
        candidate_limit=min(50, _int_env("JOURNEY_CANDIDATE_LIMIT", DEFAULT_CANDIDATE_LIMIT)),
        max_attempts=_int_env("JOURNEY_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
    )


class ProviderSnapshot(BaseModel):
    isochrone_provider: str = Field(default="mock")
    place_provider: str = Field(default="mock")
    travel_mode: TravelMode = Field(default=DEFAULT_TRAVEL_MODE)
    strict_external_data: bool = Field(default=False)


def resolve_provider_snapshot() -> ProviderSnapshot:
    provider = resolve_provider()
    return ProviderSnapshot(
        isochrone_provider=provider,
        place_provider=provider,
        travel_mode=resolve_travel_mode(),
        strict_external_data=strict_external_data_enabled(),
    )


__all__ = [
    "EngineSettings",
    "ProviderSnapshot",
    "load_engine_settings",
    "resolve_http_timeout",
    "resolve_provider",
    "resolve_provider_snapshot",
    "resolve_travel_mode",
    "strict_external_data_enabled",
]
