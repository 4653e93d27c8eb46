"""Runtime configuration helpers."""

from journey.config.settings import (
    EngineSettings,
    ProviderSnapshot,
    load_engine_settings,
    resolve_provider_snapshot,
)

__all__ = [
    "EngineSettings",
    "ProviderSnapshot",
    "load_engine_settings",
    "resolve_provider_snapshot",
]
