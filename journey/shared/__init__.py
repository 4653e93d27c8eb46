"""Shared cross-layer types and exceptions."""

from journey.shared.exceptions import (
    KeyMissingError,
    ProviderError,
    ProviderResponseError,
    ProviderTransportError,
)

__all__ = ["ProviderError", "ProviderTransportError", "ProviderResponseError", "KeyMissingError"]
