"""Access-token registry for the Mapbox providers.

Adapters read their token here instead of calling ``os.getenv``, so every
token that was ever handed out is also known to ``scrub_text``.
"""

from __future__ import annotations

import os
from typing import Optional

from journey.security.redact import redact_sensitive
from journey.shared.exceptions import KeyMissingError

MAPBOX_TOKEN_NAME = "MAPBOX_ACCESS_TOKEN"


class KeyManager:
    def __init__(self):
        self._tokens: dict[str, str] = {}

    def _load(self, name: str) -> Optional[str]:
        if name not in self._tokens:
            value = os.getenv(name, "").strip()
            if not value:
                return None
            self._tokens[name] = value
        return self._tokens[name]

    def get(self, name: str, *, required: bool = False) -> Optional[str]:
        value = self._load(name)
        if value is None and required:
            raise KeyMissingError(name)
        return value

    def get_mapbox_token(self, *, required: bool = True) -> str:
        return self.get(MAPBOX_TOKEN_NAME, required=required) or ""

    def has_key(self, name: str) -> bool:
        return self._load(name) is not None

    def reload(self, name: str) -> None:
        """Forget the cached value so the next read sees the rotated token."""
        self._tokens.pop(name, None)
        self._load(name)

    @staticmethod
    def redact(value: str) -> str:
        """Mask all but the first and last four characters."""
        if not value or len(value) <= 8:
            return "****"
        return f"{value[:4]}****{value[-4:]}"

    def scrub_text(self, text) -> str:
        result = "" if text is None else str(text)
        for name, value in self._tokens.items():
            result = result.replace(value, f"[{name}:***REDACTED***]")
        return redact_sensitive(result)


_manager: Optional[KeyManager] = None


def get_key_manager() -> KeyManager:
    global _manager
    if _manager is None:
        _manager = KeyManager()
    return _manager


__all__ = ["KeyManager", "MAPBOX_TOKEN_NAME", "get_key_manager"]
