"""Provider response cache: TTL expiry, least-recently-used eviction."""

from __future__ import annotations

import hashlib
import json
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Optional

# never part of a cache key
_SECRET_PARAMS = frozenset({"access_token"})


class ResponseCache:
    """Holds parsed provider responses keyed by request fingerprint."""

    def __init__(self, name: str, ttl_seconds: float, max_entries: int, clock: Callable[[], float] = time.monotonic):
        self.name = name
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def lookup(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[0] <= self._clock():
                del self._entries[key]
                entry = None
            if entry is None:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return entry[1]

    def store(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock() + self._ttl, value)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = self._misses = 0

    @property
    def stats(self) -> dict[str, Any]:
        lookups = self._hits + self._misses
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / lookups, 3) if lookups else 0.0,
        }


def request_fingerprint(endpoint: str, params: dict[str, Any]) -> str:
    """Stable key for a provider request; secrets are left out."""
    visible = {k: v for k, v in params.items() if k not in _SECRET_PARAMS}
    raw = json.dumps([endpoint, visible], sort_keys=True, default=str)
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()


isochrone_cache = ResponseCache("isochrone", ttl_seconds=1800.0, max_entries=200)
place_cache = ResponseCache("places", ttl_seconds=600.0, max_entries=300)
