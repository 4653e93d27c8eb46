"""Structured logging: one JSON object per line, with token scrubbing."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


def _get_scrubber():
    # deferred to avoid an import cycle with journey.security
    from journey.security.key_manager import get_key_manager

    return get_key_manager()


class StructuredLogger:
    """Emits JSON lines and scrubs known tokens from every line."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        line = json.dumps(data, ensure_ascii=False, default=str)
        output = self._output or sys.stderr
        output.write(_get_scrubber().scrub_text(line) + "\n")
        output.flush()

    def start(self, name: str, **extra: Any) -> None:
        self._timers[name] = time.time()
        self._emit({"event": f"{name}_start", **extra})

    def end(self, name: str, **extra: Any) -> None:
        started = self._timers.pop(name, time.time())
        duration_ms = round((time.time() - started) * 1000, 1)
        self._emit({"event": f"{name}_done", "duration_ms": duration_ms, **extra})

    def warning(self, name: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "node": name, "message": message, **extra})

    def error(self, name: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "node": name, "error": error, **extra})


__all__ = ["StructuredLogger"]
