"""Async HTTP client shared by every external geodata call.

Responsibilities:
  1. scrub access tokens out of every error message
  2. uniform timeout / retry policy
  3. map httpx failures onto ``ProviderTransportError`` / ``ProviderResponseError``
  4. keep the httpx dependency in one place
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from journey.security.key_manager import get_key_manager
from journey.shared.exceptions import ProviderError, ProviderResponseError, ProviderTransportError

_logger = logging.getLogger("journey.http")


class SecureHttpClient:
    """Wraps ``httpx.AsyncClient``; one client per request, nothing shared."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        max_retries: int = 1,
        tool_name: str = "http",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._timeout = timeout
        self._max_retries = max_retries
        self._tool_name = tool_name
        self._transport = transport
        self._km = get_key_manager()

    async def get(
        self,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        """GET ``url`` and return the decoded JSON object."""
        last_error: Optional[ProviderError] = None

        for attempt in range(1, self._max_retries + 2):
            try:
                async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                    resp = await client.get(url, params=params, headers=headers)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                safe_msg = self._km.scrub_text(str(e))
                last_error = ProviderTransportError(self._tool_name, f"HTTP {status}: {safe_msg}")
                if status < 500 and status != 429:
                    raise last_error from None
            except httpx.TimeoutException:
                last_error = ProviderTransportError(
                    self._tool_name, f"request timed out after {self._timeout}s (attempt {attempt})"
                )
            except httpx.HTTPError as e:
                safe_msg = self._km.scrub_text(str(e))
                last_error = ProviderTransportError(self._tool_name, f"network error: {safe_msg}")
            else:
                return self._decode(resp)

            if attempt <= self._max_retries:
                _logger.warning("%s attempt %d failed, retrying: %s", self._tool_name, attempt, last_error)
                await asyncio.sleep(0.5 * attempt)

        raise last_error  # type: ignore[misc]

    def _decode(self, resp: httpx.Response) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError:
            raise ProviderResponseError(self._tool_name, "response body is not valid JSON") from None
        if not isinstance(data, dict):
            raise ProviderResponseError(
                self._tool_name, f"expected a JSON object, got {type(data).__name__}"
            )
        return data


__all__ = ["SecureHttpClient"]
