"""Secret redaction and key manager behaviour."""

from __future__ import annotations

import pytest

from journey.security.key_manager import KeyManager, get_key_manager
from journey.security.redact import redact_sensitive
from journey.shared.exceptions import KeyMissingError


def test_redact_access_token_query_value():
    text = "GET https://api.mapbox.com/isochrone?contours_minutes=30&access_token=abc123secret"
    redacted = redact_sensitive(text)
    assert "abc123secret" not in redacted
    assert "contours_minutes=30" in redacted


def test_redact_bare_mapbox_tokens():
    token = "sk.eyJ1IjoiYWJjZGVmZ2hpamtsbW5vcCJ9.QRSTUVWXYZ012345"
    assert token not in redact_sensitive(f"token leaked: {token}")


def test_key_manager_scrubs_loaded_values(monkeypatch):
    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "plain-token-value-1234")
    km = get_key_manager()
    km.reload("MAPBOX_ACCESS_TOKEN")

    assert km.get_mapbox_token() == "plain-token-value-1234"
    assert "plain-token-value-1234" not in km.scrub_text("failed with plain-token-value-1234")
    assert KeyManager.redact("plain-token-value-1234") == "plai****1234"


def test_key_manager_required_missing_key_raises():
    with pytest.raises(KeyMissingError):
        KeyManager().get_mapbox_token(required=True)
    assert KeyManager().get_mapbox_token(required=False) == ""


def test_structured_logger_scrubs_tokens(monkeypatch):
    import io
    import json

    from journey.infrastructure.logging import StructuredLogger

    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "plain-token-value-1234")
    get_key_manager().reload("MAPBOX_ACCESS_TOKEN")
    stream = io.StringIO()

    StructuredLogger(trace_id="abc", output=stream).error("journey", "request failed for plain-token-value-1234")

    line = stream.getvalue()
    assert "plain-token-value-1234" not in line
    assert json.loads(line)["trace_id"] == "abc"
