"""Unit tests for logging setup and redaction."""

import logging

from playlist_connector.logging_config import log_with_context, setup_logging
from playlist_connector.middleware.logging_middleware import REDACTED, redact_envelope, redact_sensitive_data


def test_redact_sensitive_data():
    """Test tokens in query strings are hidden."""
    url = "https://api.spotify.com/v1/me/player?device_id=dev1&access_token=abc123"

    redacted = redact_sensitive_data(url)

    assert "abc123" not in redacted
    assert "device_id=dev1" in redacted


def test_redact_envelope_leaves_original_untouched():
    """Test the access token is replaced in a copy only."""
    payload = {"headers": {"interactionType": "interactionResult"}, "authentication": {"token": "secret"}}

    redacted = redact_envelope(payload)

    assert redacted["authentication"]["token"] == REDACTED
    assert payload["authentication"]["token"] == "secret"


def test_redact_envelope_without_authentication():
    """Test envelopes without credentials are returned as is."""
    assert redact_envelope({"headers": {}}) == {"headers": {}}


def test_setup_logging_with_file(tmp_path):
    """Test a JSON file handler is added when a log file is configured."""
    log_file = tmp_path / "logs" / "connector.log"
    root = logging.getLogger()
    previous_handlers = root.handlers[:]
    previous_level = root.level

    try:
        setup_logging("DEBUG", log_file)
        log_with_context(logging.getLogger("test"), "info", "hello", event_type="test_event")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        assert '"event_type": "test_event"' in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_setup_logging_console_only():
    """Test only the console handler is added without a log file."""
    root = logging.getLogger()
    previous_handlers = root.handlers[:]
    previous_level = root.level

    try:
        setup_logging("WARNING")

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
