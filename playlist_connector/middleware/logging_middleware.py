"""Redaction of credentials before URLs and envelopes are logged."""

import copy
import re
from typing import Any

REDACTED = "***REDACTED***"

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "token",
    "access_token",
    "refresh_token",
    "client_secret",
    "authorization",
    "bearer",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"{param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}={REDACTED}", redacted)
    return redacted


def redact_envelope(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a SmartThings envelope with its access token hidden."""
    redacted = copy.deepcopy(payload)
    authentication = redacted.get("authentication")
    if isinstance(authentication, dict) and "token" in authentication:
        authentication["token"] = REDACTED
    return redacted
