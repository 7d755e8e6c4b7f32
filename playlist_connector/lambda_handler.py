"""AWS Lambda entrypoint for the SmartThings connector.

The Lambda receives an API Gateway proxy event whose ``body`` is the
SmartThings request as a JSON string and answers with
``{"statusCode": ..., "body": ...}``.
"""

import asyncio
import base64
import binascii
import json
from functools import cache
from typing import Any

from playlist_connector.config import get_settings
from playlist_connector.dispatcher import RequestDispatcher
from playlist_connector.exceptions import EnvelopeDecodeException
from playlist_connector.logging_config import get_logger, log_with_context, setup_logging
from playlist_connector.middleware.logging_middleware import redact_envelope

logger = get_logger(__name__)

INTERACTION_RESULT = "interactionResult"


def decode_body(raw_body: str | bytes | None) -> dict[str, Any]:
    """Parse a transport body into a JSON object.

    Raises:
        EnvelopeDecodeException: If the body is missing, not JSON or not an object.
    """
    if raw_body is None:
        raise EnvelopeDecodeException("Request body is empty")
    if not isinstance(raw_body, str | bytes):
        raise EnvelopeDecodeException(f"Request body must be a JSON string, not {type(raw_body).__name__}")
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise EnvelopeDecodeException(f"Request body is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise EnvelopeDecodeException("Request body must be a JSON object")
    return payload


def log_interaction_result(payload: dict[str, Any]) -> None:
    """Log SmartThings diagnostic callbacks; they are then dispatched as usual."""
    headers = payload.get("headers")
    if isinstance(headers, dict) and headers.get("interactionType") == INTERACTION_RESULT:
        log_with_context(
            logger,
            "error",
            INTERACTION_RESULT,
            payload=json.dumps(redact_envelope(payload), indent=2),
            event_type="interaction_result",
        )


async def handle_event(event: dict[str, Any], dispatcher: RequestDispatcher | None = None) -> dict[str, Any]:
    """Handle one API Gateway proxy event.

    Returns:
        ``{"statusCode": 200, "body": <json>}`` on success,
        ``{"statusCode": 500, "body": <json>}`` when the request failed, and
        ``{"statusCode": 500, "body": <message>}`` when the body could not be decoded.
    """
    raw_body = event.get("body")
    try:
        if raw_body is not None and event.get("isBase64Encoded"):
            try:
                raw_body = base64.b64decode(raw_body, validate=True)
            except (binascii.Error, TypeError, ValueError) as e:
                raise EnvelopeDecodeException(f"Request body is not valid base64: {e}") from e
        payload = decode_body(raw_body)
    except EnvelopeDecodeException as e:
        log_with_context(logger, "warning", "Could not decode request body", error=e.message, event_type="decode_error")
        return {"statusCode": 500, "body": e.message}

    log_interaction_result(payload)

    if dispatcher is None:
        dispatcher = RequestDispatcher()
    result = await dispatcher.dispatch(payload)

    return {
        "statusCode": 200 if result.succeeded else 500,
        "body": json.dumps(result.body),
    }


@cache
def _configure_logging() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Lambda entrypoint."""
    _configure_logging()
    return asyncio.run(handle_event(event))
