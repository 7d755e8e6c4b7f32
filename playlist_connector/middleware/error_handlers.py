"""Exception handlers for the webhook app.

The webhook answers the way the Lambda entrypoint does: an undecodable body
gets HTTP 500 with the plain error message, and any other failure that
escapes the dispatcher gets HTTP 500 with a SmartThings ``globalError``
envelope.
"""

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse

from playlist_connector.exceptions import ConnectorException, EnvelopeDecodeException, GlobalErrorEnum
from playlist_connector.logging_config import get_logger, log_with_context
from playlist_connector.middleware.logging_middleware import redact_sensitive_data
from playlist_connector.schema import SchemaResponse, response_interaction_type

logger = get_logger(__name__)


def _global_error(detail: str, error_enum: GlobalErrorEnum) -> JSONResponse:
    response = SchemaResponse(response_interaction_type(None), None).set_error(detail, error_enum)
    return JSONResponse(status_code=500, content=response.to_dict())


async def envelope_decode_handler(request: Request, exc: EnvelopeDecodeException) -> PlainTextResponse:
    """Answer an undecodable request body with its error message."""
    log_with_context(
        logger,
        "warning",
        "Could not decode request body",
        error=exc.message,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="decode_error",
    )
    return PlainTextResponse(exc.message, status_code=500)


async def connector_exception_handler(request: Request, exc: ConnectorException) -> JSONResponse:
    """Answer a connector error raised before the dispatcher built a response."""
    log_with_context(
        logger,
        "warning",
        "Connector error",
        error_code=exc.code.value,
        error_message=exc.message,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="connector_error",
    )
    return _global_error(exc.message, exc.error_enum)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=True)

    # Internal details stay in the log
    return _global_error("Internal server error", GlobalErrorEnum.BAD_REQUEST)


def register_error_handlers(app) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    from slowapi import _rate_limit_exceeded_handler
    from slowapi.errors import RateLimitExceeded

    app.add_exception_handler(EnvelopeDecodeException, envelope_decode_handler)
    app.add_exception_handler(ConnectorException, connector_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
