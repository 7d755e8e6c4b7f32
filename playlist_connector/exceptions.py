"""Custom exceptions for the playlist connector with SmartThings error mapping."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    CONNECTOR_ERROR = "CONNECTOR_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Envelope errors
    ENVELOPE_DECODE_ERROR = "ENVELOPE_DECODE_ERROR"
    UNSUPPORTED_INTERACTION = "UNSUPPORTED_INTERACTION"

    # Spotify errors
    SPOTIFY_ERROR = "SPOTIFY_ERROR"
    SPOTIFY_AUTH_ERROR = "SPOTIFY_AUTH_ERROR"
    SPOTIFY_API_ERROR = "SPOTIFY_API_ERROR"


class GlobalErrorEnum(str, Enum):
    """SmartThings Schema global error values."""

    BAD_REQUEST = "BAD-REQUEST"
    TOKEN_EXPIRED = "TOKEN-EXPIRED"
    INVALID_TOKEN = "INVALID-TOKEN"
    INVALID_INTERACTION_TYPE = "INVALID-INTERACTION-TYPE"


class ConnectorException(Exception):
    """Base exception for connector errors.

    Carries an HTTP status code for the webhook app and a SmartThings error
    value for the failure envelope.
    """

    error_enum: GlobalErrorEnum = GlobalErrorEnum.BAD_REQUEST

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONNECTOR_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize connector exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class EnvelopeDecodeException(ConnectorException):
    """Inbound body is not a valid SmartThings envelope."""

    def __init__(self, message: str = "Malformed request envelope", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.ENVELOPE_DECODE_ERROR,
            status_code=500,
            details=details,
        )


class UnsupportedInteractionException(ConnectorException):
    """No handler is registered for the interaction type."""

    error_enum = GlobalErrorEnum.INVALID_INTERACTION_TYPE

    def __init__(self, interaction_type: str | None):
        super().__init__(
            f"Unsupported interaction type: {interaction_type}",
            code=ErrorCode.UNSUPPORTED_INTERACTION,
            status_code=400,
            details={"interaction_type": interaction_type},
        )


class SpotifyException(ConnectorException):
    """Spotify-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SPOTIFY_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class SpotifyAuthException(SpotifyException):
    """Spotify rejected the access token."""

    error_enum = GlobalErrorEnum.TOKEN_EXPIRED

    def __init__(self, message: str = "Spotify authentication failed", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SPOTIFY_AUTH_ERROR,
            status_code=401,
            details=details,
        )


class SpotifyAPIException(SpotifyException):
    """Spotify API request failed."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SPOTIFY_API_ERROR,
            status_code=status_code,
            details=details,
        )
