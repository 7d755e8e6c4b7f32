"""Unit tests for connector exceptions."""

from playlist_connector.exceptions import (
    ConnectorException,
    EnvelopeDecodeException,
    ErrorCode,
    GlobalErrorEnum,
    SpotifyAPIException,
    SpotifyAuthException,
    SpotifyException,
    UnsupportedInteractionException,
)


def test_connector_exception_defaults():
    """Test ConnectorException with defaults."""
    exc = ConnectorException(message="Simple error")

    assert exc.message == "Simple error"
    assert exc.code == ErrorCode.CONNECTOR_ERROR
    assert exc.status_code == 500
    assert exc.details == {}
    assert exc.error_enum == GlobalErrorEnum.BAD_REQUEST


def test_spotify_auth_exception():
    """Test auth failures map to TOKEN-EXPIRED."""
    exc = SpotifyAuthException()

    assert isinstance(exc, SpotifyException)
    assert exc.status_code == 401
    assert exc.code == ErrorCode.SPOTIFY_AUTH_ERROR
    assert exc.error_enum == GlobalErrorEnum.TOKEN_EXPIRED


def test_spotify_api_exception():
    """Test API failures default to 502 and BAD-REQUEST."""
    exc = SpotifyAPIException("Spotify GET /me/player failed", details={"upstream_status": 503})

    assert exc.status_code == 502
    assert exc.code == ErrorCode.SPOTIFY_API_ERROR
    assert exc.details == {"upstream_status": 503}
    assert exc.error_enum == GlobalErrorEnum.BAD_REQUEST


def test_unsupported_interaction_exception():
    """Test unknown interaction types map to INVALID-INTERACTION-TYPE."""
    exc = UnsupportedInteractionException("grantCallbackAccess")

    assert exc.message == "Unsupported interaction type: grantCallbackAccess"
    assert exc.error_enum == GlobalErrorEnum.INVALID_INTERACTION_TYPE
    assert exc.details == {"interaction_type": "grantCallbackAccess"}


def test_envelope_decode_exception():
    """Test decode failures are server errors like the Lambda transport."""
    exc = EnvelopeDecodeException()

    assert exc.message == "Malformed request envelope"
    assert exc.status_code == 500
    assert exc.code == ErrorCode.ENVELOPE_DECODE_ERROR
