"""Pytest configuration and shared fixtures."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from playlist_connector.config import Settings
from playlist_connector.core.app_factory import create_app
from playlist_connector.dispatcher import RequestDispatcher
from playlist_connector.models import PlaybackState, Playlist, SpotifyDevice


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="127.0.0.1",
        api_port=8000,
        spotify_api_base_url="https://api.spotify.test/v1",
        request_timeout=5.0,
        playlist_limit=20,
        target_device_name="Mobile Web Player",
        device_profile_id="test-profile-id",
        manufacturer_name="Spotify",
        rate_limit_enabled=False,
    )


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for Spotify API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.request = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def make_response():
    """Factory for mock httpx responses."""

    def _make(status_code: int = 200, json_data=None):
        response = MagicMock()
        response.status_code = status_code
        response.json = lambda: json_data
        response.raise_for_status = lambda: None
        return response

    return _make


@pytest.fixture
def spotify_devices():
    """Devices reported by Spotify: two targets, one other device, one without an id."""
    return [
        SpotifyDevice(id="dev1", name="Mobile Web Player", type="Computer", is_active=True),
        SpotifyDevice(id="dev2", name="Kitchen Speaker", type="Speaker"),
        SpotifyDevice(id=None, name="Mobile Web Player", type="Computer", is_restricted=True),
        SpotifyDevice(id="dev3", name="Mobile Web Player", type="Smartphone"),
    ]


@pytest.fixture
def playlists():
    """Playlists reported by Spotify."""
    return [
        Playlist(uri="spotify:playlist:morning", name="Morning", id="morning"),
        Playlist(uri="spotify:playlist:focus", name="Focus", id="focus"),
    ]


@pytest.fixture
def mock_provider(spotify_devices, playlists):
    """Mock playback provider with a small inventory, currently playing."""
    provider = AsyncMock()
    provider.list_devices = AsyncMock(return_value=spotify_devices)
    provider.list_playlists = AsyncMock(return_value=playlists)
    provider.get_current_playback_state = AsyncMock(return_value=PlaybackState(is_playing=True))
    provider.play = AsyncMock(return_value=None)
    provider.pause = AsyncMock(return_value=None)
    provider.skip_to_next = AsyncMock(return_value=None)
    provider.skip_to_previous = AsyncMock(return_value=None)
    return provider


@pytest.fixture
def provider_factory(mock_provider):
    """Client factory handing out mock_provider and recording the tokens it was given."""
    tokens: list[str] = []

    @asynccontextmanager
    async def factory(token, settings):
        tokens.append(token)
        yield mock_provider

    factory.tokens = tokens
    return factory


@pytest.fixture
def dispatcher(mock_settings, provider_factory):
    """Dispatcher wired to the mock provider."""
    return RequestDispatcher(mock_settings, client_factory=provider_factory)


@pytest.fixture
def test_client(mock_settings, dispatcher):
    """FastAPI test client with lifespan context."""
    app = create_app(mock_settings, dispatcher=dispatcher)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_envelope():
    """Factory for SmartThings Schema request bodies."""

    def _make(interaction_type: str, devices=None, token: str = "test-access-token", request_id: str = "req-1"):
        body = {
            "headers": {
                "schema": "st-schema",
                "version": "1.0",
                "interactionType": interaction_type,
                "requestId": request_id,
            },
            "authentication": {"tokenType": "Bearer", "token": token},
        }
        if devices is not None:
            body["devices"] = devices
        return body

    return _make
