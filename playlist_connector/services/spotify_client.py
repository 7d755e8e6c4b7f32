"""Spotify Web API client scoped to a single SmartThings request."""

from types import TracebackType
from typing import Any

import httpx

from playlist_connector.config import Settings, get_settings
from playlist_connector.exceptions import SpotifyAPIException, SpotifyAuthException
from playlist_connector.logging_config import get_logger, log_with_context
from playlist_connector.middleware.logging_middleware import redact_sensitive_data
from playlist_connector.models import PlaybackState, Playlist, SpotifyDevice

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log requests with redacted sensitive data."""
    log_with_context(
        logger,
        "debug",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses with redacted sensitive data."""
    log_with_context(
        logger,
        "debug",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


class SpotifyClient:
    """Calls the Spotify Web API with the bearer token of one request.

    Use as an async context manager. When no ``http_client`` is injected,
    a fresh ``httpx.AsyncClient`` is opened on enter and closed on exit, so
    no connection outlives the request that created it.
    """

    def __init__(
        self,
        token: str,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            token: Spotify access token forwarded by SmartThings
            settings: Settings instance (defaults to singleton)
            http_client: Externally owned HTTP client, mainly for tests
        """
        self._token = token
        self._settings = settings or get_settings()
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "SpotifyClient":
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._settings.request_timeout,
                event_hooks={"request": [log_request], "response": [log_response]},
            )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send an authenticated request and map failures to connector exceptions.

        Raises:
            SpotifyAuthException: If Spotify rejects the token (401)
            SpotifyAPIException: On any other HTTP or network failure
        """
        if self._client is None:
            raise RuntimeError("HTTP client not initialized. Use SpotifyClient as an async context manager.")

        url = f"{self._settings.spotify_api_base_url}{path}"
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self._settings.request_timeout,
            )
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            log_with_context(
                logger,
                "warning",
                "Spotify request rejected",
                method=method,
                path=path,
                status_code=status_code,
                event_type="spotify_http_error",
            )
            if status_code == 401:
                raise SpotifyAuthException(
                    f"Spotify rejected the access token for {method} {path}",
                    details={"path": path},
                ) from e
            raise SpotifyAPIException(
                f"Spotify {method} {path} failed with status {status_code}",
                details={"path": path, "upstream_status": status_code},
            ) from e
        except httpx.HTTPError as e:
            log_with_context(
                logger,
                "warning",
                "Spotify request failed",
                method=method,
                path=path,
                error=str(e),
                event_type="spotify_network_error",
            )
            raise SpotifyAPIException(
                f"Spotify {method} {path} failed: {str(e)}",
                details={"path": path},
            ) from e

    async def list_devices(self) -> list[SpotifyDevice]:
        """List the Spotify Connect devices available to the account."""
        response = await self._request("GET", "/me/player/devices")
        try:
            return [SpotifyDevice.model_validate(device) for device in response.json().get("devices", [])]
        except (ValueError, AttributeError) as e:
            raise SpotifyAPIException(f"Invalid Spotify devices response: {str(e)}") from e

    async def list_playlists(self) -> list[Playlist]:
        """List the current user's playlists (first page only)."""
        response = await self._request("GET", "/me/playlists", params={"limit": self._settings.playlist_limit})
        try:
            return [Playlist.model_validate(item) for item in response.json().get("items", [])]
        except (ValueError, AttributeError) as e:
            raise SpotifyAPIException(f"Invalid Spotify playlists response: {str(e)}") from e

    async def get_current_playback_state(self) -> PlaybackState:
        """Get the account-wide playback state.

        Spotify answers 204 when nothing is playing on any device.
        """
        response = await self._request("GET", "/me/player")
        data = response.json() if response.status_code != 204 else {}
        data = data or {}

        item = data.get("item") or {}
        device = data.get("device") or {}
        context = data.get("context") or {}

        return PlaybackState(
            is_playing=bool(data.get("is_playing", False)),
            device_id=device.get("id"),
            device_name=device.get("name"),
            context_uri=context.get("uri"),
            track_name=item.get("name"),
            progress_ms=data.get("progress_ms"),
        )

    async def play(self, context_uri: str, device_id: str) -> None:
        """Start playing a playlist on a device.

        Args:
            context_uri: Spotify URI of the playlist (spotify:playlist:xxx)
            device_id: Spotify device to play on
        """
        await self._request(
            "PUT",
            "/me/player/play",
            params={"device_id": device_id},
            json={"context_uri": context_uri},
        )

    async def pause(self, device_id: str) -> None:
        """Pause playback on a device."""
        await self._request("PUT", "/me/player/pause", params={"device_id": device_id})

    async def skip_to_next(self) -> None:
        """Skip to the next track on the active device."""
        await self._request("POST", "/me/player/next")

    async def skip_to_previous(self) -> None:
        """Skip to the previous track on the active device."""
        await self._request("POST", "/me/player/previous")
