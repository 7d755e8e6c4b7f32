"""Protocol definitions for dependency injection."""

from typing import Protocol

from playlist_connector.models import PlaybackState, Playlist, SpotifyDevice


class PlaybackProvider(Protocol):
    """Protocol for the media provider the handlers talk to.

    SpotifyClient implements it; tests pass AsyncMock doubles instead.
    """

    async def list_devices(self) -> list[SpotifyDevice]: ...

    async def list_playlists(self) -> list[Playlist]: ...

    async def get_current_playback_state(self) -> PlaybackState: ...

    async def play(self, context_uri: str, device_id: str) -> None: ...

    async def pause(self, device_id: str) -> None: ...

    async def skip_to_next(self) -> None: ...

    async def skip_to_previous(self) -> None: ...
