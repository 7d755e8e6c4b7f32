"""Pydantic models for Spotify Web API payloads."""

from pydantic import BaseModel, ConfigDict


class SpotifyDevice(BaseModel):
    """A Spotify Connect device as reported by /me/player/devices."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str = ""
    type: str = ""
    is_active: bool = False
    is_restricted: bool = False
    volume_percent: int | None = None


class Playlist(BaseModel):
    """A playlist owned or followed by the current user."""

    model_config = ConfigDict(extra="ignore")

    uri: str
    name: str = ""
    id: str | None = None


class PlaybackState(BaseModel):
    """Current Spotify playback status for the whole account."""

    is_playing: bool = False
    device_id: str | None = None
    device_name: str | None = None
    context_uri: str | None = None
    track_name: str | None = None
    progress_ms: int | None = None
