"""Playlist connector models"""

from playlist_connector.models.base_models import HealthResponse
from playlist_connector.models.devices import VirtualDevice, VirtualDeviceId
from playlist_connector.models.envelope import (
    Authentication,
    CommandItem,
    DeviceCommandRequest,
    InboundEnvelope,
    RequestHeaders,
)
from playlist_connector.models.spotify import PlaybackState, Playlist, SpotifyDevice

__all__ = [
    "Authentication",
    "CommandItem",
    "DeviceCommandRequest",
    "HealthResponse",
    "InboundEnvelope",
    "PlaybackState",
    "Playlist",
    "RequestHeaders",
    "SpotifyDevice",
    "VirtualDevice",
    "VirtualDeviceId",
]
