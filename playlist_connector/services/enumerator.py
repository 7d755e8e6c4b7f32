"""Enumerate the virtual devices exposed to SmartThings."""

from playlist_connector.config import Settings, get_settings
from playlist_connector.logging_config import get_logger, log_with_context
from playlist_connector.models import SpotifyDevice, VirtualDevice, VirtualDeviceId
from playlist_connector.protocols import PlaybackProvider
from playlist_connector.utils.tasks import gather_all

logger = get_logger(__name__)


def is_target_device(device: SpotifyDevice, settings: Settings) -> bool:
    """Return True if a Spotify device should be exposed as a playback target."""
    return bool(device.id) and device.name == settings.target_device_name


async def list_virtual_devices(client: PlaybackProvider, settings: Settings | None = None) -> list[VirtualDevice]:
    """
    Build one virtual device per (target device, playlist) pair.

    Devices and playlists are fetched with two independent reads. The result
    keeps Spotify's ordering: devices outer, playlists inner. Nothing is
    cached, so every call hits Spotify again.

    Args:
        client: Authenticated playback provider.
        settings: Settings instance (defaults to singleton)

    Returns:
        Virtual devices for every matching device and playlist.

    Raises:
        SpotifyException if either read fails.
    """
    if settings is None:
        settings = get_settings()

    devices, playlists = await gather_all([client.list_devices(), client.list_playlists()])
    targets = [device for device in devices if is_target_device(device, settings)]

    virtual_devices = [
        VirtualDevice(
            id=VirtualDeviceId(device_id=device.id, playlist_uri=playlist.uri),
            name=f"Playlist {playlist.name} on {device.name}",
            model=device.type,
        )
        for device in targets
        for playlist in playlists
    ]

    log_with_context(
        logger,
        "debug",
        "Enumerated virtual devices",
        spotify_devices=len(devices),
        target_devices=len(targets),
        playlists=len(playlists),
        virtual_devices=len(virtual_devices),
        event_type="devices_enumerated",
    )
    return virtual_devices
