"""Discovery request handler."""

from playlist_connector import identity
from playlist_connector.config import Settings, get_settings
from playlist_connector.logging_config import get_logger, log_with_context
from playlist_connector.models import InboundEnvelope
from playlist_connector.protocols import PlaybackProvider
from playlist_connector.schema import DiscoveryResponse
from playlist_connector.services.enumerator import list_virtual_devices

logger = get_logger(__name__)


async def discovery_request(
    envelope: InboundEnvelope,
    response: DiscoveryResponse,
    client: PlaybackProvider,
    settings: Settings | None = None,
) -> None:
    """Announce every (device, playlist) pair as a SmartThings device.

    Read-only: running it twice against the same Spotify inventory
    announces the same devices.
    """
    if settings is None:
        settings = get_settings()

    for device in await list_virtual_devices(client, settings):
        response.add_device(
            identity.encode(device.id),
            device.name,
            settings.device_profile_id,
        ).manufacturer_name(settings.manufacturer_name).model_name(device.model)

    log_with_context(
        logger,
        "info",
        "Discovery completed",
        device_count=len(response.devices),
        request_id=envelope.headers.request_id,
        event_type="discovery_completed",
    )
