"""State refresh request handler."""

from playlist_connector import identity
from playlist_connector.config import Settings, get_settings
from playlist_connector.handlers.command import MEDIA_PLAYBACK, SUPPORTED_PLAYBACK_COMMANDS, PlaybackStatus
from playlist_connector.logging_config import get_logger, log_with_context
from playlist_connector.models import InboundEnvelope
from playlist_connector.protocols import PlaybackProvider
from playlist_connector.schema import MAIN_COMPONENT, StateRefreshResponse
from playlist_connector.services.enumerator import list_virtual_devices
from playlist_connector.utils.tasks import gather_all

logger = get_logger(__name__)


async def state_refresh_request(
    envelope: InboundEnvelope,
    response: StateRefreshResponse,
    client: PlaybackProvider,
    settings: Settings | None = None,
) -> None:
    """Report supported commands and playback status for every virtual device.

    Spotify only knows one playback status per account, so every virtual
    device gets the same ``playbackStatus`` value.
    """
    if settings is None:
        settings = get_settings()

    virtual_devices, playback_state = await gather_all(
        [list_virtual_devices(client, settings), client.get_current_playback_state()]
    )
    status = PlaybackStatus.PLAYING if playback_state.is_playing else PlaybackStatus.PAUSED

    for device in virtual_devices:
        response.add_device(
            identity.encode(device.id),
            [
                {
                    "component": MAIN_COMPONENT,
                    "capability": MEDIA_PLAYBACK,
                    "attribute": "supportedPlaybackCommands",
                    "value": list(SUPPORTED_PLAYBACK_COMMANDS),
                },
                {
                    "component": MAIN_COMPONENT,
                    "capability": MEDIA_PLAYBACK,
                    "attribute": "playbackStatus",
                    "value": status.value,
                },
            ],
        )

    log_with_context(
        logger,
        "info",
        "State refresh completed",
        device_count=len(virtual_devices),
        playback_status=status.value,
        request_id=envelope.headers.request_id,
        event_type="state_refresh_completed",
    )
