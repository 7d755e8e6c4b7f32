"""Command request handler.

SmartThings commands are looked up in ``COMMAND_ACTIONS`` by capability and
command name. Each entry names the Spotify call to make, the playback status
to report afterwards, and whether a failed call fails the whole request.
Pairs missing from the table are ignored.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

from playlist_connector import identity
from playlist_connector.exceptions import EnvelopeDecodeException
from playlist_connector.logging_config import get_logger, log_with_context
from playlist_connector.models import CommandItem, DeviceCommandRequest, InboundEnvelope, VirtualDeviceId
from playlist_connector.protocols import PlaybackProvider
from playlist_connector.schema import MAIN_COMPONENT, CommandResponse, DeviceComponent
from playlist_connector.utils.tasks import gather_all

logger = get_logger(__name__)

MEDIA_PLAYBACK = "st.mediaPlayback"


class Capability(str, Enum):
    MEDIA_PLAYBACK = MEDIA_PLAYBACK


class PlaybackCommand(str, Enum):
    PLAY = "play"
    PAUSE = "pause"
    FAST_FORWARD = "fastForward"
    REWIND = "rewind"


class PlaybackStatus(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"


SUPPORTED_PLAYBACK_COMMANDS = (
    PlaybackCommand.PAUSE.value,
    PlaybackCommand.PLAY.value,
    PlaybackCommand.FAST_FORWARD.value,
    PlaybackCommand.REWIND.value,
)


async def _play(client: PlaybackProvider, target: VirtualDeviceId) -> None:
    if not target.device_id or not target.playlist_uri:
        raise EnvelopeDecodeException(
            "External device id does not name a device and a playlist",
            details={"device_id": target.device_id, "playlist_uri": target.playlist_uri},
        )
    await client.play(context_uri=target.playlist_uri, device_id=target.device_id)


async def _pause(client: PlaybackProvider, target: VirtualDeviceId) -> None:
    await client.pause(device_id=target.device_id)


# Skipping acts on whatever device is active, not on the addressed one.
async def _skip_to_next(client: PlaybackProvider, target: VirtualDeviceId) -> None:
    await client.skip_to_next()


async def _skip_to_previous(client: PlaybackProvider, target: VirtualDeviceId) -> None:
    await client.skip_to_previous()


@dataclass(frozen=True)
class CommandAction:
    """What to do for one (capability, command) pair."""

    name: str
    run: Callable[[PlaybackProvider, VirtualDeviceId], Awaitable[None]]
    reported_status: PlaybackStatus
    propagate_failure: bool


COMMAND_ACTIONS: dict[tuple[str, str], CommandAction] = {
    (Capability.MEDIA_PLAYBACK.value, PlaybackCommand.PLAY.value): CommandAction(
        "play", _play, PlaybackStatus.PLAYING, propagate_failure=True
    ),
    (Capability.MEDIA_PLAYBACK.value, PlaybackCommand.PAUSE.value): CommandAction(
        "pause", _pause, PlaybackStatus.PAUSED, propagate_failure=False
    ),
    (Capability.MEDIA_PLAYBACK.value, PlaybackCommand.FAST_FORWARD.value): CommandAction(
        "next", _skip_to_next, PlaybackStatus.PLAYING, propagate_failure=False
    ),
    (Capability.MEDIA_PLAYBACK.value, PlaybackCommand.REWIND.value): CommandAction(
        "previous", _skip_to_previous, PlaybackStatus.PLAYING, propagate_failure=False
    ),
}


def get_command_action(capability: str, command: str) -> CommandAction | None:
    """Return the action for a capability command, or None if it is not supported."""
    return COMMAND_ACTIONS.get((capability, command))


async def execute_command(
    client: PlaybackProvider,
    external_device_id: str,
    target: VirtualDeviceId,
    component: DeviceComponent,
    command: CommandItem,
) -> None:
    """Run one command and record the resulting playback status on ``component``.

    Raises:
        Whatever the provider raised, for actions that propagate failures.
    """
    action = get_command_action(command.capability, command.command)
    if action is None:
        log_with_context(
            logger,
            "debug",
            "Ignoring unsupported command",
            external_device_id=external_device_id,
            capability=command.capability,
            command=command.command,
            event_type="command_ignored",
        )
        return

    try:
        await action.run(client, target)
    except Exception as e:
        if action.propagate_failure:
            raise
        log_with_context(
            logger,
            "error",
            f"Spotify {action.name} failed",
            external_device_id=external_device_id,
            command=command.command,
            error=str(e),
            error_type=type(e).__name__,
            event_type="command_failure_tolerated",
        )

    component.add_state(command.capability, "playbackStatus", action.reported_status.value)


async def handle_device_request(
    client: PlaybackProvider,
    response: CommandResponse,
    device_request: DeviceCommandRequest,
) -> None:
    """Run all commands addressed to one virtual device concurrently.

    The device entry and its ``main`` component are added before any
    command runs, so the device is reported even if every command fails.
    """
    external_device_id = device_request.external_device_id
    component = response.add_device(external_device_id).add_component(MAIN_COMPONENT)
    target = identity.decode(external_device_id)

    await gather_all(
        execute_command(client, external_device_id, target, component, command)
        for command in device_request.commands
    )


async def command_request(
    envelope: InboundEnvelope,
    response: CommandResponse,
    client: PlaybackProvider,
) -> None:
    """Execute a batch of device commands.

    Device requests run concurrently, as do the commands inside each one;
    no ordering between them is guaranteed. Every command has finished
    before a failure is raised.
    """
    await gather_all(handle_device_request(client, response, device_request) for device_request in envelope.devices)

    log_with_context(
        logger,
        "info",
        "Command request completed",
        device_count=len(envelope.devices),
        request_id=envelope.headers.request_id,
        event_type="command_completed",
    )
