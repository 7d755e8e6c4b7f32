"""Route SmartThings Schema requests to their handlers."""

from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from playlist_connector.config import Settings, get_settings
from playlist_connector.exceptions import (
    ConnectorException,
    EnvelopeDecodeException,
    GlobalErrorEnum,
    UnsupportedInteractionException,
)
from playlist_connector.handlers.command import command_request
from playlist_connector.handlers.discovery import discovery_request
from playlist_connector.handlers.state import state_refresh_request
from playlist_connector.logging_config import get_logger, log_with_context
from playlist_connector.models import InboundEnvelope
from playlist_connector.protocols import PlaybackProvider
from playlist_connector.schema import (
    CommandResponse,
    DiscoveryResponse,
    SchemaResponse,
    StateRefreshResponse,
    response_interaction_type,
)
from playlist_connector.services.spotify_client import SpotifyClient

logger = get_logger(__name__)

ClientFactory = Callable[[str, Settings], AbstractAsyncContextManager[PlaybackProvider]]
InteractionHandler = Callable[[InboundEnvelope, PlaybackProvider], Awaitable[SchemaResponse]]


def spotify_client_factory(token: str, settings: Settings) -> SpotifyClient:
    """Create a Spotify client for one request."""
    return SpotifyClient(token, settings)


class DispatchResult(BaseModel):
    """Outcome of one dispatched request."""

    status: Literal["success", "failure"]
    body: dict[str, Any]

    @property
    def succeeded(self) -> bool:
        return self.status == "success"


class RequestDispatcher:
    """Stateless router from interaction type to handler.

    A new provider client is created from the request's token for every
    dispatch and closed when the handler finishes.
    """

    def __init__(self, settings: Settings | None = None, client_factory: ClientFactory | None = None):
        self.settings = settings or get_settings()
        self.client_factory = client_factory or spotify_client_factory
        self._handlers: dict[str, InteractionHandler] = {
            "discoveryRequest": self._discovery,
            "stateRefreshRequest": self._state_refresh,
            "commandRequest": self._command,
        }

    @property
    def interaction_types(self) -> list[str]:
        return list(self._handlers)

    async def _discovery(self, envelope: InboundEnvelope, client: PlaybackProvider) -> SchemaResponse:
        response = DiscoveryResponse(envelope.headers.request_id)
        await discovery_request(envelope, response, client, self.settings)
        return response

    async def _state_refresh(self, envelope: InboundEnvelope, client: PlaybackProvider) -> SchemaResponse:
        response = StateRefreshResponse(envelope.headers.request_id)
        await state_refresh_request(envelope, response, client, self.settings)
        return response

    async def _command(self, envelope: InboundEnvelope, client: PlaybackProvider) -> SchemaResponse:
        response = CommandResponse(envelope.headers.request_id)
        await command_request(envelope, response, client)
        return response

    async def _handle(self, envelope: InboundEnvelope) -> SchemaResponse:
        interaction_type = envelope.interaction_type

        # Nothing is stored per integration, so deletion only needs an acknowledgement.
        if interaction_type == "integrationDeleted":
            return SchemaResponse(interaction_type, envelope.headers.request_id)

        handler = self._handlers.get(interaction_type or "")
        if handler is None:
            raise UnsupportedInteractionException(interaction_type)

        if envelope.authentication is None or not envelope.authentication.token:
            raise EnvelopeDecodeException("Missing authentication token")

        async with self.client_factory(envelope.authentication.token, self.settings) as client:
            return await handler(envelope, client)

    async def dispatch(self, payload: dict[str, Any]) -> DispatchResult:
        """Handle one decoded SmartThings request.

        Args:
            payload: The request body as a JSON object.

        Returns:
            A success result wrapping the response envelope, or a failure
            result wrapping an envelope that carries a ``globalError``.
        """
        headers = payload.get("headers")
        if not isinstance(headers, dict):
            headers = {}
        interaction_type = headers.get("interactionType")
        if not isinstance(interaction_type, str):
            interaction_type = None
        request_id = headers.get("requestId")
        if not isinstance(request_id, str):
            request_id = None

        try:
            try:
                envelope = InboundEnvelope.model_validate(payload)
            except ValidationError as e:
                raise EnvelopeDecodeException(
                    f"Invalid {interaction_type or 'request'} envelope",
                    details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
                ) from e

            response = await self._handle(envelope)
            return DispatchResult(status="success", body=response.to_dict())
        except ConnectorException as e:
            log_with_context(
                logger,
                "warning",
                "Request failed",
                interaction_type=interaction_type,
                request_id=request_id,
                error_code=e.code.value,
                error_message=e.message,
                event_type="request_failed",
            )
            return self._failure(interaction_type, request_id, e.message, e.error_enum)
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Unhandled exception while handling request",
                interaction_type=interaction_type,
                request_id=request_id,
                error=str(e),
                error_type=type(e).__name__,
                event_type="unhandled_error",
            )
            logger.error("Exception traceback:", exc_info=True)
            return self._failure(interaction_type, request_id, str(e) or type(e).__name__, GlobalErrorEnum.BAD_REQUEST)

    @staticmethod
    def _failure(
        interaction_type: str | None,
        request_id: str | None,
        detail: str,
        error_enum: GlobalErrorEnum,
    ) -> DispatchResult:
        response = SchemaResponse(response_interaction_type(interaction_type), request_id)
        response.set_error(detail, error_enum)
        return DispatchResult(status="failure", body=response.to_dict())
