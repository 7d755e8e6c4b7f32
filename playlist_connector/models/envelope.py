"""Pydantic models for inbound SmartThings Schema envelopes.

Only the fields the connector reads are modelled; anything else SmartThings
sends is ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RequestHeaders(_EnvelopeModel):
    """Common SmartThings Schema headers."""

    schema_: str = Field(default="st-schema", alias="schema")
    version: str = "1.0"
    interaction_type: str | None = Field(default=None, alias="interactionType")
    request_id: str | None = Field(default=None, alias="requestId")


class Authentication(_EnvelopeModel):
    """Bearer token issued by Spotify and forwarded by SmartThings."""

    token_type: str | None = Field(default=None, alias="tokenType")
    token: str


class CommandItem(_EnvelopeModel):
    """One capability command addressed to a device."""

    component: str = "main"
    capability: str
    command: str
    arguments: list[Any] = Field(default_factory=list)


class DeviceCommandRequest(_EnvelopeModel):
    """Commands addressed to one virtual device."""

    external_device_id: str = Field(alias="externalDeviceId")
    commands: list[CommandItem] = Field(default_factory=list)


class InboundEnvelope(_EnvelopeModel):
    """A SmartThings Schema request."""

    headers: RequestHeaders = Field(default_factory=RequestHeaders)
    authentication: Authentication | None = None
    devices: list[DeviceCommandRequest] = Field(default_factory=list)

    @property
    def interaction_type(self) -> str | None:
        return self.headers.interaction_type
