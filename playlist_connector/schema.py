"""SmartThings Schema response envelopes.

Handlers fill a response incrementally: discovery through ``add_device``
plus the chained manufacturer/model setters, state refresh and command
responses through ``add_device``, ``add_component`` and ``add_state``.
``to_dict`` renders the JSON body SmartThings expects.
"""

from typing import Any

from playlist_connector.exceptions import GlobalErrorEnum

SCHEMA_NAME = "st-schema"
SCHEMA_VERSION = "1.0"
MAIN_COMPONENT = "main"


def response_interaction_type(request_type: str | None) -> str:
    """Map ``fooRequest`` to ``fooResponse``; other types are echoed."""
    if not request_type:
        return "interactionResult"
    if request_type.endswith("Request"):
        return request_type[: -len("Request")] + "Response"
    return request_type


class SchemaResponse:
    """Base response with headers and an optional global error."""

    def __init__(self, interaction_type: str, request_id: str | None = None):
        self.headers: dict[str, Any] = {
            "schema": SCHEMA_NAME,
            "version": SCHEMA_VERSION,
            "interactionType": interaction_type,
            "requestId": request_id,
        }
        self.global_error: dict[str, str] | None = None

    @property
    def is_error(self) -> bool:
        return self.global_error is not None

    def set_error(self, detail: str, error_enum: GlobalErrorEnum = GlobalErrorEnum.BAD_REQUEST) -> "SchemaResponse":
        self.global_error = {"errorEnum": error_enum.value, "detail": detail}
        return self

    def _body(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"headers": dict(self.headers)}
        if self.global_error is not None:
            result["globalError"] = dict(self.global_error)
        result.update(self._body())
        return result


class DiscoveryDevice:
    """One device announcement in a discovery response."""

    def __init__(self, external_device_id: str, friendly_name: str, device_handler_type: str):
        self.external_device_id = external_device_id
        self.friendly_name = friendly_name
        self.device_handler_type = device_handler_type
        self.manufacturer_info: dict[str, str] = {}

    def manufacturer_name(self, name: str) -> "DiscoveryDevice":
        self.manufacturer_info["manufacturerName"] = name
        return self

    def model_name(self, name: str) -> "DiscoveryDevice":
        self.manufacturer_info["modelName"] = name
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "externalDeviceId": self.external_device_id,
            "friendlyName": self.friendly_name,
            "deviceHandlerType": self.device_handler_type,
            "manufacturerInfo": dict(self.manufacturer_info),
        }


class DiscoveryResponse(SchemaResponse):
    def __init__(self, request_id: str | None = None):
        super().__init__("discoveryResponse", request_id)
        self.devices: list[DiscoveryDevice] = []

    def add_device(self, external_device_id: str, friendly_name: str, device_handler_type: str) -> DiscoveryDevice:
        device = DiscoveryDevice(external_device_id, friendly_name, device_handler_type)
        self.devices.append(device)
        return device

    def _body(self) -> dict[str, Any]:
        return {"devices": [device.to_dict() for device in self.devices]}


class DeviceComponent:
    """State accumulator for one component of a device.

    A later value for the same capability and attribute replaces the
    earlier one.
    """

    def __init__(self, name: str):
        self.name = name
        self._states: dict[tuple[str, str], Any] = {}

    def add_state(self, capability: str, attribute: str, value: Any) -> "DeviceComponent":
        self._states[(capability, attribute)] = value
        return self

    @property
    def states(self) -> list[dict[str, Any]]:
        return [
            {"component": self.name, "capability": capability, "attribute": attribute, "value": value}
            for (capability, attribute), value in self._states.items()
        ]


class DeviceState:
    """All reported states of one device."""

    def __init__(self, external_device_id: str):
        self.external_device_id = external_device_id
        self.components: dict[str, DeviceComponent] = {}

    def add_component(self, name: str = MAIN_COMPONENT) -> DeviceComponent:
        if name not in self.components:
            self.components[name] = DeviceComponent(name)
        return self.components[name]

    def to_dict(self) -> dict[str, Any]:
        states = [state for component in self.components.values() for state in component.states]
        return {"externalDeviceId": self.external_device_id, "states": states}


class DeviceStateResponse(SchemaResponse):
    """Response carrying device states: state refresh and command responses."""

    def __init__(self, interaction_type: str, request_id: str | None = None):
        super().__init__(interaction_type, request_id)
        self.device_state: list[DeviceState] = []

    def add_device(self, external_device_id: str, states: list[dict[str, Any]] | None = None) -> DeviceState:
        """Add a device, optionally with initial ``{component, capability, attribute, value}`` states."""
        device = DeviceState(external_device_id)
        for state in states or []:
            device.add_component(state.get("component", MAIN_COMPONENT)).add_state(
                state["capability"], state["attribute"], state["value"]
            )
        self.device_state.append(device)
        return device

    def _body(self) -> dict[str, Any]:
        return {"deviceState": [device.to_dict() for device in self.device_state]}


class StateRefreshResponse(DeviceStateResponse):
    def __init__(self, request_id: str | None = None):
        super().__init__("stateRefreshResponse", request_id)


class CommandResponse(DeviceStateResponse):
    def __init__(self, request_id: str | None = None):
        super().__init__("commandResponse", request_id)
