"""Unit tests for SmartThings response envelopes."""

from playlist_connector.exceptions import GlobalErrorEnum
from playlist_connector.schema import (
    CommandResponse,
    DiscoveryResponse,
    SchemaResponse,
    StateRefreshResponse,
    response_interaction_type,
)


def test_response_interaction_type():
    """Test request types map to their response types."""
    assert response_interaction_type("discoveryRequest") == "discoveryResponse"
    assert response_interaction_type("stateRefreshRequest") == "stateRefreshResponse"
    assert response_interaction_type("commandRequest") == "commandResponse"
    assert response_interaction_type("integrationDeleted") == "integrationDeleted"
    assert response_interaction_type(None) == "interactionResult"


def test_discovery_device_chaining():
    """Test manufacturer and model setters chain."""
    response = DiscoveryResponse("req-1")
    response.add_device("dev1|ctx1", "Playlist A on B", "profile").manufacturer_name("Spotify").model_name("Computer")

    assert response.to_dict() == {
        "headers": {"schema": "st-schema", "version": "1.0", "interactionType": "discoveryResponse", "requestId": "req-1"},
        "devices": [
            {
                "externalDeviceId": "dev1|ctx1",
                "friendlyName": "Playlist A on B",
                "deviceHandlerType": "profile",
                "manufacturerInfo": {"manufacturerName": "Spotify", "modelName": "Computer"},
            }
        ],
    }


def test_state_refresh_initial_states():
    """Test states passed to add_device are grouped by component."""
    response = StateRefreshResponse()
    response.add_device(
        "dev1|ctx1",
        [
            {"component": "main", "capability": "st.mediaPlayback", "attribute": "playbackStatus", "value": "paused"},
            {"capability": "st.audioVolume", "attribute": "volume", "value": 30},
        ],
    )

    states = response.to_dict()["deviceState"][0]["states"]
    assert states == [
        {"component": "main", "capability": "st.mediaPlayback", "attribute": "playbackStatus", "value": "paused"},
        {"component": "main", "capability": "st.audioVolume", "attribute": "volume", "value": 30},
    ]


def test_add_state_last_write_wins():
    """Test a later value for the same attribute replaces the earlier one."""
    response = CommandResponse()
    component = response.add_device("dev1|ctx1").add_component("main")
    component.add_state("st.mediaPlayback", "playbackStatus", "playing")
    component.add_state("st.mediaPlayback", "playbackStatus", "paused")

    assert response.to_dict()["deviceState"][0]["states"] == [
        {"component": "main", "capability": "st.mediaPlayback", "attribute": "playbackStatus", "value": "paused"}
    ]


def test_add_component_returns_existing():
    """Test adding the same component twice returns one accumulator."""
    device = CommandResponse().add_device("dev1|ctx1")

    assert device.add_component("main") is device.add_component()


def test_set_error():
    """Test errors are rendered as globalError."""
    response = SchemaResponse("commandResponse", "req-9").set_error("boom", GlobalErrorEnum.TOKEN_EXPIRED)

    assert response.is_error
    assert response.to_dict() == {
        "headers": {"schema": "st-schema", "version": "1.0", "interactionType": "commandResponse", "requestId": "req-9"},
        "globalError": {"errorEnum": "TOKEN-EXPIRED", "detail": "boom"},
    }
