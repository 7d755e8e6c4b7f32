"""Mapping between SmartThings external device ids and virtual device ids.

An external id is ``"<spotify device id>|<playlist uri>"``. Spotify device
ids are hex strings and playlist URIs are colon separated, so neither ever
contains the delimiter; no escaping is done.
"""

from playlist_connector.models import VirtualDeviceId

DELIMITER = "|"


def encode(device_id: VirtualDeviceId) -> str:
    """Return the external id for a virtual device id."""
    return f"{device_id.device_id}{DELIMITER}{device_id.playlist_uri}"


def decode(external_id: str) -> VirtualDeviceId:
    """Split an external id into its device id and playlist uri.

    Never raises. A missing delimiter yields an empty playlist uri, an empty
    string yields empty fields, and anything after a second delimiter is
    dropped. Callers validate what they need.
    """
    parts = external_id.split(DELIMITER, 2)
    playlist_uri = parts[1] if len(parts) > 1 else ""
    return VirtualDeviceId(device_id=parts[0], playlist_uri=playlist_uri)
