"""Virtual device models exposed to SmartThings."""

from pydantic import BaseModel, ConfigDict


class VirtualDeviceId(BaseModel):
    """Identity of one virtual device: a Spotify device playing one playlist.

    Either field may be empty when decoded from a malformed external id.
    """

    model_config = ConfigDict(frozen=True)

    device_id: str
    playlist_uri: str


class VirtualDevice(BaseModel):
    """A (Spotify device, playlist) pair announced to SmartThings."""

    id: VirtualDeviceId
    name: str
    model: str
