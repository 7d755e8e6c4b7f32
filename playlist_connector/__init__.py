"""Spotify Playlist Connector for SmartThings"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("spotify-playlist-connector")
except PackageNotFoundError:
    __version__ = "dev"
