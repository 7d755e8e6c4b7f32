"""Application configuration loaded from the environment and an optional .env file."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # repository root

DEFAULT_DEVICE_PROFILE_ID = "0284c595-fed5-4b00-9e02-6e85bb3b32fb"


class Settings(BaseSettings):
    """Connector settings with validation.

    Every field has a working default so the connector runs without a
    .env file. Nothing secret lives here: the Spotify access token arrives
    with each SmartThings request.
    """

    # Webhook server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Webhook server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="Webhook server port")
    rate_limit: str = Field(default="60/minute", min_length=1, description="Per-IP webhook rate limit")
    rate_limit_enabled: bool = Field(default=True, description="Enable webhook rate limiting")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")

    # Spotify Web API
    spotify_api_base_url: str = Field(
        default="https://api.spotify.com/v1",
        pattern=r"^https?://",
        description="Spotify Web API base URL",
    )
    request_timeout: float = Field(default=10.0, gt=0, description="Spotify request timeout in seconds")
    playlist_limit: int = Field(default=20, ge=1, le=50, description="Number of playlists to expose")

    # Virtual device mapping
    target_device_name: str = Field(
        default="Mobile Web Player",
        min_length=1,
        description="Only Spotify devices with this name are exposed",
    )
    device_profile_id: str = Field(
        default=DEFAULT_DEVICE_PROFILE_ID,
        min_length=1,
        description="SmartThings device profile for announced devices",
    )
    manufacturer_name: str = Field(default="Spotify", min_length=1, description="Manufacturer label")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @field_validator("spotify_api_base_url", mode="after")
    @classmethod
    def validate_spotify_api_base_url(cls, v: str) -> str:
        """Drop a trailing slash so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("target_device_name", mode="after")
    @classmethod
    def validate_target_device_name(cls, v: str) -> str:
        """Ensure target_device_name is not whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("target_device_name cannot be empty")
        return v


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get the cached Settings instance.

    Settings are read from the environment once per process. They hold
    configuration only; no request state is kept here.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
