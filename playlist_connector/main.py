"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from playlist_connector.config import get_settings
from playlist_connector.core.app_factory import create_app
from playlist_connector.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

app = create_app(settings)


def run() -> None:
    """Serve the webhook with uvicorn."""
    import uvicorn

    uvicorn.run(
        "playlist_connector.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
