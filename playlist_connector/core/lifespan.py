"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from playlist_connector import __version__
from playlist_connector.dispatcher import RequestDispatcher
from playlist_connector.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Only the stateless dispatcher is created here. Spotify clients are
    opened per request from the token SmartThings sends, so there is no
    shared HTTP session to set up or tear down.
    """
    log_with_context(
        logger,
        "info",
        "Starting playlist connector",
        version=__version__,
        event_type="app_startup",
    )

    if getattr(app.state, "dispatcher", None) is None:
        app.state.dispatcher = RequestDispatcher(app.state.settings)

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down playlist connector",
            event_type="app_shutdown",
        )
