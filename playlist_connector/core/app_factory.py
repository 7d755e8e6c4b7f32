"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from playlist_connector import __version__
from playlist_connector.config import Settings, get_settings
from playlist_connector.core.lifespan import lifespan
from playlist_connector.core.middleware import setup_middleware
from playlist_connector.dispatcher import RequestDispatcher
from playlist_connector.middleware.error_handlers import register_error_handlers
from playlist_connector.routers import health_router, webhook_router


def create_app(settings: Settings | None = None, dispatcher: RequestDispatcher | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings instance (defaults to singleton)
        dispatcher: Dispatcher to serve requests with, mainly for tests

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Spotify Playlist Connector",
        description="""
        SmartThings Schema connector exposing Spotify playlists as media players.

        Every (Spotify device, playlist) pair becomes one SmartThings device.
        SmartThings posts discovery, state refresh and command requests to `/`.
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )
    app.state.settings = settings
    app.state.dispatcher = dispatcher

    setup_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(webhook_router.router, tags=["smartthings"])

    return app
