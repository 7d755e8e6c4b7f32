"""Health endpoints."""

from fastapi import APIRouter

from playlist_connector import __version__
from playlist_connector.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    The connector keeps no connections open, so being able to answer is
    the whole check.
    """
    return HealthResponse(status="ok", version=__version__)
