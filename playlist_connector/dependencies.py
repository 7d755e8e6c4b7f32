"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from playlist_connector.dispatcher import RequestDispatcher


async def get_dispatcher(request: Request) -> RequestDispatcher:
    """
    Get the request dispatcher from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The RequestDispatcher instance.

    Raises:
        RuntimeError: If the dispatcher is not initialized.
    """
    dispatcher: RequestDispatcher | None = getattr(request.app.state, "dispatcher", None)

    if dispatcher is None:
        raise RuntimeError("Request dispatcher not initialized.")

    return dispatcher
