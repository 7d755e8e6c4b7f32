"""SmartThings Schema webhook endpoint."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from playlist_connector.dispatcher import RequestDispatcher
from playlist_connector.dependencies import get_dispatcher
from playlist_connector.lambda_handler import decode_body, log_interaction_result

router = APIRouter()


@router.post(
    "/",
    summary="SmartThings Schema webhook",
    description="""
    Receives discovery, state refresh and command requests from SmartThings.

    The Spotify access token is taken from the request's `authentication`
    block. Failed requests are answered with HTTP 500 and a `globalError`
    in the response envelope.
    """,
)
async def webhook(request: Request, dispatcher: RequestDispatcher = Depends(get_dispatcher)) -> JSONResponse:
    """Dispatch one SmartThings request."""
    payload = decode_body(await request.body())
    log_interaction_result(payload)

    result = await dispatcher.dispatch(payload)
    return JSONResponse(status_code=200 if result.succeeded else 500, content=result.body)
