"""
Page Router - serves the websocket demo page on every path and method
"""
import json
import logging
from fastapi import Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from modules.config import ConfigEnv
from modules.page import (
    SELECTED_MODEL_TOKEN,
    WEBSOCKET_URL_TOKEN,
    load_template,
    render_page,
)
from services.playht import PlayHTAuthService

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = (
    "Error while obtaining authenticated websocket URL. Please check the server logs."
)


def get_auth_service(request: Request) -> PlayHTAuthService:
    """Return the PlayHT auth service stored in app state by the lifespan hook."""
    auth_service = getattr(request.app.state, "auth_service", None)
    if auth_service is None:
        raise RuntimeError("Auth service not initialized. Server may be starting up.")
    return auth_service


async def serve_page(request: Request) -> Response:
    """
    Render the demo page with a freshly signed PlayHT websocket URL.

    Every request re-authenticates with PlayHT. Responses:
    - 200: rendered HTML
    - 400: the selected model is missing from the v4 URL map
    - 500: any other failure (details only in the server log)
    """
    logger.info(f"{request.method} {request.url.path}")
    model = ConfigEnv.MODEL

    try:
        result = await get_auth_service(request).get_websocket_auth()

        websocket_url = result.url_for_model(model)
        if websocket_url is None:
            logger.warning(f"Model {model} not found in websocket-auth response")
            return PlainTextResponse(
                f"Model {model} not found in response: {json.dumps(result.raw)}",
                status_code=400,
            )

        page = render_page(
            load_template(ConfigEnv.TEMPLATE_PATH),
            {
                WEBSOCKET_URL_TOKEN: websocket_url,
                SELECTED_MODEL_TOKEN: model,
            },
        )
        return HTMLResponse(page, status_code=200)

    except Exception as e:
        logger.error(f"Error serving HTML page: {e}", exc_info=True)
        return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=500)


class PageEndpoint:
    """
    ASGI endpoint for the catch-all route.

    Starlette only restricts methods for function endpoints, so routing to an
    ASGI instance lets every HTTP method (TRACE, PROPFIND, ...) reach the page.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = await serve_page(request)
        await response(scope, receive, send)


# =========================
# Catch-all Route
# =========================
page_route = Route("/{full_path:path}", endpoint=PageEndpoint(), name="page")
