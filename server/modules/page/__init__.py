"""HTML page rendering for the websocket demo client."""

from .renderer import (
    DEFAULT_TEMPLATE_PATH,
    SELECTED_MODEL_TOKEN,
    WEBSOCKET_URL_TOKEN,
    load_template,
    render_page,
)

__all__ = [
    "DEFAULT_TEMPLATE_PATH",
    "SELECTED_MODEL_TOKEN",
    "WEBSOCKET_URL_TOKEN",
    "load_template",
    "render_page",
]
