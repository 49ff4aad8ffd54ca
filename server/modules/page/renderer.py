from pathlib import Path
from typing import Mapping, Union

WEBSOCKET_URL_TOKEN = "<%= WEBSOCKET_URL %>"
SELECTED_MODEL_TOKEN = "<%= SELECTED_MODEL %>"

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "websocket.html"


def load_template(path: Union[str, Path]) -> str:
    """Read the HTML template from disk. Re-read on every request."""
    return Path(path).read_text(encoding="utf-8")


def render_page(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every occurrence of each placeholder token with its value."""
    page = template
    for token, value in replacements.items():
        page = page.replace(token, value)
    return page
