"""PlayHT websocket authentication service."""

from .auth_service import PlayHTAuthError, PlayHTAuthService, WebSocketAuth
from .schemas import WebSocketAuthV3, WebSocketAuthV4

__all__ = [
    "PlayHTAuthError",
    "PlayHTAuthService",
    "WebSocketAuth",
    "WebSocketAuthV3",
    "WebSocketAuthV4",
]
