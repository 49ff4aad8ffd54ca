"""Services package"""

from .playht import PlayHTAuthError, PlayHTAuthService

__all__ = [
    "PlayHTAuthError",
    "PlayHTAuthService",
]
