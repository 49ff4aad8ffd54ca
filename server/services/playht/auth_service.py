"""
PlayHT Auth Service - obtains signed websocket URLs for browser clients.
Uses the PlayHT websocket-auth REST endpoint (v3 single URL, v4 per-model URLs).
"""
import logging
from typing import Optional, Union

import httpx
from pydantic import ValidationError

from modules.config import ConfigEnv
from .schemas import WebSocketAuthV3, WebSocketAuthV4

logger = logging.getLogger(__name__)

WebSocketAuth = Union[WebSocketAuthV3, WebSocketAuthV4]


class PlayHTAuthError(Exception):
    """Raised when PlayHT refuses or garbles a websocket-auth request."""


class PlayHTAuthService:
    """Service for requesting authenticated websocket URLs from PlayHT."""

    def __init__(
        self,
        user_id: Optional[str] = None,
        api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize with explicit credentials or fall back to ConfigEnv."""
        self.user_id = user_id if user_id is not None else ConfigEnv.USER_ID
        self.api_key = api_key if api_key is not None else ConfigEnv.API_KEY
        self.api_version = api_version or ConfigEnv.PLAYHT_API_VERSION
        self.base_url = (base_url or ConfigEnv.PLAYHT_BASE_URL).rstrip("/")
        self._transport = transport

    @property
    def auth_url(self) -> str:
        return f"{self.base_url}/api/{self.api_version}/websocket-auth"

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "X-User-Id": self.user_id or "",
            "Content-Type": "application/json",
        }

    async def get_websocket_auth(self) -> WebSocketAuth:
        """
        Request a fresh authenticated websocket URL.

        Every call goes to PlayHT; nothing is cached between calls, even
        though the response carries an expires_at timestamp.

        Returns:
            WebSocketAuthV3 for the v3 API, WebSocketAuthV4 for the v4 API.

        Raises:
            PlayHTAuthError: If PlayHT answers with a non-2xx status or a
                body that does not match the expected schema.
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.auth_url, headers=self._headers())

            if not response.is_success:
                raise PlayHTAuthError(
                    "\nFailed to get authenticated websocket URL. "
                    "\nPlease make sure the API_KEY and USER_ID in the .env file are correct. "
                    f"\nReceived response: {response.status_code} {response.reason_phrase}"
                )

            try:
                data = response.json()
            except ValueError as e:
                raise PlayHTAuthError(f"PlayHT returned a non-JSON body: {e}") from e

            schema = WebSocketAuthV4 if self.api_version == "v4" else WebSocketAuthV3
            try:
                result = schema.model_validate(data)
            except ValidationError as e:
                raise PlayHTAuthError(f"Unexpected websocket-auth response: {e}") from e

            result.raw = data
            logger.debug(f"Obtained websocket auth, expires_at={result.expires_at}")
            return result

        except Exception as e:
            logger.error(f"Error while obtaining authenticated websocket URL: {e}", exc_info=True)
            raise
