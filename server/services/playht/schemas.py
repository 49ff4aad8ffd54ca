"""Pydantic models for the PlayHT websocket-auth responses."""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class WebSocketAuthV3(BaseModel):
    """v3 response: a single signed websocket URL."""
    websocket_url: str
    expires_at: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    def url_for_model(self, model: str) -> Optional[str]:
        return self.websocket_url


class WebSocketAuthV4(BaseModel):
    """v4 response: one signed websocket URL per voice model."""
    websocket_urls: Dict[str, str]
    expires_at: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    def url_for_model(self, model: str) -> Optional[str]:
        return self.websocket_urls.get(model)
