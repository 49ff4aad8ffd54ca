"""Pytest configuration and fixtures for testing."""

import os
import pytest
from unittest.mock import Mock, AsyncMock
from fastapi.testclient import TestClient

# Set test environment variables before the app reads them
os.environ.setdefault("USER_ID", "test_user_12345")
os.environ.setdefault("API_KEY", "test_api_key_12345")

from modules.config import ConfigEnv
from services.playht import WebSocketAuthV3, WebSocketAuthV4

_CONFIG_KEYS = [
    "USER_ID",
    "API_KEY",
    "MODEL",
    "PLAYHT_API_VERSION",
    "PLAYHT_BASE_URL",
    "HOST",
    "PORT",
    "PORT_SETTING",
    "LOG_LEVEL",
    "TEMPLATE_PATH",
]


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any ConfigEnv changes a test makes."""
    snapshot = {key: getattr(ConfigEnv, key) for key in _CONFIG_KEYS}
    ConfigEnv.USER_ID = "test_user_12345"
    ConfigEnv.API_KEY = "test_api_key_12345"
    ConfigEnv.MODEL = "Play3.0-mini"
    ConfigEnv.PLAYHT_API_VERSION = "v4"
    yield
    for key, value in snapshot.items():
        setattr(ConfigEnv, key, value)


@pytest.fixture
def v4_auth_result():
    """Successful v4 websocket-auth payload."""
    data = {
        "websocket_urls": {
            "Play3.0-mini": "wss://ws.fal.run/playht-fal/playht-tts/stream?token=mini",
            "PlayDialog": "wss://ws.fal.run/playht-fal/playht-tts-ldm/stream?token=dialog",
            "PlayDialogMultilingual": "wss://ws.fal.run/playht-fal/playht-tts-multilingual-ldm/stream?token=multi",
        },
        "expires_at": "2026-10-19T12:00:00.000Z",
    }
    result = WebSocketAuthV4.model_validate(data)
    result.raw = data
    return result


@pytest.fixture
def v3_auth_result():
    """Successful v3 websocket-auth payload."""
    data = {
        "websocket_url": "wss://api.play.ht/v3/ws?token=single",
        "expires_at": "2026-10-19T12:00:00.000Z",
    }
    result = WebSocketAuthV3.model_validate(data)
    result.raw = data
    return result


@pytest.fixture
def mock_auth_service(v4_auth_result):
    """Mock PlayHTAuthService for testing."""
    mock = Mock()

    # get_websocket_auth is async - use AsyncMock for assertion support
    mock.get_websocket_auth = AsyncMock(return_value=v4_auth_result)
    mock.auth_url = "https://api.play.ht/api/v4/websocket-auth"

    return mock


@pytest.fixture
def test_client(mock_auth_service):
    """FastAPI test client with mocked auth service."""
    # Import here so the env defaults above are applied first
    from main import app

    # Override the auth service in app state
    app.state.auth_service = mock_auth_service

    yield TestClient(app)

    del app.state.auth_service
