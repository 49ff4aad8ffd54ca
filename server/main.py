"""Main application entry point for the PlayHT websocket demo server."""

import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables first
load_dotenv()

from modules.config import ConfigEnv, check_startup
from routers.page import page_route
from services.playht import PlayHTAuthService

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, ConfigEnv.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI app.
    Handles startup and shutdown events.
    """
    logger.info("Starting up PlayHT websocket demo...")

    app.state.auth_service = PlayHTAuthService()
    logger.info(f"✓ Auth endpoint: {app.state.auth_service.auth_url}")

    yield  # Application runs here

    logger.info("✓ Shutdown complete")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="PlayHT WebSocket Demo",
    description="Serves a browser page wired to an authenticated PlayHT TTS websocket",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Catch-all page route; accepts every method on every path
app.router.routes.append(page_route)


def run() -> None:
    """Validate the environment, then serve until killed."""
    import uvicorn

    configure_logging()
    check_startup()
    logger.info(f"*** Server running on http://localhost:{ConfigEnv.PORT}")
    uvicorn.run(app, host=ConfigEnv.HOST, port=ConfigEnv.PORT)


if __name__ == "__main__":
    run()
