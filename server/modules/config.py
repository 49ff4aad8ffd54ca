import os
import sys
import logging
from pathlib import Path
from typing import List, Optional, Tuple
from dotenv import load_dotenv

from modules.page.renderer import DEFAULT_TEMPLATE_PATH

# Load environment variables (single place for the app)
load_dotenv()

logger = logging.getLogger(__name__)

ALLOWED_MODELS = (
    "Play3.0-mini",
    "PlayDialog",
    "PlayDialogMultilingual",
    "PlayDialogArabic",
)
DEFAULT_MODEL = "Play3.0-mini"

ALLOWED_API_VERSIONS = ("v3", "v4")
DEFAULT_API_VERSION = "v4"

MINIMUM_PYTHON: Tuple[int, int] = (3, 9)


def convert_to_port(value: Optional[str]) -> Optional[int]:
    """Parse a TCP port, returning None when it is not a usable number."""
    if value is None or not value.strip().isdigit():
        return None
    port = int(value)
    return port if 0 < port < 65536 else None


def mask_secret(value: Optional[str], visible: int = 4) -> str:
    """Show only the first few characters of a credential."""
    if not value:
        return ""
    return value[:visible] + "..."


class ConfigEnv:
    # ----- PlayHT credentials -----
    USER_ID: Optional[str] = None
    API_KEY: Optional[str] = None

    # ----- PlayHT websocket auth -----
    MODEL: str = DEFAULT_MODEL
    PLAYHT_API_VERSION: str = DEFAULT_API_VERSION
    PLAYHT_BASE_URL: str = "https://api.play.ht"

    # ----- Server -----
    HOST: str = "0.0.0.0"
    PORT: Optional[int] = 8080
    PORT_SETTING: str = "8080"
    LOG_LEVEL: str = "INFO"
    TEMPLATE_PATH: Path = DEFAULT_TEMPLATE_PATH

    REQUIRED = [
        "USER_ID",
        "API_KEY",
    ]

    @classmethod
    def reload(cls) -> None:
        """Re-read every setting from the process environment."""
        cls.USER_ID = os.getenv("USER_ID")
        cls.API_KEY = os.getenv("API_KEY")
        cls.MODEL = os.getenv("MODEL") or DEFAULT_MODEL
        cls.PLAYHT_API_VERSION = (os.getenv("PLAYHT_API_VERSION") or DEFAULT_API_VERSION).strip().lower()
        cls.PLAYHT_BASE_URL = os.getenv("PLAYHT_BASE_URL", "https://api.play.ht").rstrip("/")
        cls.HOST = os.getenv("HOST", "0.0.0.0")
        cls.PORT_SETTING = os.getenv("PORT") or "8080"
        cls.PORT = convert_to_port(cls.PORT_SETTING)
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        template_path = os.getenv("TEMPLATE_PATH")
        cls.TEMPLATE_PATH = Path(template_path) if template_path else DEFAULT_TEMPLATE_PATH

    @classmethod
    def uses_model_map(cls) -> bool:
        """v4 returns one websocket URL per model; v3 returns a single URL."""
        return cls.PLAYHT_API_VERSION == "v4"

    @classmethod
    def missing(cls) -> List[str]:
        return [key for key in cls.REQUIRED if not getattr(cls, key)]

    @classmethod
    def validate(cls) -> List[str]:
        """
        Collect every startup problem as a human readable message.

        Returns:
            List of error messages, empty when the configuration is usable.
        """
        errors = [f"{key} not found in environment." for key in cls.missing()]
        if errors:
            errors.append(
                "One or more required environment variables are missing. "
                "Please create an .env file similar to the .env.example file."
            )

        if cls.MODEL not in ALLOWED_MODELS:
            errors.append(
                f"Invalid MODEL '{cls.MODEL}'. Must be one of: {', '.join(ALLOWED_MODELS)}."
            )

        if cls.PLAYHT_API_VERSION not in ALLOWED_API_VERSIONS:
            errors.append(
                f"Invalid PLAYHT_API_VERSION '{cls.PLAYHT_API_VERSION}'. "
                f"Must be one of: {', '.join(ALLOWED_API_VERSIONS)}."
            )

        if cls.PORT is None:
            errors.append(
                f"Invalid PORT '{cls.PORT_SETTING}'. Must be a number between 1 and 65535."
            )

        current = tuple(sys.version_info[:2])
        if current < MINIMUM_PYTHON:
            errors.append(
                f"Python {MINIMUM_PYTHON[0]}.{MINIMUM_PYTHON[1]} or newer is required, "
                f"running {current[0]}.{current[1]}."
            )

        return errors


def check_startup() -> None:
    """
    Validate the environment once before the server binds its port.

    Logs a diagnostic for each problem and exits with status 1 if any is found.
    """
    errors = ConfigEnv.validate()
    if errors:
        for message in errors:
            logger.error(message)
        sys.exit(1)

    logger.info(f"USER_ID = {mask_secret(ConfigEnv.USER_ID)}")
    logger.info(f"API_KEY = {mask_secret(ConfigEnv.API_KEY)}")
    logger.info(f"PlayHT API version = {ConfigEnv.PLAYHT_API_VERSION}")
    if ConfigEnv.uses_model_map():
        logger.info(f"Selected model = {ConfigEnv.MODEL}")


ConfigEnv.reload()
