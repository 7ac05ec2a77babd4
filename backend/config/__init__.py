import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from .constants import (
    LLM_CONFIG,
    VALIDATION_DEFAULTS,
    VOCABULARIES,
    SAFETY_CATEGORIES,
)
from .settings import Settings, get_settings


def check_engine_config_on_startup(settings: Settings = None) -> bool:
    """Log whether the reasoning engine credential is present."""
    settings = settings or get_settings()
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not set. Verification requests will be rejected.")
        return False
    logger.info(f"Reasoning engine configured with model {settings.GEMINI_MODEL}.")
    return True

__all__ = [
    "logger",
    "LLM_CONFIG",
    "VALIDATION_DEFAULTS",
    "VOCABULARIES",
    "SAFETY_CATEGORIES",
    "Settings",
    "get_settings",
    "check_engine_config_on_startup",
]
