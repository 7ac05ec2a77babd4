from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loads the reasoning engine settings from the environment."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"

    # Per-attempt bound; a hung call is treated like a failed one.
    VERIFY_ATTEMPT_TIMEOUT: float = 45.0
    GEMINI_REQUEST_TIMEOUT: float = 60.0


@lru_cache()
def get_settings() -> Settings:
    return Settings()
