from __future__ import annotations

import logging
import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # Empty means misconfigured: every generate request answers 500.
    GEMINI_API_KEY: str = ""
    GEMINI_API_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_IMAGE_MODEL: str = "gemini-2.5-flash-image-preview"
    GEMINI_HTTP_TIMEOUT_SEC: float = 120.0

    PROXY_DEFAULT_LOCALE: Literal["ko", "en"] = "ko"

    PROXY_HOST: str = "0.0.0.0"
    PROXY_PORT: int = 8000


S = Settings()

logger = logging.getLogger("uvicorn.error")
logger.setLevel(os.getenv("PROXY_LOG_LEVEL", "INFO").upper())
