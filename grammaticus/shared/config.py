# grammaticus/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Values come from GRAMMATICUS_* environment variables or a local .env file.
    """

    # --- Rendering ---
    DEFAULT_LOCALE: str = "en"
    MISSING_LABEL: str = "MISSING"

    # Forces the lowercasing policy for every language when set.
    # None keeps the per-language default (off for ja/zh/ko/th/vi/tl).
    DONT_CAPITALIZE: Optional[bool] = None

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(
        env_prefix="GRAMMATICUS_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
