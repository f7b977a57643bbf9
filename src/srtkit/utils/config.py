"""Library configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SRTKIT_*`` environment variables.

    Attributes:
        default_encoding: Encoding recorded for Latin-1/CP-1252/unknown input
        charset_detector: Encoding detector ("file" utility or "chardet")
        file_command: Executable used by the "file" detector
        log_level: Minimum structlog level
        log_json: Render logs as JSON instead of console output
    """

    default_encoding: str = "Windows-1252"
    charset_detector: Literal["file", "chardet"] = "file"
    file_command: str = "file"

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SRTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached. Use get_settings.cache_clear() to reload
        settings in tests.
    """
    return Settings()
