# Settings for pubfiles — remote API base, timeouts, web server binding.
# Created: 2026-10-19

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from ``PUBFILES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PUBFILES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote storage API
    api_base: str = Field(
        default="http://localhost:8000/api",
        description="Base address of the remote storage API",
    )
    request_timeout: float = Field(default=15.0, gt=0, description="Seconds per API call")

    # Web server
    host: str = Field(default="127.0.0.1", description="Host to bind the web server")
    port: int = Field(default=8888, description="Port for the web server")
    cors_allowed_origins: list[str] = Field(default_factory=list)

    log_level: str = Field(default="INFO")

    @field_validator("api_base")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return v

    @classmethod
    def load(cls) -> Settings:
        """Build settings from the environment (uncached)."""
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    settings = Settings.load()
    logger.debug("Loaded settings (api_base=%s)", settings.api_base)
    return settings
