"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
Every value has a default, so the package works with no environment at all;
invalid overrides raise a ValidationError when settings are first loaded.

Environment variables use the ``TOKPULSE_`` prefix, e.g. ``TOKPULSE_REQUEST_TIMEOUT=30``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOKPULSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # HTTP fetching
    # -------------------------------------------------------------------------
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent header sent with every page request",
    )
    accept_language: str = Field(
        default="en-US,en;q=0.9",
        description="Accept-Language header sent with every page request",
    )
    request_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Timeout for a single page request in seconds",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Attempts per fetch on timeouts and connection errors",
    )
    max_concurrent_downloads: int = Field(
        default=4,
        ge=1,
        description="Upper bound on simultaneous fetches in batch downloads",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: human-readable console or JSON lines",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
