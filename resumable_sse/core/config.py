"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables prefixed with ``RESUMABLE_SSE_``. Every setting has a default, so the
library works without any environment configured.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from resumable_sse.core.config import get_settings

    settings = get_settings()
    delay_ms = settings.reconnection_time_ms
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resumable_sse.core.constants import (
    BACKOFF_FACTOR_DEFAULT,
    BACKOFF_JITTER_DEFAULT,
    CONNECT_TIMEOUT_DEFAULT,
    MAX_BACKOFF_MS_DEFAULT,
    MAX_LINE_LENGTH_DEFAULT,
    RECONNECTION_TIME_MS_DEFAULT,
)


class EventSourceSettings(BaseSettings):
    """
    EventSource settings (flat structure).

    Configuration precedence:
        1. Environment variables (RESUMABLE_SSE_*)
        2. Default values
    """

    # Reconnection
    reconnection_time_ms: int = Field(
        default=RECONNECTION_TIME_MS_DEFAULT,
        ge=0,
        description="Initial reconnection delay in milliseconds (overridden by server `retry:`)",
    )
    backoff_factor: float = Field(
        default=BACKOFF_FACTOR_DEFAULT,
        ge=1.0,
        description="Exponential backoff multiplier per attempt",
    )
    max_backoff_ms: int = Field(
        default=MAX_BACKOFF_MS_DEFAULT,
        ge=0,
        description="Upper bound for backoff delays in milliseconds",
    )
    backoff_jitter: float = Field(
        default=BACKOFF_JITTER_DEFAULT,
        description="Relative jitter for backoff delays (0 disables jitter)",
    )
    max_retries: int | None = Field(
        default=None,
        ge=0,
        description="Give up after this many consecutive retries (None = retry forever)",
    )

    # Transport
    connect_timeout: float = Field(
        default=CONNECT_TIMEOUT_DEFAULT,
        gt=0,
        description="Connect timeout in seconds for clients owned by EventSource.get()",
    )

    # Parsing
    max_line_length: int = Field(
        default=MAX_LINE_LENGTH_DEFAULT,
        gt=0,
        description="Longest accepted SSE line in characters",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of the human-readable console format",
    )
    configure_logging: bool = Field(
        default=False,
        description="Configure structlog globally (leave False when embedded in an app)",
    )

    model_config = SettingsConfigDict(
        env_prefix="RESUMABLE_SSE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("backoff_jitter")
    @classmethod
    def validate_backoff_jitter(cls, v: float) -> float:
        """Validate jitter is a fraction between 0 and 1.

        Args:
            v: Jitter ratio to validate.

        Returns:
            float: Validated jitter ratio.

        Raises:
            ValueError: If jitter is outside [0, 1].
        """
        if not 0.0 <= v <= 1.0:
            raise ValueError("backoff_jitter must be between 0 and 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def reconnection_time(self) -> timedelta:
        """Initial reconnection delay as a timedelta."""
        return timedelta(milliseconds=self.reconnection_time_ms)

    @property
    def max_backoff(self) -> timedelta:
        """Backoff cap as a timedelta."""
        return timedelta(milliseconds=self.max_backoff_ms)


@lru_cache
def get_settings() -> EventSourceSettings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.
    Tests call ``get_settings.cache_clear()`` after patching the environment.

    Returns:
        EventSourceSettings: Cached settings instance.
    """
    return EventSourceSettings()
