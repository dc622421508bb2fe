"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from firefund.config.business_constants import (
    DEFAULT_CHART_HISTORY_MONTHS,
    DEFAULT_FETCH_CONCURRENCY,
    DEFAULT_NETWORK_DEPTH,
    MAX_NETWORK_DEPTH,
)

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str
    database_echo: bool = False

    # Application
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str | None = None

    # Network rollup
    network_max_depth: int = Field(
        default=DEFAULT_NETWORK_DEPTH,
        ge=1,
        le=MAX_NETWORK_DEPTH,
        description="Downline levels included in the rollup",
    )
    snapshot_fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-member snapshot fetch timeout in seconds",
    )
    snapshot_fetch_concurrency: int = Field(
        default=DEFAULT_FETCH_CONCURRENCY,
        ge=1,
        le=100,
        description="Data source calls in flight per fan-out (one connection each)",
    )
    chart_history_months: int = Field(
        default=DEFAULT_CHART_HISTORY_MONTHS,
        ge=1,
        le=120,
        description="Trailing months shown in monthly performance charts",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode='after')
    def validate_production(self) -> 'Settings':
        """Validate production-specific requirements."""
        if self.environment == 'production' and self.debug:
            raise ValueError(
                'DEBUG must be False in production environment. '
                'Set DEBUG=false in your .env file.'
            )
        return self

    @field_validator('database_url')
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL."""
        if not v.startswith(('postgresql://', 'postgresql+asyncpg://')):
            raise ValueError(
                'DATABASE_URL must start with postgresql:// or postgresql+asyncpg://'
            )
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate loguru level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f'Invalid LOG_LEVEL: {v}. Expected one of {", ".join(_LOG_LEVELS)}'
            )
        return level

    @property
    def async_database_url(self) -> str:
        """Database URL with the asyncpg driver."""
        if self.database_url.startswith('postgresql://'):
            return self.database_url.replace('postgresql://', 'postgresql+asyncpg://', 1)
        return self.database_url


@lru_cache
def get_settings() -> Settings:
    """Get process-wide settings instance."""
    return Settings()
