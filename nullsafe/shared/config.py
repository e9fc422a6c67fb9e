"""Configuration management using Pydantic Settings.

Loads configuration from environment variables (prefix ``NULLSAFE_``) with validation.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: LogLevel = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Validation layer
    log_guard_failures: bool = Field(
        default=False,
        description="Log each rejected callable or value at DEBUG before raising",
    )

    model_config = SettingsConfigDict(
        env_prefix="NULLSAFE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton instance for process-wide configuration
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Returns:
        Settings: The cached configuration instance

    Example:
        >>> settings = get_settings()
        >>> settings.log_guard_failures
        False
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
