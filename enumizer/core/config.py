"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from
environment variables prefixed with ``ENUMIZER_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from enumizer.core.config import get_settings

    settings = get_settings()
    if settings.log_generated_source:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from enumizer.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Generator settings (flat structure).

    Configuration precedence:
        1. Environment variables (ENUMIZER_*)
        2. Default values

    Returns:
        Settings: Generator configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_generated_source: bool = Field(
        default=False,
        description="Log the rendered source of every generated alias at debug level",
    )
    module_header: str = Field(
        default="Generated by enumizer. Do not edit by hand.",
        description="Comment line written at the top of rendered alias modules",
    )

    model_config = SettingsConfigDict(
        env_prefix="ENUMIZER_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("module_header")
    @classmethod
    def validate_module_header(cls, v: str) -> str:
        """
        Keep the header on a single comment line.

        Args:
            v: Header text.

        Returns:
            str: Header without surrounding whitespace.

        Raises:
            ValueError: If the header spans multiple lines.
        """
        if "\n" in v or "\r" in v:
            raise ValueError("module_header must be a single line")
        return v.strip()

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def uses_json_logs(self) -> bool:
        """
        Check if logs should be machine-readable.

        Returns:
            bool: True in testing and CI environments.
        """
        return self.environment in {Environment.TESTING, Environment.CI}


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
