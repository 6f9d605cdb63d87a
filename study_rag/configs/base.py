"""
Base configuration settings.

Shared .env loading options for every settings class, plus the
process-level fields (environment, debug flag, log level).

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


def env_config(prefix: str = "", **overrides) -> SettingsConfigDict:
    """
    Build the settings config used across the service.

    Args:
        prefix: Environment variable prefix (e.g. "EMBEDDING_")
        **overrides: Extra SettingsConfigDict options

    Returns:
        SettingsConfigDict: Case-insensitive config reading .env, ignoring unknown keys
    """
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        **overrides,
    )


class BaseSettings(PydanticBaseSettings):
    """Process-level settings shared by the API and the RAG layer."""

    model_config = env_config()

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level and reject names logging does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
