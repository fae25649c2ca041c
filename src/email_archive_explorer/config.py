"""Configuration management for Email Archive Explorer.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache
from pathlib import Path

import pydantic
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from email_archive_explorer.exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the EMAIL_EXPLORER_ prefix (e.g., EMAIL_EXPLORER_DATASET_PATH).
    """

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_EXPLORER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dataset Configuration
    dataset_path: Path = Field(
        default=Path("emails.json"),
        description="Path to the JSON file holding the annotated email records",
    )
    strict_loading: bool = Field(
        default=False,
        description=(
            "Abort loading on malformed records or duplicate document IDs "
            "instead of skipping them with a warning"
        ),
    )

    # Query defaults
    default_list_limit: int = Field(
        default=100,
        ge=1,
        description="Default page size for mentioned people, participants and notable figures",
    )
    default_search_limit: int = Field(
        default=20,
        ge=1,
        description="Default maximum number of person search matches",
    )
    default_emails_limit: int = Field(
        default=50,
        ge=1,
        description="Default page size for filtered email results",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.

    Raises:
        ConfigurationError: If the environment or .env file holds invalid values.
    """
    try:
        return Settings()
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
