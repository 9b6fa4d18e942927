"""Configuration management for Today I Ran."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import UnitSystem

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be set with a ``TODAY_I_RAN_`` prefixed variable, either
    in the environment or in a .env file in the working directory. Command
    line flags take precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="TODAY_I_RAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    unit_system: UnitSystem = Field(
        default=UnitSystem.METRIC,
        description="Default unit system for output: metric or imperial",
    )
    verbose: bool = Field(
        default=False,
        description="Always show projections and comparisons",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'Unknown log level "{v}"')
        return level


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None
