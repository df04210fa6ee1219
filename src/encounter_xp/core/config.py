"""Configuration management for the encounter XP calculator.

Settings come from environment variables and an optional ``.env`` file via
pydantic-settings. Command line flags always take precedence over these.

Example:
    >>> from encounter_xp.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.log_level)
    'WARNING'

Environment Variables:
    ENCOUNTER_XP_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    ENCOUNTER_XP_JSON_LOGS: Emit logs as JSON instead of console text
    ENCOUNTER_XP_TABLE_PATH: Encounter table file used when --path is not given
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from encounter_xp.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings.

    Attributes:
        app_name: Program name shown by ``--version``.
        log_level: Application logging level.
        json_logs: Render log entries as JSON.
        table_path: Default encounter table file, if any.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENCOUNTER_XP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="encounter-xp",
        description="Program name",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log entries",
    )
    table_path: Path | None = Field(
        default=None,
        description="Encounter table file used when no --path is given",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("table_path", mode="before")
    @classmethod
    def empty_path_is_unset(cls, value: object) -> object:
        """Treat an empty ENCOUNTER_XP_TABLE_PATH as not configured."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid settings.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
