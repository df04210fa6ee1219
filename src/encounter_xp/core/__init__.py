"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        EncounterXpError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        TableLoadError: Table file errors (not found, unreadable, malformed).
        LevelInputError: Invalid adventurer level input.
        CalculationError: Threshold lookup errors.

    Configuration:
        Settings: Application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from encounter_xp.core.config import Settings, clear_settings_cache, get_settings
from encounter_xp.core.exceptions import (
    CalculationError,
    ConfigurationError,
    EncounterXpError,
    InvalidLevelTokenError,
    LevelInputError,
    LevelOutOfRangeError,
    MalformedTableError,
    TableIndexError,
    TableLoadError,
    TableNotFoundError,
    TableReadError,
)
from encounter_xp.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "EncounterXpError",
    # Configuration exceptions
    "ConfigurationError",
    # Table exceptions
    "TableLoadError",
    "TableNotFoundError",
    "TableReadError",
    "MalformedTableError",
    # Level exceptions
    "LevelInputError",
    "InvalidLevelTokenError",
    "LevelOutOfRangeError",
    # Calculation exceptions
    "CalculationError",
    "TableIndexError",
    # Configuration
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
