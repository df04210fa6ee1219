"""Custom exception hierarchy for the encounter XP calculator.

Every failure the calculator can hit is terminal: the error travels up to
the command line entry point, which reports its message once and exits
non-zero. All exceptions inherit from EncounterXpError so that boundary only
needs a single ``except`` clause, while each subclass keeps the offending
input in ``details`` for logging and tests.

Example:
    >>> from encounter_xp.core.exceptions import TableNotFoundError
    >>> raise TableNotFoundError("Encounter table json not found", source_file="dmg.json")
"""

from __future__ import annotations

from typing import Any


class EncounterXpError(Exception):
    """Base exception for all encounter XP calculator errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(EncounterXpError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Table Loading Exceptions
# =============================================================================


class TableLoadError(EncounterXpError):
    """Base exception for errors obtaining an encounter table.

    Raised when a table file cannot be found, read, or turned into a
    valid EncounterTable.
    """

    def __init__(
        self,
        message: str,
        *,
        source_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize table load error with source file context.

        Args:
            message: Human-readable error description.
            source_file: Path to the table file that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if source_file:
            combined_details["source_file"] = source_file
        super().__init__(message, details=combined_details)


class TableNotFoundError(TableLoadError):
    """Raised when the requested table file does not exist."""


class TableReadError(TableLoadError):
    """Raised when the table file exists but cannot be read.

    Typically a permissions problem, or the path names a directory.
    """


class MalformedTableError(TableLoadError):
    """Raised when the table file is not a valid encounter table.

    Covers invalid JSON as well as missing, mistyped, negative or
    oversized threshold fields.
    """


# =============================================================================
# Level Input Exceptions
# =============================================================================


class LevelInputError(EncounterXpError):
    """Base exception for invalid adventurer level input."""

    def __init__(
        self,
        message: str,
        *,
        raw_input: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize level input error with the raw input string.

        Args:
            message: Human-readable error description.
            raw_input: The full level string as supplied by the user.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if raw_input is not None:
            combined_details["raw_input"] = raw_input
        super().__init__(message, details=combined_details)


class InvalidLevelTokenError(LevelInputError):
    """Raised when a level token is not an integer at all."""

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        raw_input: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid token error.

        Args:
            message: Human-readable error description.
            token: The token that failed to parse.
            raw_input: The full level string as supplied by the user.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if token is not None:
            combined_details["token"] = token
        super().__init__(message, raw_input=raw_input, details=combined_details)


class LevelOutOfRangeError(LevelInputError):
    """Raised when a level parses as an integer outside 1-20."""

    def __init__(
        self,
        message: str,
        *,
        level: int | None = None,
        raw_input: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize out-of-range error.

        Args:
            message: Human-readable error description.
            level: The offending level value.
            raw_input: The full level string as supplied by the user.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if level is not None:
            combined_details["level"] = level
        super().__init__(message, raw_input=raw_input, details=combined_details)


# =============================================================================
# Calculation Exceptions
# =============================================================================


class CalculationError(EncounterXpError):
    """Base exception for errors while totalling XP thresholds."""


class TableIndexError(CalculationError):
    """Raised when a level does not index the selected threshold array.

    Only reachable with a table whose arrays hold fewer than 20 entries.
    """

    def __init__(
        self,
        message: str,
        *,
        tier: str | None = None,
        level: int | None = None,
        length: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize table index error with lookup context.

        Args:
            message: Human-readable error description.
            tier: Name of the difficulty tier being totalled.
            level: The level that could not be looked up.
            length: Number of entries in the selected array.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if tier:
            combined_details["tier"] = tier
        if level is not None:
            combined_details["level"] = level
        if length is not None:
            combined_details["length"] = length
        super().__init__(message, details=combined_details)


__all__ = [
    "EncounterXpError",
    "ConfigurationError",
    "TableLoadError",
    "TableNotFoundError",
    "TableReadError",
    "MalformedTableError",
    "LevelInputError",
    "InvalidLevelTokenError",
    "LevelOutOfRangeError",
    "CalculationError",
    "TableIndexError",
]
