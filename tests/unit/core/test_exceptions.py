"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

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


class TestEncounterXpError:
    """Tests for the base EncounterXpError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = EncounterXpError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = EncounterXpError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)
        assert exc.message == "Test error"

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(EncounterXpError("Test", details={"x": 1}))
        assert "EncounterXpError" in repr_str
        assert "x" in repr_str


class TestTableLoadExceptions:
    """Tests for table loading exceptions."""

    def test_source_file(self) -> None:
        """Test TableLoadError with source file."""
        exc = TableNotFoundError("Missing", source_file="dmg.json")
        assert exc.details["source_file"] == "dmg.json"

    @pytest.mark.parametrize("cls", [TableNotFoundError, TableReadError, MalformedTableError])
    def test_inheritance(self, cls: type[TableLoadError]) -> None:
        """Test table exception inheritance chain."""
        exc = cls("Error")
        assert isinstance(exc, TableLoadError)
        assert isinstance(exc, EncounterXpError)


class TestLevelInputExceptions:
    """Tests for level input exceptions."""

    def test_invalid_token(self) -> None:
        """Test InvalidLevelTokenError keeps the token and raw input."""
        exc = InvalidLevelTokenError("Bad", token="x", raw_input="1,x")
        assert exc.details == {"token": "x", "raw_input": "1,x"}
        assert isinstance(exc, LevelInputError)

    def test_out_of_range(self) -> None:
        """Test LevelOutOfRangeError keeps the level."""
        exc = LevelOutOfRangeError("Bad", level=25)
        assert exc.details["level"] == 25
        assert isinstance(exc, LevelInputError)


class TestOtherExceptions:
    """Tests for calculation and configuration exceptions."""

    def test_table_index_error(self) -> None:
        """Test TableIndexError with lookup context."""
        exc = TableIndexError("Short", tier="easy", level=5, length=3)
        assert exc.details == {"tier": "easy", "level": 5, "length": 3}
        assert isinstance(exc, CalculationError)

    def test_configuration_error(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad level", config_key="log_level")
        assert exc.details["config_key"] == "log_level"

    def test_raise_from(self) -> None:
        """Test that exceptions can be properly chained."""
        original = OSError("Permission denied")

        with pytest.raises(TableReadError) as exc_info:
            try:
                raise original
            except OSError as e:
                raise TableReadError(str(e)) from e

        assert exc_info.value.__cause__ is original
