"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the encounter XP calculator test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from encounter_xp.core.logging import configure_logging


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

    from encounter_xp.models.table import EncounterTable


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from encounter_xp.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Keep ENCOUNTER_XP_* variables and stray .env files out of tests."""
    for key in ("ENCOUNTER_XP_LOG_LEVEL", "ENCOUNTER_XP_JSON_LOGS", "ENCOUNTER_XP_TABLE_PATH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    configure_logging(level="WARNING")


# =============================================================================
# Table Fixtures
# =============================================================================


@pytest.fixture
def default_table() -> EncounterTable:
    """Provide the embedded DMG encounter table.

    Returns:
        The default EncounterTable.
    """
    from encounter_xp.engine.table_loader import default_encounter_table

    return default_encounter_table()


@pytest.fixture
def short_table() -> EncounterTable:
    """Provide a table whose arrays only cover levels 1-3.

    Returns:
        EncounterTable with three entries per tier.
    """
    from encounter_xp.models.table import EncounterTable

    return EncounterTable(
        easy=[1, 2, 3],
        medium=[10, 20, 30],
        hard=[100, 200, 300],
        deadly=[1000, 2000, 3000],
    )


@pytest.fixture
def default_table_file(tmp_path: Path) -> Path:
    """Write the embedded table to a JSON file.

    Args:
        tmp_path: Pytest temporary path fixture.

    Returns:
        Path to the written table file.
    """
    from encounter_xp.engine.table_loader import default_table_json

    path = tmp_path / "dmg_table.json"
    path.write_text(default_table_json(), encoding="utf-8")
    return path


@pytest.fixture
def custom_table_file(tmp_path: Path) -> Path:
    """Write a small hand-made table to a JSON file.

    Args:
        tmp_path: Pytest temporary path fixture.

    Returns:
        Path to the written table file.
    """
    path = tmp_path / "custom_table.json"
    path.write_text(
        """
        {
            "deadly": [4, 40, 400],
            "hard": [3, 30, 300],
            "medium": [2, 20, 200],
            "easy": [1, 10, 100]
        }
        """,
        encoding="utf-8",
    )
    return path
