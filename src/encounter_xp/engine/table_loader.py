"""Encounter table loading.

A table is read from a JSON file when a path is given and taken from the
embedded DMG data otherwise. A failed load is never replaced by the
embedded table: the error propagates to the caller.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from encounter_xp.core.constants import DEFAULT_ENCOUNTER_THRESHOLDS
from encounter_xp.core.exceptions import (
    MalformedTableError,
    TableNotFoundError,
    TableReadError,
)
from encounter_xp.core.logging import get_logger
from encounter_xp.models.table import EncounterTable


logger = get_logger(__name__)


@lru_cache(maxsize=1)
def default_encounter_table() -> EncounterTable:
    """Get the embedded DMG encounter table.

    Returns:
        The default EncounterTable, built once and reused.
    """
    return EncounterTable.model_validate(DEFAULT_ENCOUNTER_THRESHOLDS)


def default_table_json(*, indent: int | None = 4) -> str:
    """Render the embedded table in the table file format.

    Args:
        indent: JSON indentation, or None for a single line.

    Returns:
        JSON text that ``load_encounter_table`` accepts.
    """
    return json.dumps(DEFAULT_ENCOUNTER_THRESHOLDS, indent=indent)


def read_table_file(path: str | Path) -> EncounterTable:
    """Read and validate an encounter table file.

    Args:
        path: Path to a JSON table file.

    Returns:
        The validated EncounterTable.

    Raises:
        TableNotFoundError: If no file exists at ``path``.
        TableReadError: If the file exists but cannot be read.
        MalformedTableError: If the content is not a valid table.
    """
    source = str(path)
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError as exc:
        raise TableNotFoundError(
            f"Encounter table json not found at: {source}, please check path",
            source_file=source,
        ) from exc
    except OSError as exc:
        raise TableReadError(str(exc), source_file=source) from exc

    try:
        table = EncounterTable.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedTableError(
            f"Unable to construct Encounter Table from JSON, error received:\n{exc}",
            source_file=source,
            details={"error_count": exc.error_count()},
        ) from exc

    logger.debug(
        "Loaded encounter table from file",
        source_file=source,
        sizes={name: len(values) for name, values in table.model_dump().items()},
    )
    return table


def load_encounter_table(path: str | Path | None = None) -> EncounterTable:
    """Load an encounter table from ``path``, or the embedded default.

    Args:
        path: Optional path to a JSON table file.

    Returns:
        The loaded EncounterTable.

    Raises:
        TableLoadError: If a path was given and the file cannot be used.
    """
    if path is None:
        logger.debug("Using embedded encounter table")
        return default_encounter_table()
    return read_table_file(path)


__all__ = [
    "default_encounter_table",
    "default_table_json",
    "load_encounter_table",
    "read_table_file",
]
