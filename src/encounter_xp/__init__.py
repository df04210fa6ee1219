"""encounter-xp - D&D 5E encounter XP budget calculator.

Sums the per-level XP thresholds of a party to give the experience budget
of an encounter at each difficulty tier (DMG p.82).

Example:
    >>> from encounter_xp import DifficultyTier, compute_total, load_encounter_table
    >>>
    >>> table = load_encounter_table()  # embedded DMG table
    >>> compute_total(table, [3, 5], DifficultyTier.EASY)
    325

Modules:
    core: Configuration, logging, constants, and exceptions.
    models: DifficultyTier and the EncounterTable schema.
    engine: Table loading, input parsing, totals, and formatting.
    cli: The ``encounter-xp`` command.
"""

from __future__ import annotations

# Core
from encounter_xp.core.config import Settings, get_settings
from encounter_xp.core.exceptions import EncounterXpError
from encounter_xp.core.logging import configure_logging, get_logger

# Models
from encounter_xp.models import DifficultyTier, EncounterTable

# Engine
from encounter_xp.engine import (
    compute_total,
    compute_totals,
    default_encounter_table,
    default_table_json,
    format_outcome,
    load_encounter_table,
    parse_difficulty,
    parse_levels,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "EncounterXpError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "DifficultyTier",
    "EncounterTable",
    # Engine
    "compute_total",
    "compute_totals",
    "default_encounter_table",
    "default_table_json",
    "format_outcome",
    "load_encounter_table",
    "parse_difficulty",
    "parse_levels",
]
