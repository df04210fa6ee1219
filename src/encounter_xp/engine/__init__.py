"""Encounter XP engine: table loading, input parsing, totals, and output.

Exports:
    load_encounter_table: Load a table from a file or the embedded default.
    default_encounter_table: The embedded DMG table.
    default_table_json: The embedded table as JSON text.
    parse_levels: Parse the level list.
    parse_difficulty: Parse the difficulty selector.
    compute_total: XP budget for one tier.
    compute_totals: XP budgets for every tier.
    format_outcome: Render budgets as text.
"""

from __future__ import annotations

from encounter_xp.engine.calculator import compute_total, compute_totals
from encounter_xp.engine.formatter import format_outcome, format_tier_line
from encounter_xp.engine.levels import parse_difficulty, parse_level, parse_levels
from encounter_xp.engine.table_loader import (
    default_encounter_table,
    default_table_json,
    load_encounter_table,
    read_table_file,
)


__all__ = [
    "compute_total",
    "compute_totals",
    "default_encounter_table",
    "default_table_json",
    "format_outcome",
    "format_tier_line",
    "load_encounter_table",
    "parse_difficulty",
    "parse_level",
    "parse_levels",
    "read_table_file",
]
