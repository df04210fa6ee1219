"""Data models for the encounter XP calculator.

Exports:
    DifficultyTier: Easy / Medium / Hard / Deadly enumeration.
    EncounterTable: Pydantic model of per-level XP thresholds.
"""

from __future__ import annotations

from encounter_xp.models.enums import DifficultyTier
from encounter_xp.models.table import EncounterTable, Threshold


__all__ = [
    "DifficultyTier",
    "EncounterTable",
    "Threshold",
]
