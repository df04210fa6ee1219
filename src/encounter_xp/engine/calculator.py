"""XP budget calculation.

The budget for a tier is the sum of each adventurer's threshold for that
tier. Both functions here are pure.
"""

from __future__ import annotations

from collections.abc import Iterable

from encounter_xp.core.exceptions import TableIndexError
from encounter_xp.models.enums import DifficultyTier
from encounter_xp.models.table import EncounterTable


def compute_total(
    table: EncounterTable,
    levels: Iterable[int],
    tier: DifficultyTier,
) -> int:
    """Total the tier's thresholds over every level.

    Args:
        table: Encounter threshold table.
        levels: Adventurer levels; duplicates count once each.
        tier: Difficulty tier to total.

    Returns:
        The XP budget for the party at this tier.

    Raises:
        TableIndexError: If the tier's array has no entry for a level.
    """
    thresholds = table.thresholds(tier)
    total = 0
    for level in levels:
        if not 1 <= level <= len(thresholds):
            raise TableIndexError(
                f"Encounter table has no {tier.value} threshold for level {level} "
                f"({len(thresholds)} entries)",
                tier=tier.value,
                level=level,
                length=len(thresholds),
            )
        total += thresholds[level - 1]
    return total


def compute_totals(
    table: EncounterTable,
    levels: Iterable[int],
) -> dict[DifficultyTier, int]:
    """Total every tier, in Easy, Medium, Hard, Deadly order."""
    levels = list(levels)
    return {tier: compute_total(table, levels, tier) for tier in DifficultyTier}


__all__ = ["compute_total", "compute_totals"]
