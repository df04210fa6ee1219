"""Text rendering of XP budgets."""

from __future__ import annotations

from collections.abc import Sequence

from encounter_xp.engine.calculator import compute_total, compute_totals
from encounter_xp.models.enums import DifficultyTier
from encounter_xp.models.table import EncounterTable


def _line(tier: DifficultyTier, total: int) -> str:
    return f"{tier.label}: {total} xp\n"


def format_tier_line(
    table: EncounterTable,
    levels: Sequence[int],
    tier: DifficultyTier,
) -> str:
    """Render one tier as ``"<Tier>: <total> xp\\n"``."""
    return _line(tier, compute_total(table, levels, tier))


def format_outcome(
    table: EncounterTable,
    levels: Sequence[int],
    tier: DifficultyTier | None,
) -> str:
    """Render the XP budget for one tier, or for all four.

    Args:
        table: Encounter threshold table.
        levels: Adventurer levels.
        tier: Tier to report, or None for every tier.

    Returns:
        One line per reported tier, each ending in a newline, in
        Easy, Medium, Hard, Deadly order.
    """
    if tier is not None:
        return format_tier_line(table, levels, tier)
    totals = compute_totals(table, levels)
    return "".join(_line(each, total) for each, total in totals.items())


__all__ = ["format_outcome", "format_tier_line"]
