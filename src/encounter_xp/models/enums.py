"""Enumeration types for the encounter XP calculator."""

from __future__ import annotations

from enum import StrEnum


class DifficultyTier(StrEnum):
    """D&D 5E encounter difficulty tiers (DMG p.82).

    Values match the field names of an encounter table file. Member order
    is the order tiers are reported in when no tier is selected.
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    DEADLY = "deadly"

    @property
    def label(self) -> str:
        """Get the display name of the tier.

        Returns:
            Capitalized tier name (e.g., 'Easy' for EASY).
        """
        return self.value.capitalize()

    @property
    def letter(self) -> str:
        """Get the single-letter selector for the tier.

        Returns:
            Lowercase selector letter (e.g., 'e' for EASY).
        """
        return self.value[0]

    @classmethod
    def from_letter(cls, letter: str | None) -> DifficultyTier | None:
        """Look up a tier by its single-letter selector.

        Matching is case-sensitive. Anything that is not exactly one of
        ``e``, ``m``, ``h`` or ``d`` yields None rather than an error.

        Args:
            letter: Selector letter, or None.

        Returns:
            The matching tier, or None when nothing matches.
        """
        for tier in cls:
            if letter == tier.letter:
                return tier
        return None


__all__ = ["DifficultyTier"]
