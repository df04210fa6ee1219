"""Pydantic V2 schema for the encounter threshold table.

An EncounterTable holds four arrays of XP thresholds, one per difficulty
tier, indexed by adventurer level (index 0 = level 1). Tables come from
the embedded DMG data or from a JSON file of the form::

    {
        "easy":   [20 integers],
        "medium": [20 integers],
        "hard":   [20 integers],
        "deadly": [20 integers]
    }

Array length is not checked here; a short array is only reported when a
level beyond its end is looked up.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from encounter_xp.core.constants import MAX_THRESHOLD
from encounter_xp.models.enums import DifficultyTier


Threshold = Annotated[int, Field(ge=0, le=MAX_THRESHOLD)]


class EncounterTable(BaseModel):
    """XP thresholds per difficulty tier.

    Attributes:
        easy: Easy thresholds by level.
        medium: Medium thresholds by level.
        hard: Hard thresholds by level.
        deadly: Deadly thresholds by level.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
    )

    easy: list[Threshold] = Field(description="Easy thresholds, index 0 = level 1")
    medium: list[Threshold] = Field(description="Medium thresholds, index 0 = level 1")
    hard: list[Threshold] = Field(description="Hard thresholds, index 0 = level 1")
    deadly: list[Threshold] = Field(description="Deadly thresholds, index 0 = level 1")

    def thresholds(self, tier: DifficultyTier) -> list[int]:
        """Get the threshold array for a tier.

        Args:
            tier: The difficulty tier.

        Returns:
            Thresholds for the tier, index 0 = level 1.
        """
        match tier:
            case DifficultyTier.EASY:
                return self.easy
            case DifficultyTier.MEDIUM:
                return self.medium
            case DifficultyTier.HARD:
                return self.hard
            case DifficultyTier.DEADLY:
                return self.deadly


__all__ = ["EncounterTable", "Threshold"]
