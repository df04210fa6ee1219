"""Application-wide constants for the encounter XP calculator.

This module holds the D&D 5E rules constants the calculator depends on,
including the encounter threshold table from the Dungeon Master's Guide.
"""

from __future__ import annotations

# =============================================================================
# Level Bounds
# =============================================================================

MIN_LEVEL = 1
"""Lowest adventurer level."""

MAX_LEVEL = 20
"""Highest adventurer level."""

LEVEL_SEPARATORS = (",", " ")
"""Characters that separate levels in the --levels argument."""

# =============================================================================
# Threshold Bounds
# =============================================================================

MAX_THRESHOLD = 2**32 - 1
"""Largest XP threshold a table may hold (unsigned 32-bit)."""

# =============================================================================
# XP Thresholds by Character Level (DMG p.82)
# =============================================================================

# One entry per level, index 0 = level 1.
DEFAULT_ENCOUNTER_THRESHOLDS: dict[str, list[int]] = {
    "easy": [
        25, 50, 75, 125, 250, 300, 350, 450, 550, 600,
        800, 1000, 1100, 1250, 1400, 1600, 2000, 2100, 2400, 2800,
    ],
    "medium": [
        50, 100, 150, 250, 500, 600, 750, 900, 1100, 1200,
        1600, 2000, 2200, 2500, 2800, 3200, 3900, 4200, 4900, 5700,
    ],
    "hard": [
        75, 150, 225, 375, 750, 900, 1100, 1400, 1600, 1900,
        2400, 3000, 3400, 3800, 4300, 4800, 5900, 6300, 7300, 8500,
    ],
    "deadly": [
        100, 200, 400, 500, 1100, 1400, 1700, 2100, 2400, 2800,
        3600, 4500, 5100, 5700, 6400, 7200, 8800, 9500, 10900, 12700,
    ],
}


__all__ = [
    "MIN_LEVEL",
    "MAX_LEVEL",
    "LEVEL_SEPARATORS",
    "MAX_THRESHOLD",
    "DEFAULT_ENCOUNTER_THRESHOLDS",
]
