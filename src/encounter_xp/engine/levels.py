"""Normalisation of raw command line input into levels and a tier."""

from __future__ import annotations

import re

from encounter_xp.core.constants import LEVEL_SEPARATORS, MAX_LEVEL, MIN_LEVEL
from encounter_xp.core.exceptions import InvalidLevelTokenError, LevelOutOfRangeError
from encounter_xp.core.logging import get_logger
from encounter_xp.models.enums import DifficultyTier


logger = get_logger(__name__)

# Every separator character delimits a token, so "3, 5" has an empty middle token.
_SEPARATOR_PATTERN = re.compile("[" + re.escape("".join(LEVEL_SEPARATORS)) + "]")
# Signed integers are accepted here; negatives and values above 20 are then
# reported as out of range rather than as non-integer tokens.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _invalid_token(token: str, raw: str) -> InvalidLevelTokenError:
    return InvalidLevelTokenError(
        "Please check that levels contains only integers separated by "
        f"commas or spaces, received:\n{raw}",
        token=token,
        raw_input=raw,
    )


def parse_level(token: str, raw: str) -> int:
    """Parse one level token.

    Args:
        token: A single token from the level string.
        raw: The full level string, for error messages.

    Returns:
        The level as an int in 1-20.

    Raises:
        InvalidLevelTokenError: If the token is not an integer.
        LevelOutOfRangeError: If the integer is outside 1-20.
    """
    if not _INTEGER_PATTERN.fullmatch(token):
        raise _invalid_token(token, raw)
    try:
        level = int(token)
    except ValueError as exc:
        # Digit runs past the interpreter's int conversion limit.
        raise _invalid_token(token, raw) from exc
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise LevelOutOfRangeError(
            f"All provided levels must be between {MIN_LEVEL} and {MAX_LEVEL} "
            f"inclusive, received:\n{level}",
            level=level,
            raw_input=raw,
        )
    return level


def parse_levels(raw: str) -> list[int]:
    """Parse a comma and/or space separated list of adventurer levels.

    Duplicates are kept: each occurrence is one adventurer.

    Args:
        raw: Level string as given on the command line, e.g. ``"3,5"``.

    Returns:
        Levels in input order.

    Raises:
        InvalidLevelTokenError: If any token is not an integer.
        LevelOutOfRangeError: If any level is outside 1-20.
    """
    levels = [parse_level(token, raw) for token in _SEPARATOR_PATTERN.split(raw)]
    logger.debug("Parsed levels", levels=levels)
    return levels


def parse_difficulty(raw: str | None) -> DifficultyTier | None:
    """Parse the difficulty selector.

    An unrecognised selector is treated the same as no selector, which
    reports every tier.

    Args:
        raw: One of ``e``, ``m``, ``h``, ``d``, or None.

    Returns:
        The selected tier, or None for all tiers.
    """
    tier = DifficultyTier.from_letter(raw)
    if tier is None and raw is not None:
        logger.debug("Ignoring unrecognised difficulty", difficulty=raw)
    return tier


__all__ = [
    "parse_difficulty",
    "parse_level",
    "parse_levels",
]
