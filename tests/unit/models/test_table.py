"""Tests for EncounterTable and DifficultyTier."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from encounter_xp.core.constants import MAX_THRESHOLD
from encounter_xp.models import DifficultyTier, EncounterTable


class TestDifficultyTier:
    """Tests for the DifficultyTier enum."""

    def test_order(self) -> None:
        """Test that tiers iterate in reporting order."""
        assert list(DifficultyTier) == [
            DifficultyTier.EASY,
            DifficultyTier.MEDIUM,
            DifficultyTier.HARD,
            DifficultyTier.DEADLY,
        ]

    def test_labels(self) -> None:
        """Test display labels are capitalized."""
        assert [tier.label for tier in DifficultyTier] == ["Easy", "Medium", "Hard", "Deadly"]

    @pytest.mark.parametrize(
        ("letter", "expected"),
        [
            ("e", DifficultyTier.EASY),
            ("m", DifficultyTier.MEDIUM),
            ("h", DifficultyTier.HARD),
            ("d", DifficultyTier.DEADLY),
        ],
    )
    def test_from_letter(self, letter: str, expected: DifficultyTier) -> None:
        """Test selector letters map to tiers."""
        assert DifficultyTier.from_letter(letter) is expected

    @pytest.mark.parametrize("letter", [None, "", "x", "E", "easy", "ee"])
    def test_from_letter_unknown(self, letter: str | None) -> None:
        """Test that anything else selects no tier."""
        assert DifficultyTier.from_letter(letter) is None


class TestEncounterTable:
    """Tests for the EncounterTable model."""

    def test_thresholds_by_tier(self, short_table: EncounterTable) -> None:
        """Test each tier selects its own array."""
        assert short_table.thresholds(DifficultyTier.EASY) == [1, 2, 3]
        assert short_table.thresholds(DifficultyTier.MEDIUM) == [10, 20, 30]
        assert short_table.thresholds(DifficultyTier.HARD) == [100, 200, 300]
        assert short_table.thresholds(DifficultyTier.DEADLY) == [1000, 2000, 3000]

    def test_default_table_shape(self, default_table: EncounterTable) -> None:
        """Test the embedded table has twenty entries per tier."""
        for tier in DifficultyTier:
            assert len(default_table.thresholds(tier)) == 20

    def test_missing_field(self) -> None:
        """Test that every tier is required."""
        with pytest.raises(ValidationError):
            EncounterTable.model_validate_json('{"easy": [], "medium": [], "hard": []}')

    @pytest.mark.parametrize("value", ["-1", "1.5", '"25"', "true", str(MAX_THRESHOLD + 1)])
    def test_invalid_threshold(self, value: str) -> None:
        """Test that thresholds must be unsigned 32-bit JSON integers."""
        text = f'{{"easy": [{value}], "medium": [], "hard": [], "deadly": []}}'
        with pytest.raises(ValidationError):
            EncounterTable.model_validate_json(text)

    def test_largest_threshold(self) -> None:
        """Test the unsigned 32-bit upper bound is accepted."""
        text = f'{{"easy": [{MAX_THRESHOLD}], "medium": [], "hard": [], "deadly": []}}'
        assert EncounterTable.model_validate_json(text).easy == [MAX_THRESHOLD]

    def test_extra_fields_ignored(self) -> None:
        """Test that unknown fields are ignored."""
        text = '{"easy": [1], "medium": [2], "hard": [3], "deadly": [4], "trivial": [0]}'
        table = EncounterTable.model_validate_json(text)
        assert table.deadly == [4]

    def test_frozen(self, short_table: EncounterTable) -> None:
        """Test that tables cannot be reassigned."""
        with pytest.raises(ValidationError):
            short_table.easy = [0]  # type: ignore[misc]
