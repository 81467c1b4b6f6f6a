"""
Unit tests for dice rolling.

Tests roll ranges, seeded reproducibility and the single-owner discipline of
RandomSource.
"""

import pytest

from streakduel.core.dice import DiceRoll, RandomSource
from streakduel.core.errors import RandomSourceOwnershipError


class TestDiceRoll:
    """Test DiceRoll value object."""

    def test_single_roll_flags(self):
        roll = DiceRoll(die1=4, die2=0, total=4)
        assert roll.is_single
        assert not roll.is_double
        assert str(roll) == "[4] = 4"

    def test_double_roll_flags(self):
        roll = DiceRoll(die1=3, die2=5, total=8, label="ATK")
        assert roll.is_double
        assert not roll.is_single
        assert str(roll) == "[3+5] = 8"

    def test_default_label(self):
        assert DiceRoll(1, 0, 1).label == "generic"


class TestRandomSource:
    """Test RandomSource rolling behavior."""

    def test_single_rolls_in_range(self):
        """Single-die rolls have die2 == 0 and total == die1 in [1, 6]."""
        source = RandomSource(seed=7)
        for _ in range(500):
            roll = source.roll_single("test")
            assert roll.die2 == 0
            assert roll.total == roll.die1
            assert 1 <= roll.total <= 6

    def test_double_rolls_in_range(self):
        """Double-die rolls have both dice in [1, 6] and the total is their sum."""
        source = RandomSource(seed=7)
        for _ in range(500):
            roll = source.roll_double("test")
            assert 1 <= roll.die1 <= 6
            assert 1 <= roll.die2 <= 6
            assert roll.total == roll.die1 + roll.die2
            assert 2 <= roll.total <= 12

    def test_every_face_appears(self):
        source = RandomSource(seed=123)
        faces = {source.roll_single().die1 for _ in range(600)}
        assert faces == {1, 2, 3, 4, 5, 6}

    def test_label_is_kept(self):
        source = RandomSource(seed=1)
        assert source.roll_double("EVASION").label == "EVASION"
        assert source.roll_single("INIT").label == "INIT"

    def test_same_seed_same_sequence(self):
        """Identical seed and call order reproduce identical rolls."""
        first = RandomSource(seed=2024)
        second = RandomSource(seed=2024)

        def sequence(source):
            return [
                source.roll_double("ATK"),
                source.roll_single("INIT"),
                source.roll_double("DEF"),
                source.roll_double("COUNTER"),
            ]

        assert [(r.die1, r.die2) for r in sequence(first)] == [(r.die1, r.die2) for r in sequence(second)]

    def test_double_roll_matches_two_single_draws(self):
        """A double roll consumes exactly two die draws, first die first."""
        doubles = RandomSource(seed=99)
        singles = RandomSource(seed=99)

        roll = doubles.roll_double()
        first = singles.roll_single()
        second = singles.roll_single()

        assert (roll.die1, roll.die2) == (first.die1, second.die1)

    def test_different_seeds_diverge(self):
        a = RandomSource(seed=1)
        b = RandomSource(seed=2)
        rolls_a = [a.roll_double().total for _ in range(30)]
        rolls_b = [b.roll_double().total for _ in range(30)]
        assert rolls_a != rolls_b

    def test_rolls_made_counts_rolls_not_dice(self):
        source = RandomSource(seed=5)
        source.roll_double()
        source.roll_single()
        assert source.rolls_made == 2

    def test_unseeded_source_rolls(self):
        source = RandomSource()
        assert source.seed is None
        assert 2 <= source.roll_double().total <= 12


class TestRandomSourceOwnership:
    """Test the one-engine-per-source discipline."""

    def test_claim_and_reclaim_by_same_owner(self):
        source = RandomSource(seed=1)
        owner = object()
        source.claim(owner)
        source.claim(owner)
        assert source.owner is owner

    def test_second_owner_rejected(self):
        source = RandomSource(seed=1)
        source.claim(object())
        with pytest.raises(RandomSourceOwnershipError):
            source.claim(object())

    def test_release_allows_new_owner(self):
        source = RandomSource(seed=1)
        first, second = object(), object()
        source.claim(first)
        source.release(first)
        source.claim(second)
        assert source.owner is second

    def test_release_by_non_owner_is_ignored(self):
        source = RandomSource(seed=1)
        owner = object()
        source.claim(owner)
        source.release(object())
        assert source.owner is owner
