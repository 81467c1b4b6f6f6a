"""Dice rolling for combat resolution.

Every roll goes through a RandomSource so that a seeded engine replays the
exact same fight. The source wraps a numpy Generator (PCG64). Each die is
one ``integers(1, 7)`` call, first die before second. The PCG64 bit stream
for a seed is stable, but numpy only guarantees the values
``Generator.integers`` derives from it within a single numpy release, so
seeded fights replay exactly only under the same numpy version.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import RandomSourceOwnershipError

DIE_SIDES = 6


@dataclass(frozen=True)
class DiceRoll:
    """Result of a single-die or double-die roll.

    ``die2`` is 0 for a single-die roll, in which case ``total == die1``.
    """
    die1: int
    die2: int
    total: int
    label: str = "generic"

    @property
    def is_single(self) -> bool:
        """True for a 1d6 roll."""
        return self.die2 == 0

    @property
    def is_double(self) -> bool:
        """True for a 2d6 roll."""
        return self.die2 > 0

    def __str__(self) -> str:
        if self.is_single:
            return f"[{self.die1}] = {self.total}"
        return f"[{self.die1}+{self.die2}] = {self.total}"


class RandomSource:
    """Seeded or unseeded six-sided dice generator.

    A source belongs to exactly one CombatEngine. Sharing it between engines
    interleaves their draws and silently breaks replay, so engines claim the
    source on construction and a second claim is rejected.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the random source.

        Args:
            seed: Seed for reproducible sequences. None draws fresh OS entropy.
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._owner: Optional[object] = None
        self.rolls_made = 0

    def _next_die(self) -> int:
        """Draw one die face in [1, 6]."""
        return int(self._rng.integers(1, DIE_SIDES + 1))

    def roll_single(self, label: str = "generic") -> DiceRoll:
        """Roll 1d6.

        Args:
            label: Tag describing what the roll is for

        Returns:
            DiceRoll with die2 == 0 and total in [1, 6]
        """
        die1 = self._next_die()
        self.rolls_made += 1
        return DiceRoll(die1=die1, die2=0, total=die1, label=label)

    def roll_double(self, label: str = "generic") -> DiceRoll:
        """Roll 2d6.

        Args:
            label: Tag describing what the roll is for

        Returns:
            DiceRoll with both dice in [1, 6] and total in [2, 12]
        """
        die1 = self._next_die()
        die2 = self._next_die()
        self.rolls_made += 1
        return DiceRoll(die1=die1, die2=die2, total=die1 + die2, label=label)

    @property
    def owner(self) -> Optional[object]:
        """The engine currently holding this source, if any."""
        return self._owner

    def claim(self, owner: object) -> None:
        """Register the engine that owns this source.

        Args:
            owner: The claiming engine

        Raises:
            RandomSourceOwnershipError: If another engine already owns it
        """
        if self._owner is not None and self._owner is not owner:
            raise RandomSourceOwnershipError(type(self._owner).__name__)
        self._owner = owner

    def release(self, owner: object) -> None:
        """Give the source up so another engine can claim it."""
        if self._owner is owner:
            self._owner = None
