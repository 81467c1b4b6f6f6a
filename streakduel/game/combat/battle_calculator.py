"""
Battle calculation system for damage prediction and forecasting.

This module provides forecast calculations separate from actual combat
resolution, so a presentation layer can show damage ranges and defense odds
without touching combatant state or consuming rolls from the engine's
random source. Probabilities are exact: they enumerate all 36 outcomes of
2d6 instead of sampling.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..entities.combatant import Combatant

_FACES = np.arange(1, 7, dtype=np.int16)
# All 36 equally likely 2d6 totals
TWO_D6_TOTALS = (_FACES[:, None] + _FACES[None, :]).ravel()


@dataclass(frozen=True)
class BattleForecast:
    """Predicted numbers for one attacker/defender pairing."""
    attacker_name: str
    defender_name: str
    min_damage: int
    max_damage: int
    average_damage: float
    full_block_chance: float
    counter_gain_chance: float
    evasion_chance: float
    counter_ready: bool


class BattleCalculator:
    """Calculates battle forecasts for damage prediction."""

    @staticmethod
    def calculate_forecast(attacker: "Combatant", defender: "Combatant") -> BattleForecast:
        """Calculate a complete forecast for attacker hitting defender.

        Defense odds are taken against the attacker's average damage.

        Args:
            attacker: The attacking combatant
            defender: The defending combatant

        Returns:
            BattleForecast with all prediction values
        """
        min_damage, max_damage = BattleCalculator.damage_range(attacker)
        average = BattleCalculator.average_damage(attacker)
        expected_incoming = int(round(average))

        return BattleForecast(
            attacker_name=attacker.name,
            defender_name=defender.name,
            min_damage=min_damage,
            max_damage=max_damage,
            average_damage=average,
            full_block_chance=BattleCalculator.full_block_chance(defender, expected_incoming),
            counter_gain_chance=BattleCalculator.counter_gain_chance(defender, expected_incoming),
            evasion_chance=BattleCalculator.evasion_chance(defender, expected_incoming),
            counter_ready=defender.counter.is_ready,
        )

    @staticmethod
    def _attack_damages(attacker: "Combatant") -> np.ndarray:
        return np.maximum(0, TWO_D6_TOTALS + attacker.attack_points)

    @staticmethod
    def damage_range(attacker: "Combatant") -> tuple[int, int]:
        """Min and max damage of a normal or counter attack."""
        damages = BattleCalculator._attack_damages(attacker)
        return int(damages.min()), int(damages.max())

    @staticmethod
    def average_damage(attacker: "Combatant") -> float:
        """Expected damage of a normal or counter attack."""
        return float(BattleCalculator._attack_damages(attacker).mean())

    @staticmethod
    def full_block_chance(defender: "Combatant", incoming_damage: int) -> float:
        """Probability (0-1) that Defend blocks all of incoming_damage."""
        totals = TWO_D6_TOTALS + defender.defense_points
        return float(np.mean(totals >= incoming_damage))

    @staticmethod
    def counter_gain_chance(defender: "Combatant", incoming_damage: int) -> float:
        """Probability (0-1) that Defend over-defends and adds to the gauge."""
        totals = TWO_D6_TOTALS + defender.defense_points
        return float(np.mean(totals > incoming_damage))

    @staticmethod
    def evasion_chance(defender: "Combatant", incoming_damage: int) -> float:
        """Probability (0-1) that Move avoids all of incoming_damage."""
        totals = TWO_D6_TOTALS + defender.movement_points
        return float(np.mean(totals >= incoming_damage))
