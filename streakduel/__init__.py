"""Turn-based duel combat resolution engine.

Resolves attacks, defensive responses, stamina costs and the counter-gauge
("badminton streak") mechanic that grants a bonus counter attack after enough
accumulated over-defense.
"""

from .core.config import CombatConfig
from .core.data import DefenseChoice, CombatAction, FailureReason, Position
from .core.dice import DiceRoll, RandomSource
from .core.errors import CombatError, InvalidArgumentError
from .game.combat import CombatEngine
from .game.entities import Combatant, CounterGauge, Stats

__all__ = [
    "CombatConfig",
    "DefenseChoice",
    "CombatAction",
    "FailureReason",
    "Position",
    "DiceRoll",
    "RandomSource",
    "CombatError",
    "InvalidArgumentError",
    "CombatEngine",
    "Combatant",
    "CounterGauge",
    "Stats",
]
