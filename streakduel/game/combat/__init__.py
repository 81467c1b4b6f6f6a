"""Combat resolution: the engine, its outcome records and forecasts."""

from .battle_calculator import BattleCalculator, BattleForecast
from .combat_engine import CombatEngine
from .results import (
    AnyDefenseOutcome,
    AttackOutcome,
    CombatLogEntry,
    CombatRoundResult,
    CombatStatus,
    DefendOutcome,
    DefenseOutcome,
    EvasionOutcome,
    TakeDamageOutcome,
)

__all__ = [
    "BattleCalculator",
    "BattleForecast",
    "CombatEngine",
    "AnyDefenseOutcome",
    "AttackOutcome",
    "CombatLogEntry",
    "CombatRoundResult",
    "CombatStatus",
    "DefendOutcome",
    "DefenseOutcome",
    "EvasionOutcome",
    "TakeDamageOutcome",
]
