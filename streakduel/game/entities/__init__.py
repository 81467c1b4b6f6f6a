"""Combat entities: combatants, their stats and resource components."""

from .combatant import Combatant
from .components import HealthComponent, StaminaComponent, CounterGauge, DEFAULT_COUNTER_MAX
from .stats import Stats, attack_points, defense_points, movement_points

__all__ = [
    "Combatant",
    "HealthComponent",
    "StaminaComponent",
    "CounterGauge",
    "DEFAULT_COUNTER_MAX",
    "Stats",
    "attack_points",
    "defense_points",
    "movement_points",
]
