"""Combatant aggregate used by the combat engine.

A Combatant is created once per match setup and mutated in place by the
engine for the rest of the match.
"""

import uuid
from typing import Optional, TYPE_CHECKING

from ...core.data import Position
from ..combat.results import CombatStatus
from .components import HealthComponent, StaminaComponent, CounterGauge, DEFAULT_COUNTER_MAX
from .stats import Stats, attack_points, defense_points, movement_points

if TYPE_CHECKING:
    from ...core.config import CombatConfig

DEFAULT_HEALTH = 100
DEFAULT_STAMINA = 20


class Combatant:
    """One participant in a duel.

    Wraps the resource components behind flat properties:

    Property Access Patterns:
    1. **Core properties** (most frequent): combatant.current_health,
       combatant.attack_points, combatant.can_act
    2. **Component access** (less frequent): combatant.health.get_hp_percent(),
       combatant.counter.fill_percentage

    Derived combat points are recomputed from ``stats`` on every read, so
    editing a stat takes effect immediately.
    """

    def __init__(
        self,
        name: str,
        stats: Optional[Stats] = None,
        health: int = DEFAULT_HEALTH,
        stamina: int = DEFAULT_STAMINA,
        position: Optional[Position] = None,
        counter_max: int = DEFAULT_COUNTER_MAX,
        combatant_id: Optional[str] = None,
    ):
        """Initialize a combatant at full health and stamina.

        Args:
            name: Display name
            stats: Attribute block (all stats 10 when omitted)
            health: Maximum health
            stamina: Maximum stamina
            position: Initial grid position (origin when omitted)
            counter_max: Counter gauge threshold
            combatant_id: Optional fixed identifier (random uuid when omitted)
        """
        self.name = name
        self.combatant_id = combatant_id or str(uuid.uuid4())
        self.stats = stats if stats is not None else Stats()
        self.position = position if position is not None else Position(0, 0)
        self.health = HealthComponent(health)
        self.stamina = StaminaComponent(stamina)
        self.counter = CounterGauge(counter_max)

    @classmethod
    def from_config(
        cls,
        name: str,
        config: "CombatConfig",
        stats: Optional[Stats] = None,
        position: Optional[Position] = None,
        combatant_id: Optional[str] = None,
    ) -> "Combatant":
        """Create a combatant using the configured defaults.

        Args:
            name: Display name
            config: Balance configuration supplying health, stamina,
                default stat value and counter gauge threshold
            stats: Attribute block (config default stat value when omitted)
            position: Initial grid position
            combatant_id: Optional fixed identifier

        Returns:
            New Combatant
        """
        defaults = config.character_defaults
        return cls(
            name,
            stats=stats if stats is not None else Stats.uniform(defaults.stat_value),
            health=defaults.health,
            stamina=defaults.stamina,
            position=position,
            counter_max=config.counter_max,
            combatant_id=combatant_id,
        )

    # ============== Resources ==============

    @property
    def current_health(self) -> int:
        return self.health.hp_current

    @property
    def max_health(self) -> int:
        return self.health.hp_max

    @property
    def current_stamina(self) -> int:
        return self.stamina.stamina_current

    @property
    def max_stamina(self) -> int:
        return self.stamina.stamina_max

    @property
    def is_alive(self) -> bool:
        return self.health.is_alive()

    @property
    def can_act(self) -> bool:
        """Alive and with at least one point of stamina."""
        return self.is_alive and self.current_stamina > 0

    # ============== Derived Combat Points ==============

    @property
    def attack_points(self) -> int:
        return attack_points(self.stats)

    @property
    def defense_points(self) -> int:
        return defense_points(self.stats)

    @property
    def movement_points(self) -> int:
        return movement_points(self.stats)

    # ============== Mutators (delegate to components) ==============

    def use_stamina(self, amount: int) -> bool:
        """Pay stamina; False and no change when there is not enough."""
        return self.stamina.use(amount)

    def restore_stamina(self, amount: int) -> int:
        """Restore stamina up to the maximum. Returns the amount restored."""
        return self.stamina.restore(amount)

    def take_damage(self, amount: int) -> int:
        """Lose health down to 0. Returns the damage actually taken."""
        return self.health.take_damage(amount)

    def heal(self, amount: int) -> int:
        """Recover health up to the maximum. Returns the amount healed."""
        return self.health.heal(amount)

    def snapshot(self, config: Optional["CombatConfig"] = None) -> CombatStatus:
        """Read-only status for presentation layers."""
        return CombatStatus.from_combatant(self, config)

    def __repr__(self) -> str:
        return f"Combatant({self.name!r}, id={self.combatant_id!r})"

    def __str__(self) -> str:
        return (f"{self.name} (HP: {self.current_health}/{self.max_health}, "
                f"SP: {self.current_stamina}/{self.max_stamina})")
