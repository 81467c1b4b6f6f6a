"""
Test utilities and helper functions for the streakduel test suite.

This module provides a scripted dice source, builders for combatants and
engines, and assertion helpers that keep combat tests short and exact.
"""
from typing import Iterable, Optional

from streakduel.core.config import CombatConfig
from streakduel.core.dice import RandomSource
from streakduel.core.events import EventManager, EventType, GameEvent
from streakduel.game.combat import CombatEngine
from streakduel.game.entities import Combatant, Stats


class ScriptedRandomSource(RandomSource):
    """RandomSource that returns predetermined die faces in order.

    Lets a test pin every roll of a fight instead of hunting for seeds.
    """

    def __init__(self, faces: Iterable[int] = ()):
        super().__init__(seed=0)
        self.faces = list(faces)

    def queue(self, *faces: int) -> "ScriptedRandomSource":
        """Append more faces to the script."""
        self.faces.extend(faces)
        return self

    def _next_die(self) -> int:
        if not self.faces:
            raise AssertionError("ScriptedRandomSource ran out of die faces")
        return self.faces.pop(0)


class CombatantTestBuilder:
    """Builder for combatants in specific combat states."""

    def __init__(self, name: str = "Fighter"):
        self.name = name
        self.stats = Stats()
        self.health = 100
        self.stamina = 20
        self.counter_max = 6
        self.current_health: Optional[int] = None
        self.current_stamina: Optional[int] = None
        self.counter_value = 0

    def with_stats(self, **values: int) -> "CombatantTestBuilder":
        """Set the given stats; every stat not named is 0."""
        self.stats = zero_stats(**values)
        return self

    def with_flat_stats(self, value: int) -> "CombatantTestBuilder":
        self.stats = Stats.uniform(value)
        return self

    def with_health(self, current: int, maximum: Optional[int] = None) -> "CombatantTestBuilder":
        self.current_health = current
        if maximum is not None:
            self.health = maximum
        return self

    def with_stamina(self, current: int, maximum: Optional[int] = None) -> "CombatantTestBuilder":
        self.current_stamina = current
        if maximum is not None:
            self.stamina = maximum
        return self

    def with_counter(self, value: int, maximum: Optional[int] = None) -> "CombatantTestBuilder":
        self.counter_value = value
        if maximum is not None:
            self.counter_max = maximum
        return self

    def build(self) -> Combatant:
        """Build and return the configured combatant."""
        combatant = Combatant(
            self.name,
            stats=self.stats,
            health=self.health,
            stamina=self.stamina,
            counter_max=self.counter_max,
            combatant_id=self.name.lower(),
        )
        if self.current_health is not None:
            combatant.health.hp_current = self.current_health
        if self.current_stamina is not None:
            combatant.stamina.stamina_current = self.current_stamina
        combatant.counter.add_counter(self.counter_value)
        return combatant


def zero_stats(**overrides: int) -> Stats:
    """Stats with every value 0 except the given overrides."""
    values = dict(strength=0, endurance=0, charisma=0, intelligence=0, agility=0, wisdom=0)
    values.update(overrides)
    return Stats(**values)


def scripted_engine(*faces: int, config: Optional[CombatConfig] = None,
                    event_manager: Optional[EventManager] = None) -> CombatEngine:
    """Create an engine whose dice return faces in order."""
    return CombatEngine(
        config=config,
        random_source=ScriptedRandomSource(faces),
        event_manager=event_manager,
    )


class EventRecorder:
    """Universal subscriber that keeps every delivered event."""

    def __init__(self, event_manager: EventManager):
        self.events: list[GameEvent] = []
        event_manager.subscribe_all(self.events.append, subscriber_name="EventRecorder")

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        return [event for event in self.events if event.event_type == event_type]

    def types(self) -> list[EventType]:
        return [event.event_type for event in self.events]


def assert_resources(combatant: Combatant, health: int, stamina: int, counter: int) -> None:
    """Assert a combatant's health, stamina and counter gauge in one go."""
    assert (combatant.current_health, combatant.current_stamina, combatant.counter.current) == \
        (health, stamina, counter), (
            f"{combatant.name}: expected HP {health}, SP {stamina}, counter {counter}; got "
            f"HP {combatant.current_health}, SP {combatant.current_stamina}, "
            f"counter {combatant.counter.current}"
        )
