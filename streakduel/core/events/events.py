"""Combat events and log events.

The engine publishes these through an optional EventManager so that
observers such as the LogManager can follow a fight without the engine
knowing about them.

Event Design Principles:
- Events are immutable dataclasses
- All events carry ``sequence``, the engine's history length when published
- Events carry the outcome records themselves instead of copying fields
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...game.combat.results import AttackOutcome, DefenseOutcome


class EventType(Enum):
    """Types of events that observers can subscribe to."""
    # Combat Events
    ATTACK_EXECUTED = auto()
    DEFENSE_RESOLVED = auto()
    COUNTER_ATTACK_EXECUTED = auto()
    STAMINA_RESTORED = auto()
    COMBATANT_DEFEATED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all events."""
    sequence: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class AttackExecuted(GameEvent):
    """Event emitted after an attack attempt, successful or not."""
    outcome: "AttackOutcome"

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.ATTACK_EXECUTED)


@dataclass(frozen=True)
class DefenseResolved(GameEvent):
    """Event emitted after a defender's response has been applied."""
    defender_name: str
    outcome: "DefenseOutcome"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEFENSE_RESOLVED)


@dataclass(frozen=True)
class CounterAttackExecuted(GameEvent):
    """Event emitted after a counter attack attempt."""
    outcome: "AttackOutcome"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COUNTER_ATTACK_EXECUTED)


@dataclass(frozen=True)
class StaminaRestored(GameEvent):
    """Event emitted when a combatant rests."""
    combatant_name: str
    amount: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.STAMINA_RESTORED)


@dataclass(frozen=True)
class CombatantDefeated(GameEvent):
    """Event emitted when damage drops a combatant to 0 health."""
    combatant_name: str
    combatant_id: str
    defeated_by: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_DEFEATED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: str
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the log buffer should be written to disk."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
