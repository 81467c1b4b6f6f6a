"""Event system for publisher-subscriber communication.

This package contains the event-driven plumbing around the combat engine:
- event_manager.py: Publisher-subscriber event routing
- events.py: Combat and logging event definitions
"""

from .event_manager import EventManager, EventPriority, QueuedEvent
from .events import (
    GameEvent,
    EventType,
    AttackExecuted,
    DefenseResolved,
    CounterAttackExecuted,
    StaminaRestored,
    CombatantDefeated,
    LogMessage,
    DebugMessage,
    LogSaveRequested,
)

__all__ = [
    "EventManager",
    "EventPriority",
    "QueuedEvent",
    "GameEvent",
    "EventType",
    "AttackExecuted",
    "DefenseResolved",
    "CounterAttackExecuted",
    "StaminaRestored",
    "CombatantDefeated",
    "LogMessage",
    "DebugMessage",
    "LogSaveRequested",
]
