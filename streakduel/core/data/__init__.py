"""Core data structures and definitions.

This package contains fundamental data types and combat definitions:
- data_structures.py: Position for grid coordinates
- game_enums.py: Centralized enums for defense choices, log actions and failures
"""

from .data_structures import Position
from .game_enums import (
    DefenseChoice,
    CombatAction,
    FailureReason,
    DEFENSE_CHOICE_NAMES,
    COMBAT_ACTION_NAMES,
)

__all__ = [
    "Position",
    "DefenseChoice",
    "CombatAction",
    "FailureReason",
    "DEFENSE_CHOICE_NAMES",
    "COMBAT_ACTION_NAMES",
]
