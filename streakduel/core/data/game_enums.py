"""Centralized combat enums and constants.

This module contains the enums shared by the combat engine, its outcome
records and the log pipeline, providing a single source of truth.
"""

from enum import Enum, auto


class DefenseChoice(Enum):
    """Defender's response to an incoming attack."""
    DEFEND = auto()       # Pay stamina, roll 2d6 + DEF, build counter on over-defense
    MOVE = auto()         # Pay stamina, roll 2d6 + MOV to evade
    TAKE_DAMAGE = auto()  # Free, take the full hit, counter gauge preserved


class CombatAction(Enum):
    """Kinds of actions recorded in the combat history."""
    ATTACK = auto()
    DEFEND = auto()
    MOVE = auto()
    TAKE_DAMAGE = auto()
    REST = auto()
    COUNTER_ATTACK = auto()


class FailureReason(Enum):
    """Why an operation produced a failed or degraded outcome."""
    INSUFFICIENT_STAMINA = auto()  # Not enough stamina for the chosen action
    INCAPACITATED = auto()         # Actor is dead
    INVALID_STATE = auto()         # Counter attack attempted without a ready gauge


DEFENSE_CHOICE_NAMES = {
    DefenseChoice.DEFEND: "Defend",
    DefenseChoice.MOVE: "Move",
    DefenseChoice.TAKE_DAMAGE: "Take Damage",
}

COMBAT_ACTION_NAMES = {
    CombatAction.ATTACK: "Attack",
    CombatAction.DEFEND: "Defend",
    CombatAction.MOVE: "Move",
    CombatAction.TAKE_DAMAGE: "Take Damage",
    CombatAction.REST: "Rest",
    CombatAction.COUNTER_ATTACK: "Counter Attack",
}
