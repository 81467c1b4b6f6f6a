"""Outcome records produced by the combat engine.

Every engine operation returns one of these instead of raising on ordinary
game situations. Defense outcomes are split per choice so each variant only
carries the fields that mean something for it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional, Union, TYPE_CHECKING

from ...core.data import CombatAction, DefenseChoice, FailureReason, COMBAT_ACTION_NAMES
from ...core.dice import DiceRoll

if TYPE_CHECKING:
    from ...core.config import CombatConfig
    from ..entities.combatant import Combatant


@dataclass(frozen=True)
class AttackOutcome:
    """Result of an attack or counter attack."""
    success: bool
    message: str
    attacker: Optional[str] = None
    defender: Optional[str] = None
    attacker_id: Optional[str] = None
    defender_id: Optional[str] = None
    roll: Optional[DiceRoll] = None
    damage: int = 0
    is_counter_attack: bool = False
    failure_reason: Optional[FailureReason] = None

    @classmethod
    def failed(cls, message: str, reason: FailureReason, attacker: Optional["Combatant"] = None,
               defender: Optional["Combatant"] = None, is_counter_attack: bool = False) -> "AttackOutcome":
        """Create a failed outcome; nothing was rolled or changed."""
        return cls(
            success=False,
            message=message,
            attacker=attacker.name if attacker else None,
            defender=defender.name if defender else None,
            attacker_id=attacker.combatant_id if attacker else None,
            defender_id=defender.combatant_id if defender else None,
            is_counter_attack=is_counter_attack,
            failure_reason=reason,
        )

    def __str__(self) -> str:
        if not self.success:
            return self.message
        prefix = "COUNTER: " if self.is_counter_attack else ""
        return f"{prefix}{self.attacker} → {self.defender}: {self.roll} = {self.damage} damage"


@dataclass(frozen=True)
class DefenseOutcome:
    """Fields shared by every defense variant."""
    incoming_damage: int
    final_damage: int
    counter_ready: bool
    message: str

    choice: ClassVar[DefenseChoice]


@dataclass(frozen=True)
class DefendOutcome(DefenseOutcome):
    """Defender rolled 2d6 + DEF against the incoming damage."""
    roll: DiceRoll
    total_defense: int
    damage_blocked: int
    counter_built: int

    choice: ClassVar[DefenseChoice] = DefenseChoice.DEFEND

    def __str__(self) -> str:
        return (f"DEF: {self.roll} = {self.total_defense} defense, "
                f"blocked {self.damage_blocked}, counter +{self.counter_built}")


@dataclass(frozen=True)
class EvasionOutcome(DefenseOutcome):
    """Defender rolled 2d6 + MOV to get out of the way."""
    roll: DiceRoll
    total_evasion: int
    difference: int
    movement_distance: int

    choice: ClassVar[DefenseChoice] = DefenseChoice.MOVE

    @property
    def evaded(self) -> bool:
        return self.difference >= 0

    @property
    def can_move(self) -> bool:
        """Whether the external movement layer should grant a reposition."""
        return self.movement_distance > 0

    def __str__(self) -> str:
        if self.evaded:
            return f"MOVED: evaded, may move {self.movement_distance}"
        return f"MOVED: failed to evade, took {self.final_damage} damage"


@dataclass(frozen=True)
class TakeDamageOutcome(DefenseOutcome):
    """Defender absorbed the full hit, by choice or as a fallback."""
    requested_choice: DefenseChoice = DefenseChoice.TAKE_DAMAGE
    reason: str = ""
    failure_reason: Optional[FailureReason] = None

    choice: ClassVar[DefenseChoice] = DefenseChoice.TAKE_DAMAGE

    @property
    def fell_back(self) -> bool:
        """True when another choice was requested but could not be paid for."""
        return self.requested_choice is not DefenseChoice.TAKE_DAMAGE

    def __str__(self) -> str:
        return f"NO DEFENSE: Took {self.final_damage} damage"


AnyDefenseOutcome = Union[DefendOutcome, EvasionOutcome, TakeDamageOutcome]


@dataclass(frozen=True)
class CombatLogEntry:
    """Immutable record of one resolved combat action."""
    action: CombatAction
    actor: str
    target: Optional[str] = None
    roll: Optional[DiceRoll] = None
    stamina_cost: int = 0
    info: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False) -> str:
        """Format the entry for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        text = f"{self.actor}: {COMBAT_ACTION_NAMES[self.action]}"
        if self.target:
            text += f" → {self.target}"
        if self.roll is not None:
            text += f" [{self.roll}]"
        if self.stamina_cost > 0:
            text += f" (-{self.stamina_cost} SP)"
        if self.info:
            text += f" ({self.info})"
        parts.append(text)

        return " ".join(parts)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class CombatStatus:
    """Read-only snapshot of a combatant for presentation layers."""
    name: str
    health: int
    max_health: int
    stamina: int
    max_stamina: int
    counter_gauge: int
    max_counter: int
    attack_cost: int = 3
    defend_cost: int = 2
    move_cost: int = 1

    @classmethod
    def from_combatant(cls, combatant: "Combatant", config: Optional["CombatConfig"] = None) -> "CombatStatus":
        """Capture the current state of a combatant.

        Args:
            combatant: Combatant to capture
            config: Supplies the stamina costs behind can_attack/can_defend/can_move
        """
        costs = {}
        if config is not None:
            costs = {
                "attack_cost": config.attack_cost,
                "defend_cost": config.defend_cost,
                "move_cost": config.move_cost,
            }
        return cls(
            name=combatant.name,
            health=combatant.current_health,
            max_health=combatant.max_health,
            stamina=combatant.current_stamina,
            max_stamina=combatant.max_stamina,
            counter_gauge=combatant.counter.current,
            max_counter=combatant.counter.maximum,
            **costs,
        )

    @property
    def can_attack(self) -> bool:
        return self.health > 0 and self.stamina > 0 and self.stamina >= self.attack_cost

    @property
    def can_defend(self) -> bool:
        return self.health > 0 and self.stamina > 0 and self.stamina >= self.defend_cost

    @property
    def can_move(self) -> bool:
        return self.health > 0 and self.stamina >= self.move_cost

    @property
    def counter_ready(self) -> bool:
        return self.counter_gauge >= self.max_counter

    @property
    def health_percentage(self) -> float:
        return self.health / self.max_health if self.max_health > 0 else 0.0

    @property
    def stamina_percentage(self) -> float:
        return self.stamina / self.max_stamina if self.max_stamina > 0 else 0.0

    @property
    def counter_percentage(self) -> float:
        return self.counter_gauge / self.max_counter if self.max_counter > 0 else 0.0

    def __str__(self) -> str:
        counter = " [COUNTER READY!]" if self.counter_ready else f" (Counter: {self.counter_gauge}/{self.max_counter})"
        return f"{self.name}: {self.health}/{self.max_health} HP, {self.stamina}/{self.max_stamina} SP{counter}"


@dataclass(frozen=True)
class CombatRoundResult:
    """One attack, the defender's response and an optional counter."""
    attack: AttackOutcome
    defense: Optional[AnyDefenseOutcome] = None
    counter_attack: Optional[AttackOutcome] = None
    round_time: datetime = field(default_factory=datetime.now)

    @property
    def summary(self) -> str:
        result = f"ROUND: {self.attack}"
        if self.defense is not None:
            result += f" | {self.defense}"
        if self.counter_attack is not None:
            result += f" | {self.counter_attack}"
        return result

    def __str__(self) -> str:
        return self.summary
