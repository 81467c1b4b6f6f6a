"""
Combat engine for resolving attacks, defenses and counter attacks.

A round runs attack → defense choice → resolution → optional counter. The
engine exposes each step as a separate synchronous operation; the external
turn controller decides who acts and which defense is chosen.

Ordinary game situations (not enough stamina, empty counter gauge) never
raise: they come back as outcome records carrying a FailureReason. Only a
missing actor or attack raises InvalidArgumentError, before anything is
changed.
"""
from typing import Callable, Optional, TYPE_CHECKING

from ...core.config import CombatConfig
from ...core.data import CombatAction, DefenseChoice, FailureReason
from ...core.dice import RandomSource
from ...core.errors import InvalidArgumentError
from ...core.events import (
    AttackExecuted,
    CombatantDefeated,
    CounterAttackExecuted,
    DefenseResolved,
    LogMessage,
    StaminaRestored,
)
from .results import (
    AnyDefenseOutcome,
    AttackOutcome,
    CombatLogEntry,
    CombatRoundResult,
    CombatStatus,
    DefendOutcome,
    EvasionOutcome,
    TakeDamageOutcome,
)

if TYPE_CHECKING:
    from ...core.events import EventManager, GameEvent
    from ..entities.combatant import Combatant

DEFAULT_HISTORY_WINDOW = 10


class CombatEngine:
    """Resolves combat between combatants and keeps the action history."""

    def __init__(
        self,
        config: Optional[CombatConfig] = None,
        seed: Optional[int] = None,
        random_source: Optional[RandomSource] = None,
        event_manager: Optional["EventManager"] = None,
    ):
        """Initialize the engine.

        Args:
            config: Balance values (defaults when omitted)
            seed: Seed for a new random source; ignored when random_source is given
            random_source: Existing source to take ownership of
            event_manager: Optional event bus for combat and log events

        Raises:
            ConfigError: If config fails validation
            RandomSourceOwnershipError: If random_source belongs to another engine
        """
        self.config = (config or CombatConfig()).validate()
        self.random_source = random_source if random_source is not None else RandomSource(seed)
        self.random_source.claim(self)
        self.event_manager = event_manager
        self._history: list[CombatLogEntry] = []

    def close(self) -> None:
        """Release the random source so another engine may own it."""
        self.random_source.release(self)

    # ============== Attack ==============

    def execute_attack(self, attacker: "Combatant", defender: "Combatant") -> AttackOutcome:
        """Execute an attack action between two combatants.

        Args:
            attacker: The combatant performing the attack
            defender: The combatant being attacked

        Returns:
            AttackOutcome; on success its damage is what the defender must
            now respond to via resolve_defense

        Raises:
            InvalidArgumentError: If attacker or defender is missing
        """
        _require(attacker, "attacker")
        _require(defender, "defender")

        cost = self.config.attack_cost
        if not attacker.is_alive:
            outcome = AttackOutcome.failed(
                f"{attacker.name} cannot attack (incapacitated)",
                FailureReason.INCAPACITATED, attacker, defender,
            )
        elif not attacker.can_act or attacker.current_stamina < cost:
            outcome = AttackOutcome.failed(
                f"{attacker.name} cannot attack (insufficient stamina: "
                f"{attacker.current_stamina}/{cost})",
                FailureReason.INSUFFICIENT_STAMINA, attacker, defender,
            )
        else:
            attacker.use_stamina(cost)

            roll = self.random_source.roll_double("ATK")
            damage = max(0, roll.total + attacker.attack_points)

            outcome = AttackOutcome(
                success=True,
                message=(f"{attacker.name} attacks {defender.name}: {roll} + "
                         f"{attacker.attack_points} ATK = {damage} damage!"),
                attacker=attacker.name,
                defender=defender.name,
                attacker_id=attacker.combatant_id,
                defender_id=defender.combatant_id,
                roll=roll,
                damage=damage,
            )
            self._record(CombatLogEntry(
                action=CombatAction.ATTACK,
                actor=attacker.name,
                target=defender.name,
                roll=roll,
                stamina_cost=cost,
            ))

        self._emit_log(outcome.message, level="INFO" if outcome.success else "WARNING")
        self._publish(lambda seq: AttackExecuted(sequence=seq, outcome=outcome))
        return outcome

    # ============== Defense ==============

    def resolve_defense(
        self,
        defender: "Combatant",
        incoming_attack: AttackOutcome,
        choice: DefenseChoice,
    ) -> AnyDefenseOutcome:
        """Apply the defender's response to an incoming attack.

        Defend and Move fall back to taking the full hit when the defender
        cannot pay for them; the outcome then says why.

        Args:
            defender: The combatant being attacked
            incoming_attack: Successful AttackOutcome from execute_attack
            choice: The defender's response

        Returns:
            DefendOutcome, EvasionOutcome or TakeDamageOutcome

        Raises:
            InvalidArgumentError: If defender or attack is missing, the attack
                did not succeed, the attack is a counter attack, or choice is
                not a DefenseChoice
        """
        _require(defender, "defender")
        _require(incoming_attack, "incoming_attack")
        if not incoming_attack.success:
            raise InvalidArgumentError("incoming_attack", "did not succeed; there is no damage to resolve")
        if incoming_attack.is_counter_attack:
            raise InvalidArgumentError("incoming_attack", "is a counter attack; it bypasses defense")
        if not isinstance(choice, DefenseChoice):
            raise InvalidArgumentError("choice", f"must be a DefenseChoice, got {choice!r}")

        handlers: dict[DefenseChoice, Callable[["Combatant", AttackOutcome], AnyDefenseOutcome]] = {
            DefenseChoice.DEFEND: self._handle_defend,
            DefenseChoice.MOVE: self._handle_move,
            DefenseChoice.TAKE_DAMAGE: self._handle_take_damage,
        }
        was_alive = defender.is_alive
        outcome = handlers[choice](defender, incoming_attack)

        self._emit_log(outcome.message)
        self._publish(lambda seq: DefenseResolved(sequence=seq, defender_name=defender.name, outcome=outcome))
        self._check_defeat(defender, was_alive, incoming_attack.attacker)
        return outcome

    def _handle_defend(self, defender: "Combatant", incoming_attack: AttackOutcome) -> AnyDefenseOutcome:
        """Roll 2d6 + DEF; over-defense fills the counter gauge."""
        cost = self.config.defend_cost
        if not defender.is_alive:
            return self._handle_take_damage(
                defender, incoming_attack, DefenseChoice.DEFEND,
                "Unable to defend!", FailureReason.INCAPACITATED,
            )
        if not defender.can_act or defender.current_stamina < cost:
            return self._handle_take_damage(
                defender, incoming_attack, DefenseChoice.DEFEND,
                "Insufficient stamina to defend!", FailureReason.INSUFFICIENT_STAMINA,
            )

        defender.use_stamina(cost)

        roll = self.random_source.roll_double("DEF")
        incoming = incoming_attack.damage
        total_defense = roll.total + defender.defense_points

        damage_blocked = max(0, min(total_defense, incoming))
        final_damage = max(0, incoming - total_defense)
        over_defense = max(0, total_defense - incoming)

        if over_defense > 0:
            defender.counter.add_counter(over_defense)
        if final_damage > 0:
            defender.take_damage(final_damage)

        message = (f"{defender.name} defends: {roll} + {defender.defense_points} DEF = "
                   f"{total_defense} defense")
        message += f" - takes {final_damage} damage" if final_damage > 0 else " - blocks completely!"
        if over_defense > 0:
            message += f" Counter +{over_defense}!"

        self._record(CombatLogEntry(
            action=CombatAction.DEFEND,
            actor=defender.name,
            target=incoming_attack.attacker,
            roll=roll,
            stamina_cost=cost,
            info=f"Blocked {damage_blocked}, Counter +{over_defense}",
        ))

        return DefendOutcome(
            incoming_damage=incoming,
            final_damage=final_damage,
            counter_ready=defender.counter.is_ready,
            message=message,
            roll=roll,
            total_defense=total_defense,
            damage_blocked=damage_blocked,
            counter_built=over_defense,
        )

    def _handle_move(self, defender: "Combatant", incoming_attack: AttackOutcome) -> AnyDefenseOutcome:
        """Roll 2d6 + MOV against the attack; the gauge is left alone either way."""
        cost = self.config.move_cost
        if not defender.is_alive:
            return self._handle_take_damage(
                defender, incoming_attack, DefenseChoice.MOVE,
                "Unable to move!", FailureReason.INCAPACITATED,
            )
        if not defender.use_stamina(cost):
            return self._handle_take_damage(
                defender, incoming_attack, DefenseChoice.MOVE,
                "Insufficient stamina to move!", FailureReason.INSUFFICIENT_STAMINA,
            )

        roll = self.random_source.roll_double("EVASION")
        incoming = incoming_attack.damage
        total_evasion = roll.total + defender.movement_points
        difference = total_evasion - incoming

        summary = (f"{defender.name} evades: {roll} + {defender.movement_points} MOV = "
                   f"{total_evasion} evasion vs {incoming} attack")
        if difference >= 0:
            final_damage = 0
            movement_distance = max(1, difference)
            message = f"{summary} - evades completely and can move {movement_distance} spaces!"
        else:
            final_damage = -difference
            movement_distance = 0
            defender.take_damage(final_damage)
            message = f"{summary} - fails to evade, takes {final_damage} damage!"

        self._record(CombatLogEntry(
            action=CombatAction.MOVE,
            actor=defender.name,
            target=incoming_attack.attacker,
            roll=roll,
            stamina_cost=cost,
            info=f"Evasion: {total_evasion} vs Attack: {incoming}, Difference: {difference}",
        ))

        return EvasionOutcome(
            incoming_damage=incoming,
            final_damage=final_damage,
            counter_ready=defender.counter.is_ready,
            message=message,
            roll=roll,
            total_evasion=total_evasion,
            difference=difference,
            movement_distance=movement_distance,
        )

    def _handle_take_damage(
        self,
        defender: "Combatant",
        incoming_attack: AttackOutcome,
        requested_choice: DefenseChoice = DefenseChoice.TAKE_DAMAGE,
        reason: str = "",
        failure_reason: Optional[FailureReason] = None,
    ) -> TakeDamageOutcome:
        """Absorb the full hit. No stamina cost and the counter gauge is preserved."""
        incoming = incoming_attack.damage
        defender.take_damage(incoming)

        message = f"{defender.name} takes {incoming} damage!"
        if reason:
            message += f" ({reason})"

        self._record(CombatLogEntry(
            action=CombatAction.TAKE_DAMAGE,
            actor=defender.name,
            target=incoming_attack.attacker,
            info=reason,
        ))

        return TakeDamageOutcome(
            incoming_damage=incoming,
            final_damage=incoming,
            counter_ready=defender.counter.is_ready,
            message=message,
            requested_choice=requested_choice,
            reason=reason,
            failure_reason=failure_reason,
        )

    # ============== Counter Attack ==============

    def execute_counter_attack(self, counter_attacker: "Combatant", target: "Combatant") -> AttackOutcome:
        """Spend a full counter gauge on an attack that skips the defense step.

        Costs no stamina and leaves the target's own gauge untouched.

        Args:
            counter_attacker: Combatant whose gauge is spent
            target: Combatant taking the damage directly

        Returns:
            Successful AttackOutcome with is_counter_attack set, or a failed
            one with FailureReason.INVALID_STATE when the gauge is not ready

        Raises:
            InvalidArgumentError: If either combatant is missing
        """
        _require(counter_attacker, "counter_attacker")
        _require(target, "target")

        if not counter_attacker.counter.consume_counter():
            outcome = AttackOutcome.failed(
                f"{counter_attacker.name} counter gauge not ready! ({counter_attacker.counter})",
                FailureReason.INVALID_STATE, counter_attacker, target, is_counter_attack=True,
            )
            self._emit_log(outcome.message, level="WARNING")
            self._publish(lambda seq: CounterAttackExecuted(sequence=seq, outcome=outcome))
            return outcome

        roll = self.random_source.roll_double("COUNTER")
        damage = max(0, roll.total + counter_attacker.attack_points)

        was_alive = target.is_alive
        target.take_damage(damage)

        outcome = AttackOutcome(
            success=True,
            message=(f"{counter_attacker.name} COUNTER ATTACKS {target.name}: {roll} + "
                     f"{counter_attacker.attack_points} ATK = {damage} damage! [BADMINTON STREAK!]"),
            attacker=counter_attacker.name,
            defender=target.name,
            attacker_id=counter_attacker.combatant_id,
            defender_id=target.combatant_id,
            roll=roll,
            damage=damage,
            is_counter_attack=True,
        )
        self._record(CombatLogEntry(
            action=CombatAction.COUNTER_ATTACK,
            actor=counter_attacker.name,
            target=target.name,
            roll=roll,
            stamina_cost=0,
            info="Badminton streak activated!",
        ))

        self._emit_log(outcome.message, category="COUNTER")
        self._publish(lambda seq: CounterAttackExecuted(sequence=seq, outcome=outcome))
        self._check_defeat(target, was_alive, counter_attacker.name)
        return outcome

    # ============== Rest and Rounds ==============

    def rest(self, actor: "Combatant") -> int:
        """Recover the configured amount of stamina at no cost.

        Returns:
            Stamina actually restored (less near the maximum)

        Raises:
            InvalidArgumentError: If actor is missing
        """
        _require(actor, "actor")

        restored = actor.restore_stamina(self.config.rest_stamina_restore)
        self._record(CombatLogEntry(
            action=CombatAction.REST,
            actor=actor.name,
            info=f"+{restored} SP",
        ))

        self._emit_log(f"{actor.name} rests and recovers {restored} stamina")
        self._publish(lambda seq: StaminaRestored(sequence=seq, combatant_name=actor.name, amount=restored))
        return restored

    def resolve_round(
        self,
        attacker: "Combatant",
        defender: "Combatant",
        choice: DefenseChoice,
    ) -> CombatRoundResult:
        """Run attack, defense and, if the defender's gauge filled up, the counter.

        The counter is only taken while the defender is still alive.

        Args:
            attacker: The combatant attacking this round
            defender: The combatant responding
            choice: The defender's response

        Returns:
            CombatRoundResult; defense and counter_attack stay None when the
            attack failed or no counter happened
        """
        attack = self.execute_attack(attacker, defender)
        if not attack.success:
            return CombatRoundResult(attack=attack)

        defense = self.resolve_defense(defender, attack, choice)

        counter = None
        if defender.is_alive and defender.counter.is_ready:
            counter = self.execute_counter_attack(defender, attacker)

        return CombatRoundResult(attack=attack, defense=defense, counter_attack=counter)

    def get_status(self, combatant: "Combatant") -> CombatStatus:
        """Snapshot a combatant using this engine's stamina costs."""
        _require(combatant, "combatant")
        return CombatStatus.from_combatant(combatant, self.config)

    # ============== History ==============

    @property
    def history(self) -> tuple[CombatLogEntry, ...]:
        """Full action history in chronological order."""
        return tuple(self._history)

    def get_recent_history(self, count: int = DEFAULT_HISTORY_WINDOW) -> list[CombatLogEntry]:
        """Get the last count entries, oldest first.

        Returns fewer entries when the history is shorter, none for count <= 0.
        """
        if count <= 0:
            return []
        return self._history[-count:]

    def _record(self, entry: CombatLogEntry) -> None:
        self._history.append(entry)

    # ============== Events ==============

    def _check_defeat(self, combatant: "Combatant", was_alive: bool, defeated_by: Optional[str]) -> None:
        if was_alive and not combatant.is_alive:
            self._emit_log(f"{combatant.name}: Defeated", category="BATTLE")
            self._publish(lambda seq: CombatantDefeated(
                sequence=seq,
                combatant_name=combatant.name,
                combatant_id=combatant.combatant_id,
                defeated_by=defeated_by,
            ))

    def _publish(self, build_event: Callable[[int], "GameEvent"]) -> None:
        """Publish an event built for the current history length, if anyone listens."""
        if self.event_manager is None:
            return
        self.event_manager.publish(build_event(len(self._history)), source="CombatEngine")

    def _emit_log(self, message: str, category: str = "COMBAT", level: str = "INFO") -> None:
        """Emit a log message event."""
        self._publish(lambda seq: LogMessage(
            sequence=seq,
            message=message,
            category=category,
            level=level,
            source="CombatEngine",
        ))


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(name)
