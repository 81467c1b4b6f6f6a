"""Resource components owned by a combatant.

This module contains the bounded resources a Combatant is built from:
Health, Stamina and the CounterGauge that drives the counter attack
("badminton streak") mechanic.
"""

DEFAULT_COUNTER_MAX = 6


class HealthComponent:
    """Component for life and death management.

    Handles current and maximum hit points, damage and healing, and
    life/death state tracking.
    """

    def __init__(self, hp_max: int):
        """Initialize health component.

        Args:
            hp_max: Maximum hit points; the component starts at full health
        """
        if hp_max < 1:
            raise ValueError("Maximum health must be at least 1")
        self.hp_max = hp_max
        self.hp_current = hp_max

    def is_alive(self) -> bool:
        """Check if hp_current > 0."""
        return self.hp_current > 0

    def get_hp_percent(self) -> float:
        """Get current health as a fraction of maximum (0.0 to 1.0)."""
        return self.hp_current / self.hp_max

    def take_damage(self, amount: int) -> int:
        """Apply damage, never dropping below 0.

        Args:
            amount: Amount of damage to apply

        Returns:
            Actual damage dealt (may be less due to overkill prevention)

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("Damage amount cannot be negative")

        old_hp = self.hp_current
        self.hp_current = max(0, self.hp_current - amount)
        return old_hp - self.hp_current

    def heal(self, amount: int) -> int:
        """Apply healing, never exceeding hp_max.

        Args:
            amount: Amount of healing to apply

        Returns:
            Actual healing done (may be less due to max hp cap)

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("Healing amount cannot be negative")

        old_hp = self.hp_current
        self.hp_current = min(self.hp_max, self.hp_current + amount)
        return self.hp_current - old_hp


class StaminaComponent:
    """Component for the stamina pool that pays for combat actions."""

    def __init__(self, stamina_max: int):
        if stamina_max < 1:
            raise ValueError("Maximum stamina must be at least 1")
        self.stamina_max = stamina_max
        self.stamina_current = stamina_max

    def has(self, amount: int) -> bool:
        """Check whether amount can be paid right now."""
        return self.stamina_current >= amount

    def use(self, amount: int) -> bool:
        """Pay amount of stamina if available.

        All-or-nothing: either the full amount is deducted or nothing is.

        Returns:
            True if the stamina was paid, False otherwise

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("Stamina cost cannot be negative")
        if not self.has(amount):
            return False
        self.stamina_current -= amount
        return True

    def restore(self, amount: int) -> int:
        """Restore stamina, clamped at stamina_max.

        Returns:
            Stamina actually restored

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("Stamina restore amount cannot be negative")

        old_stamina = self.stamina_current
        self.stamina_current = min(self.stamina_max, self.stamina_current + amount)
        return self.stamina_current - old_stamina

    def get_stamina_percent(self) -> float:
        return self.stamina_current / self.stamina_max


class CounterGauge:
    """Bounded accumulator behind the counter attack ("badminton streak").

    Over-defense fills the gauge; once full it can be consumed for one bonus
    attack that bypasses the target's defense. The value only ever goes up
    through positive additions (clamped at maximum) and only ever goes down
    by being forced back to 0.
    """

    def __init__(self, maximum: int = DEFAULT_COUNTER_MAX):
        """Initialize an empty gauge.

        Args:
            maximum: Value at which the gauge is ready

        Raises:
            ValueError: If maximum is below 1
        """
        if maximum < 1:
            raise ValueError("Counter gauge maximum must be at least 1")
        self._maximum = maximum
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    @property
    def maximum(self) -> int:
        return self._maximum

    @property
    def is_ready(self) -> bool:
        """True once the gauge has been filled."""
        return self._current >= self._maximum

    @property
    def fill_percentage(self) -> float:
        """Fill level from 0.0 to 1.0."""
        return self._current / self._maximum

    def add_counter(self, amount: int) -> None:
        """Add counter points from over-defense.

        Zero and negative amounts are ignored so the gauge can never be
        drained this way.
        """
        if amount > 0:
            self._current = min(self._maximum, self._current + amount)

    def consume_counter(self) -> bool:
        """Spend a full gauge.

        Returns:
            True and resets to 0 if the gauge was ready; False with no change
            otherwise
        """
        if self.is_ready:
            self._current = 0
            return True
        return False

    def reset(self) -> None:
        """Unconditionally empty the gauge."""
        self._current = 0

    def __str__(self) -> str:
        return f"Counter: {self._current}/{self._maximum}" + (" [READY!]" if self.is_ready else "")
