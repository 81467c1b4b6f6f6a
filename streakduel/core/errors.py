"""Exceptions raised by the combat engine.

Only programming errors are raised. Running out of stamina or attempting a
counter attack with an empty gauge are ordinary game situations and come back
as failed outcome records instead (see FailureReason).
"""


class CombatError(Exception):
    """Base exception for combat engine errors."""
    pass


class InvalidArgumentError(CombatError, ValueError):
    """Raised when a required combat argument is missing or unusable."""

    def __init__(self, argument: str, detail: str = "is required"):
        super().__init__(f"{argument} {detail}")
        self.argument = argument


class ConfigError(CombatError):
    """Raised when combat configuration values are invalid."""

    def __init__(self, errors: list[str]):
        super().__init__("Invalid config:\n  " + "\n  ".join(errors))
        self.errors = list(errors)


class RandomSourceOwnershipError(CombatError):
    """Raised when a random source is handed to a second engine."""

    def __init__(self, owner_name: str):
        super().__init__(f"Random source is already owned by {owner_name}")
        self.owner_name = owner_name
