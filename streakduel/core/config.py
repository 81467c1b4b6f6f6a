"""Combat balance configuration.

Stamina costs, the counter gauge threshold and character defaults are plain
values passed into the engine and combatants at construction. There is no
process-wide "current" configuration: two engines built from different
configs never see each other's values.

Configuration files are YAML, e.g.::

    combat:
      stamina_costs: {attack: 3, defend: 2, move: 1}
      rest_stamina_restore: 5
      counter_gauge: {maximum: 6}
    characters:
      defaults: {health: 100, stamina: 20, stat_value: 10}

camelCase keys (``staminaCosts``, ``restStaminaRestore``, ``counterGauge``,
``statValue``) are accepted as well.
"""

import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class StaminaCosts:
    """Stamina paid for each stamina-consuming action."""
    attack: int = 3
    defend: int = 2
    move: int = 1


@dataclass(frozen=True)
class CharacterDefaults:
    """Starting values for newly created combatants."""
    health: int = 100
    stamina: int = 20
    stat_value: int = 10


@dataclass(frozen=True)
class CombatConfig:
    """Complete set of injectable balance values."""
    stamina_costs: StaminaCosts = field(default_factory=StaminaCosts)
    counter_max: int = 6
    rest_stamina_restore: int = 5
    character_defaults: CharacterDefaults = field(default_factory=CharacterDefaults)

    @property
    def attack_cost(self) -> int:
        return self.stamina_costs.attack

    @property
    def defend_cost(self) -> int:
        return self.stamina_costs.defend

    @property
    def move_cost(self) -> int:
        return self.stamina_costs.move

    def validate(self) -> "CombatConfig":
        """Check every value and report all problems at once.

        Returns:
            self, so construction and validation can be chained

        Raises:
            ConfigError: If any value is out of range
        """
        errors = []

        if self.stamina_costs.attack < 0:
            errors.append("combat.stamina_costs.attack must be >= 0")
        if self.stamina_costs.defend < 0:
            errors.append("combat.stamina_costs.defend must be >= 0")
        if self.stamina_costs.move < 0:
            errors.append("combat.stamina_costs.move must be >= 0")
        if self.rest_stamina_restore < 1:
            errors.append("combat.rest_stamina_restore must be >= 1")
        if self.counter_max < 1:
            errors.append("combat.counter_gauge.maximum must be >= 1")

        if self.character_defaults.health < 1:
            errors.append("characters.defaults.health must be >= 1")
        if self.character_defaults.stamina < 1:
            errors.append("characters.defaults.stamina must be >= 1")
        if self.character_defaults.stat_value < 0:
            errors.append("characters.defaults.stat_value must be >= 0")

        if errors:
            raise ConfigError(errors)
        return self

    def with_costs(self, attack: Optional[int] = None, defend: Optional[int] = None,
                   move: Optional[int] = None) -> "CombatConfig":
        """Return a copy with some stamina costs replaced."""
        costs = replace(
            self.stamina_costs,
            **{name: value for name, value in
               (("attack", attack), ("defend", defend), ("move", move))
               if value is not None}
        )
        return replace(self, stamina_costs=costs).validate()

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "CombatConfig":
        """Build a validated config from a parsed YAML/JSON mapping.

        Missing sections and keys keep their defaults.

        Args:
            data: Mapping with optional ``combat`` and ``characters`` sections

        Returns:
            Validated CombatConfig

        Raises:
            ConfigError: If a section has the wrong shape or a value is invalid
        """
        data = _normalize_keys(data or {})
        if not isinstance(data, dict):
            raise ConfigError(["config root must be a mapping"])

        combat = _section(data, "combat")
        characters = _section(data, "characters")
        costs = _section(combat, "stamina_costs", "combat.")
        gauge = _section(combat, "counter_gauge", "combat.")
        defaults = _section(characters, "defaults", "characters.")

        base_costs = StaminaCosts()
        base_defaults = CharacterDefaults()
        try:
            config = cls(
                stamina_costs=StaminaCosts(
                    attack=int(costs.get("attack", base_costs.attack)),
                    defend=int(costs.get("defend", base_costs.defend)),
                    move=int(costs.get("move", base_costs.move)),
                ),
                counter_max=int(gauge.get("maximum", cls.counter_max)),
                rest_stamina_restore=int(combat.get("rest_stamina_restore", cls.rest_stamina_restore)),
                character_defaults=CharacterDefaults(
                    health=int(defaults.get("health", base_defaults.health)),
                    stamina=int(defaults.get("stamina", base_defaults.stamina)),
                    stat_value=int(defaults.get("stat_value", base_defaults.stat_value)),
                ),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError([f"non-integer config value: {e}"]) from e

        return config.validate()

    @classmethod
    def load_from_file(cls, file_path: Union[str, "os.PathLike[str]"]) -> "CombatConfig":
        """Load and validate a YAML configuration file.

        Args:
            file_path: Path to the YAML file

        Returns:
            Validated CombatConfig

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file content is invalid
        """
        config_file = Path(file_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError([f"could not parse {config_file}: {e}"]) from e

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the nested mapping layout used by config files."""
        return {
            "combat": {
                "stamina_costs": {
                    "attack": self.stamina_costs.attack,
                    "defend": self.stamina_costs.defend,
                    "move": self.stamina_costs.move,
                },
                "rest_stamina_restore": self.rest_stamina_restore,
                "counter_gauge": {"maximum": self.counter_max},
            },
            "characters": {
                "defaults": {
                    "health": self.character_defaults.health,
                    "stamina": self.character_defaults.stamina,
                    "stat_value": self.character_defaults.stat_value,
                },
            },
        }


_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def _normalize_keys(value: Any) -> Any:
    """Recursively convert camelCase mapping keys to snake_case."""
    if isinstance(value, dict):
        return {
            _CAMEL_BOUNDARY.sub('_', str(key)).lower(): _normalize_keys(item)
            for key, item in value.items()
        }
    return value


def _section(data: dict[str, Any], name: str, prefix: str = "") -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError([f"{prefix}{name} must be a mapping"])
    return section
