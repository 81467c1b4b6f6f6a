"""Six-stat attribute block and the combat point formulas derived from it.

Combat points use the weighted formulas:

- ATK = 3*STR + 2*END + AGI
- DEF = 2*END + STR + AGI
- MOV = 3*AGI + INT

Charisma and wisdom do not feed combat yet.
"""

from dataclasses import dataclass, asdict

DEFAULT_STAT_VALUE = 10


@dataclass
class Stats:
    """Named integer attributes. Values are not range-checked."""
    strength: int = DEFAULT_STAT_VALUE
    endurance: int = DEFAULT_STAT_VALUE
    charisma: int = DEFAULT_STAT_VALUE
    intelligence: int = DEFAULT_STAT_VALUE
    agility: int = DEFAULT_STAT_VALUE
    wisdom: int = DEFAULT_STAT_VALUE

    @classmethod
    def uniform(cls, value: int) -> "Stats":
        """Create a block with every stat set to value."""
        return cls(value, value, value, value, value, value)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def attack_points(stats: Stats) -> int:
    return stats.strength * 3 + stats.endurance * 2 + stats.agility


def defense_points(stats: Stats) -> int:
    return stats.endurance * 2 + stats.strength + stats.agility


def movement_points(stats: Stats) -> int:
    return stats.agility * 3 + stats.intelligence
