"""Grid position data structure.

Combatants carry a Position that the external movement and rendering layers
read and update. The engine itself only reports evasion distances; it never
moves anyone.
"""

from dataclasses import dataclass
import math

import numpy as np
from numpy.typing import NDArray


@dataclass
class Position:
    """Position on the arena grid.

    Uses (x, y) ordering with an optional z coordinate that stays 0 on a flat
    arena. Equality and hashing cover all three coordinates so positions can
    be used in sets and as dictionary keys.
    """
    x: int
    y: int
    z: int = 0

    def __add__(self, other: "Position") -> "Position":
        """Vector addition."""
        return Position(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Position") -> "Position":
        """Vector subtraction."""
        return Position(self.x - other.x, self.y - other.y, self.z - other.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return False
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        """Make Position iterable for unpacking (x, y, z order)."""
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        if self.z == 0:
            return f"({self.x},{self.y})"
        return f"({self.x},{self.y},{self.z})"

    def distance_to(self, other: "Position") -> float:
        """Calculate Euclidean distance to another position."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def manhattan_distance_to(self, other: "Position") -> int:
        """Calculate Manhattan distance to another position."""
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def is_adjacent(self, other: "Position") -> bool:
        """Check whether another position is within one step, diagonals included."""
        return self.distance_to(other) <= 1.5

    @classmethod
    def from_tuple(cls, coords: tuple[int, ...]) -> "Position":
        """Create Position from an (x, y) or (x, y, z) tuple."""
        if len(coords) not in (2, 3):
            raise ValueError("Tuple must contain 2 or 3 coordinates")
        return cls(*coords)

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to coordinate tuple (x, y, z order)."""
        return (self.x, self.y, self.z)

    def to_numpy(self) -> NDArray[np.int32]:
        """Convert to numpy array (x, y, z order)."""
        return np.array([self.x, self.y, self.z], dtype=np.int32)

    @classmethod
    def from_numpy(cls, arr: NDArray[np.int32]) -> "Position":
        """Create Position from a numpy array of 2 or 3 coordinates."""
        if arr.shape not in ((2,), (3,)):
            raise ValueError("Array must have shape (2,) or (3,) for Position conversion")
        return cls(*(int(v) for v in arr))
