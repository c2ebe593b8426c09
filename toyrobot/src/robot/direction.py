"""
Facing directions for the toy robot.

Each direction carries its unit movement vector as the enum value, so
moving forward is just adding ``direction.value`` to the position.
"""

from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """Robot facing directions."""
    NORTH = (0, 1)
    SOUTH = (0, -1)
    EAST = (1, 0)
    WEST = (-1, 0)
    UNKNOWN = (0, 0)  # before placement

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @property
    def is_known(self) -> bool:
        return self is not Direction.UNKNOWN

    @property
    def left(self) -> "Direction":
        """The direction 90 degrees counter-clockwise."""
        return _LEFT_TURNS[self]

    @property
    def right(self) -> "Direction":
        """The direction 90 degrees clockwise."""
        return _RIGHT_TURNS[self]

    @classmethod
    def from_name(cls, name: str) -> Optional["Direction"]:
        """
        Case-insensitive lookup by name.

        Args:
            name: Direction name such as "north" or "WEST"

        Returns:
            The matching Direction, or None if the name is not recognised
        """
        return cls.__members__.get(name.strip().upper())

    def __str__(self) -> str:
        return self.name


_LEFT_TURNS = {
    Direction.NORTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
    Direction.UNKNOWN: Direction.UNKNOWN,
}

_RIGHT_TURNS = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
    Direction.UNKNOWN: Direction.UNKNOWN,
}
