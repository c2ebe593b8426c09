"""
Toy Robot

The robot state machine: a single robot on a rectangular table that can
be placed once, then moved and turned without ever leaving the table.

All operations return True/False instead of raising. A rejected
operation leaves the robot exactly as it was and records the reason in
``last_error``.
"""

import logging
from enum import Enum
from typing import NamedTuple, Optional

from .direction import Direction
from ..config import GridConfig


class RobotError(Enum):
    """Reasons a robot operation can be rejected."""
    ALREADY_PLACED = "already_placed"
    OUT_OF_BOUNDS = "out_of_bounds"
    NOT_PLACED = "not_placed"
    INVALID_FACING = "invalid_facing"


class RobotReport(NamedTuple):
    """Position and facing of the robot."""
    x: int
    y: int
    facing: Direction

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.facing.name}"


_EDGE_NAMES = {
    Direction.NORTH: "north",
    Direction.SOUTH: "south",
    Direction.EAST: "east",
    Direction.WEST: "west",
}


def _is_coordinate(value) -> bool:
    """Coordinates are whole numbers; bool is not accepted."""
    return isinstance(value, int) and not isinstance(value, bool)


class ToyRobot:
    """
    A robot on a table of ``grid.width`` x ``grid.height`` cells.

    States:
        UNPLACED: initial state, reports (0, 0, UNKNOWN)
        PLACED:   after the first successful try_place(); never left

    Example:
        robot = ToyRobot()
        robot.try_place(0, 0, Direction.NORTH)
        robot.try_move()
        robot.report()  # RobotReport(x=0, y=1, facing=Direction.NORTH)
    """

    def __init__(
        self,
        grid: Optional[GridConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize an unplaced robot.

        Args:
            grid: Table size (6x6 if None)
            logger: Sink for status and error messages (module logger if None)
        """
        self.grid = grid or GridConfig()
        self.grid.validate()
        self.logger = logger or logging.getLogger(__name__)

        self._x = 0
        self._y = 0
        self._facing = Direction.UNKNOWN
        self._placed = False
        self.last_error: Optional[RobotError] = None

    @property
    def placed(self) -> bool:
        return self._placed

    def _reject(self, error: RobotError, level: int, message: str) -> bool:
        self.last_error = error
        self.logger.log(level, message)
        return False

    def _accept(self) -> bool:
        self.last_error = None
        return True

    def try_place(self, x: int, y: int, facing: Direction) -> bool:
        """
        Put the robot on the table.

        Only the first successful placement counts; every later call is
        rejected whatever its arguments.

        Args:
            x: Column, 0 to grid.max_x
            y: Row, 0 to grid.max_y
            facing: NORTH, SOUTH, EAST or WEST

        Returns:
            True if the robot was placed
        """
        if self._placed:
            return self._reject(
                RobotError.ALREADY_PLACED, logging.WARNING,
                "Robot is already placed. Ignoring the command",
            )

        if not _is_coordinate(x) or x < 0 or x > self.grid.max_x:
            return self._reject(
                RobotError.OUT_OF_BOUNDS, logging.ERROR,
                f"Invalid x coordinate. X should be in between 0-{self.grid.max_x}",
            )

        if not _is_coordinate(y) or y < 0 or y > self.grid.max_y:
            return self._reject(
                RobotError.OUT_OF_BOUNDS, logging.ERROR,
                f"Invalid y coordinate. Y should be in between 0-{self.grid.max_y}",
            )

        if not isinstance(facing, Direction) or not facing.is_known:
            return self._reject(
                RobotError.INVALID_FACING, logging.ERROR,
                f"Invalid facing direction for placement: {facing}",
            )

        self._x = x
        self._y = y
        self._facing = facing
        self._placed = True
        self.logger.info(f"Robot placed at {self.report()}")
        return self._accept()

    def try_move(self) -> bool:
        """
        Move one unit forward in the facing direction.

        Returns:
            True if the robot moved; False if unplaced or the move would
            take it off the table
        """
        if not self._placed:
            return self._reject(
                RobotError.NOT_PLACED, logging.ERROR,
                "Robot is not placed. Please place the robot before moving.",
            )

        if not self._facing.is_known:
            return self._reject(
                RobotError.INVALID_FACING, logging.ERROR,
                "Robot is facing an unknown direction.",
            )

        dx, dy = self._facing.vector
        new_x = self._x + dx
        new_y = self._y + dy

        if not self.grid.contains(new_x, new_y):
            return self._reject(
                RobotError.OUT_OF_BOUNDS, logging.WARNING,
                f"Robot going to move over the {_EDGE_NAMES[self._facing]} edge. "
                "Command is ignored for safety.",
            )

        self._x = new_x
        self._y = new_y
        return self._accept()

    def try_turn_left(self) -> bool:
        """Rotate 90 degrees counter-clockwise."""
        return self._turn(self._facing.left)

    def try_turn_right(self) -> bool:
        """Rotate 90 degrees clockwise."""
        return self._turn(self._facing.right)

    def _turn(self, new_facing: Direction) -> bool:
        if not self._placed:
            return self._reject(
                RobotError.NOT_PLACED, logging.ERROR, "Robot is not placed."
            )

        if not new_facing.is_known:
            return self._reject(
                RobotError.INVALID_FACING, logging.ERROR,
                "Robot is now facing an unknown direction.",
            )

        self._facing = new_facing
        self.logger.info(f"Robot is now facing {new_facing.name}")
        return self._accept()

    def report(self) -> RobotReport:
        """Current position and facing; (0, 0, UNKNOWN) until placed."""
        return RobotReport(self._x, self._y, self._facing)

    def __repr__(self) -> str:
        state = "PLACED" if self._placed else "UNPLACED"
        return f"ToyRobot({state}, {self.report()}, grid={self.grid.width}x{self.grid.height})"
