"""
Robot Module - The toy robot state machine

Holds the robot's position and facing and enforces the placement,
movement and rotation rules that keep it on the table.
"""

from .direction import Direction
from .toy_robot import ToyRobot, RobotError, RobotReport

__all__ = [
    "Direction",
    "ToyRobot",
    "RobotError",
    "RobotReport",
]
