"""
ToyRobot - A robot on a table, driven by text commands

Place the robot on a 6x6 table, move it, turn it and ask where it is.
The robot refuses any command that would make it fall off the table.
"""

from .src.robot import (
    Direction,
    ToyRobot,
    RobotError,
    RobotReport,
)
from .src.commands import (
    Command,
    CommandParser,
    CommandParseError,
    ParsedCommand,
    Commander,
    CommandResult,
)
from .src.adapters import (
    CommandSource,
    ConsoleSource,
    FileSource,
    IterableSource,
    setup_logging,
)
from .src.config import (
    AppConfig,
    GridConfig,
    create_config,
    get_default_config,
)

__version__ = "0.1.0"
__author__ = "ToyRobot Team"

__all__ = [
    # Robot
    "Direction",
    "ToyRobot",
    "RobotError",
    "RobotReport",
    # Commands
    "Command",
    "CommandParser",
    "CommandParseError",
    "ParsedCommand",
    "Commander",
    "CommandResult",
    # Adapters
    "CommandSource",
    "ConsoleSource",
    "FileSource",
    "IterableSource",
    "setup_logging",
    # Config
    "AppConfig",
    "GridConfig",
    "create_config",
    "get_default_config",
]
