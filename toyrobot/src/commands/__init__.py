"""
Commands Module - Text command language and dispatcher

Parses lines such as "PLACE 1,2,NORTH" or "MOVE" and forwards them to
the robot, logging the outcome of each command.
"""

from .parser import (
    Command,
    CommandParser,
    CommandParseError,
    ParsedCommand,
)
from .commander import Commander, CommandResult

__all__ = [
    "Command",
    "CommandParser",
    "CommandParseError",
    "ParsedCommand",
    "Commander",
    "CommandResult",
]
