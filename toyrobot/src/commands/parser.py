"""
Command Parser - Turns a line of text into a robot command.

Command words are matched against a closed, case-insensitive table.
Anything that is not in the table, or a PLACE command with malformed
arguments, raises CommandParseError so the caller can report it.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..robot.direction import Direction

# ASCII digits only, no underscores or surrounding whitespace
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


class Command(Enum):
    """Commands understood by the robot."""
    PLACE = "place"
    MOVE = "move"
    LEFT = "left"
    RIGHT = "right"
    REPORT = "report"
    EXIT = "exit"
    UNKNOWN = "unknown"


class CommandParseError(Exception):
    """
    Raised when a line cannot be turned into a command.

    Attributes:
        line: The raw input line
        command: The command word, if it was recognised
    """

    def __init__(self, message: str, line: str = "", command: Optional[Command] = None):
        super().__init__(message)
        self.line = line
        self.command = command


@dataclass
class ParsedCommand:
    """
    A command with its arguments.

    Only PLACE carries arguments; x, y and facing are None otherwise.
    """
    command: Command
    x: Optional[int] = None
    y: Optional[int] = None
    facing: Optional[Direction] = None
    line: str = ""


PLACE_USAGE = (
    "Command expects 3 arguments in the form of (place x,y,direction)"
)


class CommandParser:
    """
    Parser for the toy robot command language.

    Lines look like:
        PLACE 1,2,NORTH
        MOVE
        LEFT
        RIGHT
        REPORT
        EXIT
    """

    COMMANDS: Dict[str, Command] = {
        "place": Command.PLACE,
        "move": Command.MOVE,
        "left": Command.LEFT,
        "right": Command.RIGHT,
        "report": Command.REPORT,
        "exit": Command.EXIT,
    }

    def lookup(self, word: str) -> Command:
        """Map a command word to a Command (UNKNOWN if not in the table)."""
        return self.COMMANDS.get(word.lower().strip(), Command.UNKNOWN)

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse a single line.

        Args:
            line: Raw input line (must not be blank)

        Returns:
            ParsedCommand

        Raises:
            CommandParseError: If the command is unknown or its arguments
                are invalid
        """
        tokens = line.split()
        if not tokens:
            raise CommandParseError("Unknown command", line=line)

        command = self.lookup(tokens[0])
        if command is Command.UNKNOWN:
            raise CommandParseError("Unknown command", line=line)

        if command is Command.PLACE:
            return self._parse_place(" ".join(tokens[1:]), line)

        # Extra arguments to the other commands are ignored
        return ParsedCommand(command=command, line=line)

    def _parse_place(self, args: str, line: str) -> ParsedCommand:
        parts = split_arguments(args)
        if len(parts) != 3:
            raise CommandParseError(
                f"Invalid number of arguments for place command. {PLACE_USAGE}",
                line=line,
                command=Command.PLACE,
            )

        x = parse_int(parts[0])
        if x is None:
            raise CommandParseError(
                f"Invalid x value: {parts[0]}", line=line, command=Command.PLACE
            )

        y = parse_int(parts[1])
        if y is None:
            raise CommandParseError(
                f"Invalid y value: {parts[1]}", line=line, command=Command.PLACE
            )

        facing = Direction.from_name(parts[2])
        if facing is None:
            raise CommandParseError(
                f"Invalid facing direction: {parts[2]}", line=line, command=Command.PLACE
            )

        return ParsedCommand(command=Command.PLACE, x=x, y=y, facing=facing, line=line)


def split_arguments(args: str, delimiter: str = ",") -> List[str]:
    """Split on the delimiter, strip whitespace and drop empty pieces."""
    return [part.strip() for part in args.split(delimiter) if part.strip()]


def parse_int(text: str) -> Optional[int]:
    """Parse a base-10 integer, returning None if the text is not one."""
    if not _INTEGER.fullmatch(text):
        return None
    return int(text, 10)
