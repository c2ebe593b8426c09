"""
Commander - Main command loop

Reads lines from a CommandSource, parses them and forwards each command
to the robot, logging what happened:
1. Parse: text to ParsedCommand (parse errors are logged and skipped)
2. Dispatch: ParsedCommand to a ToyRobot operation
3. Report: REPORT output and failures go to the logger

The loop runs until the source is exhausted or an EXIT command is read.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .parser import Command, CommandParser, CommandParseError, ParsedCommand
from ..adapters.sources import CommandSource
from ..robot.toy_robot import RobotError, ToyRobot


@dataclass
class CommandResult:
    """
    Outcome of a single input line.
    """
    line: str
    command: Command = Command.UNKNOWN
    success: bool = False

    # REPORT output, e.g. "3,2,SOUTH"
    output: Optional[str] = None

    # Failure details
    error_message: Optional[str] = None
    robot_error: Optional[RobotError] = None

    def to_dict(self) -> Dict[str, Any]:
        """Export result to dictionary."""
        return {
            "line": self.line,
            "command": self.command.value,
            "success": self.success,
            "output": self.output,
            "error_message": self.error_message,
            "robot_error": self.robot_error.value if self.robot_error else None,
        }


_FAILURE_MESSAGES = {
    Command.PLACE: "Placement failed.",
    Command.MOVE: "Move failed.",
    Command.LEFT: "Turn left failed.",
    Command.RIGHT: "Turn right failed.",
}


class Commander:
    """
    Drives a ToyRobot from text commands.

    Example:
        robot = ToyRobot()
        commander = Commander(robot, IterableSource(["PLACE 0,0,NORTH", "MOVE", "REPORT"]))
        results = commander.launch()
        results[-1].output  # "0,1,NORTH"
    """

    def __init__(
        self,
        robot: ToyRobot,
        source: Optional[CommandSource] = None,
        logger: Optional[logging.Logger] = None,
        parser: Optional[CommandParser] = None,
    ):
        """
        Initialize the commander.

        Args:
            robot: The robot to drive
            source: Where launch() reads lines from
            logger: Sink for status and error messages (module logger if None)
            parser: Command parser (default CommandParser)
        """
        self.robot = robot
        self.source = source
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or CommandParser()

    def launch(self) -> List[CommandResult]:
        """
        Run commands from the source until it is exhausted or EXIT is read.

        Returns:
            One CommandResult per non-blank line processed
        """
        if self.source is None:
            raise ValueError("Commander.launch() requires a command source")

        self.logger.info("Toy robot starting..")

        results: List[CommandResult] = []
        while True:
            line = self.source.read_line()
            if line is None:
                break
            if not line.strip():
                continue

            result = self.execute(line)
            results.append(result)
            if result.command is Command.EXIT:
                break

        self.logger.info("Toy robot quitting..")
        return results

    def execute(self, line: str) -> CommandResult:
        """
        Parse and run a single line.

        Args:
            line: Raw command text

        Returns:
            CommandResult describing what happened
        """
        try:
            parsed = self.parser.parse(line)
        except CommandParseError as e:
            self.logger.error(str(e))
            return CommandResult(
                line=line,
                command=e.command or Command.UNKNOWN,
                error_message=str(e),
            )

        return self.dispatch(parsed)

    def dispatch(self, parsed: ParsedCommand) -> CommandResult:
        """Forward a parsed command to the robot."""
        result = CommandResult(line=parsed.line, command=parsed.command)

        if parsed.command is Command.EXIT:
            result.success = True
            return result

        if parsed.command is Command.REPORT:
            report = self.robot.report()
            result.output = str(report)
            result.success = True
            self.logger.info(f"Output: {report}")
            return result

        if parsed.command is Command.PLACE:
            result.success = self.robot.try_place(parsed.x, parsed.y, parsed.facing)
        elif parsed.command is Command.MOVE:
            result.success = self.robot.try_move()
        elif parsed.command is Command.LEFT:
            result.success = self.robot.try_turn_left()
        elif parsed.command is Command.RIGHT:
            result.success = self.robot.try_turn_right()
        else:
            result.error_message = "Unknown command"
            self.logger.error(result.error_message)
            return result

        if not result.success:
            result.robot_error = self.robot.last_error
            result.error_message = _FAILURE_MESSAGES[parsed.command]
            self.logger.error(result.error_message)

        return result
