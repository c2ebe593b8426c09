"""
ToyRobot - Command-line entry point

Usage:
    toyrobot                          # Read commands from the console
    toyrobot --file commands.txt      # Read commands from a file
    toyrobot --log-file robot.log     # Append log output to a file
    toyrobot --width 8 --height 8     # Use a bigger table
"""

import argparse
import logging
import sys
from typing import List, Optional

from .adapters.logging_setup import setup_logging
from .adapters.sources import CommandSource, ConsoleSource, FileSource
from .commands.commander import Commander
from .config import LOG_LEVELS, AppConfig, create_config
from .robot.toy_robot import ToyRobot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toy robot simulator")
    parser.add_argument(
        "--file",
        dest="command_file",
        default=None,
        help="Read commands from this file instead of the console",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Append log output to this file instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=list(LOG_LEVELS),
        help="Logging level",
    )
    parser.add_argument("--width", type=int, default=None, help="Table width")
    parser.add_argument("--height", type=int, default=None, help="Table height")
    return parser


def open_source(config: AppConfig) -> CommandSource:
    """Pick the command source for this run."""
    if config.command_file:
        return FileSource(config.command_file)
    return ConsoleSource(prompt=config.prompt)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = create_config(
            width=args.width,
            height=args.height,
            log_level=args.log_level,
            log_file=args.log_file,
            command_file=args.command_file,
        )
        config.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, config.log_file)

    try:
        source = open_source(config)
    except OSError as e:
        logger.error(f"Cannot open command file {config.command_file}: {e}")
        return 1

    robot = ToyRobot(grid=config.grid)
    with source:
        Commander(robot, source).launch()

    return 0


if __name__ == "__main__":
    sys.exit(main())
