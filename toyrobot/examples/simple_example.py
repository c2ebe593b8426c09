#!/usr/bin/env python3
"""
Simple Example: Drive the robot from a script

Runs a few command sessions through the Commander and prints what the
robot reports, without needing the console.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.adapters.logging_setup import setup_logging
from src.adapters.sources import FileSource, IterableSource
from src.commands.commander import Commander
from src.robot.toy_robot import ToyRobot


SESSIONS = {
    "Basic moves": ["PLACE 0,0,NORTH", "MOVE", "REPORT"],
    "Turn and move": ["PLACE 1,2,EAST", "MOVE", "MOVE", "LEFT", "MOVE", "REPORT"],
    "Edge of the table": ["PLACE 3,2,SOUTH", "MOVE", "MOVE", "MOVE", "REPORT"],
    "Not placed yet": ["MOVE", "LEFT", "REPORT", "PLACE 9,9,WEST", "REPORT"],
}


def print_separator(title: str = ""):
    """Print a visual separator."""
    print("\n" + "=" * 70)
    if title:
        print(f"  {title}")
        print("=" * 70)


def main():
    setup_logging("WARNING")

    for title, lines in SESSIONS.items():
        print_separator(title)
        robot = ToyRobot()
        results = Commander(robot, IterableSource(lines)).launch()

        for result in results:
            status = "ok" if result.success else f"failed ({result.robot_error or result.error_message})"
            print(f"  {result.line:<20} {status}")
            if result.output:
                print(f"  {'':<20} -> {result.output}")

    commands_file = Path(__file__).parent / "commands.txt"
    print_separator(f"From file: {commands_file.name}")
    setup_logging("INFO")
    with FileSource(commands_file) as source:
        Commander(ToyRobot(), source, logger=logging.getLogger("toyrobot")).launch()


if __name__ == "__main__":
    main()
