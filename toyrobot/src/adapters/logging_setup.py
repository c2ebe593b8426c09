"""
Logging setup for the command-line robot.

Log records go either to the console or, when a log file is configured,
appended to that file. Both use the same line format:

    19-10-2026 14-03-22 - INFO - Output: 3,2,SOUTH
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%d-%m-%Y %H-%M-%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Handler:
    """
    Configure the root logger with a single console or file handler.

    Args:
        level: Logging level name
        log_file: Append to this file instead of writing to stdout

    Returns:
        The installed handler
    """
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )
    return handler
