"""
Adapters Module - Input sources and log output

Console, file and in-memory command sources behind a single
read_line() interface, plus console/file logging setup.
"""

from .sources import CommandSource, ConsoleSource, FileSource, IterableSource
from .logging_setup import setup_logging

__all__ = [
    "CommandSource",
    "ConsoleSource",
    "FileSource",
    "IterableSource",
    "setup_logging",
]
