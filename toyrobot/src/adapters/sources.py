"""
Command Sources - Where command lines come from.

Every source implements read_line(), returning the next line without
its trailing newline, or None once input is exhausted.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from ..config import DEFAULT_PROMPT

logger = logging.getLogger(__name__)


class CommandSource(ABC):
    """Abstract base class for command sources."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """
        Read a single line of input.

        Returns:
            The line, or None if the input is closed
        """
        pass

    def close(self) -> None:
        """Release any underlying resource."""

    def __enter__(self) -> "CommandSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ConsoleSource(CommandSource):
    """Reads commands typed on the console."""

    def __init__(self, prompt: str = DEFAULT_PROMPT):
        self.prompt = prompt

    def read_line(self) -> Optional[str]:
        try:
            return input(self.prompt)
        except EOFError:
            return None


class FileSource(CommandSource):
    """
    Reads commands from a text file, one per line.

    The file is opened on construction, so a missing file raises
    FileNotFoundError straight away.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self._file: Optional[TextIO] = open(self.path, "r", encoding=encoding)
        logger.debug(f"Reading commands from {self.path}")

    def read_line(self) -> Optional[str]:
        if self._file is None:
            return None

        line = self._file.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class IterableSource(CommandSource):
    """Serves lines from any iterable of strings (scripts, tests)."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)

    def read_line(self) -> Optional[str]:
        line = next(self._lines, None)
        if line is None:
            return None
        return line.rstrip("\r\n")
