"""A small named logger that writes prefixed lines to a stream."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Level(Enum):
    """Severity of a log message; the value is the printed prefix."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Logger:
    """Writes lines of the form ``[name] LEVEL: message``."""

    def __init__(self, name: str, stream: TextIO | None = None) -> None:
        self.name = name
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def log(self, level: Level, message: str, *args: object) -> None:
        """Write one message; ``args`` are applied with %-formatting."""
        text = message % args if args else message
        out = self.stream
        out.write(f"[{self.name}] {level.value}: {text}\n")
        out.flush()

    def info(self, message: str, *args: object) -> None:
        self.log(Level.INFO, message, *args)

    def warning(self, message: str, *args: object) -> None:
        self.log(Level.WARNING, message, *args)

    def error(self, message: str, *args: object) -> None:
        self.log(Level.ERROR, message, *args)

    def critical(self, message: str, *args: object) -> None:
        self.log(Level.CRITICAL, message, *args)