"""Line-oriented command terminal with nested command levels."""

from __future__ import annotations

import atexit
import os
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from .arena import ArenaError, MemoryArena
from .buffer import BufferFull, FixedBuffer
from .logger import Logger

try:
    import fcntl
    import termios
except ImportError:  # not a POSIX system
    fcntl = None  # type: ignore[assignment]
    termios = None  # type: ignore[assignment]

Command = Callable[[str], None]

MAX_COMMANDS = 1024
MAX_CMD_LEVELS = 256
INPUT_BUFFER_SIZE = 512
PROMPT = ">"
BACKSPACE_CHARS = ("\b", "\x7f")

_IDLE_SECONDS = 0.001


class TerminalOverflow(Exception):
    """Raised when a typed line does not fit in the input buffer."""


@dataclass(eq=False)
class CommandLevel:
    """A named entry in the command tree, optionally bound to a command."""

    name: str
    help: str
    children: list[CommandLevel] = field(default_factory=list)
    command: Command | None = None


class Terminal:
    """Reads characters one at a time and dispatches completed lines."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._levels: FixedBuffer[CommandLevel] | None = None
        self._commands: FixedBuffer[Command] | None = None
        self._input: FixedBuffer[str] = FixedBuffer(INPUT_BUFFER_SIZE)
        self._current: CommandLevel | None = None
        self._fd: int | None = None
        self._saved_stdin: tuple[int, int, list | None] | None = None

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def base_level(self) -> CommandLevel:
        return self._require_levels()[0]

    @property
    def current_level(self) -> CommandLevel:
        self._require_levels()
        assert self._current is not None
        return self._current

    def init(self, logger: Logger, memory: MemoryArena) -> None:
        """Reserve buffers, put stdin in raw non-blocking mode and add HELP."""
        try:
            # The input line lives in the application's arena budget.
            memory.push(INPUT_BUFFER_SIZE)
        except ArenaError:
            logger.error("Couldn't allocate input buffer of size: %d", INPUT_BUFFER_SIZE)
            raise

        self._levels = FixedBuffer(MAX_CMD_LEVELS)
        # Slot zero of the command table is reserved as the empty command.
        self._commands = FixedBuffer(MAX_COMMANDS - 1)
        self._input = FixedBuffer(INPUT_BUFFER_SIZE)

        self._configure_stdin()

        base = CommandLevel("base", "this is the base level at index 0")
        self._levels.push(base)
        self._current = base

        help_level = self.add_cmd_level("HELP", "Prints out the help text", base)
        self.add_cmd_to_level(help_level, lambda _args: self.print_help())

    def add_cmd_level(
        self, name: str, help: str, parent: CommandLevel | None = None
    ) -> CommandLevel:
        """Create a level under ``parent`` (the base level by default)."""
        levels = self._require_levels()
        if parent is None:
            parent = levels[0]
        level = CommandLevel(name, help)
        levels.push(level)
        parent.children.append(level)
        return level

    def add_cmd_to_level(self, level: CommandLevel | None, callback: Command) -> None:
        """Bind ``callback`` to ``level``; it receives the rest of the line."""
        levels = self._require_levels()
        assert self._commands is not None
        if level is None:
            level = levels[0]
        self._commands.push(callback)
        level.command = callback

    def welcome(self) -> None:
        self._write(PROMPT)

    def handle_char(self, c: str) -> None:
        """Echo one character and apply it to the current line."""
        self._write(c)

        if c in BACKSPACE_CHARS:
            if len(self._input):
                self._input.pop()
                self._write("\b \b")
            return

        if c == "\n":
            self._submit_line()
            return

        try:
            self._input.push(c)
        except BufferFull as exc:
            self._write("OVERFLOW\n")
            raise TerminalOverflow(
                f"input line exceeds {self._input.capacity} characters"
            ) from exc

    def handle_io_non_blocking(self) -> bool:
        """Process one pending character; return False if none was waiting."""
        c = self._read_char()
        if c is None:
            time.sleep(_IDLE_SECONDS)
            return False
        self.handle_char(c)
        return True

    def print_help(self) -> None:
        for child in self.current_level.children:
            self._write(f"{child.name}: {child.help}\n")

    def _submit_line(self) -> None:
        line = "".join(self._input)
        if not line:
            self._write(PROMPT)
            return

        split = next(
            (i for i, ch in enumerate(line) if ch in (" ", "\0")), len(line)
        )
        token = line[:split]

        found = False
        for level in self.current_level.children:
            if level.name[:split].lower() != token.lower():
                continue
            found = True
            if level.command is not None:
                level.command(line[split:])
            break

        if not found:
            self._write(f"Command {token} not found!\n")

        self._input.reset()
        self._write(PROMPT)

    def _require_levels(self) -> FixedBuffer[CommandLevel]:
        if self._levels is None:
            raise RuntimeError("terminal is not initialised")
        return self._levels

    def _write(self, text: str) -> None:
        out = self.stdout
        out.write(text)
        out.flush()

    def _read_char(self) -> str | None:
        if self._fd is not None:
            try:
                data = os.read(self._fd, 1)
            except (BlockingIOError, InterruptedError):
                return None
            return data.decode("latin-1") if data else None
        ch = self.stdin.read(1)
        return ch or None

    def _configure_stdin(self) -> None:
        if fcntl is None or termios is None:
            return
        try:
            fd = self.stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return

        flags = fcntl.fcntl(fd, fcntl.F_GETFL)
        fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)

        saved_attrs = None
        if os.isatty(fd):
            saved_attrs = termios.tcgetattr(fd)
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~(termios.ECHO | termios.ICANON)
            termios.tcsetattr(fd, termios.TCSANOW, attrs)

        self._fd = fd
        self._saved_stdin = (fd, flags, saved_attrs)
        atexit.register(self._restore_stdin)

    def _restore_stdin(self) -> None:
        if self._saved_stdin is None or fcntl is None or termios is None:
            return
        fd, flags, attrs = self._saved_stdin
        self._saved_stdin = None
        try:
            fcntl.fcntl(fd, fcntl.F_SETFL, flags)
            if attrs is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        except (OSError, termios.error):
            pass