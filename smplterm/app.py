"""The application: sets up memory, the terminal and its commands, then runs."""

from __future__ import annotations

import sys

from .alsa import AlsaIO
from .arena import ArenaError, MemoryArena
from .logger import Logger
from .terminal import Terminal, TerminalOverflow
from .units import megabytes


class App:
    """Owns the memory arena, terminal and ALSA commands."""

    MEMORY_SIZE = megabytes(512)

    def __init__(self, logger: Logger, terminal: Terminal | None = None) -> None:
        self.logger = logger
        self.terminal = terminal if terminal is not None else Terminal()
        self.memory = MemoryArena()
        self.alsa = AlsaIO(logger)
        self.is_running = False

    def run(self) -> bool:
        """Initialise everything and loop until stopped; False on setup failure."""
        try:
            return self._run()
        finally:
            self.is_running = False
            self.memory.close()

    def stop(self) -> None:
        self.is_running = False

    def _run(self) -> bool:
        try:
            self.memory.allocate(self.MEMORY_SIZE)
        except ArenaError:
            self.logger.error("Memory failed to intialise")
            return False

        try:
            self.terminal.init(self.logger, self.memory)
        except ArenaError:
            self.logger.error("Terminal failed to allocate")
            return False

        self.logger.info("App intialised successfully")
        self.logger.info("Set is_running to true.")
        self.is_running = True

        self.alsa.init(self.memory, self.terminal)

        self.logger.info("Beginning main loop.")
        self.terminal.welcome()

        while self.is_running:
            try:
                self.terminal.handle_io_non_blocking()
            except TerminalOverflow:
                self.logger.error("Error handling terminal IO")
        return True


def main(argv: list[str] | None = None) -> int:
    """Run the sampler terminal; return the process exit status."""
    logger = Logger("APP")
    app = App(logger)
    try:
        ok = app.run()
    except KeyboardInterrupt:
        return 130
    if not ok:
        logger.error("App ran unsuccessfully")
        return 1
    logger.info("Ran successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())