"""Commands for inspecting the system's ALSA PCM devices."""

from __future__ import annotations

import sys

from .arena import MemoryArena
from .logger import Logger
from .terminal import Terminal

DEFAULT_PCM_PATH = "/proc/asound/pcm"


def list_pcm_devices(proc_path: str = DEFAULT_PCM_PATH) -> list[str]:
    """Return ``hw:CARD,DEVICE`` names listed in an ALSA pcm proc file."""
    devices = []
    with open(proc_path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            ident, sep, _ = line.partition(":")
            if not sep:
                continue
            card, dash, device = ident.strip().partition("-")
            if not dash or not card.isdigit() or not device.isdigit():
                continue
            devices.append(f"hw:{int(card)},{int(device)}")
    return devices


class AlsaIO:
    """Registers the ALSA command with a terminal."""

    def __init__(self, logger: Logger, proc_path: str = DEFAULT_PCM_PATH) -> None:
        self.logger = logger
        self.proc_path = proc_path
        self._terminal: Terminal | None = None

    def init(self, memory: MemoryArena, terminal: Terminal) -> None:
        level = terminal.add_cmd_level("ALSA", "List the alsa devices")
        terminal.add_cmd_to_level(level, self.enumerate_devices)
        self._terminal = terminal

    def enumerate_devices(self, args: str = "") -> None:
        """Print one PCM device name per line."""
        out = self._terminal.stdout if self._terminal is not None else sys.stdout
        try:
            names = list_pcm_devices(self.proc_path)
        except OSError as exc:
            code = exc.errno if exc.errno is not None else -1
            out.write(f"Error getting device hints ({code})")
            out.flush()
            return
        for name in names:
            out.write(f"{name}\n")
        out.flush()