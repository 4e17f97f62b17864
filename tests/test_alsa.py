import errno
import io

import pytest

from smplterm.alsa import AlsaIO, list_pcm_devices
from smplterm.arena import MemoryArena
from smplterm.logger import Logger
from smplterm.terminal import Terminal

PCM_TEXT = (
    "00-00: bcm2835 ALSA : bcm2835 ALSA : playback 7\n"
    "01-00: USB Audio : USB Audio : playback 1 : capture 1\n"
)
EXPECTED = ["hw:0,0", "hw:1,0"]


@pytest.fixture
def pcm_file(tmp_path):
    path = tmp_path / "pcm"
    path.write_text(PCM_TEXT)
    return str(path)


def make_terminal():
    term = Terminal(stdin=io.StringIO(), stdout=io.StringIO())
    arena = MemoryArena()
    arena.allocate(4096)
    term.init(Logger("TEST", io.StringIO()), arena)
    return term, arena


def test_list_pcm_devices(pcm_file):
    assert list_pcm_devices(pcm_file) == EXPECTED


def test_malformed_lines_are_skipped(tmp_path):
    path = tmp_path / "pcm"
    path.write_text("garbage\nxx-yy: bad : bad\n" + PCM_TEXT + "\n")
    assert list_pcm_devices(str(path)) == EXPECTED


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_pcm_devices(str(tmp_path / "absent"))


def test_init_registers_alsa_level(pcm_file):
    term, arena = make_terminal()
    AlsaIO(Logger("TEST", io.StringIO()), pcm_file).init(arena, term)
    term.print_help()
    assert "ALSA: List the alsa devices\n" in term.stdout.getvalue()


def test_typed_command_lists_devices(pcm_file):
    term, arena = make_terminal()
    AlsaIO(Logger("TEST", io.StringIO()), pcm_file).init(arena, term)
    for ch in "alsa\n":
        term.handle_char(ch)
    assert term.stdout.getvalue() == "alsa\nhw:0,0\nhw:1,0\n>"


def test_enumerate_reports_error(tmp_path):
    term, arena = make_terminal()
    alsa = AlsaIO(Logger("TEST", io.StringIO()), str(tmp_path / "absent"))
    alsa.init(arena, term)
    alsa.enumerate_devices("")
    assert f"Error getting device hints ({errno.ENOENT})" in term.stdout.getvalue()


def test_enumerate_without_terminal_uses_stdout(pcm_file, capsys):
    AlsaIO(Logger("TEST", io.StringIO()), pcm_file).enumerate_devices("")
    assert capsys.readouterr().out.splitlines() == EXPECTED