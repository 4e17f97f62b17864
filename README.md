# smplterm

smplterm is the control console for a small sampler. It opens an
interactive prompt on your terminal. You type a command and press Enter to
run it. One built-in command lists the PCM sound devices that the system
reports.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
smplterm
```

At start-up the program does the following:

1. It maps a 512 MiB working area of memory.
2. It sets up the terminal and logs a few `[APP] INFO: ...` lines.
3. It shows a `>` prompt.

On a POSIX terminal, stdin is switched to non-blocking mode with echo and
line buffering turned off. These settings are put back when the process
exits.

Editing a line:

- Every character you type is printed back.
- Backspace and Delete erase the last character.
- Enter runs the line.

A line may hold up to 512 characters. One character more prints
`OVERFLOW`, and the application logs `Error handling terminal IO`.

How a line is matched to a command:

- The first word of the line, up to the first space, is compared with the
  start of each command name. The comparison ignores case, so `help`,
  `HELP` and `he` all run `HELP`.
- The first matching command runs. It receives the rest of the line,
  including the leading space.
- A word that matches no command prints `Command <word> not found!`.
- An empty line shows the prompt again.

Built-in commands:

- `HELP`: prints `NAME: help text` for every command at the current level.
- `ALSA`: reads `/proc/asound/pcm` and prints one `hw:CARD,DEVICE` name per
  listed PCM device. If the file cannot be read, it prints
  `Error getting device hints (<errno>)`.

The main loop keeps running until the process is interrupted. Ctrl-C ends
the program with exit status 130. The exit status is 1 if memory or the
terminal could not be set up.

## What it does not do

- There is no command to quit; the program runs until it is interrupted.
- It does not play, record or mix audio. `ALSA` only lists device names
  and does not open the devices.
- Command levels can be nested with `Terminal.add_cmd_level`, but no
  command moves into a nested level. The prompt always works at the base
  level.

## Using it as a library

```python
import io

from smplterm.arena import MemoryArena
from smplterm.logger import Logger
from smplterm.terminal import Terminal
from smplterm.units import megabytes

out = io.StringIO()
log = Logger("APP", out)
with MemoryArena() as arena:
    arena.allocate(megabytes(1))
    term = Terminal(io.StringIO(""), out)
    term.init(log, arena)
    level = term.add_cmd_level("PING", "Replies with pong", None)
    term.add_cmd_to_level(level, lambda args: out.write("pong\n"))
    term.welcome()
    for ch in "ping\n":
        term.handle_char(ch)

print(out.getvalue())
```

Modules in the package:

- `smplterm.units`: the size helpers `kilobytes`, `megabytes` and
  `gigabytes`, in powers of 1024. A negative size raises `ValueError`.
- `smplterm.logger`: `Logger(name, stream)`.
  - It has the methods `info`, `warning`, `error` and `critical`, plus
    `log(level, message, *args)`.
  - Each writes a line `[name] LEVEL: message` to the stream, which is
    stdout by default.
  - Extra arguments are applied with `%`-formatting.
  - Levels come from the `Level` enum.
- `smplterm.arena`: `MemoryArena`, a bump allocator over one anonymous
  memory mapping.
  - `allocate(size)` maps the memory.
  - `push(size)` returns the next slice as a writable `memoryview`.
  - `close()` releases the mapping. The arena also works as a context
    manager.
  - When a request does not fit, it raises `ArenaError`.
- `smplterm.buffer`: `FixedBuffer(capacity)`, a bounded stack.
  - It has `push`, `pop` and `reset`, and supports `len`, iteration and
    indexing.
  - `push` on a full buffer raises `BufferFull`.
  - `pop` on an empty buffer raises `IndexError`.
- `smplterm.terminal`: `Terminal(stdin, stdout)` and `CommandLevel`.
  - `init(logger, memory)` sets up the terminal.
  - `add_cmd_level(name, help, parent)` and
    `add_cmd_to_level(level, callback)` add commands.
  - `handle_char(c)` feeds one character.
  - `handle_io_non_blocking()` reads and handles one pending character. It
    returns `False` when none was waiting.
  - `print_help()` prints the help lines.
  - An overlong line raises `TerminalOverflow`.
- `smplterm.alsa`: `list_pcm_devices(proc_path)` and `AlsaIO`, which
  registers the `ALSA` command.
- `smplterm.app`: `App` and `main`.
  - `App` ties the pieces together.
  - `run()` sets up and loops until `stop()` is called.
  - `main()` is what the `smplterm` command starts.