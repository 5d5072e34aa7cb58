from __future__ import annotations

import os
import select
import sys
import termios
import tty
from typing import TextIO

from . import config
from .render import render
from .state import Board


class TerminalMode:
    """Put stdin into cbreak mode (no line buffering, no echo) for the block."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdin
        self.old: list | None = None

    def __enter__(self) -> TerminalMode:
        if self.stream.isatty():
            fd = self.stream.fileno()
            self.old = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.old is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self.old)
            self.old = None


def read_key(timeout_ms: float, stream: TextIO | None = None) -> str:
    """Read one key, or return TIMEOUT_KEY if none arrives in time."""
    stream = stream or sys.stdin
    readable, _, _ = select.select([stream], [], [], max(timeout_ms, 0.0) / 1000.0)
    if not readable:
        return config.TIMEOUT_KEY
    # One keypress can be several bytes (escape sequences, UTF-8); take the
    # whole burst so it costs a single tick.
    data = os.read(stream.fileno(), config.KEY_READ_BYTES)
    if not data:
        # EOF
        return config.TIMEOUT_KEY
    key = data.decode(errors="replace")
    if key.startswith("\x1b"):
        return key
    return key[0]


def hide_cursor() -> None:
    sys.stdout.write("\x1b[?25l")
    sys.stdout.flush()


def show_cursor() -> None:
    sys.stdout.write("\x1b[?25h")
    sys.stdout.flush()


def clear_screen() -> None:
    sys.stdout.write("\x1b[2J\x1b[H")
    sys.stdout.flush()


class TextFrontend:
    """Terminal front-end: prints the rendered board and reads raw keys."""

    def __init__(self, stream: TextIO | None = None, clear: bool = True) -> None:
        self.stream = stream or sys.stdin
        self.clear = clear
        self._mode = TerminalMode(self.stream)

    def __enter__(self) -> TextFrontend:
        self._mode.__enter__()
        if self.clear:
            hide_cursor()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.clear:
            show_cursor()
        self._mode.__exit__(exc_type, exc, tb)

    def show(self, board: Board) -> None:
        if self.clear:
            clear_screen()
        print(render(board))
        # clear_screen() wipes the copy printed at startup.
        print(config.INSTRUCTIONS, flush=True)

    def read_key(self, timeout_ms: float) -> str:
        return read_key(timeout_ms, self.stream)
