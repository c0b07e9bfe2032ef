"""Small terminal effects: screen clearing, pauses, dots and typed-out text."""

from __future__ import annotations

import sys
import time
from typing import TextIO

CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    out = _out(stream)
    out.write(CLEAR_SEQUENCE)
    out.flush()


def clear_characters(count: int, stream: TextIO | None = None) -> None:
    """Erase the last count characters written on the current line."""
    out = _out(stream)
    out.write("\b" * count + " " * count + "\b" * count)
    out.flush()


def delay(seconds: float = 0.5) -> None:
    """Pause for the given number of seconds; non-positive values do nothing."""
    if seconds > 0:
        time.sleep(seconds)


def loading_dots(count: int, stream: TextIO | None = None, pause: float = 0.5) -> None:
    """Animate three dots count times, then leave three dots on screen."""
    out = _out(stream)
    for _ in range(count):
        for _ in range(3):
            delay(pause)
            out.write(".")
            out.flush()
        delay(pause)
        clear_characters(3, out)
    out.write("...")
    out.flush()


def typewriter(text: str, delay_time: float = 0.05, stream: TextIO | None = None) -> None:
    """Write text one character at a time with a pause after each."""
    out = _out(stream)
    for char in text:
        out.write(char)
        out.flush()
        delay(delay_time)