"""Terminal size and colour control for command-line output."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass
from typing import TextIO

__all__ = ["Color", "ConsoleSize", "console_size", "color_code", "set_color"]

_STDOUT_FILENO = 1
_RESET_SEQUENCE = "\033[m"


class Color(enum.Enum):
    """Colours that console output may be written in."""

    RED = 31
    GREEN = 32
    YELLOW = 33
    MAGENTA = 35
    CYAN = 36
    TEXT = 37
    RESET = 0


@dataclass(frozen=True)
class ConsoleSize:
    """Dimensions of the terminal, in character cells."""

    rows: int
    columns: int


_DEFAULT_SIZE = ConsoleSize(rows=40, columns=80)


def console_size() -> ConsoleSize:
    """Return the size of the terminal attached to standard output.

    Falls back to 40 rows by 80 columns when no terminal is attached.
    """
    try:
        size = os.get_terminal_size(_STDOUT_FILENO)
    except (OSError, ValueError):
        return _DEFAULT_SIZE
    return ConsoleSize(rows=size.lines, columns=size.columns)


def color_code(color: Color, bold: bool = False) -> str:
    """Return the ANSI escape sequence that switches to ``color``."""
    if color is Color.RESET:
        return _RESET_SEQUENCE
    weight = 1 if bold else 0
    return f"\033[{weight};{color.value}m"


def set_color(color: Color, bold: bool = False, stream: TextIO | None = None) -> None:
    """Switch ``stream`` (standard output by default) to ``color``.

    Nothing is written unless the stream is a terminal.
    """
    if stream is None:
        stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return
    stream.write(color_code(color, bold))