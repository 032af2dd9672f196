"""ANSI escape sequence encoding.

Pure functions that turn semantic terminal operations (cursor movement,
cursor visibility, SGR colors) into escape strings.  Nothing here touches
a file handle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ESC = "\x1b"
CSI = ESC + "["

RESET = CSI + "0m"

_HIDE_CURSOR = CSI + "?25l"
_SHOW_CURSOR = CSI + "?25h"
_MOVE_CURSOR_FMT = CSI + "{};{}H"


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class Color(Enum):
    """The 8-color palette plus the terminal's default color."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT = 9

    @property
    def foreground(self) -> int:
        return 30 + self.value

    @property
    def background(self) -> int:
        return 40 + self.value


@dataclass(frozen=True)
class Style:
    """A style directive: foreground, background and the inverse attribute."""

    foreground: Color = Color.DEFAULT
    background: Color = Color.DEFAULT
    inverse: bool = False


PLAIN = Style()
HIGHLIGHT = Style(inverse=True)


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------


def sgr(style: Style) -> str:
    """Encode *style* as a single SGR sequence.

    The sequence always starts from a reset so that attributes from a
    previous directive do not leak into this one.
    """
    params = ["0", str(style.foreground.foreground), str(style.background.background)]
    if style.inverse:
        params.append("7")
    return CSI + ";".join(params) + "m"


def move_cursor(row: int, column: int) -> str:
    """Move to zero-based (*row*, *column*); the wire format is 1-indexed."""
    return _MOVE_CURSOR_FMT.format(row + 1, column + 1)


def hide_cursor() -> str:
    return _HIDE_CURSOR


def show_cursor() -> str:
    return _SHOW_CURSOR
