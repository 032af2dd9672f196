"""Line-addressed screen on top of a terminal device.

The screen clips every write to the terminal's current geometry: rows
outside the terminal are dropped and each line is padded with spaces to
the full width so shorter content erases what was there before.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from linepick import ansi
from linepick.ansi import Style
from linepick.terminal import TerminalDevice
from linepick.text import Text, printable, truncate_to_width, visible_width

logger = logging.getLogger(__name__)

# ``stty raw -echo cbreak``: character-at-a-time input, no local echo.
RAW_MODE_ARGS = ("raw", "-echo", "cbreak")
# The delayed-suspend character (^Y) only exists on BSD-derived systems.
DSUSP_ARGS = ("dsusp", "undef")


def _supports_dsusp(platform: str) -> bool:
    return platform.startswith(("darwin", "freebsd", "openbsd", "netbsd", "dragonfly"))


class Screen:
    """Clipped, line-oriented output plus scoped terminal-state changes."""

    def __init__(self, tty: TerminalDevice, platform: str = sys.platform) -> None:
        self.tty = tty
        self._platform = platform

    # -- geometry -----------------------------------------------------------

    @property
    def height(self) -> int:
        return self.tty.size()[0]

    @property
    def width(self) -> int:
        return self.tty.size()[1]

    # -- scoped terminal state ----------------------------------------------

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Put the terminal in raw/no-echo mode for the duration of the block.

        The original ``stty -g`` configuration is restored on every exit
        path.  A failure to capture or to apply the raw settings is fatal
        and propagates as ``TerminalConfigError``.
        """
        saved = self.tty.stty("-g")
        logger.debug("Saved terminal configuration %s", saved)
        try:
            self.tty.stty(*RAW_MODE_ARGS)
            if _supports_dsusp(self._platform):
                self.tty.stty(*DSUSP_ARGS)
            yield
        finally:
            self.tty.stty(saved)
            logger.debug("Restored terminal configuration")

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for a batch of writes; always show it again."""
        self.tty.write(ansi.hide_cursor())
        try:
            yield
        finally:
            self.tty.write(ansi.show_cursor())
            self.tty.flush()

    # -- output -------------------------------------------------------------

    def reserve(self, rows: int) -> None:
        """Scroll *rows* blank lines into view below existing content."""
        self.tty.write("\n" * rows)
        self.tty.flush()

    def move_cursor(self, row: int, column: int) -> None:
        self.tty.write(ansi.move_cursor(row, column))

    def write_line(self, row: int, text: Text) -> None:
        self.write(row, 0, text)

    def write(self, row: int, column: int, text: Text) -> None:
        """Write *text* at (*row*, *column*), padded to the terminal width.

        Tabs are expanded and control characters replaced so the text
        occupies exactly the columns it is measured at.  Writes to rows
        outside the terminal are silently discarded.
        """
        height, width = self.tty.size()
        if row < 0 or row >= height or column >= width:
            return

        remaining = width - column
        out: list[str] = [ansi.move_cursor(row, column)]
        for part in text.parts:
            if isinstance(part, Style):
                out.append(ansi.sgr(part))
                continue
            if remaining <= 0:
                continue
            clipped = truncate_to_width(printable(part), remaining)
            out.append(clipped)
            remaining -= visible_width(clipped)
        out.append(" " * max(remaining, 0))
        out.append(ansi.RESET)
        self.tty.write("".join(out))

    def finish(self) -> None:
        """Park the cursor on a fresh line below the picker region."""
        height = self.height
        self.move_cursor(max(height - 1, 0), 0)
        self.tty.write("\r\n")
        self.tty.flush()
