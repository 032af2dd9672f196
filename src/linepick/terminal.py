"""Controlling terminal device.

``TTY`` owns a dedicated read/write handle on the interactive terminal
(``/dev/tty``), independent of stdin/stdout, so the picker keeps working
when the candidate list is piped in and the selection is piped out.
Line-discipline changes go through the external ``stty`` utility.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import BinaryIO, Protocol

logger = logging.getLogger(__name__)

DEFAULT_TTY_PATH = "/dev/tty"

_FALLBACK_COLUMNS = 80
_FALLBACK_ROWS = 24


class TerminalConfigError(RuntimeError):
    """The terminal could not be opened or reconfigured."""


# ---------------------------------------------------------------------------
# Terminal device protocol
# ---------------------------------------------------------------------------


class TerminalDevice(Protocol):
    """Interface for the terminal the picker draws on and reads keys from."""

    def read_char(self) -> str: ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    def size(self) -> tuple[int, int]: ...

    def stty(self, *args: str) -> str: ...


# ---------------------------------------------------------------------------
# TTY implementation
# ---------------------------------------------------------------------------


class TTY:
    """Terminal device backed by a file handle on the terminal special file."""

    def __init__(self, handle: BinaryIO) -> None:
        self._handle = handle
        self._pending: list[str] = []

    @classmethod
    def open(cls, path: str = DEFAULT_TTY_PATH) -> TTY:
        try:
            handle = open(path, "r+b", buffering=0)
        except OSError as e:
            raise TerminalConfigError(f"cannot open terminal {path}: {e.strerror}") from e
        logger.debug("Opened terminal %s", path)
        return cls(handle)

    def close(self) -> None:
        self._handle.close()

    def fileno(self) -> int:
        return self._handle.fileno()

    # -- input --------------------------------------------------------------

    def read_char(self) -> str:
        """Block until one character arrives; return "" at end of file.

        A multi-byte UTF-8 sequence is read in full and decoded into one
        character.
        """
        first = os.read(self.fileno(), 1)
        if not first:
            return ""

        remaining = _continuation_bytes(first[0])
        data = first
        while remaining:
            chunk = os.read(self.fileno(), remaining)
            if not chunk:
                break
            data += chunk
            remaining -= len(chunk)
        return data.decode("utf-8", errors="replace")

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        self._pending.append(data)

    def flush(self) -> None:
        if not self._pending:
            return
        payload = "".join(self._pending).encode("utf-8")
        self._pending.clear()
        self._handle.write(payload)

    # -- geometry / line discipline -----------------------------------------

    def size(self) -> tuple[int, int]:
        """Return the current ``(rows, columns)`` of the terminal."""
        try:
            size = os.get_terminal_size(self.fileno())
        except (ValueError, OSError):
            logger.debug("Terminal size unavailable, using %dx%d", _FALLBACK_ROWS, _FALLBACK_COLUMNS)
            return _FALLBACK_ROWS, _FALLBACK_COLUMNS
        return size.lines, size.columns

    def stty(self, *args: str) -> str:
        """Run ``stty`` against this terminal and return its output."""
        logger.debug("stty %s", " ".join(args))
        try:
            result = subprocess.run(
                ["stty", *args],
                stdin=self._handle,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise TerminalConfigError("stty not found") from e
        except subprocess.CalledProcessError as e:
            message = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise TerminalConfigError(f"stty {' '.join(args)} failed: {message}") from e
        return result.stdout.strip()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _continuation_bytes(lead: int) -> int:
    """Number of bytes that follow a UTF-8 lead byte."""
    if lead >= 0xF0:
        return 3
    if lead >= 0xE0:
        return 2
    if lead >= 0xC0:
        return 1
    return 0
