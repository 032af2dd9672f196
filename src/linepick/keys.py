"""Key encoding for the picker.

Only single characters are recognised; escape sequences such as arrow
keys arrive as separate characters and are treated like any other input.
"""

from __future__ import annotations

from enum import Enum

CTRL_C = "\x03"
CTRL_N = "\x0e"
CTRL_P = "\x10"
CTRL_W = "\x17"
DELETE = "\x7f"
ENTER = "\r"


class Command(Enum):
    ABORT = "abort"
    DOWN = "down"
    UP = "up"
    DELETE_WORD = "delete_word"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"
    INSERT = "insert"
    IGNORE = "ignore"


_BINDINGS: dict[str, Command] = {
    CTRL_C: Command.ABORT,
    CTRL_N: Command.DOWN,
    CTRL_P: Command.UP,
    CTRL_W: Command.DELETE_WORD,
    DELETE: Command.BACKSPACE,
    ENTER: Command.CONFIRM,
}


def is_printable(char: str) -> bool:
    return len(char) == 1 and char.isprintable()


def classify(char: str) -> Command:
    """Map one input character to the command it triggers."""
    command = _BINDINGS.get(char)
    if command is not None:
        return command
    if is_printable(char):
        return Command.INSERT
    return Command.IGNORE
