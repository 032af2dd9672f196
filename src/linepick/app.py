"""The picker's event loop.

Each iteration paints the current ``World``, blocks for one character
from the terminal, and applies the matching transition until the user
confirms a choice or aborts.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

from linepick.config import PickerConfig
from linepick.keys import Command, classify
from linepick.renderer import paint, render
from linepick.screen import Screen
from linepick.terminal import TTY
from linepick.world import Selection, World

logger = logging.getLogger(__name__)


class PickerAborted(Exception):
    """The user cancelled the session (Ctrl-C, interrupt or end of input)."""


class _Abort:
    def __repr__(self) -> str:
        return "ABORT"


ABORT = _Abort()

Outcome = Union[World, Selection, _Abort]


def handle_key(world: World, char: str) -> Outcome:
    """Apply the command bound to *char* to *world*.

    Enter with an empty match list leaves the state unchanged, so
    ``World.confirm`` is only reached when there is something to select.
    """
    command = classify(char)
    if command is Command.ABORT:
        return ABORT
    if command is Command.DOWN:
        return world.down()
    if command is Command.UP:
        return world.up()
    if command is Command.DELETE_WORD:
        return world.delete_word()
    if command is Command.BACKSPACE:
        return world.backspace()
    if command is Command.CONFIRM:
        if not world.matches:
            return world
        return world.confirm()
    if command is Command.INSERT:
        return world.append(char)
    return world


def run(screen: Screen, world: World, prompt: str) -> str:
    """Drive the loop on an already configured *screen*.

    Returns the chosen candidate or raises ``PickerAborted``.
    """
    while True:
        paint(screen, render(world, prompt))
        char = screen.tty.read_char()
        if not char:
            raise PickerAborted("terminal closed")

        outcome = handle_key(world, char)
        if outcome is ABORT:
            raise PickerAborted("aborted by user")
        if isinstance(outcome, Selection):
            return outcome.choice
        world = outcome


def pick(candidates: Sequence[str], config: PickerConfig) -> str:
    """Run a full interactive session against the controlling terminal."""
    world = World.create(candidates, config.visible_choices, config.search)
    logger.info("Starting picker with %d candidates", len(world.candidates))

    tty = TTY.open(config.tty_path)
    try:
        screen = Screen(tty)
        screen.reserve(config.visible_choices + 1)
        try:
            with screen.raw_mode():
                choice = run(screen, world, config.prompt)
        except KeyboardInterrupt as e:
            raise PickerAborted("interrupted") from e
        finally:
            screen.finish()
    finally:
        tty.close()

    logger.info("Picked %r", choice)
    return choice
