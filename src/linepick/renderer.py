"""Turn a ``World`` into screen lines and paint them."""

from __future__ import annotations

from dataclasses import dataclass

from linepick.ansi import HIGHLIGHT, PLAIN
from linepick.screen import Screen
from linepick.text import Text, printable, visible_width
from linepick.world import World

DEFAULT_PROMPT = "> "


@dataclass(frozen=True)
class Frame:
    """A complete picture of the picker region.

    ``lines[0]`` is the prompt, followed by exactly ``visible_choices``
    choice lines.  The cursor position is relative to the region's top row.
    """

    lines: tuple[Text, ...]
    cursor_row: int
    cursor_column: int


def render(world: World, prompt: str = DEFAULT_PROMPT) -> Frame:
    prompt_line = prompt + world.query
    lines = [Text.of(PLAIN, prompt_line)]

    choices = world.visible_matches
    for row in range(world.visible_choices):
        if row >= len(choices):
            lines.append(Text.of(PLAIN, ""))
        elif row == world.index:
            lines.append(Text.of(HIGHLIGHT, choices[row]))
        else:
            lines.append(Text.of(PLAIN, choices[row]))

    return Frame(tuple(lines), 0, visible_width(printable(prompt_line)))


def paint(screen: Screen, frame: Frame) -> None:
    """Repaint the bottom ``len(frame.lines)`` rows of *screen*."""
    start_row = screen.height - len(frame.lines)
    with screen.hidden_cursor():
        for offset, line in enumerate(frame.lines):
            screen.write_line(start_row + offset, line)
        screen.move_cursor(max(start_row + frame.cursor_row, 0), frame.cursor_column)
