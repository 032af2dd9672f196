"""linepick: interactive fuzzy picker for one line out of many."""

from linepick.ansi import HIGHLIGHT, PLAIN, Color, Style
from linepick.app import PickerAborted, handle_key, pick, run
from linepick.config import PickerConfig
from linepick.matcher import match
from linepick.renderer import Frame, paint, render
from linepick.screen import Screen
from linepick.terminal import TTY, TerminalConfigError, TerminalDevice
from linepick.text import Text
from linepick.world import EmptyMatchError, Selection, World

__all__ = [
    # ANSI
    "Color",
    "HIGHLIGHT",
    "PLAIN",
    "Style",
    # Event loop
    "PickerAborted",
    "handle_key",
    "pick",
    "run",
    # Configuration
    "PickerConfig",
    # Matching
    "match",
    # Rendering
    "Frame",
    "paint",
    "render",
    "Screen",
    "Text",
    # Terminal
    "TTY",
    "TerminalConfigError",
    "TerminalDevice",
    # State
    "EmptyMatchError",
    "Selection",
    "World",
]
