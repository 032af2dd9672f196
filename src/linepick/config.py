"""Picker configuration."""

from __future__ import annotations

from dataclasses import dataclass

from linepick.renderer import DEFAULT_PROMPT
from linepick.terminal import DEFAULT_TTY_PATH

DEFAULT_VISIBLE_CHOICES = 10


@dataclass(frozen=True)
class PickerConfig:
    visible_choices: int = DEFAULT_VISIBLE_CHOICES
    search: str = ""
    prompt: str = DEFAULT_PROMPT
    tty_path: str = DEFAULT_TTY_PATH

    def __post_init__(self) -> None:
        if self.visible_choices < 1:
            raise ValueError(f"visible_choices must be a positive integer, got {self.visible_choices}")
        if "\n" in self.search or "\r" in self.search:
            raise ValueError("search must be a single line")
