"""Immutable interaction state and its transitions.

Every keystroke produces a new ``World``; nothing is mutated in place.
The match list is derived from ``(candidates, query)`` on read.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Sequence

from linepick.matcher import match

_TRAILING_WORD_RE = re.compile(r"[^ ]*[ ]*$")


class EmptyMatchError(LookupError):
    """``confirm`` was called while no candidate matches the query."""


@dataclass(frozen=True)
class Selection:
    """Terminal value of a session: the chosen candidate."""

    choice: str


@dataclass(frozen=True)
class World:
    candidates: tuple[str, ...]
    visible_choices: int = 10
    query: str = ""
    index: int = 0

    @classmethod
    def create(cls, candidates: Sequence[str], visible_choices: int = 10, query: str = "") -> World:
        if visible_choices < 1:
            raise ValueError(f"visible_choices must be positive, got {visible_choices}")
        return cls(tuple(candidates), visible_choices, query, 0)

    # -- derived ------------------------------------------------------------

    @cached_property
    def matches(self) -> list[str]:
        return match(self.candidates, self.query)

    @property
    def visible_matches(self) -> list[str]:
        return self.matches[: self.visible_choices]

    @property
    def selection(self) -> str | None:
        """The highlighted candidate, or ``None`` when nothing matches."""
        matches = self.matches
        if not matches:
            return None
        return matches[min(self.index, len(matches) - 1)]

    # -- transitions --------------------------------------------------------

    def down(self) -> World:
        limit = min(len(self.matches), self.visible_choices) - 1
        return replace(self, index=max(min(self.index + 1, limit), 0))

    def up(self) -> World:
        return replace(self, index=max(self.index - 1, 0))

    def append(self, char: str) -> World:
        return replace(self, query=self.query + char, index=0)

    def backspace(self) -> World:
        return replace(self, query=self.query[:-1], index=0)

    def delete_word(self) -> World:
        """Drop the trailing word and the spaces after it; keep the index."""
        return replace(self, query=_TRAILING_WORD_RE.sub("", self.query, count=1))

    def confirm(self) -> Selection:
        choice = self.selection
        if choice is None:
            raise EmptyMatchError(f"no candidate matches {self.query!r}")
        return Selection(choice)
