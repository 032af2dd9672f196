"""Styled text and terminal width measurement.

``Text`` is the rendering primitive: an ordered list of style directives
and plain strings.  The width helpers measure grapheme clusters so that
wide characters (CJK, emoji) take two columns and combining marks none.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterator, Union

import grapheme
import wcwidth as _wcwidth

from linepick.ansi import Style

Part = Union[Style, str]


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Text:
    """A line of text interleaved with style directives.

    >>> Text.of(Style(inverse=True), "apple", Style()).plain
    'apple'
    """

    parts: tuple[Part, ...] = ()

    @classmethod
    def of(cls, *parts: Part) -> Text:
        return cls(tuple(parts))

    @property
    def plain(self) -> str:
        return "".join(p for p in self.parts if isinstance(p, str))

    @property
    def width(self) -> int:
        return visible_width(self.plain)

    def styles(self) -> Iterator[Style]:
        for part in self.parts:
            if isinstance(part, Style):
                yield part

    def __add__(self, other: Text) -> Text:
        return Text(self.parts + other.parts)


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Control characters and marks are zero width, emoji sequences are two
    columns wide, everything else is delegated to wcwidth.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


_TAB = "   "
_REPLACEMENT = "?"


def printable(text: str) -> str:
    """Make *text* safe to write: tabs become spaces, control characters ``?``."""
    if all(0x20 <= ord(ch) <= 0x7E for ch in text):
        return text
    out: list[str] = []
    for ch in text:
        cp = ord(ch)
        if ch == "\t":
            out.append(_TAB)
        elif cp < 0x20 or 0x7F <= cp <= 0x9F:
            out.append(_REPLACEMENT)
        else:
            out.append(ch)
    return "".join(out)


def visible_width(text: str) -> int:
    """Calculate the number of terminal columns *text* occupies."""
    if not text:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = sum(grapheme_width(g) for g in grapheme.graphemes(text))
    return _cache_width(text, total)


def truncate_to_width(text: str, max_width: int, pad: bool = False) -> str:
    """Cut *text* at a grapheme boundary so it fits in *max_width* columns.

    With *pad* the result is right-padded with spaces to exactly
    *max_width* columns.
    """
    if max_width <= 0:
        return ""

    text_width = visible_width(text)
    if text_width <= max_width:
        if pad:
            return text + " " * (max_width - text_width)
        return text

    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = grapheme_width(g)
        if cols + w > max_width:
            break
        result.append(g)
        cols += w

    if pad and cols < max_width:
        result.append(" " * (max_width - cols))
    return "".join(result)
