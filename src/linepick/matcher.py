"""Fuzzy subsequence matching.

A candidate matches when every query character appears in it, in order,
with anything in between, ignoring case.  Matches are ranked by length
only: shorter candidates are tighter matches and sort first, and equal
lengths keep their input order.
"""

from __future__ import annotations

import re
from typing import Sequence


def build_pattern(query: str) -> re.Pattern[str]:
    """Compile ``q.*?u.*?e.*?r.*?y`` for *query*, case-insensitively."""
    return re.compile(".*?".join(re.escape(ch) for ch in query), re.IGNORECASE | re.DOTALL)


def is_match(query: str, candidate: str) -> bool:
    return build_pattern(query).search(candidate) is not None


def match(candidates: Sequence[str], query: str) -> list[str]:
    """Return the candidates matching *query*, shortest first."""
    if not query:
        matches = list(candidates)
    else:
        pattern = build_pattern(query)
        matches = [c for c in candidates if pattern.search(c)]
    # list.sort is stable, so ties keep their original order.
    matches.sort(key=len)
    return matches
