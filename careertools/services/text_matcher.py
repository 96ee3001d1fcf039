"""Whole-word, case-insensitive term matching.

Terms are matched literally: regex metacharacters in a term ("C++", "CI/CD",
"Node.js") carry no pattern meaning. A match may not be glued to a word
character on either side, so "R" matches in "I use R" but not in "Rust",
while "C++" still matches before whitespace or punctuation.
"""

from __future__ import annotations

import math
import re
from functools import lru_cache
from typing import Optional


@lru_cache(maxsize=2048)
def term_pattern(term: str) -> re.Pattern:
    """Compile the boundary-aware pattern for a single term."""
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def count_matches(text: str, term: str) -> int:
    """Count non-overlapping occurrences of ``term`` in ``text``."""
    if not text or not term:
        return 0
    return sum(1 for _ in term_pattern(term).finditer(text))


def find_first(text: str, term: str) -> Optional[int]:
    """Return the offset of the first occurrence of ``term``, or None."""
    if not text or not term:
        return None
    match = term_pattern(term).search(text)
    return match.start() if match else None


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores and salaries round .5 up.
    return math.floor(value + 0.5)
