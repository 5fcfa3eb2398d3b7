"""
Letter histogram of a single word.

The histogram maps letter id (0..25) to the number of times that letter
occurs in the word. It is built fresh for every word and never shared.

Only lowercase a..z is accepted. Anything else is a precondition violation
and raises InvalidWordError instead of indexing outside the letter tables.
"""

from __future__ import annotations

import re
from collections import Counter

from .letters import letter_id

_CLEAN_RE = re.compile(r"[a-z]*")


class InvalidWordError(ValueError):
    """A word contains characters outside lowercase a..z."""


def is_clean_word(word: str) -> bool:
    """True if `word` is a string made only of lowercase a..z (the empty word is clean)."""
    return isinstance(word, str) and _CLEAN_RE.fullmatch(word) is not None


def histogram(word: str) -> Counter[int]:
    """
    Count letters of `word` by letter id.

    Examples:
      histogram("abba") -> Counter({0: 2, 1: 2})
      histogram("")     -> Counter()
    """
    if not is_clean_word(word):
        raise InvalidWordError(f"not a lowercase a-z word: {word!r}")

    hist: Counter[int] = Counter()
    for ch in word:
        lid = letter_id(ch)
        hist[lid] = hist[lid] + 1
    return hist
