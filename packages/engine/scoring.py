"""
Scrabble scoring for a single word.

Two scores are defined:

  base score (letters only)
    Sum of letter values, counting each letter at most as many times as
    there are tiles for it. Occurrences beyond that are played with blanks,
    which are worth 0.

  placement score (word put on the board)
    2 * base + 2 * double-letter bonus + 50 for a 7-letter word.

    The double-letter bonus models a double-letter square landing under the
    best letter near either end of the word. It is the best letter value
    over two windows taken independently from the full word: the first 3
    letters and the letters from the 4th one on. Letter values here ignore
    tile availability.

Worked example (a=1, b=2, c=3, 10 tiles each):
  base("abc") = 6, bonus("abc") = max(a, b, c) = 3, placement = 12 + 6 + 0 = 18
"""

from __future__ import annotations

from itertools import chain
from typing import Mapping

from .histogram import histogram
from .letters import LetterTables, letter_id

DOUBLE_LETTER_WINDOW = 3
SEVEN_LETTER_LENGTH = 7
SEVEN_LETTER_BONUS = 50


def letter_score(ch: str, tables: LetterTables) -> int:
    return tables.score_of(letter_id(ch))


def base_score(hist: Mapping[int, int], tables: LetterTables) -> int:
    """Sum of score[letter] * min(count, available[letter]) over the histogram."""
    return sum(
        tables.score_of(lid) * min(count, tables.available_of(lid))
        for lid, count in hist.items()
    )


def bonus_for_double_letter(word: str, tables: LetterTables) -> int:
    """Best letter value in word[:3] and word[3:]; 0 for the empty word."""
    head = word[:DOUBLE_LETTER_WINDOW]
    tail = word[DOUBLE_LETTER_WINDOW:]
    return max((letter_score(ch, tables) for ch in chain(head, tail)), default=0)


def placement_score(word: str, tables: LetterTables, hist: Mapping[int, int] | None = None) -> int:
    """
    Score of `word` placed on the board.

    Args:
      word   : lowercase a..z word
      tables : letter values and tile counts
      hist   : histogram of `word` if the caller already built one
    """
    if hist is None:
        hist = histogram(word)
    seven = SEVEN_LETTER_BONUS if len(word) == SEVEN_LETTER_LENGTH else 0
    return 2 * base_score(hist, tables) + 2 * bonus_for_double_letter(word, tables) + seven
