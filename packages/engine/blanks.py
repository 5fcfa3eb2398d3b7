"""
Blank-tile resolution.

A word can be played when every letter it uses in excess of the available
tiles can be covered by a blank, and the total number of blanks required
stays within the player's budget (2 in standard Scrabble).
"""

from __future__ import annotations

from typing import Mapping

from .letters import BLANK_BUDGET, LetterTables


def blanks_needed(hist: Mapping[int, int], tables: LetterTables) -> int:
    """Sum over letters of max(0, count - available[letter])."""
    return sum(max(0, count - tables.available_of(lid)) for lid, count in hist.items())


def can_play(hist: Mapping[int, int], tables: LetterTables, budget: int = BLANK_BUDGET) -> bool:
    """
    True if the word behind `hist` needs at most `budget` blanks.

    Raises ValueError for a negative budget.
    """
    if budget < 0:
        raise ValueError(f"blank budget must be >= 0; got {budget}")
    return blanks_needed(hist, tables) <= budget
