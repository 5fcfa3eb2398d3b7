"""
Letter-total scorer: the word's base score.

Letters beyond the available tiles are covered by blanks and add nothing.
No board bonuses are applied.
"""

from __future__ import annotations
from typing import Mapping

from packages.engine import base_score
from .base import BaseScorer, register


@register
class LetterTotalScorer(BaseScorer):
    id = "letters"
    name = "Letter total (blanks count 0)"
    version = "1.0.0"

    def score(self, word: str, hist: Mapping[int, int]) -> int:
        return base_score(hist, self.tables)
