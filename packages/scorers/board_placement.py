"""
Board-placement scorer (the default ranking).

The word is laid on a double-word square, so the base score counts twice,
with a double-letter square under the best letter near either end of the
word (also counted twice) and the 50-point bonus for a 7-letter word.
"""

from __future__ import annotations
from typing import Mapping

from packages.engine import placement_score
from .base import BaseScorer, register


@register
class BoardPlacementScorer(BaseScorer):
    id = "placement"
    name = "Board placement (double word + double letter + 7-letter bonus)"
    version = "1.0.0"

    def score(self, word: str, hist: Mapping[int, int]) -> int:
        return placement_score(word, self.tables, hist)
