from .letters import (
    BLANK_BUDGET,
    LetterTableError,
    LetterTables,
    default_tables,
    letter_id,
)
from .histogram import InvalidWordError, histogram, is_clean_word
from .blanks import blanks_needed, can_play
from .scoring import base_score, bonus_for_double_letter, letter_score, placement_score

__all__ = [
    "BLANK_BUDGET", "LetterTableError", "LetterTables", "default_tables", "letter_id",
    "InvalidWordError", "histogram", "is_clean_word",
    "blanks_needed", "can_play",
    "base_score", "bonus_for_double_letter", "letter_score", "placement_score",
]
