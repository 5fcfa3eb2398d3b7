"""
Letter tables: point value and tile count for each letter a..z.

Conventions:
  - A letter is identified by its offset from 'a' (0..25).
  - Both tables are fixed for the lifetime of a run; LetterTables is frozen.
  - Tables are validated once, when they are built. A table with the wrong
    length, a non-integer entry or a negative value is a configuration error
    (LetterTableError), never a per-word failure.

The defaults are the standard English Scrabble distribution used by the
Shakespeare benchmark (note the single 'd' tile).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
NUM_LETTERS = len(ALPHABET)

# Blank tiles available to a single player (worth 0 points each).
BLANK_BUDGET = 2

#                         a  b  c  d  e  f  g  h  i  j  k  l  m  n  o  p   q  r  s  t  u  v  w  x  y   z
SCRABBLE_LETTER_SCORES = (1, 3, 3, 2, 1, 4, 2, 4, 1, 8, 5, 1, 3, 1, 1, 3, 10, 1, 1, 1, 1, 4, 4, 8, 4, 10)
SCRABBLE_AVAILABLE_LETTERS = (9, 2, 2, 1, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)


class LetterTableError(ValueError):
    """A letter table is malformed (wrong size, non-integer or negative entries)."""


def letter_id(ch: str) -> int:
    """Offset of a lowercase letter from 'a' (0..25)."""
    return ord(ch) - ord("a")


def _as_table(values: Iterable[int], name: str) -> Tuple[int, ...]:
    """Validate one table with numpy and freeze it as a tuple of ints."""
    try:
        arr = np.asarray(list(values))
    except ValueError as e:
        raise LetterTableError(f"{name} is not a flat list of numbers ({e})") from e
    if arr.shape != (NUM_LETTERS,):
        raise LetterTableError(f"{name} must have exactly {NUM_LETTERS} entries; got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise LetterTableError(f"{name} must contain integers; got dtype {arr.dtype}")
    if (arr < 0).any():
        bad = [ALPHABET[i] for i in np.flatnonzero(arr < 0)]
        raise LetterTableError(f"{name} has negative values for letters {bad}")
    return tuple(int(v) for v in arr)


def _from_letter_map(mapping: Dict[str, int], name: str) -> Tuple[int, ...]:
    unknown = sorted(set(mapping) - set(ALPHABET))
    if unknown:
        raise LetterTableError(f"{name} has unknown letters {unknown}")
    missing = [ch for ch in ALPHABET if ch not in mapping]
    if missing:
        raise LetterTableError(f"{name} is missing letters {missing}")
    return _as_table((mapping[ch] for ch in ALPHABET), name)


@dataclass(frozen=True)
class LetterTables:
    """Per-letter point values and available tile counts, indexed by letter id."""
    scores: Tuple[int, ...]
    available: Tuple[int, ...]

    @classmethod
    def from_arrays(cls, scores: Iterable[int], available: Iterable[int]) -> "LetterTables":
        return cls(_as_table(scores, "scores"), _as_table(available, "available"))

    @classmethod
    def from_mapping(cls, scores: Dict[str, int], available: Dict[str, int]) -> "LetterTables":
        """Build tables from {'a': 1, 'b': 3, ...} style mappings (all 26 letters required)."""
        return cls(_from_letter_map(scores, "scores"), _from_letter_map(available, "available"))

    def score_of(self, lid: int) -> int:
        return self.scores[lid]

    def available_of(self, lid: int) -> int:
        return self.available[lid]


def default_tables() -> LetterTables:
    return LetterTables.from_arrays(SCRABBLE_LETTER_SCORES, SCRABBLE_AVAILABLE_LETTERS)
