"""
Group scored words into buckets and keep the best few.

A bucket holds every word that reached the same score, in the order the
words were added (corpus order). Buckets are read out best score first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple

# Number of distinct scores reported.
TOP_N = 3


@dataclass
class ScoreEntry:
    """One line of the ranking: a score and every word reaching it."""
    score: int
    words: List[str] = field(default_factory=list)


def group_by_score(pairs: Iterable[Tuple[str, int]]) -> Dict[int, List[str]]:
    """Bucket (word, score) pairs by score, keeping insertion order inside a bucket."""
    buckets: Dict[int, List[str]] = {}
    for word, score in pairs:
        buckets.setdefault(score, []).append(word)
    return buckets


def top_n(buckets: Mapping[int, List[str]], n: int = TOP_N) -> List[ScoreEntry]:
    """
    Return the `n` best buckets as ScoreEntry, strictly descending by score.
    Fewer buckets than `n` are all returned.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0; got {n}")
    best = sorted(buckets, reverse=True)[:n]
    return [ScoreEntry(score, list(buckets[score])) for score in best]
