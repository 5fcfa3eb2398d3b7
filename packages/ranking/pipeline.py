"""
Ranking pipeline: corpus -> dictionary filter -> blank check -> score -> top N.

For each corpus word, in corpus order:
  1) drop it if it is not in the dictionary
  2) drop it if it is not a lowercase a..z word (or raise, with strict=True)
  3) build its histogram once
  4) drop it if it needs more blanks than the scorer's budget
  5) score it and add it to the bucket for that score
Then read out the best `top` buckets.

Per-word work is independent. With workers > 1 the words are scored in a
process pool; Executor.map yields results in input order, so buckets are
filled in corpus order and the ranking is the same as a sequential run.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Container, Iterable, List, Optional

from packages.datasets.io import ScrabbleData
from packages.engine import InvalidWordError, histogram, is_clean_word
from packages.scorers import BaseScorer, create_scorer

from .aggregator import TOP_N, ScoreEntry, group_by_score, top_n

logger = logging.getLogger(__name__)

# Words per task sent to a worker process.
CHUNK_SIZE = 512


def evaluate_word(word: str, scorer: BaseScorer) -> Optional[int]:
    """
    Score one word, or None if it cannot be played within the blank budget.
    Raises InvalidWordError for a malformed word.
    """
    hist = histogram(word)
    if not scorer.playable(hist):
        return None
    return scorer.score(word, hist)


def _score_all(words: List[str], scorer: BaseScorer, workers: int | None) -> List[Optional[int]]:
    if workers is None or workers == 1 or len(words) < 2:
        return [evaluate_word(w, scorer) for w in words]

    logger.debug(f"Scoring {len(words)} words with {workers} worker processes")
    with ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(partial(evaluate_word, scorer=scorer), words, chunksize=CHUNK_SIZE))


def rank_words(
        corpus: Iterable[str],
        dictionary: Container[str],
        scorer: BaseScorer | None = None,
        *,
        top: int = TOP_N,
        strict: bool = False,
        workers: int | None = None,
) -> List[ScoreEntry]:
    """
    Rank corpus words by score and return the `top` best score groups.

    Args:
      corpus     : words in scan order (duplicates are kept, as in the corpus)
      dictionary : valid words (membership test only)
      scorer     : a bound scorer; defaults to the board-placement scorer
                   with the standard tables and 2 blanks
      top        : number of distinct scores to keep
      strict     : raise InvalidWordError on a malformed dictionary word
                   instead of skipping it
      workers    : score in a process pool of this size when > 1 (must be >= 1)

    Returns:
      List[ScoreEntry], strictly descending by score, at most `top` long.
    """
    if top < 0:
        raise ValueError(f"top must be >= 0; got {top}")
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    if scorer is None:
        scorer = create_scorer()

    scanned = not_in_dictionary = malformed = 0
    candidates: List[str] = []
    for word in corpus:
        scanned += 1
        if word not in dictionary:
            not_in_dictionary += 1
            continue
        if not is_clean_word(word):
            if strict:
                raise InvalidWordError(f"not a lowercase a-z word: {word!r}")
            malformed += 1
            continue
        candidates.append(word)

    scores = _score_all(candidates, scorer, workers)
    pairs = [(w, s) for w, s in zip(candidates, scores) if s is not None]

    if malformed:
        logger.warning(f"Skipped {malformed} malformed word(s)")
    logger.info(
        f"Scanned {scanned} words: {not_in_dictionary} not in dictionary, "
        f"{len(candidates) - len(pairs)} need too many blanks, {len(pairs)} ranked "
        f"(scorer={scorer.id}, blanks={scorer.budget})"
    )
    return top_n(group_by_score(pairs), top)


def rank_data(data: ScrabbleData, scorer: BaseScorer | None = None, **kwargs) -> List[ScoreEntry]:
    """rank_words over a loaded ScrabbleData; the scorer defaults to placement on data.tables."""
    if scorer is None:
        scorer = create_scorer(tables=data.tables)
    return rank_words(data.corpus, data.dictionary, scorer, **kwargs)
