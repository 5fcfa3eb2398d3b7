from .aggregator import TOP_N, ScoreEntry, group_by_score, top_n
from .pipeline import evaluate_word, rank_data, rank_words

__all__ = ["TOP_N", "ScoreEntry", "group_by_score", "top_n", "evaluate_word", "rank_data", "rank_words"]
