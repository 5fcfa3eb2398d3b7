from __future__ import annotations
from typing import List
from .base import BaseScorer, REGISTRY, register

from packages.engine import BLANK_BUDGET, LetterTables, default_tables

from . import letter_total  # noqa: F401
from . import board_placement  # noqa: F401

DEFAULT_SCORER = "placement"


def create_scorer(scorer_id: str = DEFAULT_SCORER, *, tables: LetterTables | None = None,
                  budget: int = BLANK_BUDGET) -> BaseScorer:
    """
    Factory: instantiate a registered scorer by id and bind it to the tables.
    """
    try:
        cls = REGISTRY[scorer_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown scorer id: {scorer_id}. Available: {sorted(REGISTRY.keys())}") from e
    scorer = cls()
    scorer.reset(tables=tables if tables is not None else default_tables(), budget=budget)
    return scorer


def get_scorer_ids() -> List[str]:
    """
    Return all registered scorer ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseScorer", "REGISTRY", "register", "create_scorer", "get_scorer_ids", "DEFAULT_SCORER"]
