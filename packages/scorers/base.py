from __future__ import annotations
from typing import Dict, Mapping, Type

from packages.engine import BLANK_BUDGET, LetterTables, can_play, default_tables

# ---- Global scorer registry ----
REGISTRY: Dict[str, Type["BaseScorer"]] = {}


def register(cls: Type["BaseScorer"]) -> Type["BaseScorer"]:
    """
    Decorator: @register on a scorer class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate scorer id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that scorers inherit ----
class BaseScorer:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.tables: LetterTables = default_tables()
        self.budget: int = BLANK_BUDGET

    def reset(self, *, tables: LetterTables, budget: int = BLANK_BUDGET) -> None:
        if budget < 0:
            raise ValueError(f"blank budget must be >= 0; got {budget}")
        self.tables = tables
        self.budget = int(budget)

    def playable(self, hist: Mapping[int, int]) -> bool:
        return can_play(hist, self.tables, self.budget)

    def score(self, word: str, hist: Mapping[int, int]) -> int:
        raise NotImplementedError("Override in subclass")
