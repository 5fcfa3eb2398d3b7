"""
Benchmark harness core primitives.

- run_once:      rank the corpus once and time it.
- run_benchmark: warmup + measured iterations (sample-time mode, milliseconds),
                 with summary statistics over the measured samples.
- Every iteration must produce the same ranking; the computation is pure,
  so a difference means a bug and is raised, not averaged away.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from packages.datasets import ScrabbleData
from packages.ranking import ScoreEntry, rank_data
from packages.scorers import BaseScorer

logger = logging.getLogger(__name__)

# 5 warmup + 5 measured iterations, sample-time mode.
DEFAULT_WARMUP = 5
DEFAULT_ITERATIONS = 5


def run_once(data: ScrabbleData, scorer: BaseScorer, **rank_kwargs) -> Dict:
    """
    Rank once.

    Returns:
        dict with keys: ranking (list[ScoreEntry]), time_ms (float)
    """
    t0 = time.perf_counter_ns()
    ranking = rank_data(data, scorer, **rank_kwargs)
    t1 = time.perf_counter_ns()
    return {"ranking": ranking, "time_ms": (t1 - t0) / 1_000_000.0}


def summarize_timings(timings_ms: List[float]) -> Dict[str, float]:
    """mean / std / min / p50 / p90 / max of the samples, rounded to microseconds."""
    arr = np.asarray(timings_ms, dtype=float)
    stats = {
        "mean": arr.mean(),
        "std": arr.std(),
        "min": arr.min(),
        "p50": np.percentile(arr, 50),
        "p90": np.percentile(arr, 90),
        "max": arr.max(),
    }
    return {k: round(float(v), 3) for k, v in stats.items()}


def run_benchmark(
        data: ScrabbleData,
        scorer: BaseScorer,
        *,
        iterations: int = DEFAULT_ITERATIONS,
        warmup: int = DEFAULT_WARMUP,
        progress: bool = False,
        **rank_kwargs,
) -> Dict:
    """
    Run `warmup` untimed-for-stats iterations, then `iterations` measured ones.

    Returns:
        dict with keys:
            ranking (list[ScoreEntry]), timings_ms (list[float]),
            stats (dict), iterations (int), warmup (int)
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1; got {iterations}")
    if warmup < 0:
        raise ValueError(f"warmup must be >= 0; got {warmup}")

    total = warmup + iterations
    steps = range(total)
    if progress:
        steps = tqdm(steps, ncols=80, desc=f"{scorer.id}", unit="it")

    reference: List[ScoreEntry] | None = None
    timings: List[float] = []
    for i in steps:
        r = run_once(data, scorer, **rank_kwargs)
        if reference is None:
            reference = r["ranking"]
        elif r["ranking"] != reference:
            raise RuntimeError(f"iteration {i + 1} produced a different ranking")

        if i >= warmup:
            timings.append(r["time_ms"])
        logger.debug(f"iteration {i + 1}/{total}: {r['time_ms']:.3f} ms"
                     f"{' (warmup)' if i < warmup else ''}")

    stats = summarize_timings(timings)
    logger.info(f"{scorer.id}: mean {stats['mean']:.3f} ms over {iterations} iteration(s)")
    return {
        "ranking": reference,
        "timings_ms": timings,
        "stats": stats,
        "iterations": iterations,
        "warmup": warmup,
    }
