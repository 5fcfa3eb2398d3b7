# apps/cli/run.py
"""
CLI entry point for the Shakespeare-plays-Scrabble ranking.

This script:
  1) Validates the word lists (prints counts + SHA, corpus words found in the dictionary).
  2) Loads corpus, dictionary and letter tables once, and binds the requested scorer.
  3) Runs warmup + measured iterations with an optional progress bar, prints the
     top score groups and timing stats, and writes:
       - CSV:  one row per score group
       - JSON: manifest with config, wordlist hashes, timings, ranking, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from packages.datasets import load_scrabble_data, pretty_summary, validate_wordlists
from packages.engine import BLANK_BUDGET
from packages.harness import ranking_as_dicts, run_benchmark, write_csv, write_manifest
from packages.harness.core import DEFAULT_ITERATIONS, DEFAULT_WARMUP
from packages.harness.io import git_commit_or_unknown, timestamp_id
from packages.ranking import TOP_N
from packages.scorers import DEFAULT_SCORER, create_scorer, get_scorer_ids

logger = logging.getLogger("shakespeare_scrabble")


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate datasets, run the benchmark, and write outputs.
    """
    scorer_choices = ", ".join(get_scorer_ids())

    ap = argparse.ArgumentParser(description="Rank Shakespeare's words by Scrabble score")
    ap.add_argument("--corpus", default="packages/datasets/data/words.shakespeare.txt",
                    help="path to the corpus word list (one word per line)")
    ap.add_argument("--dictionary", default="packages/datasets/data/ospd.txt",
                    help="path to the dictionary of valid Scrabble words")
    ap.add_argument("--tables", help="JSON letter tables (default: standard English Scrabble)")
    ap.add_argument("--scorer", default=DEFAULT_SCORER, help=f"scorer id (one of: {scorer_choices})")
    ap.add_argument("--blanks", type=int, default=BLANK_BUDGET, help="blank tiles available")
    ap.add_argument("--top", type=int, default=TOP_N, help="number of distinct scores to report")
    ap.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS, help="measured iterations")
    ap.add_argument("--warmup", type=int, default=DEFAULT_WARMUP, help="warmup iterations")
    ap.add_argument("--workers", type=int, help="score words in a process pool of this size")
    ap.add_argument("--strict", action="store_true",
                    help="fail on malformed dictionary words instead of skipping them")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", action=argparse.BooleanOptionalAction, default=sys.stderr.isatty(),
                    help="show a progress bar over iterations")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate wordlists and print a one-liner summary
    rep = validate_wordlists(args.corpus, args.dictionary)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning(issue)

    # 2) Load everything once; configuration errors are fatal here
    try:
        data = load_scrabble_data(args.corpus, args.dictionary, args.tables)
        scorer = create_scorer(args.scorer, tables=data.tables, budget=args.blanks)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Run; --strict surfaces malformed words here as InvalidWordError (a ValueError)
    try:
        result = run_benchmark(
            data, scorer,
            iterations=args.iterations, warmup=args.warmup, progress=args.progress,
            top=args.top, strict=args.strict, workers=args.workers,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    ranking = result["ranking"]
    for row in ranking_as_dicts(ranking):
        print(f"{row['rank']}. {row['score']:>4}  {', '.join(row['words'])}")
    s = result["stats"]
    print(f"time/iteration: mean {s['mean']:.3f} ms | p50 {s['p50']:.3f} ms | "
          f"p90 {s['p90']:.3f} ms | n={result['iterations']}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(ranking, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "scorer_id": scorer.id,
        "stats": s,
        "timings_ms": result["timings_ms"],
        "ranking": ranking_as_dicts(ranking),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
