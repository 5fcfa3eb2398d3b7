"""
I/O utilities for benchmark runs.

Responsibilities:
- ranking_as_dicts: ranking -> JSON-friendly list of dicts.
- write_csv:      one row per score group.
- write_manifest: dump a JSON manifest with config, hashes, timings and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from packages.ranking import ScoreEntry


def ranking_as_dicts(ranking: List[ScoreEntry]) -> List[Dict]:
    return [{"rank": i, "score": e.score, "words": list(e.words)} for i, e in enumerate(ranking, 1)]


def write_csv(ranking: List[ScoreEntry], path: str) -> str:
    """
    Serialize a ranking to CSV.

    Schema (columns):
      rank, score, num_words, words   (words are space-separated, corpus order)

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["rank", "score", "num_words", "words"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for row in ranking_as_dicts(ranking):
            w.writerow({
                "rank": row["rank"],
                "score": row["score"],
                "num_words": len(row["words"]),
                "words": " ".join(row["words"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (scorer, paths, blanks, iterations, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - stats: timing summary; ranking: ranking_as_dicts(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
