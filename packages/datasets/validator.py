"""
Dataset validator for the corpus / dictionary word lists.

What this module does:
- Validate a pair of word lists: the corpus (words to rank, e.g. the
  Shakespeare word list) and the dictionary (valid Scrabble words, e.g. ospd).
- Count valid words (a–z after lowercasing), invalid lines and duplicates;
  compute SHA-256 of the raw files.
- Report how much of the corpus is found in the dictionary.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/words.shakespeare.txt",
                             "packages/datasets/data/ospd.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # non-blank lines that are not a–z words


@dataclass
class ValidationReport:
    """Top-level validation result for the (corpus, dictionary) pair."""
    corpus: FileReport
    dictionary: FileReport
    corpus_in_dictionary: int   # unique corpus words found in the dictionary
    passed: bool
    issues: List[str]           # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line; blank lines are ignored
      - lowercased, the token must be a–z only

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().lower()
            if not w:
                continue
            if w.isascii() and w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(corpus_path: str, dictionary_path: str) -> Dict:
    """
    Validate the corpus/dictionary word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, invalid-line counts
          - number of unique corpus words present in the dictionary
          - `passed` boolean (both files present, dictionary non-empty, no invalid lines)
          - `issues` (list of strings) to surface any problems

    An empty corpus is reported but does not fail validation: it simply
    ranks to an empty result.
    """
    issues: List[str] = []

    cor_p = Path(corpus_path)
    dic_p = Path(dictionary_path)

    cor_exists = cor_p.exists()
    dic_exists = dic_p.exists()

    # Early return if either file is missing
    if not cor_exists or not dic_exists:
        if not cor_exists:
            issues.append(f"corpus file not found: {corpus_path}")
        if not dic_exists:
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            corpus=FileReport(corpus_path, cor_exists, 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dic_exists, 0, "", 0, 0),
            corpus_in_dictionary=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    corpus, cor_invalid = _load_and_check(cor_p)
    dictionary, dic_invalid = _load_and_check(dic_p)
    cor_report = _file_report(cor_p, corpus, cor_invalid)
    dic_report = _file_report(dic_p, dictionary, dic_invalid)

    found = len(set(corpus) & set(dictionary))

    if cor_report.count == 0:
        issues.append("corpus file contains 0 valid words")
    if dic_report.count == 0:
        issues.append("dictionary file contains 0 valid words")
    if cor_invalid:
        issues.append(f"corpus has {cor_invalid} invalid line(s)")
    if dic_invalid:
        issues.append(f"dictionary has {dic_invalid} invalid line(s)")
    if dic_report.count != dic_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    passed = cor_invalid == 0 and dic_invalid == 0 and dic_report.count > 0

    rep = ValidationReport(
        corpus=cor_report,
        dictionary=dic_report,
        corpus_in_dictionary=found,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        corpus=29046 (uniq=29046, sha=abc123...) | dictionary=79339 (uniq=79339, sha=def456...) | in_dict=12089 | OK
    """
    a = report["corpus"]
    b = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"corpus={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| in_dict={report['corpus_in_dictionary']} | {status}"
    )
