from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

from packages.engine import LetterTableError, LetterTables, default_tables


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    Order and duplicates are kept.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def load_dictionary(p: Path | str) -> FrozenSet[str]:
    return frozenset(load_words(p))


def load_letter_tables(p: Path | str) -> LetterTables:
    """
    Load letter tables from JSON:

        {"scores": [1, 3, ...], "available": [9, 2, ...]}

    Each table may also be a mapping {"a": 1, "b": 3, ...} covering all 26 letters.
    Raises FileNotFoundError for a missing file and LetterTableError for bad content.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LetterTableError(f"{p}: invalid JSON ({e})") from e

    if not isinstance(raw, dict) or "scores" not in raw or "available" not in raw:
        raise LetterTableError(f"{p}: expected an object with 'scores' and 'available'")
    scores, available = raw["scores"], raw["available"]
    if isinstance(scores, dict) and isinstance(available, dict):
        return LetterTables.from_mapping(scores, available)
    if isinstance(scores, list) and isinstance(available, list):
        return LetterTables.from_arrays(scores, available)
    raise LetterTableError(f"{p}: 'scores' and 'available' must both be lists or both be objects")


@dataclass(frozen=True)
class ScrabbleData:
    """
    Read-only inputs of a ranking run, loaded once before any scoring.
    The corpus holds each word once, in first-seen order.
    """
    corpus: Tuple[str, ...]
    dictionary: FrozenSet[str]
    tables: LetterTables


def load_scrabble_data(corpus_path: Path | str, dictionary_path: Path | str,
                       tables_path: Path | str | None = None) -> ScrabbleData:
    tables = load_letter_tables(tables_path) if tables_path else default_tables()
    return ScrabbleData(
        corpus=tuple(dict.fromkeys(load_words(corpus_path))),
        dictionary=load_dictionary(dictionary_path),
        tables=tables,
    )
