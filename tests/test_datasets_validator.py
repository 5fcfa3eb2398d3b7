import json
from pathlib import Path

import pytest
from packages.datasets import (
    load_letter_tables, load_scrabble_data, load_words, pretty_summary, validate_wordlists,
)
from packages.engine import LetterTableError, default_tables
from packages.engine.letters import SCRABBLE_AVAILABLE_LETTERS, SCRABBLE_LETTER_SCORES


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    corpus = tmp_path / "words.shakespeare.txt"
    dic = tmp_path / "ospd.txt"
    _write(corpus, ["thou", "art", "quiz", "methinks"])
    _write(dic, ["art", "quiz", "thou", "jazz"])

    rep = validate_wordlists(str(corpus), str(dic))
    assert rep["passed"] is True
    assert rep["corpus_in_dictionary"] == 3
    s = pretty_summary(rep)
    assert "in_dict=3" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    corpus = tmp_path / "corpus.txt"
    dic = tmp_path / "dict.txt"
    corpus.write_text("thou\ne'er\n\nart\n", encoding="utf-8")
    dic.write_text("art\nart\n", encoding="utf-8")

    rep = validate_wordlists(str(corpus), str(dic))
    assert rep["passed"] is False
    assert rep["corpus"]["invalid_lines"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    dic = tmp_path / "dict.txt"
    _write(dic, ["art"])
    rep = validate_wordlists(str(tmp_path / "nope.txt"), str(dic))
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_scrabble_data(tmp_path: Path):
    corpus = tmp_path / "corpus.txt"
    dic = tmp_path / "dict.txt"
    corpus.write_text("Thou\nart\n\nthou\n", encoding="utf-8")
    _write(dic, ["ART", "thou"])

    assert load_words(corpus) == ["thou", "art", "thou"]
    data = load_scrabble_data(corpus, dic)
    assert data.corpus == ("thou", "art")
    assert data.dictionary == frozenset({"art", "thou"})
    assert data.tables == default_tables()


def test_load_letter_tables_lists_and_mappings(tmp_path: Path):
    letters = "abcdefghijklmnopqrstuvwxyz"
    as_lists = tmp_path / "lists.json"
    as_lists.write_text(json.dumps({"scores": list(SCRABBLE_LETTER_SCORES),
                                    "available": list(SCRABBLE_AVAILABLE_LETTERS)}), encoding="utf-8")
    as_maps = tmp_path / "maps.json"
    as_maps.write_text(json.dumps({"scores": dict(zip(letters, SCRABBLE_LETTER_SCORES)),
                                   "available": dict(zip(letters, SCRABBLE_AVAILABLE_LETTERS))}),
                       encoding="utf-8")
    assert load_letter_tables(as_lists) == default_tables()
    assert load_letter_tables(as_maps) == default_tables()


@pytest.mark.parametrize("content", [
    "not json",
    json.dumps({"scores": [1] * 26}),
    json.dumps({"scores": [1] * 26, "available": [1] * 25}),
    json.dumps({"scores": [1] * 26, "available": {"a": 1}}),
])
def test_load_letter_tables_rejects_bad_files(tmp_path: Path, content):
    p = tmp_path / "tables.json"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(LetterTableError):
        load_letter_tables(p)


def test_load_letter_tables_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_letter_tables(tmp_path / "missing.json")


def test_load_letter_tables_ragged_json(tmp_path: Path):
    p = tmp_path / "tables.json"
    p.write_text(json.dumps({"scores": [[1, 2], [3]] + [1] * 24, "available": [1] * 26}),
                 encoding="utf-8")
    with pytest.raises(LetterTableError):
        load_letter_tables(p)
