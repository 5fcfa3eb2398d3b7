import pytest
from packages.engine import (
    LetterTableError, LetterTables, InvalidWordError, default_tables,
    histogram, is_clean_word, blanks_needed, can_play,
    base_score, bonus_for_double_letter, placement_score, letter_id,
)
from packages.engine.letters import SCRABBLE_AVAILABLE_LETTERS, SCRABBLE_LETTER_SCORES


def _abc_tables():
    # a=1, b=2, c=3, everything else 0; 10 tiles of each letter
    return LetterTables.from_arrays([1, 2, 3] + [0] * 23, [10] * 26)


# --- histogram ---
def test_histogram_counts_by_letter_id():
    h = histogram("abba")
    assert h == {letter_id("a"): 2, letter_id("b"): 2}
    assert histogram("") == {}

@pytest.mark.parametrize("word", ["Cat", "don't", "naïve", "a b", "x1"])
def test_histogram_rejects_malformed(word):
    assert is_clean_word(word) is False
    with pytest.raises(InvalidWordError):
        histogram(word)

# --- blanks ---
@pytest.mark.parametrize("word,blanks", [
    ("jazz", 1),       # one z tile
    ("pizzazz", 3),    # four z, one tile
    ("quiz", 0),
    ("dad", 1),        # a single d tile in this distribution
])
def test_blanks_needed_default_tables(word, blanks):
    assert blanks_needed(histogram(word), default_tables()) == blanks

def test_can_play_budget_two():
    t = default_tables()
    assert can_play(histogram("jazz"), t) is True
    assert can_play(histogram("pizzazz"), t) is False

def test_can_play_monotonic_in_budget():
    t = default_tables()
    h = histogram("pizzazz")
    results = [can_play(h, t, budget=b) for b in range(0, 8)]
    # once playable, stays playable for larger budgets
    first = results.index(True)
    assert first == 3 and all(results[first:])

def test_can_play_negative_budget():
    with pytest.raises(ValueError):
        can_play(histogram("a"), default_tables(), budget=-1)

# --- scores ---
def test_placement_score_abc_example():
    t = _abc_tables()
    assert base_score(histogram("abc"), t) == 6
    assert bonus_for_double_letter("abc", t) == 3
    assert placement_score("abc", t) == 18

def test_base_score_blank_letters_score_zero():
    t = default_tables()
    # j=8 + a=1 + one z tile (10); the second z is a blank
    assert base_score(histogram("jazz"), t) == 19
    assert placement_score("jazz", t) == 2 * 19 + 2 * 10

def test_base_score_zero_when_nothing_available():
    t = LetterTables.from_arrays([5] * 26, [0] * 26)
    assert base_score(histogram("zebra"), t) == 0
    assert base_score(histogram(""), default_tables()) == 0

def test_bonus_uses_head_and_tail_windows():
    t = default_tables()
    # head "qui" -> q=10, tail "z" -> z=10
    assert bonus_for_double_letter("quiz", t) == 10
    # best letter only in the tail
    assert bonus_for_double_letter("eerie" + "x", t) == 8
    assert bonus_for_double_letter("", t) == 0

def test_seven_letter_bonus():
    t = default_tables()
    # j8 u1 k5 e1 b3 o1 x8 = 27, best letter 8
    assert placement_score("jukebox", t) == 2 * 27 + 2 * 8 + 50
    # 9 letters: no 7-letter bonus; the second e is still covered by a tile
    assert placement_score("jukeboxes", t) == 2 * 29 + 2 * 8

def test_placement_score_reuses_histogram():
    t = default_tables()
    h = histogram("quiz")
    assert placement_score("quiz", t, h) == placement_score("quiz", t) == 64

# --- tables ---
def test_default_tables_match_constants():
    t = default_tables()
    assert t.scores == SCRABBLE_LETTER_SCORES
    assert t.available == SCRABBLE_AVAILABLE_LETTERS
    assert t.score_of(letter_id("q")) == 10 and t.available_of(letter_id("e")) == 12

@pytest.mark.parametrize("scores,available", [
    ([1] * 25, [1] * 26),
    ([1] * 26, [1] * 27),
    ([1] * 25 + [-1], [1] * 26),
    ([1.5] * 26, [1] * 26),
])
def test_letter_tables_rejects_bad_config(scores, available):
    with pytest.raises(LetterTableError):
        LetterTables.from_arrays(scores, available)

def test_letter_tables_from_mapping():
    letters = "abcdefghijklmnopqrstuvwxyz"
    t = LetterTables.from_mapping(dict(zip(letters, SCRABBLE_LETTER_SCORES)),
                                  dict(zip(letters, SCRABBLE_AVAILABLE_LETTERS)))
    assert t == default_tables()
    with pytest.raises(LetterTableError):
        LetterTables.from_mapping({"a": 1}, dict(zip(letters, SCRABBLE_AVAILABLE_LETTERS)))

def test_letter_tables_ragged_list():
    with pytest.raises(LetterTableError):
        LetterTables.from_arrays([[1, 2], [3]] + [1] * 24, [1] * 26)
