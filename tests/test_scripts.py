from pathlib import Path

from script.fetch_corpus import extract_words
from script.normalize_wordlist import normalize


def test_extract_words_lowercase_unique_in_order():
    text = "To be, or not to be: that is the question. O Romeo!"
    assert extract_words(text) == ["to", "be", "or", "not", "that", "is", "the", "question", "romeo"]
    assert extract_words(text, min_len=1)[-2:] == ["o", "romeo"]


def test_normalize_drops_bad_lines_and_duplicates():
    words, dropped = normalize(["Art", "  thou ", "", "e'er", "art", "JAZZ"])
    assert words == ["art", "thou", "jazz"]
    assert dropped == 1
