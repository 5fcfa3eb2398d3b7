from .validator import validate_wordlists, pretty_summary
from .io import (
    ScrabbleData,
    load_dictionary,
    load_letter_tables,
    load_scrabble_data,
    load_words,
    read_lines,
    write_lines,
)

__all__ = [
    "validate_wordlists", "pretty_summary",
    "ScrabbleData", "load_scrabble_data", "load_words", "load_dictionary", "load_letter_tables",
    "read_lines", "write_lines",
]
