import pytest
from packages.engine import histogram
from packages.scorers import BaseScorer, create_scorer, get_scorer_ids, register


def test_registered_scorers():
    assert get_scorer_ids() == ["letters", "placement"]

def test_create_scorer_unknown_id():
    with pytest.raises(ValueError, match="Unknown scorer id"):
        create_scorer("triple_word")

def test_create_scorer_negative_budget():
    with pytest.raises(ValueError):
        create_scorer("placement", budget=-1)

def test_register_rejects_duplicate_and_empty_ids():
    class Again(BaseScorer):
        id = "placement"

    class Nameless(BaseScorer):
        id = ""

    with pytest.raises(ValueError):
        register(Again)
    with pytest.raises(ValueError):
        register(Nameless)

@pytest.mark.parametrize("scorer_id,word,expected", [
    ("letters", "quiz", 22),
    ("placement", "quiz", 64),
    ("letters", "jazz", 19),
    ("placement", "jukebox", 120),
])
def test_scorer_scores(scorer_id, word, expected):
    s = create_scorer(scorer_id)
    h = histogram(word)
    assert s.playable(h) is True
    assert s.score(word, h) == expected

def test_scorer_playable_respects_budget():
    h = histogram("pizzazz")
    assert create_scorer(budget=2).playable(h) is False
    assert create_scorer(budget=3).playable(h) is True
