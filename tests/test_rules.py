import pytest
from wordscramble.game.rules import is_original, is_possible, normalize_candidate, word_score

@pytest.mark.parametrize("word, expected", [
    ("ab", True),
    ("aabb", True),
    ("bbaa", True),
    ("aaabb", False),
    ("abc", False),
])
def test_is_possible_counts_letters(word, expected):
    assert is_possible(word, "aabb") is expected

def test_root_is_possible_from_itself():
    assert is_possible("garden", "garden")

def test_is_possible_is_case_sensitive():
    # Candidates are normalized before this check
    assert not is_possible("Dean", "garden")

def test_normalize_candidate():
    assert normalize_candidate("  CaT \n") == "cat"
    assert normalize_candidate(" \t ") == ""

def test_is_original():
    assert is_original("cat", ("dog", "act"))
    assert not is_original("cat", ("dog", "cat"))

def test_word_score_is_length():
    assert word_score("dean") == 4
