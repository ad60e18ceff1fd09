from collections import Counter
from typing import Iterable

def normalize_candidate(raw: str) -> str:
    return raw.strip().lower()

def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words

def is_possible(word: str, root: str) -> bool:
    """
    True when every letter of word can be taken from root, each letter of root
    usable at most as many times as it occurs there.
    """
    available = Counter(root)
    for letter in word:
        if available[letter] == 0:
            return False
        available[letter] -= 1
    return True

def word_score(word: str) -> int:
    return len(word)
