import logging
import random
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = Path(__file__).resolve().parent.parent / "data" / "start.txt"
FALLBACK_WORD = "fallback"


class ResourceUnavailable(RuntimeError):
    """
    Raised when the root-word list cannot be located or read.
    This is a packaging defect, not something a round can recover from.
    """


class WordBank:
    """
    Owns the pool of root words and picks one per round.
    """

    def __init__(self, source: str | Path | None = None, *, rng: random.Random | None = None):
        self.source = Path(source) if source else DEFAULT_SOURCE
        self.words: list[str] | None = None
        self._rng = rng or random.Random()

    @classmethod
    def from_words(cls, words: list[str], *, rng: random.Random | None = None):
        bank = cls(rng=rng)
        bank.words = _clean(words)
        return bank

    def load(self) -> list[str]:
        try:
            with open(self.source, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceUnavailable(f"Could not load {self.source}: {e}") from e

        self.words = _clean(text.split("\n"))
        logger.info("Loaded %d root words from %s", len(self.words), self.source)
        return self.words

    def pick_root(self) -> str:
        if self.words is None:
            self.load()
        if not self.words:
            return FALLBACK_WORD
        return self._rng.choice(self.words)


def _clean(lines) -> list[str]:
    # Blank lines (including the trailing newline) and multi-word entries never become root words
    words = []
    for line in lines:
        word = line.strip().lower()
        if word and len(word.split()) == 1:
            words.append(word)
    return words
