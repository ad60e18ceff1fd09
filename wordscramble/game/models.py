import os
from enum import Enum
from pydantic import BaseModel, ConfigDict
from wordscramble.words.dictionary import DEFAULT_DICTIONARY_URL

class GameSettings(BaseModel):
    language: str = "en"                     # Language passed to the dictionary checker
    word_list: str | None = None             # Root-word list; bundled list when unset
    dictionary_provider: str = "remote"      # "remote" or "wordlist"
    dictionary_path: str | None = None       # Word file for the "wordlist" provider
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    dictionary_timeout: float = 5.0          # Seconds

    @classmethod
    def from_env(cls, **overrides):
        """
        Reads WORDSCRAMBLE_* environment variables; explicit overrides win.
        """
        env = {
            "language": os.environ.get("WORDSCRAMBLE_LANGUAGE"),
            "word_list": os.environ.get("WORDSCRAMBLE_WORD_LIST"),
            "dictionary_provider": os.environ.get("WORDSCRAMBLE_DICTIONARY"),
            "dictionary_path": os.environ.get("WORDSCRAMBLE_DICTIONARY_PATH"),
            "dictionary_url": os.environ.get("WORDSCRAMBLE_DICTIONARY_URL"),
            "dictionary_timeout": os.environ.get("WORDSCRAMBLE_DICTIONARY_TIMEOUT"),
        }
        env.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate({k: v for k, v in env.items() if v is not None})

class SessionStatus(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"

class RejectionKind(str, Enum):
    DUPLICATE_WORD = "duplicate_word"
    INFEASIBLE_SPELLING = "infeasible_spelling"
    UNKNOWN_WORD = "unknown_word"

class RoundState(BaseModel):
    model_config = ConfigDict(frozen=True)

    root_word: str
    used_words: tuple[str, ...] = ()   # Most recent first
    score: int = 0

class Accepted(BaseModel):
    word: str
    new_score: int

class Rejected(BaseModel):
    kind: RejectionKind
    attempted_word: str
    root_word: str | None = None   # Only set for INFEASIBLE_SPELLING

    @property
    def title(self) -> str:
        if self.kind == RejectionKind.DUPLICATE_WORD:
            return "Word used already"
        if self.kind == RejectionKind.INFEASIBLE_SPELLING:
            return "Word not possible"
        return "Word not recognized"

    @property
    def message(self) -> str:
        if self.kind == RejectionKind.DUPLICATE_WORD:
            return "Be more original!"
        if self.kind == RejectionKind.INFEASIBLE_SPELLING:
            return f"You can't spell that word from '{self.root_word}'!"
        return "Make up words are not accepted!"

class NoOp(BaseModel):
    pass

SubmitResult = Accepted | Rejected | NoOp
