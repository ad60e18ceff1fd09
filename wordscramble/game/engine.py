import logging
from wordscramble.game.models import (
    Accepted,
    GameSettings,
    NoOp,
    Rejected,
    RejectionKind,
    RoundState,
    SessionStatus,
    SubmitResult,
)
from wordscramble.game.rules import is_original, is_possible, normalize_candidate, word_score
from wordscramble.words.bank import WordBank
from wordscramble.words.dictionary import DictionaryChecker

logger = logging.getLogger(__name__)

class SessionNotActive(RuntimeError):
    """
    Raised when a word is submitted before any round has started.
    """

class GameSession:
    """
    Owns the state of the current round and validates submitted words.
    """

    def __init__(self, word_bank: WordBank, dictionary: DictionaryChecker, settings: GameSettings | None = None):
        self.word_bank = word_bank
        self.dictionary = dictionary
        self.settings = settings or GameSettings()
        self._round: RoundState | None = None

    @property
    def status(self) -> SessionStatus:
        return SessionStatus.IDLE if self._round is None else SessionStatus.ACTIVE

    @property
    def state(self) -> RoundState | None:
        return self._round

    @property
    def root_word(self) -> str | None:
        return self._round.root_word if self._round else None

    @property
    def used_words(self) -> tuple[str, ...]:
        return self._round.used_words if self._round else ()

    @property
    def score(self) -> int:
        return self._round.score if self._round else 0

    def start_round(self) -> RoundState:
        # Replaces root word, used words and score in one assignment
        self._round = RoundState(root_word=self.word_bank.pick_root())
        logger.info("Started round with root word %r", self._round.root_word)
        return self._round

    async def submit(self, raw_candidate: str) -> SubmitResult:
        if self._round is None:
            raise SessionNotActive("Call start_round() before submitting words")

        word = normalize_candidate(raw_candidate)
        if not word:
            return NoOp()

        current = self._round

        # Checks run in this order and stop at the first failure
        if not is_original(word, current.used_words):
            return Rejected(kind=RejectionKind.DUPLICATE_WORD, attempted_word=word)

        if not is_possible(word, current.root_word):
            return Rejected(
                kind=RejectionKind.INFEASIBLE_SPELLING,
                attempted_word=word,
                root_word=current.root_word
            )

        if not await self.dictionary.is_real(word, self.settings.language):
            return Rejected(kind=RejectionKind.UNKNOWN_WORD, attempted_word=word)

        self._round = RoundState(
            root_word=current.root_word,
            used_words=(word,) + current.used_words,
            score=current.score + word_score(word)
        )
        return Accepted(word=word, new_score=self._round.score)
