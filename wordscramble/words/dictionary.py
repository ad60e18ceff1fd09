import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from urllib.parse import quote
import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries"


class DictionaryUnavailable(RuntimeError):
    """
    The dictionary collaborator could not give an answer.
    """


class DictionaryChecker(ABC):
    """
    Answers "is this a real word in language L?".
    Implementations must not have side effects visible to the game.
    """

    @abstractmethod
    async def is_real(self, word: str, language: str) -> bool:
        pass


class WordListDictionary(DictionaryChecker):
    """
    Checks words against an in-memory word list for a single language.
    """

    def __init__(self, words, language: str = "en"):
        self.language = language
        self.all_words = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, filepath: str | Path, language: str = "en"):
        with open(filepath, 'r', encoding='utf-8', errors='ignore') as f:
            return cls(f.read().split("\n"), language=language)

    async def is_real(self, word: str, language: str) -> bool:
        if language != self.language:
            return False
        return word.lower() in self.all_words


class RemoteDictionary(DictionaryChecker):
    """
    Looks words up in a free-dictionary style HTTP API:
    GET {base_url}/{language}/{word} answers 200 for known words and 404 otherwise.
    """

    def __init__(self, base_url: str = DEFAULT_DICTIONARY_URL, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def is_real(self, word: str, language: str) -> bool:
        url = f"{self.base_url}/{quote(language)}/{quote(word)}"
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url) as resp:
                    if resp.status == 200:
                        return True
                    if resp.status == 404:
                        return False
                    text = await resp.text()
                    logger.error(f"Dictionary API error: {resp.status} - {text}")
                    raise DictionaryUnavailable(f"Dictionary lookup failed with status {resp.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Dictionary API request for {word!r} failed: {e}")
            raise DictionaryUnavailable(f"Dictionary lookup failed: {e}") from e
