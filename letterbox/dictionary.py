from __future__ import annotations
import logging
import threading
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable, List, Tuple
import requests
from .config import LetterBoxSettings
from .errors import DictionaryLoadError

logger = logging.getLogger(__name__)

def split_words(text: str) -> List[str]:
    # One word per line; blank lines and surrounding whitespace dropped
    return [line.strip() for line in text.splitlines() if line.strip()]

def fetch_word_list(url: str, timeout: float = 30.0) -> str:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise DictionaryLoadError(f"Failed to fetch dictionary: {e}") from e

    if not response.ok:
        raise DictionaryLoadError(f"Failed to fetch dictionary: {response.status_code}")
    return response.text

def read_word_list(path: str) -> str:
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise DictionaryLoadError(f"Word list file not found: {word_list_path}")
    try:
        return word_list_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DictionaryLoadError(f"Could not read word list {word_list_path}: {e}") from e

class DictionaryState(Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"

class DictionaryProvider:
    """
    Fetch-once cache around a word list source.

    UNLOADED -> LOADED on the first successful fetch; the words are then reused
    for the life of the provider. A failed fetch raises DictionaryLoadError and
    leaves the provider UNLOADED, so the next call tries again.
    """

    def __init__(self, fetch: Callable[[], str]) -> None:
        self._fetch = fetch
        self._state = DictionaryState.UNLOADED
        self._words: Tuple[str, ...] = ()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: LetterBoxSettings) -> "DictionaryProvider":
        if settings.word_list_path:
            return cls(partial(read_word_list, settings.word_list_path))
        return cls(partial(fetch_word_list, settings.dictionary_url, settings.request_timeout))

    @property
    def state(self) -> DictionaryState:
        return self._state

    def words(self) -> Tuple[str, ...]:
        if self._state is DictionaryState.LOADED:
            return self._words

        # Concurrent callers wait here for the in-flight fetch instead of starting their own
        with self._lock:
            if self._state is DictionaryState.LOADED:
                return self._words

            logger.info("Fetching dictionary...")
            text = self._fetch()
            self._words = tuple(split_words(text))
            self._state = DictionaryState.LOADED
            logger.info("Dictionary loaded: %d words", len(self._words))
            return self._words
