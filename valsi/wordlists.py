"""
Wordlist loading and the process-wide wordlist store.

Three closed lexicons back validation:

- cmavo: particles (structure words such as "mi", "le", "cu")
- gismu: five-letter content roots ("klama", "zarci")
- rafsi: combining forms of gismu, loaded for lujvo work but not used by
  the validator

Each source is a plain text file with one entry per line. Only the first
whitespace separated field counts, and a single leading "." (used by some
cmavo lists) is stripped.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Optional

from .config import WordlistConfig, WORDLIST_MARKER
from .errors import WordlistLoadError

logger = logging.getLogger(__name__)


def normalize_entry(line: str, marker: str = WORDLIST_MARKER) -> Optional[str]:
    """
    Reduce one wordlist line to its entry.

    Returns None for lines that carry no entry (blank, or only the marker).
    """
    fields = line.split()
    if not fields:
        return None
    word = fields[0]
    if marker and word.startswith(marker):
        word = word[len(marker):]
    return word or None


def load_wordlist(path, marker: str = WORDLIST_MARKER) -> FrozenSet[str]:
    """
    Load a wordlist file into a frozenset.

    Args:
        path: Path to the wordlist file
        marker: Leading character to strip from entries

    Returns:
        The set of normalized entries

    Raises:
        WordlistLoadError: if the file cannot be read or holds no entries
    """
    path = Path(path)
    logger.info(f"Loading wordlist from: {path}")

    words = set()
    count = 0
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                word = normalize_entry(line, marker)
                if word:
                    words.add(word)
                    count += 1
    except (OSError, UnicodeDecodeError) as e:
        raise WordlistLoadError(path, str(e)) from e

    if not words:
        raise WordlistLoadError(path, "no entries found")

    logger.info(f"Loaded {count} words ({len(words)} unique) from {path}")
    return frozenset(words)


@dataclass(frozen=True)
class Wordlists:
    """The three lexicons, immutable once built."""

    cmavo: FrozenSet[str]
    gismu: FrozenSet[str]
    rafsi: FrozenSet[str] = frozenset()

    def is_known(self, word: str) -> bool:
        """True if the word is a known cmavo or gismu (cmavo checked first)."""
        return word in self.cmavo or word in self.gismu

    @classmethod
    def from_config(cls, config: WordlistConfig) -> "Wordlists":
        return cls(
            cmavo=load_wordlist(config.cmavo_path, config.marker),
            gismu=load_wordlist(config.gismu_path, config.marker),
            rafsi=load_wordlist(config.rafsi_path, config.marker),
        )


class WordlistStore:
    """
    Loads Wordlists once, on first use, and hands out the same instance.

    Concurrent first callers block on a lock while exactly one of them loads;
    after that, get() is a plain attribute read. A failed load is kept and
    reported again, as a new WordlistLoadError, on every later call rather
    than retried.
    """

    def __init__(self, config: Optional[WordlistConfig] = None):
        self.config = config or WordlistConfig()
        self._wordlists: Optional[Wordlists] = None
        self._error: Optional[WordlistLoadError] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._wordlists is not None

    def get(self) -> Wordlists:
        wordlists = self._wordlists
        if wordlists is not None:
            return wordlists

        with self._lock:
            if self._wordlists is None and self._error is None:
                try:
                    self._wordlists = Wordlists.from_config(self.config)
                except WordlistLoadError as e:
                    logger.error(f"Wordlist initialization failed: {e}")
                    self._error = e
            if self._error is not None:
                # Each caller gets its own error; the first one is never re-raised
                error = self._error
                raise WordlistLoadError(error.path, error.reason) from error.__cause__
            return self._wordlists


_default_store: Optional[WordlistStore] = None
_default_store_lock = threading.Lock()


def get_default_store() -> WordlistStore:
    """The process-wide store, configured from the environment on first use."""
    global _default_store
    if _default_store is None:
        with _default_store_lock:
            if _default_store is None:
                _default_store = WordlistStore(WordlistConfig.from_env())
    return _default_store


def get_wordlists() -> Wordlists:
    """Wordlists from the process-wide store."""
    return get_default_store().get()
