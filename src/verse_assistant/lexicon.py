"""Wordlist loading for rhyme and alliteration suggestions."""
from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Tuple

import nltk
from tqdm import tqdm

LOGGER = logging.getLogger(__name__)

WORDLIST_ENV = "VERSE_ASSISTANT_WORDLIST"
WORDLIST_NAME = "wordlist.txt"
MIN_LEXICON_WORD_LENGTH = 2


def parse_wordlist(text: str) -> Tuple[str, ...]:
    """Split whitespace delimited text into lowercase words of two or more letters."""

    return _normalize(text.split())


def _normalize(words: Iterable[str]) -> Tuple[str, ...]:
    cleaned = (word.strip().lower() for word in words)
    return tuple(word for word in cleaned if len(word) >= MIN_LEXICON_WORD_LENGTH)


def load_wordlist(path: Path | str) -> Tuple[str, ...]:
    """Read a wordlist file, returning an empty tuple if it cannot be read."""

    path = Path(path)
    words = []
    try:
        with path.open("r", encoding="utf8", errors="replace") as handle:
            for line in tqdm(handle, desc="Wordlist", unit=" lines", leave=False):
                words.extend(line.split())
    except OSError as exc:
        LOGGER.error("Failed to load wordlist %s: %s", path, exc)
        return ()
    lexicon = _normalize(words)
    LOGGER.info("Wordlist loaded with %s words", len(lexicon))
    return lexicon


def ensure_nltk_words() -> None:
    """Ensure the NLTK ``words`` corpus is available."""

    try:
        nltk.data.find("corpora/words")
    except LookupError:
        LOGGER.info("Downloading words corpus via NLTK…")
        nltk.download("words", quiet=True)


def load_nltk_words() -> Tuple[str, ...]:
    """Use the NLTK ``words`` corpus as the lexicon, or ``()`` if unavailable."""

    try:
        ensure_nltk_words()
        from nltk.corpus import words as words_corpus

        lexicon = _normalize(words_corpus.words())
    except (LookupError, OSError) as exc:
        LOGGER.error("Failed to load NLTK words corpus: %s", exc)
        return ()
    LOGGER.info("Wordlist loaded with %s words", len(lexicon))
    return lexicon


def default_wordlist_path() -> Path:
    """Resolve where the wordlist is expected to live."""

    override = os.environ.get(WORDLIST_ENV)
    if override:
        return Path(override).expanduser()
    local = Path.cwd() / WORDLIST_NAME
    if local.exists():
        return local
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        base = Path(data_home)
    else:
        base = Path.home() / ".local" / "share"
    return base / "verse_assistant" / WORDLIST_NAME


class Lexicon:
    """Read-only word sequence that may be filled in from a background thread.

    Until a load finishes, or when it fails, :attr:`words` is empty and the
    matchers return no suggestions.
    """

    def __init__(self, words: Sequence[str] = ()):
        self._words: Tuple[str, ...] = tuple(words)
        self._thread: Optional[threading.Thread] = None

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def available(self) -> bool:
        return bool(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def load(self, loader: Callable[[], Sequence[str]]) -> None:
        """Run ``loader`` and keep its words; failures leave the lexicon empty."""

        try:
            words = tuple(loader())
        except Exception:
            LOGGER.exception("Wordlist loader failed")
            words = ()
        self._words = words

    def load_in_background(self, loader: Callable[[], Sequence[str]]) -> threading.Thread:
        """Start ``loader`` on a daemon thread and return the thread."""

        thread = threading.Thread(target=self.load, args=(loader,), name="lexicon-loader", daemon=True)
        self._thread = thread
        thread.start()
        return thread

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for a background load; ``True`` once no load is running."""

        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()
