"""Spelling based rhyme and alliteration suggestions drawn from a lexicon."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

LOGGER = logging.getLogger(__name__)

VOWELS = "aeiou"
MAX_SUGGESTIONS = 30


def rhyme_core(word: str) -> Optional[str]:
    """Return ``word`` from its first vowel onwards, or ``None`` without vowels."""

    for index, char in enumerate(word):
        if char in VOWELS:
            return word[index:]
    return None


def find_rhyming_words(word: str, lexicon: Iterable[str]) -> List[str]:
    """Words of ``lexicon`` ending with the rhyme core of ``word``."""

    core = rhyme_core(word)
    if not core:
        LOGGER.debug("No rhyme core for %r", word)
        return []
    return _collect(word, lexicon, lambda candidate: candidate.endswith(core))


def find_alliterative_words(word: str, lexicon: Iterable[str]) -> List[str]:
    """Words of ``lexicon`` sharing the first letter of ``word``."""

    if not word:
        return []
    first_letter = word[0]
    return _collect(word, lexicon, lambda candidate: candidate.startswith(first_letter))


def _collect(word: str, lexicon: Iterable[str], predicate: Callable[[str], bool]) -> List[str]:
    # dict keeps first-found order while dropping duplicates
    matches = {}
    for candidate in lexicon:
        if candidate != word and predicate(candidate):
            matches[candidate] = None
    return list(matches)[:MAX_SUGGESTIONS]
