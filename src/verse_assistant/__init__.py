"""Verse assistant package for rhyme, alliteration and short poem suggestions."""

from .curated import DEFAULT_TABLES, CuratedTables
from .lexicon import Lexicon, load_wordlist, parse_wordlist
from .matchers import find_alliterative_words, find_rhyming_words
from .poems import PoemGenerator, generate_alliteration_poem, generate_rhyming_poem

__all__ = [
    "CuratedTables",
    "DEFAULT_TABLES",
    "Lexicon",
    "PoemGenerator",
    "find_alliterative_words",
    "find_rhyming_words",
    "generate_alliteration_poem",
    "generate_rhyming_poem",
    "load_wordlist",
    "parse_wordlist",
]
