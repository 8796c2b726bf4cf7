"""Command line interface for the verse assistant."""
from __future__ import annotations

import argparse
import logging
import random
from functools import partial
from pathlib import Path
from typing import List, Optional

from tabulate import tabulate

from .lexicon import Lexicon, default_wordlist_path, load_nltk_words, load_wordlist
from .matchers import find_alliterative_words, find_rhyming_words
from .models import Suggestions
from .poems import PoemGenerator

LOGGER = logging.getLogger("verse_assistant")

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 50
SUGGESTION_COLUMNS = 5
DEFAULT_POEM_LINES = 4
LEXICON_LOAD_TIMEOUT = 60.0

RHYME = "rhyme"
ALLITERATION = "alliteration"

NO_MATCHES = {
    RHYME: "No common rhymes found.",
    ALLITERATION: "No common alliterations found.",
}
LEXICON_UNAVAILABLE = "Wordlist is not available or failed to load."


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def normalize_word(raw: str) -> Optional[str]:
    """Trim and lowercase ``raw``; ``None`` when the length is out of range."""

    word = raw.strip().lower()
    if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        return None
    return word


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Rhyme, alliteration and short poem helper")
    parser.add_argument("--wordlist", help="Whitespace separated wordlist used for suggestions")
    parser.add_argument("--nltk-words", action="store_true", help="Use the NLTK words corpus as the wordlist")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible poems")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    rhymes_parser = subparsers.add_parser("rhymes", help="Suggest words sharing the rhyme core of a word")
    rhymes_parser.add_argument("word", help="Seed word")

    alliteration_parser = subparsers.add_parser("alliterations", help="Suggest words sharing the first letter")
    alliteration_parser.add_argument("word", help="Seed word")

    poem_parser = subparsers.add_parser("poem", help="Write a short poem around a word")
    poem_parser.add_argument("word", help="Seed word")
    poem_parser.add_argument("--style", choices=[RHYME, ALLITERATION], default=RHYME)
    poem_parser.add_argument(
        "--lines",
        type=int,
        help="Number of lines for alliteration poems (default 4; rhyming poems always have 4)",
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    word = normalize_word(args.word)
    if word is None:
        parser.error(f"Please enter a word between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH} characters.")
    if args.command == "poem" and args.style == RHYME and args.lines is not None:
        parser.error("--lines only applies to --style alliteration")

    lexicon = _load_lexicon(args)

    if args.command == "rhymes":
        _print_suggestions(_suggest(word, lexicon, RHYME))
    elif args.command == "alliterations":
        _print_suggestions(_suggest(word, lexicon, ALLITERATION))
    elif args.command == "poem":
        _print_suggestions(_suggest(word, lexicon, args.style))
        rng = random.Random(args.seed)
        generator = PoemGenerator(rng=rng)
        if args.style == RHYME:
            result = generator.rhyming_poem(word)
            title = f'A Rhyming Poem for "{word}"' if result.is_rhyme else "No Rhymes Found"
            _print_poem(title, result.content)
        else:
            line_count = DEFAULT_POEM_LINES if args.lines is None else args.lines
            poem = generator.alliteration_poem(word, line_count=line_count)
            _print_poem(f'An Alliteration Poem on the word "{word}"', poem)


def _load_lexicon(args: argparse.Namespace) -> Lexicon:
    lexicon = Lexicon()
    if args.nltk_words:
        loader = load_nltk_words
    else:
        path = Path(args.wordlist) if args.wordlist else default_wordlist_path()
        LOGGER.debug("Reading wordlist from %s", path)
        loader = partial(load_wordlist, path)
    lexicon.load_in_background(loader)
    if not lexicon.wait(LEXICON_LOAD_TIMEOUT):
        LOGGER.error("Wordlist still loading after %s seconds", LEXICON_LOAD_TIMEOUT)
    return lexicon


def _suggest(word: str, lexicon: Lexicon, kind: str) -> Suggestions:
    if not lexicon.available:
        return Suggestions(word=word, kind=kind, lexicon_available=False)
    finder = find_rhyming_words if kind == RHYME else find_alliterative_words
    return Suggestions(word=word, kind=kind, words=finder(word, lexicon.words))


def _print_suggestions(suggestions: Suggestions) -> None:
    if not suggestions.lexicon_available:
        print(LEXICON_UNAVAILABLE)
        return
    print(f'Suggestions for "{suggestions.word}"')
    if not suggestions.words:
        print(NO_MATCHES[suggestions.kind])
        return
    print(tabulate(_rows(suggestions.words, SUGGESTION_COLUMNS), tablefmt="plain"))


def _rows(words: List[str], width: int) -> List[List[str]]:
    return [words[start : start + width] for start in range(0, len(words), width)]


def _print_poem(title: str, content: str) -> None:
    print()
    print(title)
    print("-" * len(title))
    print(content)


if __name__ == "__main__":  # pragma: no cover
    main()
