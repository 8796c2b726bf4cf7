"""Poem generators built from the curated tables."""
from __future__ import annotations

import logging
import random
from typing import List, Optional

from .curated import DEFAULT_TABLES, CuratedTables, LineTemplate
from .models import NO_RHYME, RHYME, FamilyMatch, RhymePoem

LOGGER = logging.getLogger(__name__)

POEM_NOUN_COUNT = 4
FALLBACK_NOUN = "rhyme"

NOUN = "noun"
OTHER = "other"


def resolve_rhyme_family(word: str, tables: CuratedTables = DEFAULT_TABLES) -> Optional[FamilyMatch]:
    """Find the longest registered suffix of ``word`` and classify the word in it.

    Suffixes are visited in sorted order so that equally long matches resolve
    to the lexicographically first one.  ``classification`` is ``None`` when the
    suffix matches but the word is not listed in the family.
    """

    best: Optional[str] = None
    for suffix in sorted(tables.rhyme_families):
        if suffix and word.endswith(suffix):
            if best is None or len(suffix) > len(best):
                best = suffix
    if best is None:
        return None
    family = tables.rhyme_families[best]
    classification: Optional[str] = None
    if word in family.nouns:
        classification = NOUN
    elif word in family.others:
        classification = OTHER
    return FamilyMatch(suffix=best, family=family, classification=classification)


def _no_rhyme(word: str) -> RhymePoem:
    return RhymePoem(NO_RHYME, f'No rhyming poem could be generated for "{word}".')


class PoemGenerator:
    """Generate alliteration and rhyming poems.

    ``rng`` only needs a ``choice(sequence)`` method; a :class:`random.Random`
    is created when none is supplied.
    """

    def __init__(self, tables: CuratedTables = DEFAULT_TABLES, rng=None):
        self.tables = tables
        self.rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------
    # alliteration
    # ------------------------------------------------------------------
    def alliteration_poem(self, word: str, line_count: int = 4) -> str:
        letter = word[:1]
        entry = self.tables.alliteration.get(letter)
        if entry is None or entry.is_empty:
            LOGGER.debug("No curated alliteration words for %r", letter)
            return f"I don't have enough curated words for '{letter}' to write a meaningful poem yet."

        # a letter with only one populated list borrows from the other
        adjectives = entry.adjectives or entry.nouns
        nouns = entry.nouns or entry.adjectives

        def render(template: LineTemplate) -> str:
            adjective = self.rng.choice(adjectives)
            noun = self.rng.choice(nouns)
            if template.uses_seed_word:
                return template.render(adjective, noun, word)
            return template.render(adjective, noun)

        templates = self.tables.line_templates
        lines: List[str] = []
        seed_template = next(t for t in templates if t.uses_seed_word)
        lines.append(render(seed_template))

        others = [t for t in templates if not t.uses_seed_word]
        unused = list(others)
        while len(lines) < line_count and others:
            if unused:
                template = self.rng.choice(unused)
                unused.remove(template)
            else:
                template = self.rng.choice(others)
            lines.append(render(template))

        return "\n".join(line[:1].upper() + line[1:] for line in lines)

    # ------------------------------------------------------------------
    # rhymes
    # ------------------------------------------------------------------
    def rhyming_poem(self, word: str) -> RhymePoem:
        match = resolve_rhyme_family(word, self.tables)
        if match is None or match.classification is None or not match.family.nouns:
            LOGGER.debug("No curated rhyme family for %r (match=%s)", word, match)
            return _no_rhyme(word)

        themes = sorted(name for name, theme in self.tables.themes.items() if theme.is_usable)
        if not themes:
            LOGGER.debug("No usable theme to rhyme %r with", word)
            return _no_rhyme(word)

        theme_name = self.rng.choice(themes)
        theme = self.tables.themes[theme_name]
        template = self.rng.choice(theme.templates)
        adjective = self.rng.choice(theme.adjectives)
        LOGGER.debug("Rhyming %r with family %r using theme %r", word, match.suffix, theme_name)

        nouns = self._poem_nouns(word, match)
        return RhymePoem(RHYME, template(nouns, adjective))

    def _poem_nouns(self, word: str, match: FamilyMatch) -> List[str]:
        family_nouns = list(match.family.nouns)
        available = list(family_nouns)
        if match.classification == NOUN:
            nouns = [word]
        else:
            nouns = [available.pop(0) if available else FALLBACK_NOUN]
        remaining = [noun for noun in available if noun != word]
        while len(nouns) < POEM_NOUN_COUNT:
            if remaining:
                nouns.append(remaining.pop(0))
            else:
                # repeats, even adjacent ones, are accepted here
                nouns.append(self.rng.choice(family_nouns))
        return nouns


def generate_alliteration_poem(
    word: str,
    line_count: int = 4,
    tables: CuratedTables = DEFAULT_TABLES,
    rng=None,
) -> str:
    return PoemGenerator(tables, rng).alliteration_poem(word, line_count)


def generate_rhyming_poem(word: str, tables: CuratedTables = DEFAULT_TABLES, rng=None) -> RhymePoem:
    return PoemGenerator(tables, rng).rhyming_poem(word)
