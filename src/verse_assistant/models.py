"""Dataclasses describing generator and matcher results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .curated import RhymeFamily

RHYME = "rhyme"
NO_RHYME = "no_rhyme"


@dataclass(frozen=True)
class RhymePoem:
    type: str
    content: str

    @property
    def is_rhyme(self) -> bool:
        return self.type == RHYME


@dataclass(frozen=True)
class FamilyMatch:
    suffix: str
    family: RhymeFamily
    classification: Optional[str] = None


@dataclass
class Suggestions:
    word: str
    kind: str
    words: List[str] = field(default_factory=list)
    lexicon_available: bool = True
