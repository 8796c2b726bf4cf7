from __future__ import annotations

import _bootstrap  # noqa: F401
import pytest


class FirstChoice:
    """Deterministic stand-in for :class:`random.Random` picking the first item."""

    def __init__(self) -> None:
        self.calls = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[0]


class LastChoice(FirstChoice):
    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[-1]


@pytest.fixture()
def first_choice():
    return FirstChoice()


@pytest.fixture()
def last_choice():
    return LastChoice()


@pytest.fixture()
def sample_lexicon():
    return (
        "cat",
        "bat",
        "hat",
        "combat",
        "that",
        "bat",
        "cattle",
        "catalog",
        "dog",
        "shadow",
        "meadow",
        "window",
        "shade",
        "sharp",
        "shadow",
        "moon",
        "spoon",
    )


@pytest.fixture()
def wordlist_file(tmp_path, sample_lexicon):
    path = tmp_path / "wordlist.txt"
    path.write_text("\n".join(sample_lexicon) + "\nA  x\n  Moon\n", encoding="utf8")
    return path
