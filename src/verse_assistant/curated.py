"""Curated vocabulary and templates used by the poem generators."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class AlliterationEntry:
    adjectives: Tuple[str, ...] = ()
    nouns: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.adjectives and not self.nouns


@dataclass(frozen=True)
class RhymeFamily:
    """Words sharing a spelled rhyme suffix, split into nouns and the rest."""

    nouns: Tuple[str, ...] = ()
    others: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LineTemplate:
    """A single alliteration line.

    ``text`` is a :meth:`str.format` pattern with ``{adj}``, ``{noun}`` and
    ``{Noun}`` (capitalized noun) fields.  Templates flagged with
    ``uses_seed_word`` also receive the caller's word as ``{word}``.
    """

    text: str
    uses_seed_word: bool = False

    def render(self, adjective: str, noun: str, seed_word: Optional[str] = None) -> str:
        if self.uses_seed_word and seed_word is None:
            raise ValueError("Seed word template rendered without a seed word")
        return self.text.format(
            adj=adjective,
            noun=noun,
            Noun=noun[:1].upper() + noun[1:],
            word=seed_word,
        )


@dataclass(frozen=True)
class ThemeTemplate:
    """Four-line poem pattern filled with ``{n0}``..``{n3}`` and ``{adj}``."""

    text: str
    noun_count: int = 4

    def __call__(self, nouns: Sequence[str], adjective: str) -> str:
        if len(nouns) < self.noun_count:
            raise ValueError(f"Template needs {self.noun_count} nouns, got {len(nouns)}")
        fields = {f"n{index}": noun for index, noun in enumerate(nouns[: self.noun_count])}
        return self.text.format(adj=adjective, **fields)


@dataclass(frozen=True)
class Theme:
    adjectives: Tuple[str, ...]
    templates: Tuple[ThemeTemplate, ...]

    @property
    def is_usable(self) -> bool:
        return bool(self.adjectives) and bool(self.templates)


ALLITERATION_LINE_TEMPLATES: Tuple[LineTemplate, ...] = (
    LineTemplate("The {adj} {noun} in the twilight fades."),
    LineTemplate("A distant echo of the {word} made.", uses_seed_word=True),
    LineTemplate("{Noun}s call through {adj} glades."),
    LineTemplate("A world of {adj} wonders and of passing shades."),
)


@dataclass(frozen=True)
class CuratedTables:
    """Read-only bundle of every curated table a generator needs.

    ``line_templates`` must hold exactly one template using the seed word.
    """

    alliteration: Mapping[str, AlliterationEntry]
    rhyme_families: Mapping[str, RhymeFamily]
    themes: Mapping[str, Theme]
    line_templates: Tuple[LineTemplate, ...] = ALLITERATION_LINE_TEMPLATES

    def __post_init__(self) -> None:
        seed_templates = [t for t in self.line_templates if t.uses_seed_word]
        if len(seed_templates) != 1:
            raise ValueError(
                f"Exactly one line template must use the seed word, got {len(seed_templates)}"
            )


# ---------------------------------------------------------------------------
# Alliteration words, keyed by first letter
# ---------------------------------------------------------------------------

_ALLITERATION: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "a": (
        ("ancient", "amber", "alone", "ashen", "awful", "azure", "absent"),
        ("autumn", "air", "arrow", "ark", "ash", "abyss", "age", "anchor"),
    ),
    "b": (
        ("broken", "burning", "brilliant", "bitter", "blue", "brave", "boundless"),
        ("beauty", "brook", "breath", "blood", "battle", "breeze", "branch"),
    ),
    "c": (
        ("crystal", "cold", "crimson", "calm", "ceaseless", "cosmic", "cruel"),
        ("chaos", "cloud", "candle", "circle", "cry", "cinder", "crown", "curse"),
    ),
    "d": (
        ("dark", "distant", "dreaming", "dying", "deep", "divine", "dreadful"),
        ("darkness", "day", "dawn", "death", "dew", "dust", "door", "dream"),
    ),
    "e": (
        ("endless", "empty", "eternal", "ebon", "echoing", "ethereal"),
        ("echo", "ember", "earth", "edge", "eternity", "evening", "eye"),
    ),
    "f": (
        ("fearless", "fragile", "flowing", "fluttering", "fiery", "flickering", "faint", "fast", "forgotten"),
        ("fire", "flame", "forest", "flower", "field", "fate", "friend", "father", "feather", "frost"),
    ),
    "g": (
        ("golden", "gentle", "graceful", "green", "glassy", "grand", "gray"),
        ("ghost", "garden", "gate", "grace", "gloom", "gleam", "glory", "god"),
    ),
    "h": (
        ("hidden", "hollow", "haunting", "holy", "heavy", "humble", "harsh"),
        ("heart", "heaven", "hell", "hope", "horizon", "hush", "hand"),
    ),
    "i": (
        ("infinite", "icy", "ivory", "idle", "immortal", "inner"),
        ("ice", "illusion", "isle", "iron", "ink", "infinity"),
    ),
    "j": (
        ("jaded", "joyful", "jagged", "joyous"),
        ("jewel", "journey", "joy", "judgment", "jest"),
    ),
    "k": (
        ("keen", "kind", "kingly", "knotted"),
        ("king", "kingdom", "key", "knowledge", "knife"),
    ),
    "l": (
        ("lonely", "luminous", "lasting", "lost", "light", "living", "little"),
        ("light", "life", "love", "land", "leaf", "lore", "lament", "liar"),
    ),
    "m": (
        ("misty", "mad", "magic", "moonlit", "mournful", "mortal", "mighty"),
        ("mist", "moon", "mother", "memory", "mind", "mirth", "monster"),
    ),
    "n": (
        ("naked", "nameless", "narrow", "new", "noble", "northern"),
        ("night", "north", "nothing", "name", "needle", "nest"),
    ),
    "o": (
        ("old", "open", "ornate", "ominous", "other"),
        ("ocean", "oath", "oracle", "orb", "omen"),
    ),
    "p": (
        ("pale", "patient", "perfect", "passing", "peaceful", "pure"),
        ("pain", "peace", "path", "phantom", "power", "prayer", "pride"),
    ),
    "q": (
        ("quiet", "quaking", "quivering"),
        ("queen", "quest", "quill", "quarry"),
    ),
    "r": (
        ("radiant", "resolute", "resonant", "rising", "rushing", "red", "restless", "rare"),
        ("river", "road", "rain", "rose", "ray", "rhyme", "reflection", "ruin"),
    ),
    "s": (
        ("silent", "shimmering", "sparkling", "soft", "sacred", "soaring", "swift", "strong", "summer's"),
        ("sun", "star", "shadow", "silence", "sea", "sky", "soul", "stone", "stream", "song"),
    ),
    "t": (
        ("timeless", "trembling", "terrible", "true", "twisted", "tender"),
        ("time", "tear", "thunder", "thought", "throne", "tide", "tongue"),
    ),
    "u": (
        ("unseen", "undying", "unbroken", "unholy", "utter"),
        ("universe", "unity", "urn", "undertow"),
    ),
    "v": (
        ("vast", "veiled", "violent", "vital", "vivid"),
        ("void", "voice", "valor", "veil", "vision", "vow"),
    ),
    "w": (
        ("wandering", "whispering", "wild", "warm", "watchful", "weary"),
        ("wind", "water", "world", "winter", "wave", "willow", "wonder", "word"),
    ),
    "x": ((), ()),
    "y": (
        ("yellow", "yearning", "young", "yielding"),
        ("youth", "year", "yesterday", "yoke"),
    ),
    "z": (
        ("zealous", "zodiac"),
        ("zenith", "zephyr", "zone"),
    ),
}

# ---------------------------------------------------------------------------
# Rhyme families, keyed by spelled suffix: (nouns, others)
# ---------------------------------------------------------------------------

_RHYME_FAMILIES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "ace": (("face", "grace", "place", "race", "space"), ()),
    "ade": (("grade", "shade", "trade"), ("fade", "made")),
    "ain": (("brain", "chain", "gain", "pain", "rain", "stain", "train"), ()),
    "ake": (("cake", "lake", "sake"), ("bake", "fake", "make", "take")),
    "ale": (("sale", "scale", "tale", "whale"), ("pale",)),
    "ame": (("flame", "game", "name", "shame"), ("blame", "same")),
    "ank": (("bank", "rank"), ("blank", "drank", "thank")),
    "ash": (("cash", "clash", "crash", "flash", "trash"), ()),
    "at": (("bat", "cat", "hat", "mat", "rat"), ("fat", "sat", "that")),
    "ate": (("date", "fate", "gate", "hate", "rate", "state"), ("great", "late")),
    "ay": (("day", "hay", "way"), ("gray", "may", "play", "say", "stay")),
    "eat": (("feat", "heat", "seat", "wheat"), ("beat", "neat", "treat")),
    "ed": (("bed",), ("dead", "fed", "led", "red", "said")),
    "eep": (("jeep",), ("cheap", "creep", "deep", "keep", "sleep", "weep")),
    "eet": (("feet", "sheet", "street"), ("greet", "meet", "sweet")),
    "ell": (("bell", "cell", "hell"), ("dwell", "fell", "sell", "tell", "well")),
    "end": (("friend", "trend"), ("bend", "lend", "send", "spend")),
    "ent": (("cent", "rent", "tent"), ("bent", "sent", "went")),
    "est": (("guest", "nest", "test", "quest"), ("best", "rest", "west")),
    "ice": (("dice", "ice", "mice", "price", "rice", "spice"), ("nice",)),
    "ick": (("brick", "chick"), ("kick", "pick", "quick", "sick", "thick")),
    "ide": (("bride", "pride", "side", "tide"), ("hide", "ride", "wide")),
    "ife": (("knife", "life", "strife", "wife"), ()),
    "ight": (("fight", "flight", "knight", "light", "might", "night", "sight"), ("bright", "right")),
    "ike": (("bike", "mike", "spike"), ("hike", "like", "strike")),
    "ill": (("bill", "hill"), ("chill", "fill", "kill", "still", "will")),
    "in": (("chin", "grin", "pin", "sin"), ("begin", "spin", "thin", "win")),
    "ine": (("brine", "line", "mine", "nine", "spine", "wine"), ("dine", "fine", "shine")),
    "ing": (("king", "ring", "spring", "sting", "swing", "thing"), ("bring", "sing")),
    "ink": (("drink", "link"), ("pink", "shrink", "sink", "think")),
    "ip": (("chip", "dip", "grip", "hip", "lip", "rip", "ship", "tip"), ()),
    "oat": (("boat", "coat", "float", "goat", "moat"), ()),
    "ock": (("block", "clock", "dock", "flock", "rock", "sock"), ("knock",)),
    "oil": (("coil", "foil", "soil"), ("boil", "spoil")),
    "oke": (("joke",), ("broke", "choke", "poke", "smoke", "spoke", "woke")),
    "ook": (("book", "cook", "hook"), ("look", "shook", "took")),
    "oom": (("bloom", "boom", "doom", "gloom", "room", "zoom"), ()),
    "oon": (("moon", "noon", "spoon"), ("soon", "tune")),
    "ore": (("score", "shore"), ("more", "pour", "roar", "sore", "tore")),
    "orn": (("corn", "horn", "thorn"), ("born", "morn", "scorn")),
    "ound": (("ground", "hound", "sound", "wound"), ("bound", "found", "round")),
    "out": (("gout", "pout", "sprout"), ("about", "doubt", "shout")),
    "ow": (("bow", "brow", "cow", "plow", "vow"), ("allow", "how", "now")),
    "own": (("clown", "crown", "down", "gown", "town"), ("brown", "drown")),
    "uck": (("buck", "duck", "truck"), ("luck", "pluck", "stuck")),
    "ug": (("bug", "hug", "jug", "mug", "rug"), ("dug", "tug")),
    "ump": (("bump", "dump", "grump", "jump", "lump", "pump"), ()),
    "unk": (("bunk", "chunk", "junk", "trunk"), ("drunk", "sunk")),
    "ush": (("blush", "brush", "crush"), ("flush", "hush", "rush")),
}

# ---------------------------------------------------------------------------
# Themes for rhyming poems
# ---------------------------------------------------------------------------

_THEMES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "nature": (
        ("gentle", "green", "wild", "flowing", "silent", "golden"),
        (
            "The {adj} forest knows the sleeping {n0},\n"
            "A secret kept where winding rivers {n1}.\n"
            "The wind speaks softly of a coming {n2},\n"
            "Beneath the sun, a new day finds its {n3}.",
        ),
    ),
    "night": (
        ("lonely", "dark", "moonlit", "silent", "distant", "hollow"),
        (
            "Upon the roof, a {adj} {n0},\n"
            "Chasing a moth in a fleeting {n1}.\n"
            "The stars bear witness to its silent {n2},\n"
            "And dreams take hold to banish all the {n3}.",
        ),
    ),
    "emotion": (
        ("bright", "endless", "golden", "forgotten", "gentle", "bitter"),
        (
            "My heart recalls a {adj} {n0},\n"
            "A bittersweet and almost perfect {n1}.\n"
            "It's hard to capture and it's hard to {n2},\n"
            "A fragile memory I can't let {n3}.",
        ),
    ),
}

def build_tables(
    alliteration: Mapping[str, Tuple[Sequence[str], Sequence[str]]],
    rhyme_families: Mapping[str, Tuple[Sequence[str], Sequence[str]]],
    themes: Mapping[str, Tuple[Sequence[str], Sequence[str]]],
    line_templates: Sequence[LineTemplate] = ALLITERATION_LINE_TEMPLATES,
) -> CuratedTables:
    """Freeze raw ``(first, second)`` word list pairs into :class:`CuratedTables`."""

    return CuratedTables(
        alliteration=MappingProxyType(
            {
                letter: AlliterationEntry(tuple(adjectives), tuple(nouns))
                for letter, (adjectives, nouns) in alliteration.items()
            }
        ),
        rhyme_families=MappingProxyType(
            {
                suffix: RhymeFamily(tuple(nouns), tuple(others))
                for suffix, (nouns, others) in rhyme_families.items()
            }
        ),
        themes=MappingProxyType(
            {
                name: Theme(tuple(adjectives), tuple(ThemeTemplate(text) for text in templates))
                for name, (adjectives, templates) in themes.items()
            }
        ),
        line_templates=tuple(line_templates),
    )


DEFAULT_TABLES = build_tables(_ALLITERATION, _RHYME_FAMILIES, _THEMES)
