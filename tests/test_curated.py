import string

import _bootstrap  # noqa: F401
import pytest

from verse_assistant.curated import (
    ALLITERATION_LINE_TEMPLATES,
    DEFAULT_TABLES,
    CuratedTables,
    LineTemplate,
    ThemeTemplate,
    build_tables,
)


def test_alliteration_table_covers_alphabet():
    assert set(DEFAULT_TABLES.alliteration) == set(string.ascii_lowercase)
    assert DEFAULT_TABLES.alliteration["x"].is_empty
    assert not DEFAULT_TABLES.alliteration["s"].is_empty


def test_rhyme_families_are_disjoint_and_well_formed():
    for suffix, family in DEFAULT_TABLES.rhyme_families.items():
        assert 2 <= len(suffix) <= 4
        assert not set(family.nouns) & set(family.others)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_TABLES.rhyme_families["zz"] = None
    with pytest.raises(AttributeError):
        DEFAULT_TABLES.themes = {}


def test_exactly_one_seed_word_template():
    seeded = [t for t in DEFAULT_TABLES.line_templates if t.uses_seed_word]
    assert len(seeded) == 1
    assert seeded[0].render("dark", "dawn", "ember") == "A distant echo of the ember made."


def test_seed_template_requires_seed_word():
    with pytest.raises(ValueError):
        LineTemplate("{word}", uses_seed_word=True).render("dark", "dawn")


def test_two_seed_templates_are_rejected():
    templates = [LineTemplate("{word}", uses_seed_word=True)] * 2
    with pytest.raises(ValueError):
        build_tables({}, {}, {}, line_templates=templates)


@pytest.mark.parametrize("templates", [(), (LineTemplate("The {adj} {noun}."),)])
def test_tables_without_seed_template_are_rejected(templates):
    with pytest.raises(ValueError):
        build_tables({"c": (("cold",), ("cloud",))}, {}, {}, line_templates=templates)


def test_tables_default_to_standard_line_templates():
    tables = CuratedTables(alliteration={}, rhyme_families={}, themes={})
    assert tables.line_templates == ALLITERATION_LINE_TEMPLATES


def test_theme_template_needs_four_nouns():
    template = ThemeTemplate("{adj} {n0} {n1} {n2} {n3}")
    assert template(["a", "b", "c", "d"], "wild") == "wild a b c d"
    with pytest.raises(ValueError):
        template(["a", "b"], "wild")


def test_every_theme_renders():
    for theme in DEFAULT_TABLES.themes.values():
        assert theme.adjectives
        for template in theme.templates:
            assert len(template(["w", "x", "y", "z"], "adj").split("\n")) == 4
