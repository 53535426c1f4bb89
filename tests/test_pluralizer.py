# tests/test_pluralizer.py
"""
Pluralization through the full precedence chain, on an isolated Engine.
"""

from __future__ import annotations

import pytest

from english_inflect.core.domain.tables import IRREGULAR_PLURALS


@pytest.mark.parametrize(
    "singular, plural",
    [
        ("child", "children"),
        ("box", "boxes"),
        ("person", "people"),
        ("cactus", "cacti"),
        ("analysis", "analyses"),
        ("index", "indices"),
        ("bureau", "bureaux"),
        ("sheep", "sheep"),
        ("series", "series"),
        ("Chinese", "Chinese"),
        ("cheese", "cheeses"),
        ("city", "cities"),
        ("day", "days"),
        ("knife", "knives"),
        ("roof", "roofs"),
        ("hero", "heroes"),
        ("piano", "pianos"),
        ("fireman", "firemen"),
        ("German", "Germans"),
        ("Mary", "Maries"),
        ("bus", "buses"),
        ("bison", "bisons"),
        ("formula", "formulas"),
    ],
)
def test_plural(engine, singular: str, plural: str) -> None:
    assert engine.plural(singular) == plural


def test_empty_and_non_alphabetic_words_pass_through(engine) -> None:
    assert engine.plural("") == ""
    assert engine.plural("42") == "42"
    assert engine.plural("!!") == "!!"


@pytest.mark.parametrize("word", ["child", "box", "church", "knife", "person", "potato", "city", "baby", "lady", "party"])
def test_case_is_preserved(engine, word: str) -> None:
    plural = engine.plural(word)
    assert engine.plural(word.upper()) == plural.upper()
    assert engine.plural(word.capitalize()) == plural[0].upper() + plural[1:]


def test_every_irregular_entry_is_used(engine) -> None:
    for singular, plural in IRREGULAR_PLURALS.items():
        assert engine.plural(singular) == plural


def test_pluralize_is_an_alias(engine) -> None:
    assert engine.pluralize("mouse") == "mice"


@pytest.mark.parametrize("name", ["Jones", "Marx", "Lynch", "Bush", "Ruiz"])
def test_sibilant_proper_names_stay_put_in_names_mode(engine, name: str) -> None:
    assert engine.plural(name) != name
    engine.classical_names(True)
    assert engine.plural(name) == name


def test_names_mode_leaves_common_nouns_alone(engine) -> None:
    engine.classical_names(True)
    assert engine.plural("bus") == "buses"
    assert engine.plural("box") == "boxes"
    assert engine.plural("city") == "cities"


def test_names_mode_gives_consonant_y_names_a_bare_s(engine) -> None:
    assert engine.plural("Mary") == "Maries"
    assert engine.plural("Kennedy") == "Kennedies"
    engine.classical_names(True)
    assert engine.plural("Mary") == "Marys"
    assert engine.plural("Kennedy") == "Kennedys"
    # acronyms are not names
    assert engine.plural("CITY") == "CITIES"


def test_capitalised_round_trip_without_names_mode(engine) -> None:
    assert engine.plural("City") == "Cities"
    assert engine.plural(engine.singular("Cities")) == "Cities"


def test_herd_animals_only_unchanged_in_herd_mode(engine) -> None:
    assert engine.plural("bison") == "bisons"
    engine.classical_herd(True)
    assert engine.plural("bison") == "bison"
    assert engine.plural("Buffalo") == "Buffalo"


def test_ancient_mode_uses_classical_plurals(engine) -> None:
    engine.classical_ancient(True)
    assert engine.plural("formula") == "formulae"
    assert engine.plural("octopus") == "octopodes"
    assert engine.plural("Opus") == "Opera"


@pytest.mark.parametrize(
    "word, count, expected",
    [
        ("cat", None, "cats"),
        (" cat ", None, " cats "),
        ("\tChild\n", None, "\tChildren\n"),
        ("cat", 1, "cat"),
        ("cat", -1, "cat"),
        ("cat", 0, "cats"),
        ("cat", 2, "cats"),
        ("", None, ""),
        ("   ", 2, "   "),
    ],
)
def test_plural_noun(engine, word: str, count, expected: str) -> None:
    assert engine.plural_noun(word, count) == expected
