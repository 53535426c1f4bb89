# tests/test_suffix_rules.py
"""
tests/test_suffix_rules.py
--------------------------

Each suffix rule is a tagged value; these tests pin down which rule fires
for a representative word and what it produces, independently of the
irregular tables that sit in front of the rules in the full pipeline.
"""

from __future__ import annotations

import pytest

from english_inflect.core.morphology.suffix_rules import (
    PLURAL_RULES,
    SINGULAR_RULES,
    SuffixRule,
    apply_rules,
    find_rule,
)


def _fire(rules, word):
    rule = find_rule(rules, word, word.lower())
    assert rule is not None
    return rule.name, rule.apply(word)


@pytest.mark.parametrize(
    "word, rule_name, expected",
    [
        ("Bigfoot", "compound-foot", "Bigfeet"),
        ("eyetooth", "compound-tooth", "eyeteeth"),
        ("fireman", "man-men", "firemen"),
        ("box", "sibilant-es", "boxes"),
        ("church", "sibilant-es", "churches"),
        ("city", "consonant-y-ies", "cities"),
        ("City", "consonant-y-ies", "Cities"),
        ("knife", "fe-ves", "knives"),
        ("wolf", "f-ves", "wolves"),
        ("zoo", "vowel-o-s", "zoos"),
        ("photo", "o-exception-s", "photos"),
        ("potato", "consonant-o-es", "potatoes"),
        ("cat", "default-s", "cats"),
    ],
)
def test_plural_rule_selection(word: str, rule_name: str, expected: str) -> None:
    assert _fire(PLURAL_RULES, word) == (rule_name, expected)


@pytest.mark.parametrize(
    "word, rule_name, expected",
    [
        ("Bigfeet", "compound-feet", "Bigfoot"),
        ("eyeteeth", "compound-teeth", "eyetooth"),
        ("firemen", "men-man", "fireman"),
        ("knives", "ves-fe", "knife"),
        ("wolves", "ves-f", "wolf"),
        ("movies", "ie-word", "movie"),
        ("cities", "consonant-ies-y", "city"),
        ("shoes", "silent-e", "shoe"),
        ("boxes", "sibilant-es", "box"),
        ("potatoes", "consonant-oes", "potato"),
        ("buses", "ses-stem", "bus"),
        ("cats", "bare-s", "cat"),
    ],
)
def test_singular_rule_selection(word: str, rule_name: str, expected: str) -> None:
    assert _fire(SINGULAR_RULES, word) == (rule_name, expected)


@pytest.mark.parametrize("word", ["German", "Roman", "human", "talisman"])
def test_man_exceptions_take_plain_s(word: str) -> None:
    assert apply_rules(PLURAL_RULES, word, word.lower()) == word + "s"


@pytest.mark.parametrize("word", ["specimen", "abdomen"])
def test_true_singulars_in_men_are_not_rewritten(word: str) -> None:
    assert apply_rules(SINGULAR_RULES, word, word.lower()) is None


@pytest.mark.parametrize("word", ["glass", "status", "thesis", "gas", "child"])
def test_singular_rules_leave_non_plurals_alone(word: str) -> None:
    assert apply_rules(SINGULAR_RULES, word, word.lower()) is None


def test_stem_keeps_caller_text_and_suffix_follows_case() -> None:
    assert apply_rules(PLURAL_RULES, "BOX", "box") == "BOXES"
    assert apply_rules(PLURAL_RULES, "iPod", "ipod") == "iPods"
    assert apply_rules(SINGULAR_RULES, "KNIVES", "knives") == "KNIFE"


def test_rules_are_frozen_values() -> None:
    rule = PLURAL_RULES[0]
    assert isinstance(rule, SuffixRule)
    with pytest.raises(AttributeError):
        rule.strip = 0  # type: ignore[misc]
