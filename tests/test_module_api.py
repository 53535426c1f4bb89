# tests/test_module_api.py
"""
The module-level convenience API and its lazily created default engine.
"""

from __future__ import annotations

import english_inflect as inflect
from english_inflect.core.engine import Engine
from english_inflect.shared.container import container


def test_scenarios() -> None:
    assert inflect.plural("child") == "children"
    assert inflect.plural("box") == "boxes"
    assert inflect.singular("cacti") == "cactus"
    assert inflect.an("apple") == "an apple"
    assert inflect.an("European") == "a European"
    assert inflect.an("honest cat") == "an honest cat"
    assert inflect.compare("cat", "cats") == "s:p"
    assert inflect.compare("indexes", "indices") == "p:p"
    assert inflect.compare("cat", "dog") == ""


def test_aliases() -> None:
    assert inflect.pluralize("ox") == "oxen"
    assert inflect.singularize("oxen") == "ox"
    assert inflect.a("owl") == "an owl"
    assert inflect.compare_nouns("ox", "oxen") == "s:p"
    assert inflect.is_plural("oxen")
    assert inflect.is_singular("ox")
    assert inflect.no("ox", 2) == "2 oxen"
    assert inflect.plural_noun(" ox ") == " oxen "
    assert inflect.plural_noun("ox", 1) == "ox"
    assert inflect.singular_noun("oxen") == "ox"
    assert inflect.singular_noun("oxen", 2) == "oxen"


def test_default_engine_is_a_shared_singleton() -> None:
    assert inflect.get_engine() is inflect.get_engine()
    assert isinstance(inflect.get_engine(), Engine)


def test_module_state_round_trip() -> None:
    inflect.def_noun("cactus", "cactuses")
    inflect.add_irregular("goose", "gooses")
    inflect.add_uncountable("kit")
    assert inflect.plural("cactus") == "cactuses"
    assert inflect.plural("goose") == "gooses"
    assert inflect.plural("kit") == "kit"
    assert inflect.undef_noun("cactus") is True
    inflect.def_noun_reset()
    assert inflect.plural("goose") == "geese"

    inflect.def_a("apple")
    inflect.def_an("cat")
    assert inflect.an("apple") == "a apple"
    assert inflect.undef_a("apple") is True
    assert inflect.undef_an("cat") is True
    inflect.def_a_pattern(r"o.*")
    inflect.def_an_pattern(r"d.*")
    assert inflect.an("owl") == "a owl"
    assert inflect.an("dog") == "an dog"
    assert inflect.undef_a_pattern(r"o.*") is True
    assert inflect.undef_an_pattern(r"d.*") is True
    inflect.def_a_reset()
    assert inflect.an("owl") == "an owl"


def test_module_classical_functions() -> None:
    inflect.classical_all(True)
    assert inflect.is_classical_all()
    assert inflect.is_classical()
    inflect.classical_persons(False)
    assert not inflect.is_classical_persons()
    assert inflect.is_classical_ancient()
    assert inflect.plural("formula") == "formulae"

    inflect.classical(False)
    inflect.classical_ancient(True)
    inflect.classical_names(True)
    inflect.classical_herd(True)
    inflect.classical_zero(True)
    assert inflect.is_classical_names()
    assert inflect.is_classical_herd()
    assert inflect.is_classical_zero()
    assert inflect.classical_flags().ancient is True
    assert inflect.no("cat", 0) == "no cat"


def test_state_does_not_leak_between_tests() -> None:
    # test_module_state_round_trip and test_module_classical_functions
    # mutate the default engine; the autouse fixture hands us a new one.
    assert inflect.plural("person") == "people"
    assert not inflect.is_classical_ancient()


def test_default_engine_can_be_overridden() -> None:
    custom = Engine()
    custom.def_noun("cat", "kittehs")
    with container.default_engine.override(custom):
        assert inflect.plural("cat") == "kittehs"
    assert inflect.plural("cat") == "cats"
