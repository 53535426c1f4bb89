# tests/test_classical.py
"""
Classical mode flags: bulk setting, independent sub-flags, and the
immutable snapshot model.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from english_inflect.core.domain.models import ClassicalFlags


def test_new_engine_starts_modern(engine) -> None:
    flags = engine.classical_flags()
    assert flags == ClassicalFlags()
    assert not engine.is_classical_all()
    assert engine.plural("person") == "people"


def test_classical_all_sets_every_flag(engine) -> None:
    engine.classical_all(True)
    assert engine.is_classical_all()
    assert engine.is_classical()
    assert engine.is_classical_ancient()
    assert engine.is_classical_persons()
    assert engine.is_classical_names()
    assert engine.is_classical_herd()
    assert engine.is_classical_zero()

    engine.classical(False)
    assert engine.classical_flags() == ClassicalFlags()


def test_sub_flags_are_independent(engine) -> None:
    engine.classical_all(True)
    engine.classical_persons(False)

    assert engine.plural("person") == "people"
    assert engine.plural("formula") == "formulae"
    assert engine.is_classical_ancient()
    assert not engine.is_classical_all()


def test_persons_flag(engine) -> None:
    engine.classical_persons()
    assert engine.plural("person") == "persons"
    assert engine.plural("Person") == "Persons"


@pytest.mark.parametrize(
    "setter, getter",
    [
        ("classical_ancient", "is_classical_ancient"),
        ("classical_persons", "is_classical_persons"),
        ("classical_names", "is_classical_names"),
        ("classical_herd", "is_classical_herd"),
        ("classical_zero", "is_classical_zero"),
    ],
)
def test_setter_getter_pairs(engine, setter: str, getter: str) -> None:
    getattr(engine, setter)(True)
    assert getattr(engine, getter)() is True
    getattr(engine, setter)(False)
    assert getattr(engine, getter)() is False


def test_all_enabled_requires_every_flag() -> None:
    assert ClassicalFlags.everything(True).all_enabled
    partial = ClassicalFlags.everything(True).model_copy(update={"herd": False})
    assert not partial.all_enabled


def test_snapshot_is_frozen(engine) -> None:
    flags = engine.classical_flags()
    with pytest.raises(ValidationError):
        flags.ancient = True  # type: ignore[misc]


def test_snapshot_does_not_follow_later_changes(engine) -> None:
    before = engine.classical_flags()
    engine.classical_herd(True)
    assert before.herd is False
    assert engine.classical_flags().herd is True


@pytest.mark.parametrize(
    "count, zero, expected",
    [
        (0, False, "no cats"),
        (0, True, "no cat"),
        (1, False, "1 cat"),
        (-1, False, "-1 cat"),
        (3, False, "3 cats"),
        (3, True, "3 cats"),
    ],
)
def test_no(engine, count: int, zero: bool, expected: str) -> None:
    engine.classical_zero(zero)
    assert engine.no("cat", count) == expected
