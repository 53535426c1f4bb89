# english_inflect/core/morphology/pluralizer.py
"""
Singular -> plural resolution.

The pipeline is an ordered list of strategies. Each strategy receives the
caller's word, its lowercase form and the call's ``InflectionContext``, and
returns the plural or ``None`` to pass. The first non-None answer wins;
the suffix rules at the end always answer.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from english_inflect.core.domain.casing import (
    has_letters,
    is_proper_name,
    match_case,
    match_suffix,
)
from english_inflect.core.domain.models import InflectionContext
from english_inflect.core.domain.tables import (
    CLASSICAL_PLURALS,
    HERD_ANIMALS,
    IRREGULAR_PLURALS,
    NATIONALITY_SUFFIX_EXCEPTIONS,
    NATIONALITY_SUFFIXES,
    SIBILANT_ENDINGS,
    UNCHANGED_PLURALS,
    VOWELS,
)
from english_inflect.core.morphology.suffix_rules import PLURAL_RULES, apply_rules

Strategy = Callable[[str, str, InflectionContext], Optional[str]]


def is_nationality(lower: str) -> bool:
    """Chinese, Portuguese, Iroquois... but not cheese."""
    return lower.endswith(NATIONALITY_SUFFIXES) and lower not in NATIONALITY_SUFFIX_EXCEPTIONS


# --- Strategies (in precedence order) ---

def _user_override(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    plural = ctx.nouns.plurals.get(lower)
    if plural is None:
        return None
    return match_case(word, plural)


def _ancient(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    if not ctx.flags.ancient:
        return None
    plural = CLASSICAL_PLURALS.get(lower)
    return match_case(word, plural) if plural is not None else None


def _persons(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    if ctx.flags.persons and lower == "person":
        return match_case(word, "persons")
    return None


def _irregular(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    plural = IRREGULAR_PLURALS.get(lower)
    return match_case(word, plural) if plural is not None else None


def _proper_name(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    """
    Classical "names" mode: Jones -> Jones, Marx -> Marx, Mary -> Marys.
    Capitalisation changes nothing while the flag is off.
    """
    if not ctx.flags.names or not is_proper_name(word):
        return None
    if lower.endswith(SIBILANT_ENDINGS):
        return word
    if lower.endswith("y") and lower[-2] not in VOWELS:
        return word + match_suffix(word, "s")
    return None


def _unchanged(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    return word if lower in UNCHANGED_PLURALS else None


def _herd(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    if ctx.flags.herd and lower in HERD_ANIMALS:
        return word
    return None


def _nationality(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    return word if is_nationality(lower) else None


def _no_letters(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    return None if has_letters(word) else word


def _suffix_rules(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    return apply_rules(PLURAL_RULES, word, lower)


PLURAL_STRATEGIES: Sequence[Strategy] = (
    _user_override,
    _ancient,
    _persons,
    _irregular,
    _proper_name,
    _unchanged,
    _herd,
    _nationality,
    _no_letters,
    _suffix_rules,
)


def pluralize(word: str, ctx: InflectionContext) -> str:
    """Return the plural of ``word``; never raises."""
    if not word:
        return word

    lower = word.lower()
    for strategy in PLURAL_STRATEGIES:
        result = strategy(word, lower, ctx)
        if result is not None:
            return result
    return word


__all__ = ["PLURAL_STRATEGIES", "is_nationality", "pluralize"]
