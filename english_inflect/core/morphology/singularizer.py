# english_inflect/core/morphology/singularizer.py
"""
Plural -> singular resolution, the mirror image of the pluralizer.

Words that are already singular, or that no rule recognises as plural,
come back unchanged.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from english_inflect.core.domain.casing import has_letters, match_case
from english_inflect.core.domain.models import InflectionContext
from english_inflect.core.domain.tables import (
    CLASSICAL_SINGULARS,
    HERD_ANIMALS,
    IRREGULAR_PLURALS,
    IRREGULAR_SINGULARS,
    UNCHANGED_PLURALS,
)
from english_inflect.core.morphology.pluralizer import is_nationality
from english_inflect.core.morphology.suffix_rules import SINGULAR_RULES, apply_rules

Strategy = Callable[[str, str, InflectionContext], Optional[str]]


def _user_override(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    singular = ctx.nouns.singulars.get(lower)
    if singular is None:
        return None
    return match_case(word, singular)


def _ancient(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    if not ctx.flags.ancient:
        return None
    singular = CLASSICAL_SINGULARS.get(lower)
    return match_case(word, singular) if singular is not None else None


def _persons(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    if ctx.flags.persons and lower == "persons":
        return match_case(word, "person")
    return None


def _irregular(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    singular = IRREGULAR_SINGULARS.get(lower)
    if singular is not None:
        return match_case(word, singular)
    # "thesis", "child": a known singular stays put.
    if lower in IRREGULAR_PLURALS:
        return word
    return None


def _unchanged(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    if lower in UNCHANGED_PLURALS or lower in HERD_ANIMALS:
        return word
    return None


def _nationality(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    return word if is_nationality(lower) else None


def _no_letters(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    return None if has_letters(word) else word


def _suffix_rules(word: str, lower: str, ctx: InflectionContext) -> Optional[str]:
    return apply_rules(SINGULAR_RULES, word, lower)


SINGULAR_STRATEGIES: Sequence[Strategy] = (
    _user_override,
    _ancient,
    _persons,
    _irregular,
    _unchanged,
    _nationality,
    _no_letters,
    _suffix_rules,
)


def singularize(word: str, ctx: InflectionContext) -> str:
    """Return the singular of ``word``, or ``word`` itself when nothing applies."""
    if not word:
        return word

    lower = word.lower()
    for strategy in SINGULAR_STRATEGIES:
        result = strategy(word, lower, ctx)
        if result is not None:
            return result
    return word


__all__ = ["SINGULAR_STRATEGIES", "singularize"]
