# english_inflect/core/morphology/compare.py
"""Number relationship between two forms of a noun."""

from __future__ import annotations

from english_inflect.core.domain.models import InflectionContext, Relation
from english_inflect.core.morphology.pluralizer import pluralize
from english_inflect.core.morphology.singularizer import singularize


def compare(word1: str, word2: str, ctx: InflectionContext) -> Relation:
    """
    Classify how ``word1`` relates to ``word2``, ignoring case.

    - EQUAL: same word ("cat", "CAT")
    - SINGULAR_TO_PLURAL: word1 is the singular of word2 ("cat", "cats")
    - PLURAL_TO_SINGULAR: the reverse ("cats", "cat")
    - PLURAL_TO_PLURAL: two plurals of one base ("indexes", "indices")
    - UNRELATED: anything else
    """
    if not word1 or not word2:
        if not word1 and not word2:
            return Relation.EQUAL
        return Relation.UNRELATED

    lower1 = word1.lower()
    lower2 = word2.lower()

    if lower1 == lower2:
        return Relation.EQUAL

    if pluralize(word1, ctx).lower() == lower2:
        return Relation.SINGULAR_TO_PLURAL

    if pluralize(word2, ctx).lower() == lower1:
        return Relation.PLURAL_TO_SINGULAR

    base1 = singularize(word1, ctx).lower()
    base2 = singularize(word2, ctx).lower()
    if base1 == base2 and lower1 != base1 and lower2 != base2:
        plural_of_base = pluralize(base1, ctx).lower()
        if plural_of_base in (lower1, lower2):
            return Relation.PLURAL_TO_PLURAL

    return Relation.UNRELATED


def is_plural(word: str, ctx: InflectionContext) -> bool:
    """True when ``word`` singularizes to something else."""
    if not word:
        return False
    return singularize(word, ctx).lower() != word.lower()


def is_singular(word: str, ctx: InflectionContext) -> bool:
    if not word:
        return False
    return not is_plural(word, ctx)


__all__ = ["compare", "is_plural", "is_singular"]
