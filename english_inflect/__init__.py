# english_inflect/__init__.py
"""
english_inflect
===============

English noun inflection: singular/plural conversion, indefinite articles
and number comparison.

Module-level functions act on one process-wide default ``Engine``, created
lazily by the dependency container. Build your own ``Engine()`` when you
need isolated overrides or classical settings.

    import english_inflect as inflect

    inflect.plural("child")        # "children"
    inflect.singular("cacti")      # "cactus"
    inflect.an("honest cat")       # "an honest cat"
    inflect.compare("cat", "cats") # "s:p"
"""

from typing import Optional

from english_inflect.core.domain.exceptions import InflectError, InvalidPatternError
from english_inflect.core.domain.models import ClassicalFlags, Relation
from english_inflect.core.engine import Engine
from english_inflect.shared.container import container


def get_engine() -> Engine:
    """The process-wide default engine."""
    return container.default_engine()


# --- Nouns ---

def plural(word: str) -> str:
    return get_engine().plural(word)


def singular(word: str) -> str:
    return get_engine().singular(word)


pluralize = plural
singularize = singular


def plural_noun(word: str, count: Optional[int] = None) -> str:
    return get_engine().plural_noun(word, count)


def singular_noun(word: str, count: Optional[int] = None) -> str:
    return get_engine().singular_noun(word, count)


def no(word: str, count: int) -> str:
    return get_engine().no(word, count)


def compare(word1: str, word2: str) -> Relation:
    return get_engine().compare(word1, word2)


compare_nouns = compare


def is_plural(word: str) -> bool:
    return get_engine().is_plural(word)


def is_singular(word: str) -> bool:
    return get_engine().is_singular(word)


# --- Articles ---

def an(phrase: str) -> str:
    return get_engine().an(phrase)


a = an


# --- Noun overrides ---

def def_noun(singular: str, plural: str) -> None:
    get_engine().def_noun(singular, plural)


add_irregular = def_noun


def add_uncountable(*words: str) -> None:
    get_engine().add_uncountable(*words)


def undef_noun(singular: str) -> bool:
    return get_engine().undef_noun(singular)


def def_noun_reset() -> None:
    get_engine().def_noun_reset()


# --- Article overrides ---

def def_a(word: str) -> None:
    get_engine().def_a(word)


def def_an(word: str) -> None:
    get_engine().def_an(word)


def undef_a(word: str) -> bool:
    return get_engine().undef_a(word)


def undef_an(word: str) -> bool:
    return get_engine().undef_an(word)


def def_a_pattern(pattern: str) -> None:
    get_engine().def_a_pattern(pattern)


def def_an_pattern(pattern: str) -> None:
    get_engine().def_an_pattern(pattern)


def undef_a_pattern(pattern: str) -> bool:
    return get_engine().undef_a_pattern(pattern)


def undef_an_pattern(pattern: str) -> bool:
    return get_engine().undef_an_pattern(pattern)


def def_a_reset() -> None:
    get_engine().def_a_reset()


# --- Classical mode ---

def classical_flags() -> ClassicalFlags:
    return get_engine().classical_flags()


def classical_all(enabled: bool = True) -> None:
    get_engine().classical_all(enabled)


classical = classical_all


def classical_ancient(enabled: bool = True) -> None:
    get_engine().classical_ancient(enabled)


def classical_persons(enabled: bool = True) -> None:
    get_engine().classical_persons(enabled)


def classical_names(enabled: bool = True) -> None:
    get_engine().classical_names(enabled)


def classical_herd(enabled: bool = True) -> None:
    get_engine().classical_herd(enabled)


def classical_zero(enabled: bool = True) -> None:
    get_engine().classical_zero(enabled)


def is_classical_all() -> bool:
    return get_engine().is_classical_all()


is_classical = is_classical_all


def is_classical_ancient() -> bool:
    return get_engine().is_classical_ancient()


def is_classical_persons() -> bool:
    return get_engine().is_classical_persons()


def is_classical_names() -> bool:
    return get_engine().is_classical_names()


def is_classical_herd() -> bool:
    return get_engine().is_classical_herd()


def is_classical_zero() -> bool:
    return get_engine().is_classical_zero()


__version__ = "0.1.0"

__all__ = [
    "ClassicalFlags",
    "Engine",
    "InflectError",
    "InvalidPatternError",
    "Relation",
    "a",
    "add_irregular",
    "add_uncountable",
    "an",
    "classical",
    "classical_all",
    "classical_ancient",
    "classical_flags",
    "classical_herd",
    "classical_names",
    "classical_persons",
    "classical_zero",
    "compare",
    "compare_nouns",
    "def_a",
    "def_a_pattern",
    "def_a_reset",
    "def_an",
    "def_an_pattern",
    "def_noun",
    "def_noun_reset",
    "get_engine",
    "is_classical",
    "is_classical_all",
    "is_classical_ancient",
    "is_classical_herd",
    "is_classical_names",
    "is_classical_persons",
    "is_classical_zero",
    "is_plural",
    "is_singular",
    "no",
    "plural",
    "plural_noun",
    "pluralize",
    "singular",
    "singular_noun",
    "singularize",
    "undef_a",
    "undef_a_pattern",
    "undef_an",
    "undef_an_pattern",
    "undef_noun",
]
