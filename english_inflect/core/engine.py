# english_inflect/core/engine.py
"""
core/engine.py
--------------

The ``Engine`` aggregate: one isolated set of classical flags, noun overrides
and article overrides, plus every inflection operation that reads them.

    from english_inflect.core.engine import Engine

    engine = Engine()
    engine.plural("child")            # -> "children"
    engine.def_noun("cactus", "cactuses")
    engine.plural("Cactus")           # -> "Cactuses"
    engine.an("hour")                 # -> "an hour"

Engines are thread-safe. Each state group has its own reader/writer lock,
and every operation works on immutable snapshots, so a concurrent
def/undef/reset is either fully visible to a call or not at all.
"""

from __future__ import annotations

from typing import Optional

from english_inflect.core.classical import ClassicalMode
from english_inflect.core.domain.casing import split_whitespace
from english_inflect.core.domain.models import (
    Article,
    ClassicalFlags,
    InflectionContext,
    Relation,
)
from english_inflect.core.morphology import compare as _compare
from english_inflect.core.morphology.articles import prefix_article
from english_inflect.core.morphology.pluralizer import pluralize as _pluralize
from english_inflect.core.morphology.singularizer import singularize as _singularize
from english_inflect.core.overrides import ArticleOverrides, NounOverrides


class Engine:
    """Noun inflection, article selection and comparison with its own state."""

    def __init__(self, flags: Optional[ClassicalFlags] = None):
        self._initial_flags = flags or ClassicalFlags()
        self._classical = ClassicalMode(self._initial_flags)
        self._nouns = NounOverrides()
        self._articles = ArticleOverrides()

    def __repr__(self) -> str:
        return f"Engine(flags={self._classical.snapshot()!r})"

    def _context(self) -> InflectionContext:
        return InflectionContext(
            flags=self._classical.snapshot(),
            nouns=self._nouns.snapshot(),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def clone(self) -> "Engine":
        """An independent copy carrying this engine's current state."""
        other = Engine(self._initial_flags)
        other._classical = ClassicalMode(self._classical.snapshot())
        other._nouns = NounOverrides(self._nouns.snapshot())
        other._articles = ArticleOverrides(self._articles.snapshot())
        return other

    def reset(self) -> None:
        """Drop every override and restore the flags the engine was built with."""
        self._classical.replace(self._initial_flags)
        self._nouns.reset()
        self._articles.reset()

    # ------------------------------------------------------------------
    # Nouns
    # ------------------------------------------------------------------

    def plural(self, word: str) -> str:
        return _pluralize(word, self._context())

    pluralize = plural

    def singular(self, word: str) -> str:
        return _singularize(word, self._context())

    singularize = singular

    def plural_noun(self, word: str, count: Optional[int] = None) -> str:
        """
        Plural of ``word``, or ``word`` itself when ``count`` is 1 or -1.

        Surrounding whitespace is kept: " cat " -> " cats ".
        """
        prefix, core, suffix = split_whitespace(word)
        if not core or count in (1, -1):
            return word
        return prefix + self.plural(core) + suffix

    def singular_noun(self, word: str, count: Optional[int] = None) -> str:
        """
        Singular of ``word``, or ``word`` itself when a ``count`` other than
        1 or -1 is given.
        """
        prefix, core, suffix = split_whitespace(word)
        if not core or (count is not None and count not in (1, -1)):
            return word
        return prefix + self.singular(core) + suffix

    def no(self, word: str, count: int) -> str:
        """
        Count phrase: "no cats", "1 cat", "3 cats".

        With the classical "zero" flag on, a zero count keeps the word as given
        ("no cat").
        """
        if count == 0:
            ctx = self._context()
            if ctx.flags.zero:
                return f"no {word}"
            return f"no {_pluralize(word, ctx)}"
        if abs(count) == 1:
            return f"{count} {word}"
        return f"{count} {self.plural(word)}"

    def compare(self, word1: str, word2: str) -> Relation:
        return _compare.compare(word1, word2, self._context())

    compare_nouns = compare

    def is_plural(self, word: str) -> bool:
        return _compare.is_plural(word, self._context())

    def is_singular(self, word: str) -> bool:
        return _compare.is_singular(word, self._context())

    # ------------------------------------------------------------------
    # Articles
    # ------------------------------------------------------------------

    def an(self, phrase: str) -> str:
        return prefix_article(phrase, self._articles.snapshot())

    a = an

    # ------------------------------------------------------------------
    # Noun overrides
    # ------------------------------------------------------------------

    def def_noun(self, singular: str, plural: str) -> None:
        self._nouns.define(singular, plural)

    add_irregular = def_noun

    def add_uncountable(self, *words: str) -> None:
        for word in words:
            self._nouns.define(word, word)

    def undef_noun(self, singular: str) -> bool:
        return self._nouns.undefine(singular)

    def def_noun_reset(self) -> None:
        self._nouns.reset()

    # ------------------------------------------------------------------
    # Article overrides
    # ------------------------------------------------------------------

    def def_a(self, word: str) -> None:
        self._articles.define_word(word, Article.A)

    def def_an(self, word: str) -> None:
        self._articles.define_word(word, Article.AN)

    def undef_a(self, word: str) -> bool:
        return self._articles.undefine_word(word, Article.A)

    def undef_an(self, word: str) -> bool:
        return self._articles.undefine_word(word, Article.AN)

    def def_a_pattern(self, pattern: str) -> None:
        self._articles.define_pattern(pattern, Article.A)

    def def_an_pattern(self, pattern: str) -> None:
        self._articles.define_pattern(pattern, Article.AN)

    def undef_a_pattern(self, pattern: str) -> bool:
        return self._articles.undefine_pattern(pattern, Article.A)

    def undef_an_pattern(self, pattern: str) -> bool:
        return self._articles.undefine_pattern(pattern, Article.AN)

    def def_a_reset(self) -> None:
        self._articles.reset()

    # ------------------------------------------------------------------
    # Classical mode
    # ------------------------------------------------------------------

    def classical_flags(self) -> ClassicalFlags:
        return self._classical.snapshot()

    def classical_all(self, enabled: bool = True) -> None:
        self._classical.set_all(enabled)

    classical = classical_all

    def classical_ancient(self, enabled: bool = True) -> None:
        self._classical.set_flag("ancient", enabled)

    def classical_persons(self, enabled: bool = True) -> None:
        self._classical.set_flag("persons", enabled)

    def classical_names(self, enabled: bool = True) -> None:
        self._classical.set_flag("names", enabled)

    def classical_herd(self, enabled: bool = True) -> None:
        self._classical.set_flag("herd", enabled)

    def classical_zero(self, enabled: bool = True) -> None:
        self._classical.set_flag("zero", enabled)

    def is_classical_all(self) -> bool:
        return self._classical.snapshot().all_enabled

    is_classical = is_classical_all

    def is_classical_ancient(self) -> bool:
        return self._classical.snapshot().ancient

    def is_classical_persons(self) -> bool:
        return self._classical.snapshot().persons

    def is_classical_names(self) -> bool:
        return self._classical.snapshot().names

    def is_classical_herd(self) -> bool:
        return self._classical.snapshot().herd

    def is_classical_zero(self) -> bool:
        return self._classical.snapshot().zero


__all__ = ["Engine"]
