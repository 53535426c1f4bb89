# english_inflect/core/overrides.py
"""
core/overrides.py
-----------------

Runtime customisation layered over the built-in tables.

Two independent groups, each with its own reader/writer lock:

- noun overrides: lowercase singular -> lowercase plural, with the inverse
  kept alongside for the singularizer;
- article overrides: exact words plus ordered force-"a" / force-"an"
  regular expressions.

Every mutation builds a fresh immutable table and swaps it in, so a reader
that grabbed a table keeps a consistent view for its whole call.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from english_inflect.core.domain.exceptions import InvalidPatternError
from english_inflect.core.domain.models import (
    Article,
    ArticlePattern,
    ArticleTable,
    NounTable,
)
from english_inflect.core.domain.tables import IRREGULAR_PLURALS
from english_inflect.core.locks import ReadWriteLock
from english_inflect.shared.logging_setup import get_logger

log = get_logger(__name__)


class NounOverrides:
    def __init__(self, table: Optional[NounTable] = None):
        self._lock = ReadWriteLock()
        self._table = table or NounTable()

    def snapshot(self) -> NounTable:
        with self._lock.read():
            return self._table

    def define(self, singular: str, plural: str) -> None:
        key = singular.lower()
        value = plural.lower()
        with self._lock.write():
            plurals: Dict[str, str] = dict(self._table.plurals)
            # Re-insert so the newest entry wins the inverse mapping.
            plurals.pop(key, None)
            plurals[key] = value
            self._table = NounTable.build(plurals)
        log.debug("noun_override_defined", singular=key, plural=value)

    def undefine(self, singular: str) -> bool:
        """
        Drop a user definition. Built-in irregulars are never removable, so a
        key that is also in the irregular table reports False and stays put.
        """
        key = singular.lower()
        if key in IRREGULAR_PLURALS:
            log.debug("noun_override_protected", singular=key)
            return False

        with self._lock.write():
            if key not in self._table.plurals:
                return False
            plurals = dict(self._table.plurals)
            del plurals[key]
            self._table = NounTable.build(plurals)
        log.debug("noun_override_removed", singular=key)
        return True

    def reset(self) -> None:
        with self._lock.write():
            self._table = NounTable()
        log.debug("noun_overrides_reset")


class ArticleOverrides:
    def __init__(self, table: Optional[ArticleTable] = None):
        self._lock = ReadWriteLock()
        self._table = table or ArticleTable()

    def snapshot(self) -> ArticleTable:
        with self._lock.read():
            return self._table

    # --- exact words ---

    def define_word(self, word: str, article: Article) -> None:
        key = word.lower()
        with self._lock.write():
            words = dict(self._table.words)
            words[key] = article
            self._table = ArticleTable(
                words=_freeze(words),
                a_patterns=self._table.a_patterns,
                an_patterns=self._table.an_patterns,
            )
        log.debug("article_word_defined", word=key, article=article.value)

    def undefine_word(self, word: str, article: Article) -> bool:
        """Remove ``word`` only if it currently forces ``article``."""
        key = word.lower()
        with self._lock.write():
            if self._table.words.get(key) is not article:
                return False
            words = dict(self._table.words)
            del words[key]
            self._table = ArticleTable(
                words=_freeze(words),
                a_patterns=self._table.a_patterns,
                an_patterns=self._table.an_patterns,
            )
        log.debug("article_word_removed", word=key, article=article.value)
        return True

    # --- patterns ---

    def define_pattern(self, source: str, article: Article) -> None:
        try:
            pattern = ArticlePattern.compile(source, article)
        except (re.error, OverflowError, RecursionError) as exc:
            log.debug("article_pattern_rejected", pattern=source, reason=str(exc))
            raise InvalidPatternError(source, str(exc)) from exc

        with self._lock.write():
            a_patterns, an_patterns = self._table.a_patterns, self._table.an_patterns
            if article is Article.A:
                a_patterns = a_patterns + (pattern,)
            else:
                an_patterns = an_patterns + (pattern,)
            self._table = ArticleTable(
                words=self._table.words,
                a_patterns=a_patterns,
                an_patterns=an_patterns,
            )
        log.debug("article_pattern_defined", pattern=source, article=article.value)

    def undefine_pattern(self, source: str, article: Article) -> bool:
        """Remove the first pattern registered with exactly ``source``."""
        with self._lock.write():
            current = self._table.a_patterns if article is Article.A else self._table.an_patterns
            remaining = _drop_first(current, source)
            if remaining is None:
                return False
            if article is Article.A:
                self._table = ArticleTable(
                    words=self._table.words,
                    a_patterns=remaining,
                    an_patterns=self._table.an_patterns,
                )
            else:
                self._table = ArticleTable(
                    words=self._table.words,
                    a_patterns=self._table.a_patterns,
                    an_patterns=remaining,
                )
        log.debug("article_pattern_removed", pattern=source, article=article.value)
        return True

    def reset(self) -> None:
        with self._lock.write():
            self._table = ArticleTable()
        log.debug("article_overrides_reset")


def _freeze(words: Dict[str, Article]) -> Mapping[str, Article]:
    return MappingProxyType(words)


def _drop_first(
    patterns: Tuple[ArticlePattern, ...], source: str
) -> Optional[Tuple[ArticlePattern, ...]]:
    for index, pattern in enumerate(patterns):
        if pattern.source == source:
            return patterns[:index] + patterns[index + 1:]
    return None


__all__ = ["ArticleOverrides", "NounOverrides"]
