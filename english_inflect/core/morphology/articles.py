# english_inflect/core/morphology/articles.py
"""
core/morphology/articles.py
---------------------------

Indefinite article selection ("a" / "an").

Only the first whitespace-delimited token of the phrase is inspected. The
resolution order is:

1. exact-word user override
2. user force-"a" patterns (registration order)
3. user force-"an" patterns (registration order)
4. phonetic heuristic (silent h, acronyms, "you"-sounding u, vowels)

The article is always lowercase and the phrase is returned verbatim after it:

    select_article("hour", table)        # -> "an"
    prefix_article("Ugandan", table)     # -> "a Ugandan"
"""

from __future__ import annotations

from typing import Optional

from english_inflect.core.domain.casing import is_all_upper
from english_inflect.core.domain.models import Article, ArticleTable
from english_inflect.core.domain.tables import (
    CONSONANT_SOUND_PREFIXES,
    LOWERCASE_ABBREVIATIONS,
    SILENT_H_WORDS,
    VOWEL_SOUND_LETTERS,
    VOWELS,
    YOU_SOUND_PREFIXES,
)


def _first_token(phrase: str) -> Optional[str]:
    parts = phrase.split()
    return parts[0] if parts else None


def _acronym_article(letters: str) -> Article:
    """Acronyms read letter by letter: an FBI agent, a CIA agent, an MP3."""
    if letters[0].upper() in VOWEL_SOUND_LETTERS:
        return Article.AN
    return Article.A


def _user_choice(lower: str, table: ArticleTable) -> Optional[Article]:
    exact = table.words.get(lower)
    if exact is not None:
        return exact

    for pattern in table.a_patterns:
        if pattern.matches(lower):
            return Article.A

    for pattern in table.an_patterns:
        if pattern.matches(lower):
            return Article.AN

    return None


def phonetic_article(token: str) -> Article:
    """Built-in heuristic for a single token."""
    lower = token.lower()

    if lower.startswith(SILENT_H_WORDS):
        return Article.AN

    if len(token) >= 2 and is_all_upper(token):
        return _acronym_article(token)

    if lower in LOWERCASE_ABBREVIATIONS:
        return _acronym_article(lower)

    if lower.startswith(CONSONANT_SOUND_PREFIXES):
        return Article.A

    if lower.startswith("u") and lower[:3] in YOU_SOUND_PREFIXES:
        return Article.A

    if lower[0] in VOWELS:
        return Article.AN
    return Article.A


def select_article(phrase: str, table: ArticleTable) -> Optional[Article]:
    """The article for ``phrase``, or None when it has no token at all."""
    token = _first_token(phrase)
    if token is None:
        return None

    chosen = _user_choice(token.lower(), table)
    if chosen is not None:
        return chosen
    return phonetic_article(token)


def prefix_article(phrase: str, table: ArticleTable) -> str:
    """
    Return ``phrase`` prefixed with its indefinite article.

    Empty input gives "" and whitespace-only input is returned unchanged.
    """
    if not phrase:
        return ""

    article = select_article(phrase, table)
    if article is None:
        return phrase
    return f"{article.value} {phrase}"


__all__ = ["phonetic_article", "prefix_article", "select_article"]
