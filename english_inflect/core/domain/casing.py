# english_inflect/core/domain/casing.py
"""
Case matching.

Rules compute their result in lowercase; this module re-applies the casing
class of the caller's input:

- all-uppercase input (two or more letters)  -> all-uppercase output
- input whose first letter is uppercase      -> first letter uppercased
- anything else                              -> output left as computed

Words without letters have no case class and are treated as OTHER.
"""

from __future__ import annotations

from typing import List, Tuple

from english_inflect.core.domain.models import CasePattern


def _letters(word: str) -> List[str]:
    return [ch for ch in word if ch.isalpha()]


def is_all_upper(word: str) -> bool:
    """True when the word has at least one letter and every letter is uppercase."""
    letters = _letters(word)
    return bool(letters) and all(ch.isupper() for ch in letters)


def has_letters(word: str) -> bool:
    return any(ch.isalpha() for ch in word)


def classify(word: str) -> CasePattern:
    """Derive the case class of ``word``."""
    letters = _letters(word)
    if not letters:
        return CasePattern.OTHER

    # A single letter ("A", "X") only carries a capitalisation, not a shout.
    if len(letters) > 1 and all(ch.isupper() for ch in letters):
        return CasePattern.UPPER

    if letters[0].isupper():
        return CasePattern.CAPITALIZED

    return CasePattern.OTHER


def apply_case(pattern: CasePattern, replacement: str) -> str:
    if not replacement:
        return replacement
    if pattern is CasePattern.UPPER:
        return replacement.upper()
    if pattern is CasePattern.CAPITALIZED:
        return replacement[0].upper() + replacement[1:]
    return replacement


def match_case(original: str, replacement: str) -> str:
    """
    Re-case ``replacement`` after ``original``.

    >>> match_case("Child", "children")
    'Children'
    >>> match_case("CHILD", "children")
    'CHILDREN'
    """
    if not original:
        return replacement
    return apply_case(classify(original), replacement)


def match_suffix(word: str, suffix: str) -> str:
    """Uppercase a suffix being appended to an all-uppercase word."""
    if is_all_upper(word):
        return suffix.upper()
    return suffix


def is_proper_name(word: str) -> bool:
    """
    Heuristic proper-name test: capitalised, at least two characters, and not
    an all-uppercase acronym ("Jones", "Mary" but not "CBS").
    """
    if len(word) < 2:
        return False
    if not word[0].isupper():
        return False
    return not is_all_upper(word)


def split_whitespace(word: str) -> Tuple[str, str, str]:
    """Split ``word`` into (leading whitespace, core, trailing whitespace)."""
    core = word.strip()
    if not core:
        return word, "", ""
    start = word.index(core)
    return word[:start], core, word[start + len(core):]


__all__ = [
    "apply_case",
    "classify",
    "has_letters",
    "is_all_upper",
    "is_proper_name",
    "match_case",
    "match_suffix",
    "split_whitespace",
]
