# english_inflect/core/morphology/suffix_rules.py
"""
core/morphology/suffix_rules.py
-------------------------------

Ordered suffix-transformation tables for English nouns.

Each rule is a tagged value:

    SuffixRule(name, matches, strip, append)

- ``matches(word, lower)`` decides whether the rule fires;
- ``strip`` trailing characters are removed from the caller's word;
- ``append`` (lowercase) is added back, uppercased when the word is
  all-uppercase.

The stem is always the caller's own text, so "Bigfoot" keeps its capital B
and "iPod" keeps its inner capital. The first matching rule wins.

Usage
=====

    from english_inflect.core.morphology.suffix_rules import (
        PLURAL_RULES, apply_rules,
    )

    apply_rules(PLURAL_RULES, "Box", "box")   # -> "Boxes"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from english_inflect.core.domain.casing import match_suffix
from english_inflect.core.domain.tables import (
    FE_BASES,
    IE_WORDS,
    MAN_EXCEPTIONS,
    MEN_SINGULARS,
    O_EXCEPTIONS,
    SES_STEMS,
    SIBILANT_ENDINGS,
    SILENT_E_WORDS,
    VES_WORDS,
    VOWELS,
)

Predicate = Callable[[str, str], bool]


@dataclass(frozen=True)
class SuffixRule:
    """One suffix transformation. ``matches`` sees (word, lowercase word)."""

    name: str
    matches: Predicate
    strip: int
    append: str

    def apply(self, word: str) -> str:
        stem = word[: len(word) - self.strip]
        return stem + match_suffix(word, self.append)


def _is_consonant(ch: str) -> bool:
    return ch.isalpha() and ch not in VOWELS


def _penultimate_is_consonant(lower: str) -> bool:
    return len(lower) >= 2 and _is_consonant(lower[-2])


# ---------------------------------------------------------------------------
# 1. Plural predicates
# ---------------------------------------------------------------------------


def _compound_foot(word: str, lower: str) -> bool:
    return len(lower) > 4 and lower.endswith("foot")


def _compound_tooth(word: str, lower: str) -> bool:
    return len(lower) > 5 and lower.endswith("tooth")


def _man_to_men(word: str, lower: str) -> bool:
    if not lower.endswith("man"):
        return False
    if lower.endswith("human"):
        return False
    return lower not in MAN_EXCEPTIONS


def _sibilant(word: str, lower: str) -> bool:
    return lower.endswith(SIBILANT_ENDINGS)


def _consonant_y(word: str, lower: str) -> bool:
    return lower.endswith("y") and _penultimate_is_consonant(lower)


def _fe_to_ves(word: str, lower: str) -> bool:
    return lower.endswith("fe") and lower in VES_WORDS


def _f_to_ves(word: str, lower: str) -> bool:
    return lower.endswith("f") and not lower.endswith("ff") and lower in VES_WORDS


def _vowel_o(word: str, lower: str) -> bool:
    return lower.endswith("o") and len(lower) >= 2 and lower[-2] in VOWELS


def _o_exception(word: str, lower: str) -> bool:
    return lower in O_EXCEPTIONS


def _consonant_o(word: str, lower: str) -> bool:
    return lower.endswith("o") and _penultimate_is_consonant(lower)


def _always(word: str, lower: str) -> bool:
    return True


PLURAL_RULES: Tuple[SuffixRule, ...] = (
    SuffixRule("compound-foot", _compound_foot, 3, "eet"),
    SuffixRule("compound-tooth", _compound_tooth, 4, "eeth"),
    SuffixRule("man-men", _man_to_men, 2, "en"),
    SuffixRule("sibilant-es", _sibilant, 0, "es"),
    SuffixRule("consonant-y-ies", _consonant_y, 1, "ies"),
    SuffixRule("fe-ves", _fe_to_ves, 2, "ves"),
    SuffixRule("f-ves", _f_to_ves, 1, "ves"),
    SuffixRule("vowel-o-s", _vowel_o, 0, "s"),
    SuffixRule("o-exception-s", _o_exception, 0, "s"),
    SuffixRule("consonant-o-es", _consonant_o, 0, "es"),
    SuffixRule("default-s", _always, 0, "s"),
)


# ---------------------------------------------------------------------------
# 2. Singular predicates
# ---------------------------------------------------------------------------

# Endings that took a bare "es" in the plural (boxes, churches, buzzes).
_ES_AFTER: Tuple[str, ...] = ("ss", "sh", "ch", "x", "zz", "tz")


def _compound_feet(word: str, lower: str) -> bool:
    return len(lower) > 4 and lower.endswith("feet")


def _compound_teeth(word: str, lower: str) -> bool:
    return len(lower) > 5 and lower.endswith("teeth")


def _men_to_man(word: str, lower: str) -> bool:
    return len(lower) > 3 and lower.endswith("men") and lower not in MEN_SINGULARS


def _ves_to_fe(word: str, lower: str) -> bool:
    return lower.endswith("ves") and lower[:-3] in FE_BASES


def _ves_to_f(word: str, lower: str) -> bool:
    return lower.endswith("ves") and lower[:-3] + "f" in VES_WORDS


def _ie_word(word: str, lower: str) -> bool:
    return lower.endswith("ies") and lower[:-1] in IE_WORDS


def _consonant_ies(word: str, lower: str) -> bool:
    return len(lower) > 3 and lower.endswith("ies") and _is_consonant(lower[-4])


def _silent_e(word: str, lower: str) -> bool:
    return lower.endswith("es") and lower[:-1] in SILENT_E_WORDS


def _es_after_sibilant(word: str, lower: str) -> bool:
    return lower.endswith("es") and lower[:-2].endswith(_ES_AFTER)


def _consonant_oes(word: str, lower: str) -> bool:
    if not lower.endswith("oes"):
        return False
    base = lower[:-2]
    return base not in O_EXCEPTIONS and _penultimate_is_consonant(base)


def _ses_stem(word: str, lower: str) -> bool:
    return lower.endswith("es") and lower[:-2] in SES_STEMS


def _bare_s(word: str, lower: str) -> bool:
    if len(lower) < 2 or not lower.endswith("s"):
        return False
    if lower.endswith(("ss", "us", "is")):
        return False
    return lower not in SES_STEMS


SINGULAR_RULES: Tuple[SuffixRule, ...] = (
    SuffixRule("compound-feet", _compound_feet, 3, "oot"),
    SuffixRule("compound-teeth", _compound_teeth, 4, "ooth"),
    SuffixRule("men-man", _men_to_man, 2, "an"),
    SuffixRule("ves-fe", _ves_to_fe, 3, "fe"),
    SuffixRule("ves-f", _ves_to_f, 3, "f"),
    SuffixRule("ie-word", _ie_word, 1, ""),
    SuffixRule("consonant-ies-y", _consonant_ies, 3, "y"),
    SuffixRule("silent-e", _silent_e, 1, ""),
    SuffixRule("sibilant-es", _es_after_sibilant, 2, ""),
    SuffixRule("consonant-oes", _consonant_oes, 2, ""),
    SuffixRule("ses-stem", _ses_stem, 2, ""),
    SuffixRule("bare-s", _bare_s, 1, ""),
)


def find_rule(rules: Sequence[SuffixRule], word: str, lower: str) -> Optional[SuffixRule]:
    """Return the first rule that matches, or None."""
    for rule in rules:
        if rule.matches(word, lower):
            return rule
    return None


def apply_rules(rules: Sequence[SuffixRule], word: str, lower: str) -> Optional[str]:
    """Apply the first matching rule; None when no rule fires."""
    rule = find_rule(rules, word, lower)
    if rule is None:
        return None
    return rule.apply(word)


__all__ = [
    "SuffixRule",
    "PLURAL_RULES",
    "SINGULAR_RULES",
    "find_rule",
    "apply_rules",
]
