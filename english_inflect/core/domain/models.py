# english_inflect/core/domain/models.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field


# --- Enums ---

class CasePattern(str, Enum):
    """Case class of an input word, re-applied to computed output."""
    UPPER = "upper"              # "CHILD"
    CAPITALIZED = "capitalized"  # "Child"
    OTHER = "other"              # "child", "iPhone", "42"


class Relation(str, Enum):
    """
    Result codes of ``compare``.

    Values are plain strings so callers may compare against "s:p" etc.
    """
    EQUAL = "eq"
    SINGULAR_TO_PLURAL = "s:p"
    PLURAL_TO_SINGULAR = "p:s"
    PLURAL_TO_PLURAL = "p:p"
    UNRELATED = ""

    def __str__(self) -> str:
        return self.value


class Article(str, Enum):
    A = "a"
    AN = "an"

    def __str__(self) -> str:
        return self.value


# --- Value objects ---

class ClassicalFlags(BaseModel):
    """
    Snapshot of the six classical-mode switches.

    Immutable: setters on the engine swap in a new snapshot, so a reader that
    grabbed one keeps a consistent view for the whole call.
    """
    model_config = ConfigDict(frozen=True)

    all: bool = Field(False, description="Last bulk value assigned by classical_all()")
    ancient: bool = Field(False, description="Latin/Greek plurals (formula -> formulae)")
    persons: bool = Field(False, description="person -> persons instead of people")
    names: bool = Field(False, description="Proper names ending in a sibilant stay unchanged (Jones, Marx)")
    herd: bool = Field(False, description="Herd animals stay unchanged (bison -> bison)")
    zero: bool = Field(False, description="no() uses the singular for a zero count")

    @classmethod
    def everything(cls, enabled: bool) -> "ClassicalFlags":
        return cls(
            all=enabled,
            ancient=enabled,
            persons=enabled,
            names=enabled,
            herd=enabled,
            zero=enabled,
        )

    @property
    def all_enabled(self) -> bool:
        return (
            self.all
            and self.ancient
            and self.persons
            and self.names
            and self.herd
            and self.zero
        )


class ArticlePattern(BaseModel):
    """A user-registered a/an regex, kept with its source text for removal."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: str
    article: Article
    compiled: re.Pattern

    @classmethod
    def compile(cls, source: str, article: Article) -> "ArticlePattern":
        # Compile errors propagate; the override store turns them into InvalidPatternError.
        return cls(
            source=source,
            article=article,
            compiled=re.compile(source, re.IGNORECASE),
        )

    def matches(self, token: str) -> bool:
        return self.compiled.fullmatch(token) is not None


# --- Override tables (copy-on-write snapshots) ---

def _empty() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class NounTable:
    """User noun overrides: singular -> plural plus the derived inverse."""
    plurals: Mapping[str, str] = field(default_factory=_empty)
    singulars: Mapping[str, str] = field(default_factory=_empty)

    @classmethod
    def build(cls, plurals: Mapping[str, str]) -> "NounTable":
        return cls(
            plurals=MappingProxyType(dict(plurals)),
            singulars=MappingProxyType({p: s for s, p in plurals.items()}),
        )


@dataclass(frozen=True)
class ArticleTable:
    """User article overrides: exact words, then force-a and force-an patterns."""
    words: Mapping[str, Article] = field(default_factory=_empty)
    a_patterns: Tuple[ArticlePattern, ...] = ()
    an_patterns: Tuple[ArticlePattern, ...] = ()


@dataclass(frozen=True)
class InflectionContext:
    """What one pluralize/singularize call reads: flags plus noun overrides."""
    flags: ClassicalFlags
    nouns: NounTable
