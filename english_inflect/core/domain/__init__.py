# english_inflect/core/domain/__init__.py
from .exceptions import InflectError, InvalidPatternError
from .models import (
    Article,
    ArticlePattern,
    ArticleTable,
    CasePattern,
    ClassicalFlags,
    InflectionContext,
    NounTable,
    Relation,
)

__all__ = [
    "Article",
    "ArticlePattern",
    "ArticleTable",
    "CasePattern",
    "ClassicalFlags",
    "InflectError",
    "InflectionContext",
    "InvalidPatternError",
    "NounTable",
    "Relation",
]
