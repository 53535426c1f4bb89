# english_inflect/core/domain/exceptions.py
from typing import Optional


class InflectError(Exception):
    """Base class for errors raised by the inflection library."""


class InvalidPatternError(InflectError, ValueError):
    """
    Raised when a user-supplied article pattern does not compile.

    The override store is left unchanged when this is raised.
    """

    def __init__(self, pattern: str, reason: Optional[str] = None):
        self.pattern = pattern
        self.reason = reason or "invalid regular expression"
        super().__init__(f"Invalid article pattern {pattern!r}: {self.reason}")
