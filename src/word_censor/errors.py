"""Pattern compilation errors.

All of them are raised from ``Word(...)`` before any instance exists.
"""

from __future__ import annotations


class PatternError(ValueError):
    """A word pattern could not be compiled."""

    message = "Invalid word pattern"

    def __init__(self, pattern: str, message: str | None = None) -> None:
        self.pattern = pattern
        super().__init__(message or self.message)


class UnterminatedGroupError(PatternError):
    message = "Unterminated character group"


class DanglingEscapeError(PatternError):
    message = "Escape character cannot be at the end of the word"


class EmptyPatternError(PatternError):
    message = "The word cannot be empty"


class WildcardOnlyPatternError(PatternError):
    message = "Wildcards cannot be the only character in the word"
