"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class Boundary(Enum):
    """Classification of a single sentence position."""
    START = "start"            # first letter of a token (also a one-letter token)
    WORD = "word"              # interior letter
    END = "end"                # last letter of a token
    NO_CONTENT = "no_content"  # punctuation, whitespace, digits, unmapped symbols

    @property
    def has_content(self) -> bool:
        return self is not Boundary.NO_CONTENT


@dataclass(frozen=True, slots=True)
class WordMatch:
    """A matched span in the original text, ``end`` exclusive."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class CensorOptions:
    """Options for rendering a censored sentence."""
    character: str = "*"
    source_text: str | None = None   # None = the sentence's own text


@dataclass(frozen=True, slots=True)
class CensorHit:
    """A single detected word."""
    pattern: str     # rendered pattern that matched
    start: int
    end: int
    text: str


@dataclass(slots=True)
class CensoredText:
    """Result of censoring a text."""
    text: str                                     # censored text
    hits: list[CensorHit] = field(default_factory=list)

    @property
    def flagged(self) -> bool:
        return bool(self.hits)
