"""Word pattern compiler.

Grammar, read left to right:

    **      at the very start: the word may begin mid-token (left unbound)
    **      at the very end: the word may end mid-token (right unbound)
    \\x     the character x, literally
    [abc]   one slot accepting any of a, b, c
    x       one slot accepting x

The wildcard marker is ``"*" * marker_width``; the width (1 or 2) is fixed at
compile time.  Every character goes through the confusable map and is
lowercased, so ``"BАR"`` (Cyrillic А) compiles like ``"bar"``.  Characters
with no letter content (spaces, punctuation, digits, a ``*`` that isn't a
marker) produce no slot: ``"bad word"`` and ``"badword"`` are the same word.
"""

from __future__ import annotations
from dataclasses import dataclass

from .confusables import resolve
from .errors import (
    DanglingEscapeError,
    EmptyPatternError,
    UnterminatedGroupError,
    WildcardOnlyPatternError,
)

WILDCARD = "*"
ESCAPE = "\\"
GROUP_START = "["
GROUP_END = "]"

DEFAULT_MARKER_WIDTH = 2

# A part renders as a single letter or as a group of alternatives.
Part = str | tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    bound_left: bool
    bound_right: bool
    parts: tuple[Part, ...]
    marker_width: int = DEFAULT_MARKER_WIDTH

    @property
    def slots(self) -> tuple[frozenset[str], ...]:
        return tuple(frozenset(part) for part in self.parts)

    def render(self) -> str:
        marker = WILDCARD * self.marker_width
        body = "".join(
            part if isinstance(part, str) else GROUP_START + "".join(part) + GROUP_END
            for part in self.parts
        )
        return (
            ("" if self.bound_left else marker)
            + body
            + ("" if self.bound_right else marker)
        )


@dataclass(frozen=True, slots=True)
class _Literal:
    char: str
    escaped: bool = False

    @property
    def is_wildcard(self) -> bool:
        return self.char == WILDCARD and not self.escaped


def _tokenize(pattern: str) -> list[_Literal | list[str]]:
    tokens: list[_Literal | list[str]] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == ESCAPE:
            if i + 1 == n:
                raise DanglingEscapeError(pattern)
            tokens.append(_Literal(pattern[i + 1], escaped=True))
            i += 2
        elif c == GROUP_START:
            group: list[str] = []
            i += 1
            while True:
                if i >= n:
                    raise UnterminatedGroupError(pattern)
                c = pattern[i]
                if c == GROUP_END:
                    i += 1
                    break
                if c == ESCAPE:
                    if i + 1 == n:
                        raise UnterminatedGroupError(pattern)
                    group.append(pattern[i + 1])
                    i += 2
                    continue
                group.append(c)
                i += 1
            tokens.append(group)
        else:
            tokens.append(_Literal(c))
            i += 1
    return tokens


def _is_marker(tokens: list[_Literal | list[str]], width: int) -> bool:
    return len(tokens) == width and all(
        isinstance(t, _Literal) and t.is_wildcard for t in tokens
    )


def compile_pattern(
    pattern: str,
    *,
    marker_width: int = DEFAULT_MARKER_WIDTH,
    extended_confusables: bool = False,
) -> CompiledPattern:
    """Parse ``pattern`` into boundedness flags and letter slots.

    Raises a ``PatternError`` subclass for malformed patterns.
    """
    if marker_width not in (1, 2):
        raise ValueError(f"marker_width must be 1 or 2, got {marker_width}")
    if not pattern:
        raise EmptyPatternError(pattern)

    tokens = _tokenize(pattern)

    bound_left = not _is_marker(tokens[:marker_width], marker_width)
    if not bound_left:
        tokens = tokens[marker_width:]
    bound_right = not _is_marker(tokens[-marker_width:], marker_width)
    if not bound_right:
        tokens = tokens[:-marker_width]

    parts: list[Part] = []
    for token in tokens:
        if isinstance(token, _Literal):
            parts.extend(resolve(token.char, extended_confusables))
            continue

        # Group members must stand for exactly one letter.
        members: list[str] = []
        for char in token:
            letter = resolve(char, extended_confusables)
            if len(letter) == 1 and letter not in members:
                members.append(letter)
        if len(members) == 1:
            parts.append(members[0])
        elif members:
            parts.append(tuple(members))

    if not parts:
        raise WildcardOnlyPatternError(pattern)

    return CompiledPattern(
        bound_left=bound_left,
        bound_right=bound_right,
        parts=tuple(parts),
        marker_width=marker_width,
    )
