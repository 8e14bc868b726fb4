"""Text normalized for matching, plus its censor mask.

Usage:
    from word_censor import Sentence, Word

    original = "Pepe ate a banana"
    sentence = Sentence(original)    # one per text
    word = Word("pepe")              # reusable, shareable

    word.scan(sentence)              # True, marks "Pepe" in the mask
    sentence.to_censored_string()    # "**** ate a banana"

Every codepoint of the original text keeps its own position: one entry in
``contents``, one ``Boundary`` and one mask bit.  The offset table back to
the original text is therefore the identity.

The mask is the only mutable state.  It has a single writer: run words
against a sentence one after the other, or guard it with a lock.
Masked positions are out of play for later scans, so repeated
``word.scan(sentence)`` calls walk through the occurrences one by one.
"""

from __future__ import annotations
from typing import NamedTuple

from .confusables import resolve
from .types import Boundary, CensorOptions


class Letter(NamedTuple):
    """One canonical letter in reading order, as the matcher sees it."""
    letter: str
    position: int        # offset in the original text
    token_start: bool    # first letter of its token
    token_end: bool      # last letter of its token


class Sentence:
    """Canonical letters, token boundaries and a mask over a text."""

    __slots__ = ("_text", "_contents", "_boundaries", "_letters", "_mask")

    def __init__(self, text: str, *, extended_confusables: bool = False) -> None:
        self._text = text
        resolved = [resolve(char, extended_confusables) for char in text]
        # No-content positions keep the original character so separators
        # render verbatim.
        self._contents = [letters or char for letters, char in zip(resolved, text)]
        self._boundaries = _classify([bool(letters) for letters in resolved])
        self._letters = self._build_letters()
        self._mask: list[bool] = [False] * len(text)

    def _build_letters(self) -> tuple[Letter, ...]:
        letters: list[Letter] = []
        size = len(self._boundaries)
        for pos, boundary in enumerate(self._boundaries):
            if boundary is Boundary.NO_CONTENT:
                continue
            at_end = pos + 1 == size or self._boundaries[pos + 1] is Boundary.NO_CONTENT
            chars = self._contents[pos]
            for i, letter in enumerate(chars):
                letters.append(Letter(
                    letter=letter,
                    position=pos,
                    token_start=boundary is Boundary.START and i == 0,
                    token_end=at_end and i == len(chars) - 1,
                ))
        return tuple(letters)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The original text."""
        return self._text

    @property
    def length(self) -> int:
        return len(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    @property
    def contents(self) -> tuple[str, ...]:
        """Per position: the canonical letters, or the original separator."""
        return tuple(self._contents)

    @property
    def boundaries(self) -> tuple[Boundary, ...]:
        return tuple(self._boundaries)

    @property
    def mask(self) -> tuple[bool, ...]:
        return tuple(self._mask)

    @property
    def checked(self) -> tuple[bool, ...]:
        """Alias for ``mask``."""
        return self.mask

    def letters(self) -> tuple[Letter, ...]:
        """The logical letter stream, no-content positions left out."""
        return self._letters

    def is_token_start(self, position: int) -> bool:
        return self._boundaries[position] is Boundary.START

    def is_token_end(self, position: int) -> bool:
        boundary = self._boundaries[position]
        if boundary is Boundary.END:
            return True
        if boundary is not Boundary.START:
            return False
        nxt = position + 1
        return nxt == len(self._boundaries) or self._boundaries[nxt] is Boundary.NO_CONTENT

    def to_string(self) -> str:
        return "".join(self._contents)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Sentence({self._text!r})"

    # ------------------------------------------------------------------
    # Mask
    # ------------------------------------------------------------------

    def mark(self, start: int, end: int, *, letters_only: bool = False) -> None:
        """Set the mask for original offsets ``[start, end)``."""
        if not 0 <= start < end <= len(self._mask):
            raise ValueError(f"invalid span [{start}, {end}) for length {len(self._mask)}")
        for pos in range(start, end):
            if letters_only and self._boundaries[pos] is Boundary.NO_CONTENT:
                continue
            self._mask[pos] = True

    def reset(self) -> None:
        """Clear every mask bit."""
        self._mask = [False] * len(self._mask)

    @property
    def is_marked(self) -> bool:
        return any(self._mask)

    def to_censored_string(
        self,
        options: CensorOptions | None = None,
        *,
        character: str | None = None,
        source_text: str | None = None,
    ) -> str:
        """Render ``source_text`` with every masked position replaced.

        Each masked codepoint becomes one copy of ``character``; everything
        else is copied unchanged.
        """
        options = options or CensorOptions()
        if character is None:
            character = options.character
        if source_text is None:
            source_text = options.source_text
        if source_text is None:
            source_text = self._text

        if len(source_text) != len(self._mask):
            raise ValueError("The original sentence must have the same length as the sentence")

        return "".join(
            character if masked else c
            for c, masked in zip(source_text, self._mask)
        )


def _classify(content: list[bool]) -> list[Boundary]:
    """Token boundaries from per-position "has a letter" flags."""
    boundaries: list[Boundary] = []
    run = 0  # letters seen so far in the current token
    for has_letter in content:
        if not has_letter:
            if run > 1:
                boundaries[-1] = Boundary.END
            boundaries.append(Boundary.NO_CONTENT)
            run = 0
            continue
        boundaries.append(Boundary.START if run == 0 else Boundary.WORD)
        run += 1
    if run > 1:
        boundaries[-1] = Boundary.END
    return boundaries
