"""A compiled word pattern and the matcher that runs it over sentences.

Usage:
    from word_censor import Sentence, Word

    word = Word("bar")                  # reusable, immutable
    word.find("a b aaa rrr!")           # WordMatch(start=2, end=11)

    sentence = Sentence("I saw a bbbaaaarrr")
    word.scan(sentence)                 # True, mask updated
    sentence.to_censored_string()       # "I saw a **********"

Matching works on the sentence's letter stream, where separators are
already gone (a word may span "b a r") and a run of one repeated letter
("aaaa") is consumed by a single slot.
"""

from __future__ import annotations
from typing import Iterator

from .pattern import DEFAULT_MARKER_WIDTH, CompiledPattern, compile_pattern
from .sentence import Letter, Sentence
from .types import WordMatch


class Word:
    """A bad-word pattern that can be matched against many sentences."""

    __slots__ = ("_pattern", "_compiled", "_match_slots", "_extended")

    def __init__(
        self,
        pattern: str,
        *,
        marker_width: int = DEFAULT_MARKER_WIDTH,
        extended_confusables: bool = False,
    ) -> None:
        self._pattern = pattern
        self._extended = extended_confusables
        self._compiled: CompiledPattern = compile_pattern(
            pattern,
            marker_width=marker_width,
            extended_confusables=extended_confusables,
        )

        # A doubled letter in the pattern is one logical letter, the same
        # way a doubled letter in the text is.
        merged: list[frozenset[str]] = []
        for slot in self._compiled.slots:
            if not merged or merged[-1] != slot:
                merged.append(slot)
        self._match_slots: tuple[frozenset[str], ...] = tuple(merged)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def pattern(self) -> str:
        """The pattern as given."""
        return self._pattern

    @property
    def bound_left(self) -> bool:
        return self._compiled.bound_left

    @property
    def bound_right(self) -> bool:
        return self._compiled.bound_right

    @property
    def slots(self) -> tuple[frozenset[str], ...]:
        return self._compiled.slots

    @property
    def marker_width(self) -> int:
        return self._compiled.marker_width

    def __len__(self) -> int:
        return len(self._match_slots)

    def to_string(self) -> str:
        return self._compiled.render()

    def __str__(self) -> str:
        return self._compiled.render()

    def __repr__(self) -> str:
        return f"Word({self._compiled.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._compiled == other._compiled

    def __hash__(self) -> int:
        return hash(self._compiled)

    # ------------------------------------------------------------------
    # Stateless matching
    # ------------------------------------------------------------------

    def find(self, text: str, *, inclusive_end: bool = False) -> WordMatch | None:
        """Return the first match in ``text``, or None."""
        return self.find_in(self._sentence(text), inclusive_end=inclusive_end)

    def find_in(self, sentence: Sentence, *, inclusive_end: bool = False) -> WordMatch | None:
        """Return the first match in ``sentence`` without touching its mask."""
        for match in self._iter_matches(sentence, inclusive_end=inclusive_end):
            return match
        return None

    def find_all(
        self,
        target: str | Sentence,
        *,
        inclusive_end: bool = False,
    ) -> list[WordMatch]:
        """Every non-overlapping match, left to right."""
        sentence = target if isinstance(target, Sentence) else self._sentence(target)
        return list(self._iter_matches(sentence, inclusive_end=inclusive_end, first=False))

    # ------------------------------------------------------------------
    # Stateful matching
    # ------------------------------------------------------------------

    def scan(self, sentence: Sentence, *, letters_only: bool = False) -> bool:
        """Mark the first match in ``sentence`` that isn't masked yet.

        A span touching an already-masked position is passed over, so
        ``while word.scan(sentence)`` visits each occurrence once.  Returns
        False, leaving the mask alone, when nothing new matches.
        """
        for match in self._iter_matches(sentence, skip_marked=True):
            sentence.mark(match.start, match.end, letters_only=letters_only)
            return True
        return False

    def scan_all(self, sentence: Sentence, *, letters_only: bool = False) -> int:
        """Mark every new non-overlapping match; return how many were found."""
        count = 0
        for match in self._iter_matches(sentence, first=False, skip_marked=True):
            sentence.mark(match.start, match.end, letters_only=letters_only)
            count += 1
        return count

    # ------------------------------------------------------------------
    # Engine
    # ------------------------------------------------------------------

    def _sentence(self, text: str) -> Sentence:
        return Sentence(text, extended_confusables=self._extended)

    def _iter_matches(
        self,
        sentence: Sentence,
        *,
        inclusive_end: bool = False,
        first: bool = True,
        skip_marked: bool = False,
    ) -> Iterator[WordMatch]:
        letters = sentence.letters()
        # Snapshot; spans yielded later never overlap ones marked meanwhile.
        mask = sentence.mask if skip_marked else ()
        index = 0
        while index < len(letters):
            if self.bound_left and not letters[index].token_start:
                index += 1
                continue

            last = self._match_at(letters, index)
            if last is None:
                index += 1
                continue

            start = letters[index].position
            end = letters[last].position
            if skip_marked and any(mask[start:end + 1]):
                index += 1
                continue

            yield WordMatch(
                start=start,
                end=end if inclusive_end else end + 1,
            )
            if first:
                return

            # Resume after the last matched position; an expanded character
            # ("æ") puts several letters on one position.
            index = last + 1
            while index < len(letters) and letters[index].position <= end:
                index += 1

    def _match_at(self, letters: tuple[Letter, ...], index: int) -> int | None:
        """Walk the slots from stream ``index``; return the last index consumed.

        Each slot takes the whole run of its letter.  The first slot that
        doesn't accept the next letter ends the attempt.
        """
        size = len(letters)
        pos = index
        run: list[int] = []
        for slot in self._match_slots:
            if pos >= size or letters[pos].letter not in slot:
                return None
            letter = letters[pos].letter
            run = [pos]
            pos += 1
            while pos < size and letters[pos].letter == letter:
                run.append(pos)
                pos += 1

        if not self.bound_right:
            return run[-1]

        # The final run may continue into the next token ("bar rr"); stop at
        # the furthest letter that closes a token.
        for last in reversed(run):
            if letters[last].token_end:
                return last
        return None
