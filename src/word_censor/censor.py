"""Censor — the main API.  Many words, one text.

Usage:
    from word_censor import Censor, CensorConfig

    censor = Censor(CensorConfig(words=["bar", "**foo**"]))   # reusable

    result = censor.censor("b a r and a foooo")
    print(result.text)       # "***** and a *****"
    print(result.flagged)    # True
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .pattern import DEFAULT_MARKER_WIDTH
from .sentence import Sentence
from .types import CensorHit, CensoredText, CensorOptions
from .word import Word

logger = logging.getLogger(__name__)


@dataclass
class CensorConfig:
    """Configuration for the Censor."""
    words: list[str] = field(default_factory=list)
    character: str = "*"                  # emitted once per masked codepoint
    marker_width: int = DEFAULT_MARKER_WIDTH
    letters_only: bool = False            # leave separators inside a hit visible
    extended_confusables: bool = False    # consult the confusable_homoglyphs database
    # Matched texts that should NEVER be censored (case-insensitive)
    allow_list: set[str] = field(default_factory=set)


class Censor:
    """Word group: checks and censors text against every configured word."""

    def __init__(self, config: CensorConfig | None = None) -> None:
        self.config = config or CensorConfig()
        self._allow = {entry.casefold() for entry in self.config.allow_list}
        self._words: tuple[Word, ...] = tuple(
            Word(
                entry,
                marker_width=self.config.marker_width,
                extended_confusables=self.config.extended_confusables,
            )
            for entry in self.config.words
        )
        logger.debug("compiled %d words", len(self._words))

    @property
    def words(self) -> tuple[Word, ...]:
        return self._words

    def sentence(self, text: str) -> Sentence:
        return Sentence(text, extended_confusables=self.config.extended_confusables)

    def find(self, text: str) -> list[CensorHit]:
        """Every hit of every word, sorted by offset, overlaps merged."""
        return self._hits(self.sentence(text))

    def check(self, text: str) -> bool:
        """True if any word matches ``text``."""
        return bool(self._hits(self.sentence(text)))

    def censor(self, text: str) -> CensoredText:
        """Censor ``text``, returning the new text and what was hit."""
        sentence = self.sentence(text)
        hits = self._hits(sentence)
        for hit in hits:
            sentence.mark(hit.start, hit.end, letters_only=self.config.letters_only)
        censored = sentence.to_censored_string(CensorOptions(character=self.config.character))
        if hits:
            logger.debug("censored %d hits", len(hits))
        return CensoredText(text=censored, hits=hits)

    def censor_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Censor a list of OpenAI-format messages.

        Returns new message dicts with content censored.  Does NOT
        mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                out.append({**msg, content_key: self.censor(content).text})
            else:
                out.append(msg)
        return out

    def _allowed(self, sentence: Sentence, start: int, end: int) -> bool:
        """True if the hit, or the whole token(s) it sits in, is allow-listed."""
        if not self._allow:
            return False
        text = sentence.text
        if text[start:end].casefold() in self._allow:
            return True
        boundaries = sentence.boundaries
        while start > 0 and boundaries[start - 1].has_content:
            start -= 1
        while end < len(text) and boundaries[end].has_content:
            end += 1
        return text[start:end].casefold() in self._allow

    def _hits(self, sentence: Sentence) -> list[CensorHit]:
        text = sentence.text
        found: list[CensorHit] = []
        for word in self._words:
            for match in word.find_all(sentence):
                if self._allowed(sentence, match.start, match.end):
                    continue
                found.append(CensorHit(
                    pattern=str(word),
                    start=match.start,
                    end=match.end,
                    text=text[match.start:match.end],
                ))
        return _merge_overlapping(found, text)


def _merge_overlapping(hits: list[CensorHit], text: str) -> list[CensorHit]:
    """Merge overlapping hits across words, keeping the first pattern."""
    if not hits:
        return hits
    ordered = sorted(hits, key=lambda h: (h.start, -(h.end - h.start)))
    merged: list[CensorHit] = [ordered[0]]
    for hit in ordered[1:]:
        last = merged[-1]
        if hit.start < last.end:
            if hit.end > last.end:
                merged[-1] = CensorHit(
                    pattern=last.pattern,
                    start=last.start,
                    end=hit.end,
                    text=text[last.start:hit.end],
                )
            continue
        merged.append(hit)
    return merged
