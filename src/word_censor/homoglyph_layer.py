"""Extended homoglyph lookup backed by the Unicode confusables database.

Catches look-alikes the built-in table misses (Cherokee, Armenian, Coptic,
Lisu ...).  Uses confusable_homoglyphs under the hood and only runs for
characters the built-in layers could not resolve.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import ModuleType

logger = logging.getLogger(__name__)

# Lazy singleton: don't load the confusables JSON until first use
_confusables: ModuleType | None = None


def _get_confusables() -> ModuleType:
    """Lazy-import the confusable_homoglyphs data module."""
    global _confusables
    if _confusables is None:
        from confusable_homoglyphs import confusables

        logger.debug("loaded confusable_homoglyphs database")
        _confusables = confusables
    return _confusables


def latin_homoglyph(char: str) -> str:
    """Return the lowercase ASCII letter ``char`` can be mistaken for, or ""."""
    found = _get_confusables().is_confusable(char, preferred_aliases=["latin"])
    if not found:
        return ""
    for entry in found:
        for homoglyph in entry.get("homoglyphs") or []:
            c = homoglyph.get("c", "")
            if len(c) == 1 and c.isascii() and c.isalpha():
                return c.lower()
    return ""
