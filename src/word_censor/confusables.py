"""Confusable map — one character to the Latin letters it looks like.

Resolution is layered and stops at the first layer that has an answer:

  1. ASCII letters (lowercased)
  2. curated homoglyphs (Cyrillic, Greek, IPA, Canadian syllabics) that NFKD
     leaves alone
  3. NFKD compatibility decomposition: bold/italic/script/fraktur/
     double-struck/monospace math letters, fullwidth, circled, superscripts,
     accents, ligatures; a math-styled zero reads as "o"
  4. the Unicode character name ("NEGATIVE SQUARED LATIN CAPITAL LETTER A",
     "LATIN LETTER SMALL CAPITAL R", "LATIN SMALL LETTER O WITH STROKE")
  5. optionally, the confusable_homoglyphs database (``extended=True``)

Anything else carries no letter content and resolves to "".
"""

from __future__ import annotations
import re
import unicodedata
from functools import lru_cache

_HOMOGLYPHS: dict[str, str] = {
    # Cyrillic
    "\u0430": "a",   # а
    "\u0432": "b",   # в
    "\u0433": "r",   # г
    "\u0435": "e",   # е
    "\u043a": "k",   # к
    "\u043c": "m",   # м
    "\u043d": "h",   # н
    "\u043e": "o",   # о
    "\u043f": "n",   # п
    "\u0440": "p",   # р
    "\u0441": "c",   # с
    "\u0442": "t",   # т
    "\u0443": "y",   # у
    "\u0445": "x",   # х
    "\u044c": "b",   # ь
    "\u0455": "s",   # ѕ
    "\u0456": "i",   # і
    "\u0458": "j",   # ј
    "\u0461": "w",   # ѡ
    "\u04af": "y",   # ү
    "\u04bb": "h",   # һ
    "\u04cf": "l",   # ӏ
    "\u0501": "d",   # ԁ
    "\u051b": "q",   # ԛ
    "\u051d": "w",   # ԝ
    "\u0405": "s",   # Ѕ
    "\u0406": "i",   # І
    "\u0408": "j",   # Ј
    "\u0410": "a",   # А
    "\u0412": "b",   # В
    "\u0415": "e",   # Е
    "\u041a": "k",   # К
    "\u041c": "m",   # М
    "\u041d": "h",   # Н
    "\u041e": "o",   # О
    "\u0420": "p",   # Р
    "\u0421": "c",   # С
    "\u0422": "t",   # Т
    "\u0423": "y",   # У
    "\u0425": "x",   # Х
    "\u04ae": "y",   # Ү
    "\u04ba": "h",   # Һ
    "\u04c0": "l",   # Ӏ
    "\u0500": "d",   # Ԁ
    "\u051a": "q",   # Ԛ
    "\u051c": "w",   # Ԝ
    # Greek
    "\u03b1": "a",   # α
    "\u03b2": "b",   # β
    "\u03b3": "y",   # γ
    "\u03b5": "e",   # ε
    "\u03b7": "n",   # η
    "\u03b9": "i",   # ι
    "\u03ba": "k",   # κ
    "\u03bc": "u",   # μ
    "\u03bd": "v",   # ν
    "\u03bf": "o",   # ο
    "\u03c1": "p",   # ρ
    "\u03c2": "s",   # ς
    "\u03c4": "t",   # τ
    "\u03c5": "u",   # υ
    "\u03c7": "x",   # χ
    "\u03c9": "w",   # ω
    "\u0391": "a",   # Α
    "\u0392": "b",   # Β
    "\u0395": "e",   # Ε
    "\u0396": "z",   # Ζ
    "\u0397": "h",   # Η
    "\u0399": "i",   # Ι
    "\u039a": "k",   # Κ
    "\u039c": "m",   # Μ
    "\u039d": "n",   # Ν
    "\u039f": "o",   # Ο
    "\u03a1": "p",   # Ρ
    "\u03a4": "t",   # Τ
    "\u03a5": "y",   # Υ
    "\u03a7": "x",   # Χ
    # Latin extensions and IPA letters the name rule can't read
    "\u00df": "ss",  # ß
    "\u00e6": "ae",  # æ
    "\u00c6": "ae",  # Æ
    "\u0153": "oe",  # œ
    "\u0152": "oe",  # Œ
    "\u0131": "l",   # ı dotless i
    "\u0237": "j",   # ȷ dotless j
    "\u0250": "a",   # ɐ turned a
    "\u0251": "a",   # ɑ alpha
    "\u0254": "c",   # ɔ open o
    "\u0259": "e",   # ə schwa
    "\u025b": "e",   # ɛ open e
    "\u0261": "g",   # ɡ script g
    "\u0269": "i",   # ɩ iota
    "\u0279": "r",   # ɹ turned r
    # Canadian syllabics
    "\u142f": "v",   # ᐯ
    "\u146d": "p",   # ᑭ
    "\u146f": "d",   # ᑯ
    "\u1471": "d",   # ᑱ
    "\u1472": "b",   # ᑲ
    "\u148d": "j",   # ᒍ
    "\u14aa": "l",   # ᒪ
    "\u157c": "h",   # ᕼ
}

_LATIN_NAME = re.compile(
    r"\bLATIN (?:CAPITAL |SMALL )?LETTER (?:SMALL CAPITAL )?([A-Z])(?: WITH .+)?$"
)
_REGIONAL_NAME = re.compile(r"^REGIONAL INDICATOR SYMBOL LETTER ([A-Z])$")

# Digits drawn in the math alphanumerics block that read as letters.
_STYLED_DIGITS: dict[str, str] = {"0": "o"}


def _from_name(char: str) -> str:
    name = unicodedata.name(char, "")
    m = _LATIN_NAME.search(name) or _REGIONAL_NAME.match(name)
    return m.group(1).lower() if m else ""


@lru_cache(maxsize=4096)
def resolve(char: str, extended: bool = False) -> str:
    """Return the canonical lowercase letters ``char`` represents, or ""."""
    if len(char) != 1:
        raise TypeError(f"resolve() expects a single character, got {char!r}")

    if char.isascii():
        return char.lower() if char.isalpha() else ""

    if char in _HOMOGLYPHS:
        return _HOMOGLYPHS[char]

    # Combining marks decorate the previous letter; they are never one.
    if unicodedata.category(char).startswith("M"):
        return ""

    decomposed = unicodedata.normalize("NFKD", char)
    if decomposed != char:
        if decomposed in _STYLED_DIGITS and unicodedata.name(char, "").startswith("MATHEMATICAL"):
            return _STYLED_DIGITS[decomposed]
        letters = "".join(resolve(c, extended) for c in decomposed if c != char)
        if letters:
            return letters

    letters = _from_name(char)
    if letters or not extended:
        return letters

    from .homoglyph_layer import latin_homoglyph
    return latin_homoglyph(char)


def resolve_text(text: str, *, extended: bool = False) -> str:
    """Resolve every character of ``text`` and join the letters."""
    return "".join(resolve(c, extended) for c in text)