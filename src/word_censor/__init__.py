"""word-censor — bad-word detection that sees through homoglyphs, repeats and splitting."""

from .censor import Censor, CensorConfig
from .config import create_censor, load_config, load_from_yaml
from .confusables import resolve, resolve_text
from .errors import (
    DanglingEscapeError,
    EmptyPatternError,
    PatternError,
    UnterminatedGroupError,
    WildcardOnlyPatternError,
)
from .sentence import Sentence
from .types import Boundary, CensoredText, CensorHit, CensorOptions, WordMatch
from .word import Word

__all__ = [
    "Censor", "CensorConfig",
    "create_censor", "load_config", "load_from_yaml",
    "resolve", "resolve_text",
    "PatternError", "UnterminatedGroupError", "DanglingEscapeError",
    "EmptyPatternError", "WildcardOnlyPatternError",
    "Sentence", "Word",
    "Boundary", "WordMatch", "CensorOptions", "CensorHit", "CensoredText",
]
__version__ = "0.1.0"
