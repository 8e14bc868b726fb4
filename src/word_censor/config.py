"""YAML/dict config loader for word-censor.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    word_censor:
      enabled: true
      character: "*"
      marker_width: 2         # "**bar" vs "*bar"
      letters_only: false
      extended_confusables: false
      words:
        - bar
        - "**foo**"
        - "b[a4]z**"
      allow_list:
        - foobar
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

from .censor import Censor, CensorConfig
from .pattern import DEFAULT_MARKER_WIDTH
from .types import CensorHit, CensoredText

logger = logging.getLogger(__name__)


class _NoopCensor:
    """Pass-through censor when filtering is disabled."""
    words: tuple = ()

    def find(self, text: str) -> list[CensorHit]:
        return []

    def check(self, text: str) -> bool:
        return False

    def censor(self, text: str) -> CensoredText:
        return CensoredText(text=text)

    def censor_messages(self, messages: list[dict], *, content_key: str = "content") -> list[dict]:
        return messages


def _as_list(value: Any) -> list[str]:
    # A bare scalar in YAML ("words: bar") is one entry, not its characters.
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "word_censor" key or flat
    if "word_censor" in data:
        data = data["word_censor"] or {}

    return {
        "enabled": data.get("enabled", True),
        "words": _as_list(data.get("words")),
        "character": str(data.get("character", "*")),
        "marker_width": int(data.get("marker_width", DEFAULT_MARKER_WIDTH)),
        "letters_only": bool(data.get("letters_only", False)),
        "extended_confusables": bool(data.get("extended_confusables", False)),
        "allow_list": set(_as_list(data.get("allow_list"))),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    logger.debug("loaded config from %s", path)
    return load_config(raw)


def create_censor(config: dict[str, Any]) -> Censor | _NoopCensor:
    """Create a fully configured censor from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        logger.info("word censoring disabled by config")
        return _NoopCensor()

    return Censor(CensorConfig(
        words=list(cfg["words"]),
        character=cfg["character"],
        marker_width=cfg["marker_width"],
        letters_only=cfg["letters_only"],
        extended_confusables=cfg["extended_confusables"],
        allow_list=set(cfg["allow_list"]),
    ))
