"""CLI interface for word-censor.

Usage:
    # Censor plain text (stdin: text, stdout: censored text)
    echo 'what a b a a a r' | python -m word_censor.cli --word bar censor

    # Check text (stdin: text, stdout: JSON with the hits)
    echo 'rebar' | python -m word_censor.cli --word '**bar' check

    # Censor messages (stdin: JSON array of OpenAI messages, stdout: JSON)
    echo '[{"role":"user","content":"bar"}]' | \
        python -m word_censor.cli --config words.yaml censor-messages

    # Show how patterns compile
    python -m word_censor.cli --word 'fo[o]' --word '**bar' compile
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .censor import Censor
from .config import _NoopCensor, create_censor, load_config, load_from_yaml
from .errors import PatternError
from .word import Word

logger = logging.getLogger(__name__)


def _build_config(args: argparse.Namespace) -> dict:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    cfg["words"] = cfg["words"] + list(args.word or [])
    if args.character is not None:
        cfg["character"] = args.character
    if args.marker_width is not None:
        cfg["marker_width"] = args.marker_width
    if args.letters_only:
        cfg["letters_only"] = True
    if args.extended:
        cfg["extended_confusables"] = True
    return cfg


def _build_censor(args: argparse.Namespace) -> Censor | _NoopCensor:
    return create_censor(_build_config(args))


def cmd_check(args: argparse.Namespace) -> int:
    """Report hits in the text on stdin."""
    censor = _build_censor(args)
    hits = censor.find(sys.stdin.read())
    output = {
        "flagged": bool(hits),
        "hits": [
            {"pattern": h.pattern, "start": h.start, "end": h.end, "text": h.text}
            for h in hits
        ],
    }
    json.dump(output, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 1 if hits else 0


def cmd_censor(args: argparse.Namespace) -> int:
    """Censor the text on stdin."""
    censor = _build_censor(args)
    sys.stdout.write(censor.censor(sys.stdin.read()).text)
    return 0


def cmd_censor_messages(args: argparse.Namespace) -> int:
    """Censor OpenAI-format messages on stdin."""
    censor = _build_censor(args)
    messages = json.loads(sys.stdin.read())
    json.dump(censor.censor_messages(messages), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def cmd_compile(args: argparse.Namespace) -> int:
    """Print the canonical form of every configured word."""
    cfg = _build_config(args)
    rows = []
    for pattern in cfg["words"]:
        word = Word(
            pattern,
            marker_width=cfg["marker_width"],
            extended_confusables=cfg["extended_confusables"],
        )
        rows.append({
            "pattern": pattern,
            "word": str(word),
            "bound_left": word.bound_left,
            "bound_right": word.bound_right,
        })
    json.dump(rows, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="word_censor",
        description="Bad-word detection resistant to homoglyphs, repeats and splitting",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--word", action="append", help="Word pattern (repeatable)")
    parser.add_argument("--character", default=None, help="Censor character")
    parser.add_argument("--marker-width", type=int, choices=(1, 2), default=None,
                        help="Wildcard marker width")
    parser.add_argument("--letters-only", action="store_true",
                        help="Keep separators inside a hit visible")
    parser.add_argument("--extended", action="store_true",
                        help="Use the confusable_homoglyphs database")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("check", help="Report hits as JSON (stdin)")
    sub.add_parser("censor", help="Censor plain text (stdin)")
    sub.add_parser("censor-messages", help="Censor OpenAI messages (JSON stdin)")
    sub.add_parser("compile", help="Show compiled word patterns")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    cmds = {
        "check": cmd_check,
        "censor": cmd_censor,
        "censor-messages": cmd_censor_messages,
        "compile": cmd_compile,
    }
    try:
        return cmds[args.command](args)
    except PatternError as e:
        logger.debug("pattern %r rejected", e.pattern)
        sys.stderr.write(f"invalid word {e.pattern!r}: {e}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
