"""Tests for the word group censor, config loading and the CLI."""

import sys, os, io, json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from word_censor import Censor, CensorConfig, PatternError, create_censor, load_config
from word_censor.config import load_from_yaml
from word_censor import cli


# ── Censor ───────────────────────────────────────────────────────────

def test_censor_multiple_words():
    c = Censor(CensorConfig(words=["bar", "**foo**"]))
    result = c.censor("b a r and a foooo")
    assert result.text == "***** and a *****"
    assert result.flagged
    assert [(h.start, h.end) for h in result.hits] == [(0, 5), (12, 17)]
    assert result.hits[1].text == "foooo"
    assert result.hits[1].pattern == "**foo**"


def test_censor_clean_text_unchanged():
    c = Censor(CensorConfig(words=["bar"]))
    result = c.censor("nothing to see")
    assert result.text == "nothing to see"
    assert not result.flagged
    assert not c.check("nothing to see")


def test_censor_every_occurrence():
    c = Censor(CensorConfig(words=["bar"]))
    assert c.censor("bar! BAR? bаr.").text == "***! ***? ***."


def test_censor_character_and_letters_only():
    c = Censor(CensorConfig(words=["bar"], character="#", letters_only=True))
    assert c.censor("b-a-r").text == "#-#-#"


def test_overlapping_hits_merge():
    c = Censor(CensorConfig(words=["**ba**", "**ar**"]))
    hits = c.find("bar")
    assert [(h.start, h.end) for h in hits] == [(0, 3)]
    assert c.censor("bar").text == "***"


def test_allow_list():
    c = Censor(CensorConfig(words=["**bar**"], allow_list={"Barn"}))
    assert c.censor("barn").text == "barn"
    assert c.censor("bars").text == "***s"
    assert not c.check("BARN")


def test_censor_marker_width_config():
    c = Censor(CensorConfig(words=["*bar"], marker_width=1))
    assert c.check("rebar")
    assert [str(w) for w in c.words] == ["*bar"]


def test_bad_pattern_fails_whole_censor():
    with pytest.raises(PatternError):
        Censor(CensorConfig(words=["ok", "[broken"]))


def test_censor_messages_does_not_mutate():
    c = Censor(CensorConfig(words=["bar"]))
    messages = [
        {"role": "system", "content": "Be nice."},
        {"role": "user", "content": "you bar"},
        {"role": "user", "content": None},
    ]
    out = c.censor_messages(messages)
    assert out[0] == messages[0]
    assert out[1]["content"] == "you ***"
    assert messages[1]["content"] == "you bar"
    assert out[2] is messages[2]


# ── Config ───────────────────────────────────────────────────────────

def test_load_config_nested_and_defaults():
    cfg = load_config({"word_censor": {"words": ["bar"], "marker_width": 1}})
    assert cfg["enabled"] is True
    assert cfg["words"] == ["bar"]
    assert cfg["marker_width"] == 1
    assert cfg["character"] == "*"
    assert cfg["allow_list"] == set()


def test_load_config_scalar_lists():
    cfg = load_config({"words": "bar", "allow_list": "barn"})
    assert cfg["words"] == ["bar"]
    assert cfg["allow_list"] == {"barn"}


def test_create_censor_from_dict():
    c = create_censor({"words": ["bar"], "character": "-"})
    assert c.censor("a bar").text == "a ---"


def test_create_censor_disabled():
    c = create_censor({"enabled": False, "words": ["bar"]})
    assert c.censor("bar").text == "bar"
    assert not c.check("bar")


def test_load_from_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "words.yaml"
    path.write_text(
        "word_censor:\n"
        "  character: '#'\n"
        "  words:\n"
        "    - bar\n"
        "    - '**foo'\n",
        encoding="utf-8",
    )
    cfg = load_from_yaml(path)
    assert cfg["words"] == ["bar", "**foo"]
    assert create_censor(cfg).censor("bar, kungfoo").text == "###, kung###"


def test_load_from_yaml_scalar_word(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "words.yaml"
    path.write_text("words: bar\n", encoding="utf-8")
    cfg = load_from_yaml(path)
    assert cfg["words"] == ["bar"]
    assert create_censor(cfg).censor("a b r bar").text == "a b r ***"


# ── CLI ──────────────────────────────────────────────────────────────

def _run(monkeypatch, capsys, argv, stdin=""):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    code = cli.main(argv)
    return code, capsys.readouterr()


def test_cli_censor(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["--word", "bar", "censor"], "a b a r")
    assert code == 0
    assert out.out == "a *****"


def test_cli_disabled_config_passes_text_through(monkeypatch, capsys, tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "words.yaml"
    path.write_text("word_censor:\n  enabled: false\n  words: [bar]\n", encoding="utf-8")
    code, out = _run(monkeypatch, capsys, ["--config", str(path), "censor"], "bar")
    assert code == 0
    assert out.out == "bar"


def test_cli_check(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["--word", "**bar", "check"], "rebar")
    assert code == 1
    data = json.loads(out.out)
    assert data["flagged"] is True
    assert data["hits"][0]["text"] == "bar"


def test_cli_censor_messages(monkeypatch, capsys):
    msgs = [{"role": "user", "content": "bar"}]
    code, out = _run(monkeypatch, capsys, ["--word", "bar", "censor-messages"], json.dumps(msgs))
    assert code == 0
    assert json.loads(out.out) == [{"role": "user", "content": "***"}]


def test_cli_compile(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["--word", "fo[o]", "--word", "**bar", "compile"])
    assert code == 0
    rows = json.loads(out.out)
    assert [r["word"] for r in rows] == ["foo", "**bar"]
    assert rows[1]["bound_left"] is False


def test_cli_pattern_error(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["--word", "[bar", "censor"], "bar")
    assert code == 2
    assert "Unterminated character group" in out.err
