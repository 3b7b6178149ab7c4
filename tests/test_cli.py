import io

import pytest

from copyrat.cli import main, run
from copyrat.config import Config, parse_config
from copyrat.regexes import parse_pattern_name


SAMPLE = [
    "lorem 127.0.0.1 lorem",
    "",
    "Barcelona https://en.wikipedia.org/wiki/Barcelona -   ",
]


def test_run_without_patterns_finds_nothing():
    config = Config()
    assert run(SAMPLE, config) is None


def test_run_with_unmatched_named_pattern():
    config = Config(named_patterns=[parse_pattern_name("email")])
    assert run(SAMPLE, config) is None


def test_run_ansi_sequences_are_never_spans():
    config = Config(use_all_patterns=False)
    lines = ["\x1b[31mred\x1b[0m text", "\x1b[1;32mgreen"]
    assert run(lines, config) is None


def test_run_empty_input():
    config = parse_config(["-A"])
    assert run([""], config) is None


def test_run_custom_pattern_without_group_is_rejected():
    config = Config(custom_patterns=["foo"])
    with pytest.raises(ValueError):
        run(["foo bar"], config)


def test_main_returns_one_when_nothing_matches(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("nothing to see here\n"))
    assert main(["-x", "email"]) == 1
    assert capsys.readouterr().out == ""


def test_main_rejects_unknown_alphabet(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("text\n"))
    with pytest.raises(SystemExit) as excinfo:
        main(["-k", "klingon"])
    assert excinfo.value.code == 2


def test_main_rejects_unknown_pattern_name(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("text\n"))
    with pytest.raises(SystemExit) as excinfo:
        main(["-x", "no-such-pattern"])
    assert excinfo.value.code == 2