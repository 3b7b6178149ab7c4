import pytest

from copyrat.errors import UnknownPatternName
from copyrat.regexes import (
    EXCLUDE_PATTERNS,
    PATTERNS,
    NamedPattern,
    parse_pattern_name,
)


@pytest.mark.parametrize("name,pattern", PATTERNS + EXCLUDE_PATTERNS)
def test_every_pattern_compiles_with_a_capture_group(name, pattern):
    assert NamedPattern(name, pattern).compile().groups >= 1


def test_every_catalog_name_parses_to_a_distinct_pattern():
    parsed = [parse_pattern_name(name) for name, _ in PATTERNS]
    assert len({named.name for named in parsed}) == len(PATTERNS)
    assert [named.pattern for named in parsed] == [pattern for _, pattern in PATTERNS]


@pytest.mark.parametrize("name", [name for name, _ in PATTERNS])
def test_parse_pattern_name_round_trip(name):
    named = parse_pattern_name(name)
    assert named.name == name
    assert named.pattern == dict(PATTERNS)[name]


def test_parse_unknown_pattern_name():
    with pytest.raises(UnknownPatternName):
        parse_pattern_name("not-a-pattern")


def test_named_pattern_equality():
    assert parse_pattern_name("email") == NamedPattern("email", dict(PATTERNS)["email"])


def _capture(name, text):
    match = parse_pattern_name(name).compile().search(text)
    return match.group(1)


def test_email_pattern_captures_address():
    assert _capture("email", "contact: someone@example.com now") == "someone@example.com"


def test_url_pattern_captures_url():
    url = "https://en.wikipedia.org/wiki/Barcelona"
    assert _capture("url", f"Barcelona {url} -") == url


def test_markdown_url_captures_target_only():
    target = "https://example.com/page"
    assert _capture("markdown-url", f"see [page]({target})") == target


@pytest.mark.parametrize(
    "name,text,expected",
    [
        ("diff-a", "--- a/src/main.rs", "src/main.rs"),
        ("diff-b", "+++ b/src/lib.rs", "src/lib.rs"),
        (
            "uuid",
            "id 123e4567-e89b-12d3-a456-426614174000 end",
            "123e4567-e89b-12d3-a456-426614174000",
        ),
        ("ipv4", "lorem 127.0.0.1 lorem", "127.0.0.1"),
        ("quoted-backtick", "The error was `Error no such file`", "Error no such file"),
        ("quoted-single", "say 'hello there' now", "hello there"),
        ("quoted-double", 'say "hello there" now', "hello there"),
        ("datetime", "at 2021-03-04T12:23:34 ok", "2021-03-04T12:23:34"),
        ("command-line-args", "cmd --output=file.txt", "file.txt"),
        ("hexcolor", "color #AbCdEf;", "#AbCdEf"),
        ("version", "release v1.2.3 done", "v1.2.3"),
        ("pointer-address", "at 0xDEADbeef", "0xDEADbeef"),
        ("digits", "code 12345 here", "12345"),
        ("path", "path: /usr/local/bin/git", "/usr/local/bin/git"),
    ],
)
def test_pattern_captures(name, text, expected):
    assert _capture(name, text) == expected


def test_ansi_color_pattern_matches_escape_sequence():
    ansi = NamedPattern("ansi_colors", dict(EXCLUDE_PATTERNS)["ansi_colors"]).compile()
    text = "\x1b[31mred\x1b[0m"
    matches = [m.group(0) for m in ansi.finditer(text)]
    assert matches == ["\x1b[31m", "\x1b[0m"]