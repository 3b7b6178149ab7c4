import pytest

from copyrat.colors import (
    BLUE,
    BRIGHTCYAN,
    GREEN,
    MAGENTA,
    RESET,
    YELLOW,
    Color,
    UiColors,
    parse_color,
)
from copyrat.errors import UnknownColor


def test_span_color_fg():
    assert parse_color("green").fg() + "foo" == "\x1b[38;5;2mfoo"


def test_span_color_bg():
    assert parse_color("green").bg() + "foo" == "\x1b[48;5;2mfoo"


def test_no_span_color():
    with pytest.raises(UnknownColor):
        parse_color("wat")


def test_reset_color_sequences():
    assert RESET.fg() == "\x1b[39m"
    assert RESET.bg() == "\x1b[49m"
    assert parse_color("none") == RESET


@pytest.mark.parametrize(
    "long_name,short_name",
    [
        ("bright-black", "brightblack"),
        ("bright-red", "brightred"),
        ("bright-green", "brightgreen"),
        ("bright-yellow", "brightyellow"),
        ("bright-blue", "brightblue"),
        ("bright-magenta", "brightmagenta"),
        ("bright-cyan", "brightcyan"),
        ("bright-white", "brightwhite"),
    ],
)
def test_bright_color_aliases(long_name, short_name):
    assert parse_color(long_name) == parse_color(short_name)


def test_basic_colors_indices():
    names = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]
    assert [parse_color(n).value for n in names] == list(range(8))


def test_color_equality():
    assert parse_color("green") == GREEN == Color(2)


def test_ui_colors_defaults():
    colors = UiColors()
    assert colors.text_fg == BRIGHTCYAN
    assert colors.span_fg == BLUE
    assert colors.focused_fg == MAGENTA
    assert colors.hint_fg == YELLOW
    assert colors.text_bg == colors.span_bg == colors.focused_bg == colors.hint_bg == RESET