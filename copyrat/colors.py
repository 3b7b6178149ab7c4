"""Terminal colors used for rendering."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UnknownColor


@dataclass(frozen=True)
class Color:
    """A 256-color palette index, or None for the terminal default."""

    value: int | None

    def fg(self) -> str:
        """Escape sequence that sets this color as foreground."""
        if self.value is None:
            return "\x1b[39m"
        return f"\x1b[38;5;{self.value}m"

    def bg(self) -> str:
        """Escape sequence that sets this color as background."""
        if self.value is None:
            return "\x1b[49m"
        return f"\x1b[48;5;{self.value}m"


BLACK = Color(0)
RED = Color(1)
GREEN = Color(2)
YELLOW = Color(3)
BLUE = Color(4)
MAGENTA = Color(5)
CYAN = Color(6)
WHITE = Color(7)
BRIGHTBLACK = Color(8)
BRIGHTRED = Color(9)
BRIGHTGREEN = Color(10)
BRIGHTYELLOW = Color(11)
BRIGHTBLUE = Color(12)
BRIGHTMAGENTA = Color(13)
BRIGHTCYAN = Color(14)
BRIGHTWHITE = Color(15)
RESET = Color(None)

_NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "white": WHITE,
    "bright-black": BRIGHTBLACK,
    "brightblack": BRIGHTBLACK,
    "bright-red": BRIGHTRED,
    "brightred": BRIGHTRED,
    "bright-green": BRIGHTGREEN,
    "brightgreen": BRIGHTGREEN,
    "bright-yellow": BRIGHTYELLOW,
    "brightyellow": BRIGHTYELLOW,
    "bright-blue": BRIGHTBLUE,
    "brightblue": BRIGHTBLUE,
    "bright-magenta": BRIGHTMAGENTA,
    "brightmagenta": BRIGHTMAGENTA,
    "bright-cyan": BRIGHTCYAN,
    "brightcyan": BRIGHTCYAN,
    "bright-white": BRIGHTWHITE,
    "brightwhite": BRIGHTWHITE,
    "none": RESET,
}


def parse_color(src: str) -> Color:
    """Return the color with the given name."""
    try:
        return _NAMED_COLORS[src]
    except KeyError:
        raise UnknownColor() from None


@dataclass
class UiColors:
    """Colors for base text, spans, the focused span and hints."""

    text_fg: Color = BRIGHTCYAN
    text_bg: Color = RESET
    span_fg: Color = BLUE
    span_bg: Color = RESET
    focused_fg: Color = MAGENTA
    focused_bg: Color = RESET
    hint_fg: Color = YELLOW
    hint_bg: Color = RESET