"""Escape-sequence rendering of text, spans and hints."""

from __future__ import annotations

from typing import Sequence, TextIO

from .colors import RESET, UiColors
from .styles import HintStyle, Surround

BOLD = "\x1b[1m"
STYLE_RESET = "\x1b[m"
ITALIC = "\x1b[3m"
NO_ITALIC = "\x1b[23m"
UNDERLINE = "\x1b[4m"
NO_UNDERLINE = "\x1b[24m"

FG_RESET = RESET.fg()
BG_RESET = RESET.bg()

_STYLE_CODES: dict[HintStyle, tuple[str, str]] = {
    # Resetting all styles: "no bold" alone is not enough on some terminals.
    HintStyle.BOLD: (BOLD, STYLE_RESET),
    HintStyle.ITALIC: (ITALIC, NO_ITALIC),
    HintStyle.UNDERLINE: (UNDERLINE, NO_UNDERLINE),
}


def goto(x: int, y: int) -> str:
    """Escape sequence moving the cursor to column `x`, row `y` (1-based)."""
    return f"\x1b[{y};{x}H"


def compute_wrapped_lines(lines: Sequence[str], term_width: int) -> list[int]:
    """Return the screen row where each line starts on a terminal `term_width` wide.

    A line of exactly `term_width` characters still fits on one row; it takes
    one more character to wrap.
    """
    positions: list[int] = []
    position = 0
    for line in lines:
        positions.append(position)
        line_width = len(line.rstrip())
        extra = max(0, line_width - 1) // term_width
        position += 1 + extra
    return positions


def render_base_text(
    out: TextIO,
    lines: Sequence[str],
    wrapped_lines: Sequence[int],
    colors: UiColors,
) -> None:
    """Write every non-empty line, trailing whitespace removed, at its row."""
    out.write(colors.text_bg.bg() + colors.text_fg.fg())
    for line, pos_y in zip(lines, wrapped_lines):
        trimmed = line.rstrip()
        if trimmed:
            out.write(goto(1, pos_y + 1) + trimmed)
    out.write(FG_RESET + BG_RESET)


def render_span_text(
    out: TextIO,
    text: str,
    focused: bool,
    pos: tuple[int, int],
    colors: UiColors,
) -> None:
    """Write a span's text at `pos` (0-based), in focused or span colors."""
    if focused:
        fg, bg = colors.focused_fg, colors.focused_bg
    else:
        fg, bg = colors.span_fg, colors.span_bg
    x, y = pos
    out.write(f"{goto(x + 1, y + 1)}{bg.bg()}{fg.fg()}{text}{FG_RESET}{BG_RESET}")


def render_span_hint(
    out: TextIO,
    hint_text: str,
    pos: tuple[int, int],
    colors: UiColors,
    hint_style: HintStyle | Surround | None,
) -> None:
    """Write a hint at `pos` (0-based) in hint colors and the given style."""
    x, y = pos
    prefix = f"{goto(x + 1, y + 1)}{colors.hint_bg.bg()}{colors.hint_fg.fg()}"
    suffix = FG_RESET + BG_RESET

    if hint_style is None:
        body = hint_text
    elif isinstance(hint_style, Surround):
        body = f"{hint_style.open}{hint_text}{hint_style.close}"
    else:
        start, stop = _STYLE_CODES[hint_style]
        body = f"{start}{hint_text}{stop}"

    out.write(prefix + body + suffix)