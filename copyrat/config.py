"""Command-line configuration, and tmux options merged on top of it."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .alphabet import Alphabet, parse_alphabet
from .colors import UiColors, parse_color
from .errors import ExpectedEnumVariant, ExpectedSurroundingPair
from .regexes import NamedPattern, parse_pattern_name
from .styles import HintAlignment, HintStyle, Surround
from .tmux import CaptureRegion, parse_bool

DEFAULT_ALPHABET = "dvorak"
DEFAULT_WINDOW_NAME = "[copyrat]"
DEFAULT_CLIPBOARD_EXE = "pbcopy"
TMUX_OPTION_PREFIX = "@copyrat-"


class HintStyleArg(enum.Enum):
    """Hint style as given on the command line or in tmux options."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    SURROUND = "surround"

    @classmethod
    def parse(cls, value: str) -> HintStyleArg:
        """Parse a style name, ignoring case."""
        try:
            return cls(value.lower())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ExpectedEnumVariant(allowed) from None


@dataclass(frozen=True)
class HintSurroundings:
    """The opening and closing characters used by the surround style."""

    open: str
    close: str

    def __str__(self) -> str:
        return f"{self.open}{self.close}"


def parse_surroundings(src: str) -> HintSurroundings:
    """Parse a string of exactly two characters."""
    if len(src) != 2:
        raise ExpectedSurroundingPair()
    return HintSurroundings(src[0], src[1])


def _default_alphabet() -> Alphabet:
    return parse_alphabet(DEFAULT_ALPHABET)


def _default_surroundings() -> HintSurroundings:
    return parse_surroundings("{}")


@dataclass
class Config:
    """Options shared by the standalone and the tmux commands."""

    alphabet: Alphabet = field(default_factory=_default_alphabet)
    use_all_patterns: bool = False
    named_patterns: list[NamedPattern] = field(default_factory=list)
    custom_patterns: list[str] = field(default_factory=list)
    reverse: bool = False
    unique_hint: bool = False
    focus_wrap_around: bool = False
    colors: UiColors = field(default_factory=UiColors)
    hint_alignment: HintAlignment = HintAlignment.LEADING
    hint_style_arg: HintStyleArg | None = None
    hint_surroundings: HintSurroundings = field(default_factory=_default_surroundings)

    def hint_style(self) -> HintStyle | Surround | None:
        """The rendering style for hints, or None for colors only."""
        if self.hint_style_arg is None:
            return None
        if self.hint_style_arg is HintStyleArg.SURROUND:
            return Surround(self.hint_surroundings.open, self.hint_surroundings.close)
        return HintStyle(self.hint_style_arg.value)


class OutputDestination(enum.Enum):
    """Where the selected text is copied to."""

    TMUX = "tmux"
    CLIPBOARD = "clipboard"

    def toggled(self) -> OutputDestination:
        """The other destination."""
        if self is OutputDestination.TMUX:
            return OutputDestination.CLIPBOARD
        return OutputDestination.TMUX

    def __str__(self) -> str:
        return "tmux buffer" if self is OutputDestination.TMUX else "clipboard"


@dataclass
class ConfigExt:
    """Tmux-specific options on top of the basic configuration."""

    ignore_tmux_options: bool = False
    window_name: str = DEFAULT_WINDOW_NAME
    capture_region: CaptureRegion = CaptureRegion.VISIBLE_AREA
    clipboard_exe: str = DEFAULT_CLIPBOARD_EXE
    basic_config: Config = field(default_factory=Config)

    def apply_tmux_options(self, options: Mapping[str, str]) -> ConfigExt:
        """Override settings with `@copyrat-*` tmux options; unknown ones are ignored.

        Nothing changes when tmux options are to be ignored.
        """
        if self.ignore_tmux_options:
            return self

        inner = self.basic_config
        color_fields = {
            "@copyrat-span-fg": "span_fg",
            "@copyrat-span-bg": "span_bg",
            "@copyrat-focused-fg": "focused_fg",
            "@copyrat-focused-bg": "focused_bg",
            "@copyrat-hint-fg": "hint_fg",
            "@copyrat-hint-bg": "hint_bg",
        }

        for name, value in options.items():
            if name == "@copyrat-capture-region":
                self.capture_region = CaptureRegion.parse(value)
            elif name == "@copyrat-alphabet":
                inner.alphabet = parse_alphabet(value)
            elif name == "@copyrat-reverse":
                inner.reverse = parse_bool(value)
            elif name == "@copyrat-unique-hint":
                inner.unique_hint = parse_bool(value)
            elif name in color_fields:
                setattr(inner.colors, color_fields[name], parse_color(value))
            elif name == "@copyrat-hint-alignment":
                inner.hint_alignment = HintAlignment.parse(value)
            elif name == "@copyrat-hint-style":
                inner.hint_style_arg = HintStyleArg.parse(value)
        return self


_COLOR_ARGUMENTS = (
    ("text_fg", "bright-cyan", "Foreground color for base text."),
    ("text_bg", "none", "Background color for base text."),
    ("span_fg", "blue", "Foreground color for spans."),
    ("span_bg", "none", "Background color for spans."),
    ("focused_fg", "magenta", "Foreground color for the focused span."),
    ("focused_bg", "none", "Background color for the focused span."),
    ("hint_fg", "yellow", "Foreground color for hints."),
    ("hint_bg", "none", "Background color for hints."),
)


def add_basic_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the options of `Config` to `parser`."""
    parser.add_argument(
        "-k",
        "--alphabet",
        type=parse_alphabet,
        default=DEFAULT_ALPHABET,
        help='Alphabet to draw hints from, e.g. "qwerty", "dvorak-homerow".',
    )
    parser.add_argument(
        "-A",
        "--all-patterns",
        dest="use_all_patterns",
        action="store_true",
        help="Use all available regex patterns.",
    )
    parser.add_argument(
        "-x",
        "--pattern-name",
        dest="named_patterns",
        action="append",
        type=parse_pattern_name,
        help='Pattern names to use ("email", ...).',
    )
    parser.add_argument(
        "-X",
        "--custom-patterns",
        dest="custom_patterns",
        action="append",
        help="Additional regex patterns. Must have a capture group.",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Assign hints starting from the bottom of the screen.",
    )
    parser.add_argument(
        "-u",
        "--unique-hint",
        action="store_true",
        help="Keep the same hint for identical spans.",
    )
    parser.add_argument(
        "-w",
        "--focus-wrap-around",
        action="store_true",
        help="Move focus back to first/last span.",
    )
    for dest, default, help_text in _COLOR_ARGUMENTS:
        parser.add_argument(
            "--" + dest.replace("_", "-"),
            dest=dest,
            type=parse_color,
            default=default,
            help=help_text,
        )
    parser.add_argument(
        "--hint-alignment",
        type=HintAlignment.parse,
        default=HintAlignment.LEADING.value,
        help="Align hint with its span (leading or trailing).",
    )
    parser.add_argument(
        "-s",
        "--hint-style",
        dest="hint_style_arg",
        type=HintStyleArg.parse,
        default=None,
        help="Optional hint styling: bold, italic, underline or surround.",
    )
    parser.add_argument(
        "--hint-surroundings",
        type=parse_surroundings,
        default="{}",
        help="Chars surrounding each hint, used with the surround style.",
    )
    return parser


def _config_from_namespace(ns: argparse.Namespace) -> Config:
    colors = UiColors(**{dest: getattr(ns, dest) for dest, _, _ in _COLOR_ARGUMENTS})
    return Config(
        alphabet=ns.alphabet,
        use_all_patterns=ns.use_all_patterns,
        named_patterns=list(ns.named_patterns or []),
        custom_patterns=list(ns.custom_patterns or []),
        reverse=ns.reverse,
        unique_hint=ns.unique_hint,
        focus_wrap_around=ns.focus_wrap_around,
        colors=colors,
        hint_alignment=ns.hint_alignment,
        hint_style_arg=ns.hint_style_arg,
        hint_surroundings=ns.hint_surroundings,
    )


def parse_config(argv: Sequence[str] | None = None) -> Config:
    """Parse the standalone command's arguments."""
    parser = argparse.ArgumentParser(
        prog="copyrat",
        description="Highlight spans of text from stdin and pick one by its hint.",
    )
    add_basic_arguments(parser)
    return _config_from_namespace(parser.parse_args(argv))


def parse_config_ext(argv: Sequence[str] | None = None) -> ConfigExt:
    """Parse the tmux command's arguments."""
    parser = argparse.ArgumentParser(
        prog="tmux-copyrat",
        description="Highlight spans of text in a tmux pane and pick one by its hint.",
    )
    parser.add_argument(
        "-n",
        "--ignore-tmux-options",
        action="store_true",
        help="Don't read options from tmux.",
    )
    parser.add_argument(
        "-W",
        "--window-name",
        default=DEFAULT_WINDOW_NAME,
        help="Name of the temporary tmux window.",
    )
    parser.add_argument(
        "--capture-region",
        type=CaptureRegion.parse,
        default=CaptureRegion.VISIBLE_AREA.value,
        help="Capture the visible area or the entire pane history.",
    )
    parser.add_argument(
        "--clipboard-exe",
        default=DEFAULT_CLIPBOARD_EXE,
        help="Name of the copy-to-clipboard executable.",
    )
    add_basic_arguments(parser)
    ns = parser.parse_args(argv)
    return ConfigExt(
        ignore_tmux_options=ns.ignore_tmux_options,
        window_name=ns.window_name,
        capture_region=ns.capture_region,
        clipboard_exe=ns.clipboard_exe,
        basic_config=_config_from_namespace(ns),
    )