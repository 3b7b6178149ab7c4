"""Regex patterns used to find spans of text.

Every pattern has at least one capture group; the first one is used.
"""

from __future__ import annotations

from dataclasses import dataclass

import regex

from .errors import UnknownPatternName


def _group(body: str) -> str:
    return f"({body})"


def _repeat(char_class: str, count: str) -> str:
    return f"[{char_class}]{{{count}}}"


def _quoted(quote: str) -> str:
    return f"{quote}([^{quote}]+){quote}"


def _diff_header(marker: str, side: str) -> str:
    return f"{regex.escape(marker)} {side}/([^ ]+)"


_LOWER_HEX = "0-9a-f"
_ANY_HEX = "0-9A-Fa-f"
_ONE_OR_TWO_DIGITS = _repeat("0-9", "1,2")

_ANSI_COLORS = (
    rf"[[:cntrl:]]\[({_ONE_OR_TWO_DIGITS};)?({_ONE_OR_TWO_DIGITS})?m"
)

_URL_SCHEMES = (
    "https?://",
    "git@",
    "git://",
    "ssh://",
    "s3://",
    "gs://",
    "ftp://",
    "file:///",
)
_URL = _group(f"({'|'.join(_URL_SCHEMES)})" + r"""[^ '"`()\[\]{}>]+""")

_EMAIL = r"\b" + _group(r"[A-z0-9._%+-]+@[A-z0-9.-]+\.[A-z]{2,}") + r"\b"

_PATH_CHARS = r".\w\-@"
_PATH = _group(f"([{_PATH_CHARS}~]+)?(/[{_PATH_CHARS}]+)+")

_UUID = _group("-".join(_repeat(_LOWER_HEX, str(n)) for n in (8, 4, 4, 4, 12)))

_VERSION_PART = r"\d{1,4}"
_VERSION = (
    _group(
        rf"v?{_VERSION_PART}\.{_VERSION_PART}(\.{_VERSION_PART})?"
        r"(-(alpha|beta|rc)(\.\d)?)?"
    )
    + "[^.0-9s]"
)

_IPV4 = _group(r"\.".join([r"\d{1,3}"] * 4))

_IPV6_CHARS = "[0-9A-f:]"
_IPV6 = _group(rf"{_IPV6_CHARS}+:+{_IPV6_CHARS}+[%\w\d]+")

_DATE = r"\d{4}-?\d{2}-?\d{2}"
_TIME = ":".join([r"\d{2}"] * 3)
_DATETIME = _group(rf"{_DATE}([ T]{_TIME}(\.\d{{3,9}})?)?")

_COMMAND_LINE_ARGS = r"(?:--[a-z][0-9a-z_-]+|-[a-z])[ =]([^\s-]\S+)"

_NIX_SHAS = _group(f"({'|'.join(('sha256', 'sha512'))})-" + _repeat("A-Za-z0-9+/=", "44"))
_NIX_LOG = _group(r"nix log /nix/store/" + _repeat("a-z0-9", "32") + r"-.+?\.drv")

EXCLUDE_PATTERNS: tuple[tuple[str, str], ...] = (("ansi_colors", _ANSI_COLORS),)

PATTERNS: tuple[tuple[str, str], ...] = (
    ("markdown-url", r"\[[^\]]*\]\(([^)]+)\)"),
    ("url", _URL),
    ("email", _EMAIL),
    ("diff-a", _diff_header("---", "a")),
    ("diff-b", _diff_header("+++", "b")),
    ("docker", "sha256:" + _group(_repeat(_LOWER_HEX, "64"))),
    ("path", _PATH),
    ("hexcolor", _group("#" + _repeat(_ANY_HEX, "6"))),
    ("uuid", _UUID),
    ("version", _VERSION),
    ("ipfs", _group("Qm" + _repeat("0-9A-Za-z", "44"))),
    ("sha", _group(_repeat("0-9A-f", "7,40"))),
    ("ipv4", _IPV4),
    ("ipv6", _IPV6),
    ("pointer-address", _group(f"0x[{_ANY_HEX}]+")),
    ("datetime", _DATETIME),
    ("quoted-single", _quoted("'")),
    ("quoted-double", _quoted('"')),
    ("quoted-backtick", _quoted("`")),
    ("digits", _group(_repeat("0-9", "4,"))),
    ("command-line-args", _COMMAND_LINE_ARGS),
    ("nix-shas", _NIX_SHAS),
    ("nix-log", _NIX_LOG),
)


@dataclass(frozen=True)
class NamedPattern:
    """A pattern from the catalog, with its name."""

    name: str
    pattern: str

    def compile(self) -> regex.Pattern:
        """Compile the pattern."""
        return regex.compile(self.pattern)


def parse_pattern_name(src: str) -> NamedPattern:
    """Return the catalog pattern called `src`."""
    catalog = dict(PATTERNS)
    try:
        return NamedPattern(src, catalog[src])
    except KeyError:
        raise UnknownPatternName() from None