"""Tmux pane descriptions, option parsing and command arguments."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .errors import (
    CopyratError,
    ExpectedBool,
    ExpectedEnumVariant,
    ExpectedInt,
    ExpectedPaneIdMarker,
)

LIST_PANES_FORMAT = (
    "#{pane_id}:#{?pane_in_mode,true,false}:#{pane_height}"
    ":#{scroll_position}:#{?pane_active,true,false}"
)

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_U16_MAX = 2**16 - 1


def _parse_int(text: str, pattern: re.Pattern, low: int, high: int) -> int:
    if not pattern.fullmatch(text):
        raise ExpectedInt()
    value = int(text)
    if not low <= value <= high:
        raise ExpectedInt()
    return value


def parse_bool(text: str) -> bool:
    """Parse exactly "true" or "false"."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ExpectedBool()


class CaptureRegion(enum.Enum):
    """Which region of the pane to capture."""

    ENTIRE_HISTORY = "entire-history"
    VISIBLE_AREA = "visible-area"

    @classmethod
    def parse(cls, value: str) -> CaptureRegion:
        """Parse a region name, ignoring case."""
        try:
            return cls(value.lower())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ExpectedEnumVariant(allowed) from None


@dataclass(frozen=True)
class PaneId:
    """A tmux pane identifier such as `%37`."""

    value: str

    @classmethod
    def parse(cls, src: str) -> PaneId:
        """Parse '%' followed by an unsigned 16-bit integer."""
        if not src.startswith("%"):
            raise ExpectedPaneIdMarker()
        number = _parse_int(src[1:], _UNSIGNED_INT, 0, _U16_MAX)
        return cls(f"%{number}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Pane:
    """The properties of a tmux pane needed here."""

    id: PaneId
    is_copy_mode: bool
    height: int
    scroll_position: int
    is_active: bool

    @classmethod
    def parse(cls, src: str) -> Pane:
        """Parse a line such as "%52:false:62:3:false" or "%53:false:23::true"."""
        items = src.split(":")
        if len(items) != 5:
            raise CopyratError("tmux should have returned 5 items per line")
        id_str, copy_mode, height, scroll, active = items
        return cls(
            id=PaneId.parse(id_str),
            is_copy_mode=parse_bool(copy_mode),
            height=_parse_int(height, _SIGNED_INT, _I32_MIN, _I32_MAX),
            scroll_position=_parse_int(scroll or "0", _SIGNED_INT, _I32_MIN, _I32_MAX),
            is_active=parse_bool(active),
        )

    def capture_args(self, region: CaptureRegion) -> list[str]:
        """Arguments to `tmux` that print this pane's content."""
        args = ["capture-pane", "-t", str(self.id), "-J", "-p"]
        if region is CaptureRegion.ENTIRE_HISTORY:
            args += ["-S", "-", "-E", "-"]
        elif self.is_copy_mode and self.scroll_position > 0:
            start = -self.scroll_position
            end = self.height - self.scroll_position - 1
            args += ["-S", str(start), "-E", str(end)]
        return args


def parse_panes(output: str) -> list[Pane]:
    """Parse the output of `tmux list-panes -F LIST_PANES_FORMAT`."""
    return [Pane.parse(line) for line in output.rstrip().split("\n")]


def parse_options(output: str, prefix: str) -> dict[str, str]:
    """Extract options starting with `prefix` from `tmux show-options -g`."""
    pattern = re.compile(rf'({re.escape(prefix)}[\w\-0-9]+) "?(\w+)"?')
    options: dict[str, str] = {}
    for line in output.split("\n"):
        match = pattern.search(line)
        if match is not None:
            options[match.group(1)] = match.group(2)
    return options