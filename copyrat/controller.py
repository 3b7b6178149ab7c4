"""Interactive selection of a span by its hint."""

from __future__ import annotations

import codecs
import enum
import os
import select
import shutil
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

from .colors import UiColors
from .config import OutputDestination
from .model import Model, Span
from .render import (
    compute_wrapped_lines,
    render_base_text,
    render_span_hint,
    render_span_text,
)
from .styles import HintAlignment, HintStyle, Surround

_CHUNK_SIZE = 4096
_POLL_INTERVAL = 0.025
_DEFAULT_TERM_WIDTH = 80

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_ENTER_ALT_SCREEN = "\x1b[?1049h"
_LEAVE_ALT_SCREEN = "\x1b[?1049l"


class Key(enum.Enum):
    """Keys that are not plain characters."""

    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}


@dataclass(frozen=True)
class Selection:
    """The text picked by the user, whether a hint key was uppercased,
    and where the text should be copied to."""

    text: str
    uppercased: bool
    output_destination: OutputDestination


def _parse_chunk(chunk: str) -> Iterator[Key | str]:
    i, n = 0, len(chunk)
    while i < n:
        ch = chunk[i]
        i += 1
        if ch == "\x1b":
            if i >= n:
                yield Key.ESC
                continue
            nxt = chunk[i]
            i += 1
            if nxt not in "[O":
                # Alt + character.
                yield Key.OTHER
                continue
            j = i
            while j < n and not "\x40" <= chunk[j] <= "\x7e":
                j += 1
            if j >= n:
                yield Key.OTHER
                i = n
                continue
            params, final = chunk[i:j], chunk[j]
            i = j + 1
            yield Key.OTHER if params else _ARROWS.get(final, Key.OTHER)
        elif ch in "\r\n":
            yield "\n"
        elif ch == "\t":
            yield ch
        elif ch < " " or ch == "\x7f":
            yield Key.OTHER
        else:
            yield ch


def _parse_chunks(chunks: Iterable[str]) -> Iterator[Key | str]:
    for chunk in chunks:
        yield from _parse_chunk(chunk)


def read_keys(stream: TextIO) -> Iterator[Key | str]:
    """Yield the keys typed on a text stream: characters or `Key` members."""
    return _parse_chunks(iter(lambda: stream.read(_CHUNK_SIZE), ""))


def _terminal_chunks(fd: int) -> Iterator[str]:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        ready, _, _ = select.select([fd], [], [], _POLL_INTERVAL)
        if not ready:
            continue
        data = os.read(fd, 1024)
        if not data:
            return
        text = decoder.decode(data)
        if text:
            yield text


class ViewController:
    """Renders the model's lines, spans and hints, and handles key presses."""

    def __init__(
        self,
        model: Model,
        focus_wrap_around: bool,
        default_output_destination: OutputDestination,
        colors: UiColors,
        hint_alignment: HintAlignment,
        hint_style: HintStyle | Surround | None,
        term_width: int | None = None,
    ) -> None:
        self.model = model
        self.focus_wrap_around = focus_wrap_around
        self.default_output_destination = default_output_destination
        self.colors = colors
        self.hint_alignment = hint_alignment
        self.hint_style = hint_style
        if term_width is None:
            term_width = shutil.get_terminal_size((_DEFAULT_TERM_WIDTH, 30)).columns
        self.term_width = term_width
        self.wrapped_lines = compute_wrapped_lines(model.lines, term_width)
        self.focus_index = max(0, len(model.spans) - 1) if model.reverse else 0

    # Coordinates

    def _wrapped_position(self, span: Span) -> tuple[int, int]:
        x, y = span.x, span.y
        return x % self.term_width, self.wrapped_lines[y] + x // self.term_width

    # Focus management

    def prev_focus_index(self) -> tuple[int, int]:
        """Move focus to the previous span; return the old and new indices."""
        old = self.focus_index
        last = len(self.model.spans) - 1
        if self.focus_wrap_around and self.focus_index == 0:
            self.focus_index = max(0, last)
        elif self.focus_index > 0:
            self.focus_index -= 1
        return old, self.focus_index

    def next_focus_index(self) -> tuple[int, int]:
        """Move focus to the next span; return the old and new indices."""
        old = self.focus_index
        last = len(self.model.spans) - 1
        if self.focus_wrap_around and self.focus_index == last:
            self.focus_index = 0
        elif self.focus_index < last:
            self.focus_index += 1
        return old, self.focus_index

    # Rendering

    def _render_span(self, out: TextIO, span: Span, focused: bool) -> None:
        pos_x, pos_y = self._wrapped_position(span)
        render_span_text(out, span.text, focused, (pos_x, pos_y), self.colors)
        if focused:
            return
        if self.hint_alignment is HintAlignment.TRAILING:
            offset = max(0, len(span.text) - len(span.hint))
        else:
            offset = 0
        render_span_hint(
            out, span.hint, (pos_x + offset, pos_y), self.colors, self.hint_style
        )

    def full_render(self, out: TextIO) -> None:
        """Render all lines, then every span with its hint unless focused."""
        render_base_text(out, self.model.lines, self.wrapped_lines, self.colors)
        for index, span in enumerate(self.model.spans):
            self._render_span(out, span, index == self.focus_index)
        out.flush()

    def diff_render(self, out: TextIO, old_index: int, new_index: int) -> None:
        """Re-render the previously focused span and the newly focused one."""
        self._render_span(out, self.model.spans[old_index], False)
        self._render_span(out, self.model.spans[new_index], True)
        out.flush()

    # Listening

    def _focused_selection(
        self, uppercased: bool, destination: OutputDestination
    ) -> Selection:
        text = self.model.spans[self.focus_index].text
        return Selection(text, uppercased, destination)

    def listen(self, keys: Iterable[Key | str], out: TextIO) -> Selection | None:
        """Handle keys until a span is selected or the user gives up.

        Returns None on Esc, on a key that starts no hint, or when keys run out.
        """
        spans = self.model.spans
        if not spans:
            return None

        typed_hint = ""
        uppercased = False
        destination = self.default_output_destination

        self.full_render(out)

        for key in keys:
            if key is Key.ESC:
                break
            if key is Key.UP or key is Key.LEFT:
                self.diff_render(out, *self.prev_focus_index())
            elif key is Key.DOWN or key is Key.RIGHT:
                self.diff_render(out, *self.next_focus_index())
            elif key == "n":
                move = self.prev_focus_index if self.model.reverse else self.next_focus_index
                self.diff_render(out, *move())
            elif key == "N":
                move = self.next_focus_index if self.model.reverse else self.prev_focus_index
                self.diff_render(out, *move())
            elif key in ("y", "\n"):
                return self._focused_selection(False, destination)
            elif key == "Y":
                return self._focused_selection(True, destination)
            elif key == " ":
                destination = destination.toggled()
            elif isinstance(key, str):
                lower = key.lower()
                uppercased = uppercased or key != lower
                typed_hint += lower
                node = self.model.lookup_trie.get_node(typed_hint)
                if node is None:
                    return None
                if node.is_leaf() and node.value is not None:
                    text = spans[node.value].text
                    return Selection(text, uppercased, destination)
        return None

    # Presenting

    def present(self) -> Selection | None:
        """Take over the terminal, let the user pick a span, then restore it."""
        import termios
        import tty

        with ExitStack() as stack:
            tty_in = stack.enter_context(open("/dev/tty", "rb", buffering=0))
            out = stack.enter_context(open("/dev/tty", "w", encoding="utf-8"))
            fd = tty_in.fileno()
            saved = termios.tcgetattr(fd)
            tty.setraw(fd)
            try:
                out.write(_ENTER_ALT_SCREEN + _HIDE_CURSOR)
                out.flush()
                try:
                    return self.listen(_parse_chunks(_terminal_chunks(fd)), out)
                finally:
                    out.write(_SHOW_CURSOR + _LEAVE_ALT_SCREEN)
                    out.flush()
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)