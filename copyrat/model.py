"""Finding spans of text in lines and assigning hints to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Sequence

import regex

from .alphabet import Alphabet
from .regexes import EXCLUDE_PATTERNS, PATTERNS, NamedPattern

ANSI_COLORS = "ansi_colors"
CUSTOM = "custom"


@dataclass(frozen=True)
class RawSpan:
    """A matched span of text before a hint is attached.

    `x` is the character offset in line `y` where the captured text starts.
    """

    x: int
    y: int
    pattern: str
    text: str


@dataclass(frozen=True)
class Span:
    """A matched span of text, its location, the pattern name and its hint.

    `x` is the character offset in line `y` where the text starts.
    """

    x: int
    y: int
    pattern: str
    text: str
    hint: str


@dataclass
class TrieNode:
    """A node of the hint lookup trie."""

    value: int | None = None
    children: dict[str, TrieNode] = field(default_factory=dict)

    def is_leaf(self) -> bool:
        """True when no longer key continues through this node."""
        return not self.children


class LookupTrie:
    """Maps typed hint sequences to span indices."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, key: Iterable[str], value: int) -> None:
        """Store `value` under the character sequence `key`."""
        node = self.root
        for char in key:
            node = node.children.setdefault(char, TrieNode())
        node.value = value

    def get_node(self, key: Iterable[str]) -> TrieNode | None:
        """Return the node reached by `key`, or None if no hint starts so."""
        node: TrieNode | None = self.root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def get(self, key: Iterable[str]) -> int | None:
        """Return the value stored exactly under `key`, if any."""
        node = self.get_node(key)
        return None if node is None else node.value


@lru_cache(maxsize=None)
def _compile(pattern: str) -> regex.Pattern:
    return regex.compile(pattern)


def _compile_custom(pattern: str) -> regex.Pattern:
    try:
        compiled = _compile(pattern)
    except regex.error as exc:
        raise ValueError(f"Invalid custom regexp: {pattern!r}") from exc
    if compiled.groups < 1:
        raise ValueError(f"Custom regexp must have a capture group: {pattern!r}")
    return compiled


def find_raw_spans(
    lines: Sequence[str],
    named_patterns: Sequence[NamedPattern],
    custom_patterns: Sequence[str],
    use_all_patterns: bool,
) -> list[RawSpan]:
    """Search every line for pattern matches, earliest match first.

    Custom patterns win over catalog patterns when both match at the same
    place. ANSI color sequences are skipped and never hinted.
    """
    all_regexes = [(name, _compile(pattern)) for name, pattern in EXCLUDE_PATTERNS]
    all_regexes += [(CUSTOM, _compile_custom(pattern)) for pattern in custom_patterns]
    if use_all_patterns:
        all_regexes += [(name, _compile(pattern)) for name, pattern in PATTERNS]
    else:
        all_regexes += [(np.name, _compile(np.pattern)) for np in named_patterns]

    raw_spans: list[RawSpan] = []
    for y, line in enumerate(lines):
        chunk = line
        offset = 0
        while True:
            found = [
                (name, reg, match)
                for name, reg in all_regexes
                if (match := reg.search(chunk)) is not None
            ]
            if not found:
                break

            name, reg, match = min(found, key=lambda item: item[2].start())

            if name != ANSI_COLORS:
                text = match.group(0)
                inner = reg.search(text) or match
                subtext = inner.group(1)
                substart = inner.start(1) - inner.start()
                if subtext is None:
                    subtext, substart = text, 0
                raw_spans.append(
                    RawSpan(
                        x=offset + match.start() + substart,
                        y=y,
                        pattern=name,
                        text=subtext,
                    )
                )

            # An empty match at the chunk start would never advance.
            end = match.end() or 1
            chunk = chunk[end:]
            offset += end
            if offset > len(line):
                break

    return raw_spans


def associate_hints(
    raw_spans: Sequence[RawSpan], alphabet: Alphabet, unique: bool
) -> list[Span]:
    """Attach a hint to each raw span.

    With `unique`, identical texts share one hint.
    """
    hints = iter(alphabet.make_hints(len(raw_spans)))
    known: dict[str, str] = {}
    result: list[Span] = []

    for raw in raw_spans:
        if unique:
            if raw.text not in known:
                known[raw.text] = next(hints)
            hint = known[raw.text]
        else:
            hint = next(hints)
        result.append(Span(raw.x, raw.y, raw.pattern, raw.text, hint))

    return result


def build_lookup_trie(spans: Sequence[Span]) -> LookupTrie:
    """Build a trie mapping each hint to the index of its first span."""
    trie = LookupTrie()
    for index, span in enumerate(spans):
        if trie.get(span.hint) is None:
            trie.insert(span.hint, index)
    return trie


@dataclass
class Model:
    """Lines of text with their hinted spans."""

    lines: list[str]
    reverse: bool
    spans: list[Span]
    lookup_trie: LookupTrie

    @classmethod
    def build(
        cls,
        lines: Sequence[str],
        alphabet: Alphabet,
        use_all_patterns: bool,
        named_patterns: Sequence[NamedPattern],
        custom_patterns: Sequence[str],
        reverse: bool,
        unique_hint: bool,
    ) -> Model:
        """Find spans in `lines` and assign hints to them.

        With `reverse`, hints are assigned starting from the last span.
        """
        raw_spans = find_raw_spans(
            lines, named_patterns, custom_patterns, use_all_patterns
        )
        if reverse:
            raw_spans.reverse()

        spans = associate_hints(raw_spans, alphabet, unique_hint)
        if reverse:
            spans.reverse()

        return cls(
            lines=list(lines),
            reverse=reverse,
            spans=spans,
            lookup_trie=build_lookup_trie(spans),
        )