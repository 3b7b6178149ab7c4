"""Hint alignment and hint styles."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import ExpectedEnumVariant, ExpectedSurroundingPair


class HintAlignment(enum.Enum):
    """Whether a hint sits on the leading or the trailing edge of its span."""

    LEADING = "leading"
    TRAILING = "trailing"

    @classmethod
    def parse(cls, value: str) -> HintAlignment:
        """Parse an alignment name, ignoring case."""
        try:
            return cls(value.lower())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ExpectedEnumVariant(allowed) from None


class HintStyle(enum.Enum):
    """Text styling applied to a hint."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"


@dataclass(frozen=True)
class Surround:
    """Hint style that encloses the hint between two characters."""

    open: str
    close: str

    def __post_init__(self) -> None:
        if len(self.open) != 1 or len(self.close) != 1:
            raise ExpectedSurroundingPair()