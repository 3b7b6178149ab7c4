"""Exceptions raised by copyrat."""

from __future__ import annotations


class CopyratError(Exception):
    """Base class for every error raised by copyrat."""

    default_message = "copyrat error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ExpectedSurroundingPair(CopyratError, ValueError):
    """The hint surroundings were not exactly two characters."""

    default_message = "Expected 2 chars"


class UnknownAlphabet(CopyratError, ValueError):
    """The requested alphabet does not exist."""

    default_message = "Unknown alphabet"


class UnknownColor(CopyratError, ValueError):
    """The requested color name does not exist."""

    default_message = (
        "Unknown ANSI color name: allowed values are magenta, cyan, black, ..."
    )


class UnknownPatternName(CopyratError, ValueError):
    """The requested pattern name does not exist."""

    default_message = "Unknown pattern name"


class ExpectedPaneIdMarker(CopyratError, ValueError):
    """A pane identifier did not start with '%'."""

    default_message = "Expected a pane id marker"


class ExpectedInt(CopyratError, ValueError):
    """A value could not be parsed as an integer."""

    default_message = "Failed parsing integer"


class ExpectedBool(CopyratError, ValueError):
    """A value could not be parsed as a boolean."""

    default_message = "Failed to parse bool"


class ExpectedString(CopyratError, ValueError):
    """A specific string was expected."""

    def __init__(self, expected: str) -> None:
        self.expected = expected
        super().__init__(f"Expected the string `{expected}`")


class ExpectedEnumVariant(CopyratError, ValueError):
    """A value was not one of the allowed variants."""

    def __init__(self, allowed: str) -> None:
        self.allowed = allowed
        super().__init__(f"Expected the value to be within `{allowed}`")