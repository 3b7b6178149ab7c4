"""Standalone command: pick a span of text read from stdin."""

from __future__ import annotations

import sys
from typing import Sequence

from .config import Config, OutputDestination, parse_config
from .controller import Selection, ViewController
from .model import Model


def run(lines: Sequence[str], config: Config) -> Selection | None:
    """Highlight spans in `lines` and let the user pick one.

    Returns None when no span matches or the user gives up.
    """
    model = Model.build(
        lines,
        config.alphabet,
        config.use_all_patterns,
        config.named_patterns,
        config.custom_patterns,
        config.reverse,
        config.unique_hint,
    )
    if not model.spans:
        return None

    controller = ViewController(
        model,
        config.focus_wrap_around,
        OutputDestination.CLIPBOARD,
        config.colors,
        config.hint_alignment,
        config.hint_style(),
    )
    return controller.present()


def main(argv: Sequence[str] | None = None) -> int:
    """Read stdin, let the user pick a span and print it.

    Returns 1 when nothing was selected.
    """
    config = parse_config(argv)
    lines = sys.stdin.read().split("\n")
    selection = run(lines, config)
    if selection is None:
        return 1
    print(selection.text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())