"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so that diagnostics still reach stderr when Rich is not
installed.  Rich markup is never used for text that echoes user
input; see :func:`plain`.
"""

from __future__ import annotations

import sys
from typing import Any


def get_rich_console() -> Any | None:
    """Create a Rich console targeting stderr, or ``None`` without Rich."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console(stderr=True, highlight=False, soft_wrap=True)


def plain(text: str) -> str:
    """Escape *text* so Rich prints it literally."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, markup: str, *, fallback: str | None = None) -> None:
        """Render *markup* with Rich, else print *fallback* to stderr.

        *fallback* defaults to *markup*; pass it whenever *markup*
        contains Rich tags.
        """
        rich_console = get_rich_console()
        if rich_console is None:
            print(markup if fallback is None else fallback, file=sys.stderr)
            return
        rich_console.print(markup)


console = _ConsoleProxy()
