"""Locate where the wrapped command starts in a mixed argument vector.

``stdbuf`` does not require ``--`` between its own options and the
command, and the command's arguments may look like options.  The
scanner therefore resolves ``argv[:1]``, ``argv[:2]``, … until a prefix
resolves to options plus exactly one positional — that positional,
always the final token of the first resolving prefix, is the command
name.

The scan makes at most ``len(argv)`` attempts, each a pure call to
:func:`~stdbuf.core.option_resolver.resolve_options`, so the worst case
is quadratic in the (small) argument count.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from stdbuf.core.models import (
    Boundary,
    Fatal,
    NeedsHelp,
    NeedsVersion,
    NoBoundary,
    Resolved,
    Retryable,
    ScanOutcome,
    ScanResult,
)
from stdbuf.core.option_resolver import resolve_options
from stdbuf.utils import assert_never

Resolver = Callable[[Sequence[str]], ScanOutcome]


def scan(argv: Sequence[str], *, resolver: Resolver = resolve_options) -> ScanResult:
    """Find the command boundary in *argv* (program name excluded).

    Returns
    -------
    ScanResult
        ``NeedsHelp`` / ``NeedsVersion`` as soon as a prefix asks for
        them, a :class:`Boundary` on the first resolving prefix, or
        :class:`NoBoundary` when a prefix is fatal or every prefix is
        exhausted.
    """
    args = tuple(argv)
    for length in range(1, len(args) + 1):
        outcome = resolver(args[:length])
        match outcome:
            case NeedsHelp() | NeedsVersion():
                return outcome
            case Resolved(options=options):
                index = length - 1
                return Boundary(options=options, index=index, command=args[index:])
            case Fatal(error=error):
                return NoBoundary(error)
            case Retryable():
                continue
            case _:
                assert_never(outcome)
    return NoBoundary()
