"""Resolve one argument slice into a :data:`~stdbuf.core.models.ScanOutcome`.

The slice is parsed with GNU-style option matching (permutation,
``--`` terminator, ``-oL`` / ``--output=L`` spellings, unambiguous
long-option prefixes).  Every function here is pure: no printing, no
logging, no access to the process environment beyond what
:func:`getopt.gnu_getopt` itself consults.

Outcome rules, in order:

1. Grammar failure (unknown flag, truncated value option) → ``Retryable``.
2. ``--help`` → ``NeedsHelp``; ``--version`` → ``NeedsVersion``.
3. Any invalid MODE → ``Fatal``.
4. Positional count other than one → ``Retryable``.
5. No stream option given → ``Fatal``.
6. Otherwise → ``Resolved``.
"""

from __future__ import annotations

import getopt
from collections.abc import Sequence

from stdbuf.core.mode_parser import parse_mode
from stdbuf.core.models import (
    BufferMode,
    Default,
    Fatal,
    NeedsHelp,
    NeedsVersion,
    ProgramOptions,
    Resolved,
    Retryable,
    ScanOutcome,
    Stream,
)
from stdbuf.exceptions import InvalidModeError, MissingModeError

SHORT_OPTIONS: str = "i:o:e:"
LONG_OPTIONS: tuple[str, ...] = ("input=", "output=", "error=", "help", "version")

_STREAM_FLAGS: dict[str, Stream] = {
    "-i": "input",
    "--input": "input",
    "-o": "output",
    "--output": "output",
    "-e": "error",
    "--error": "error",
}


def _collect_modes(
    matched: Sequence[tuple[str, str]],
) -> dict[Stream, BufferMode]:
    """Parse every stream option in order; later values replace earlier ones."""
    modes: dict[Stream, BufferMode] = {}
    for flag, value in matched:
        stream = _STREAM_FLAGS.get(flag)
        if stream is not None:
            modes[stream] = parse_mode(value, stream=stream)
    return modes


def resolve_options(args: Sequence[str]) -> ScanOutcome:
    """Attempt a full option parse of *args*."""
    try:
        matched, positionals = getopt.gnu_getopt(
            list(args), SHORT_OPTIONS, list(LONG_OPTIONS),
        )
    except getopt.GetoptError:
        return Retryable()

    flags = {flag for flag, _ in matched}
    if "--help" in flags:
        return NeedsHelp()
    if "--version" in flags:
        return NeedsVersion()

    try:
        modes = _collect_modes(matched)
    except InvalidModeError as exc:
        return Fatal(exc)

    if len(positionals) != 1:
        return Retryable()
    if not modes:
        return Fatal(MissingModeError())

    return Resolved(
        ProgramOptions(
            stdin=modes.get("input", Default()),
            stdout=modes.get("output", Default()),
            stderr=modes.get("error", Default()),
        )
    )
