"""Domain models for stdbuf.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The closed variant sets
(:data:`BufferMode`, :data:`ScanOutcome`, :data:`ScanResult`) are
plain unions so that ``match`` statements paired with
:func:`~stdbuf.utils.assert_never` are checked for exhaustiveness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from stdbuf.exceptions import StdbufError

MAX_BUFFER_SIZE: int = 2**64 - 1
"""Largest buffer size representable as an unsigned 64-bit integer."""

Stream: TypeAlias = Literal["input", "output", "error"]
"""Long option name of the stream a MODE applies to."""


# ---------------------------------------------------------------------------
# Buffering modes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Default:
    """Leave the stream with the platform's default buffering."""


@dataclass(frozen=True, slots=True)
class Unbuffered:
    """Every write goes straight through."""


@dataclass(frozen=True, slots=True)
class LineBuffered:
    """Flush on newline.  Never valid for standard input."""


@dataclass(frozen=True, slots=True)
class FixedSize:
    """Fully buffered with a buffer of ``size`` bytes."""

    size: int

    def __post_init__(self) -> None:
        if not 0 <= self.size <= MAX_BUFFER_SIZE:
            raise ValueError(f"buffer size out of 64-bit range: {self.size}")


BufferMode: TypeAlias = Default | Unbuffered | LineBuffered | FixedSize


# ---------------------------------------------------------------------------
# Resolved configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProgramOptions:
    """Buffering requested for each of the three standard streams."""

    stdin: BufferMode = Default()
    stdout: BufferMode = Default()
    stderr: BufferMode = Default()


# ---------------------------------------------------------------------------
# Per-prefix resolution outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NeedsHelp:
    """``--help`` was requested."""


@dataclass(frozen=True, slots=True)
class NeedsVersion:
    """``--version`` was requested."""


@dataclass(frozen=True, slots=True)
class Resolved:
    """The prefix is a complete, valid option list plus the command name."""

    options: ProgramOptions


@dataclass(frozen=True, slots=True)
class Retryable:
    """The prefix is too short or ambiguous; try a longer one."""


@dataclass(frozen=True, slots=True)
class Fatal:
    """The prefix contains a user error that no longer prefix can fix."""

    error: StdbufError


ScanOutcome: TypeAlias = NeedsHelp | NeedsVersion | Resolved | Retryable | Fatal


# ---------------------------------------------------------------------------
# Final scanner result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Boundary:
    """Where the wrapped command starts, with the options that precede it.

    ``index`` is relative to the argument vector handed to the scanner,
    and ``command`` is the slice starting at that index.
    """

    options: ProgramOptions
    index: int
    command: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NoBoundary:
    """No prefix resolved.  ``error`` holds the fatal diagnostic, if any."""

    error: StdbufError | None = None


ScanResult: TypeAlias = NeedsHelp | NeedsVersion | Boundary | NoBoundary
