"""Pure MODE token grammar.

Grammar
-------
* ``0``   — unbuffered.
* ``L``   — line buffered (rejected for standard input).
* ``N``   — fully buffered, ``N`` bytes.
* ``NU``  — ``N * 1024**rank(U)`` for ``U`` in ``K M G T P E Z Y``.
* ``NUB`` — ``N * 1000**rank(U)``.

Results must fit in an unsigned 64-bit integer; overflow is an error,
never a wraparound.
"""

from __future__ import annotations

import string

from stdbuf.core.models import (
    MAX_BUFFER_SIZE,
    BufferMode,
    FixedSize,
    LineBuffered,
    Stream,
    Unbuffered,
)
from stdbuf.exceptions import InvalidModeError, LineBufferedInputError

UNIT_RANKS: dict[str, int] = {
    unit: rank for rank, unit in enumerate("KMGTPEZY", start=1)
}
"""Rank of every unit letter; the multiplier is ``base ** rank``."""

BINARY_BASE: int = 1024
DECIMAL_BASE: int = 1000

MAX_SIZE_DIGITS: int = len(str(MAX_BUFFER_SIZE))
"""Digit count of the largest 64-bit size; longer runs cannot fit."""


def _unit_scale(suffix: str) -> int | None:
    """Return the multiplier for *suffix*, or ``None`` if unrecognised."""
    if suffix == "":
        return 1
    if len(suffix) == 2 and suffix[1] == "B" and suffix[0] in UNIT_RANKS:
        return DECIMAL_BASE ** UNIT_RANKS[suffix[0]]
    if len(suffix) == 1 and suffix in UNIT_RANKS:
        return BINARY_BASE ** UNIT_RANKS[suffix]
    return None


def split_size_token(token: str) -> tuple[str, str]:
    """Split *token* into its leading digit run and trailing letter suffix.

    Raises :class:`InvalidModeError` when the two parts do not
    concatenate back to *token* (e.g. ``12x34y``).
    """
    suffix = token.lstrip(string.digits)
    number = token.rstrip(string.ascii_letters)
    if number + suffix != token:
        raise InvalidModeError(token)
    return number, suffix


def parse_size(token: str) -> int:
    """Return the byte count described by a sized MODE token."""
    number, suffix = split_size_token(token)
    if not number:
        raise InvalidModeError(token)

    significant = number.lstrip("0") or "0"
    if len(significant) > MAX_SIZE_DIGITS:
        raise InvalidModeError(token)

    value = int(significant)
    if value > MAX_BUFFER_SIZE:
        raise InvalidModeError(token)

    scale = _unit_scale(suffix)
    if scale is None:
        raise InvalidModeError(token)

    size = value * scale
    if size > MAX_BUFFER_SIZE:
        raise InvalidModeError(token)
    return size


def parse_mode(token: str, *, stream: Stream) -> BufferMode:
    """Parse a MODE token for *stream* into a canonical :data:`BufferMode`.

    Raises
    ------
    LineBufferedInputError
        When ``L`` is requested for ``input``.
    InvalidModeError
        For any token outside the grammar, including 64-bit overflow.
    """
    if token == "0":
        return Unbuffered()
    if token == "L":
        if stream == "input":
            raise LineBufferedInputError(token)
        return LineBuffered()
    return FixedSize(parse_size(token))
