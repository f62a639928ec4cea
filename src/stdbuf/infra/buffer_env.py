"""Infrastructure: the environment contract read by the buffering adapter.

The child-side adapter (coreutils ``libstdbuf``) is loaded ahead of
the wrapped program through the dynamic loader's preload variable and
reads one variable per stream:

============  =====================================
Variable      Value
============  =====================================
_STDBUF_I     ``0`` or a byte count
_STDBUF_O     ``0``, ``L`` or a byte count
_STDBUF_E     ``0``, ``L`` or a byte count
============  =====================================

Streams left at :class:`~stdbuf.core.models.Default` are not exported.
"""

from __future__ import annotations

import platform
from collections.abc import Mapping
from pathlib import Path

from stdbuf.core.models import (
    BufferMode,
    Default,
    FixedSize,
    LineBuffered,
    ProgramOptions,
    Unbuffered,
)
from stdbuf.utils import assert_never

STREAM_VARIABLES: tuple[tuple[str, str], ...] = (
    ("stdin", "_STDBUF_I"),
    ("stdout", "_STDBUF_O"),
    ("stderr", "_STDBUF_E"),
)


def mode_env_value(mode: BufferMode) -> str | None:
    """Return the adapter's encoding of *mode*, or ``None`` for Default."""
    match mode:
        case Default():
            return None
        case Unbuffered():
            return "0"
        case LineBuffered():
            return "L"
        case FixedSize(size=size):
            return str(size)
        case _:
            assert_never(mode)


def describe_mode(mode: BufferMode) -> str:
    """Human-readable rendering used in diagnostics."""
    match mode:
        case Default():
            return "default"
        case Unbuffered():
            return "unbuffered"
        case LineBuffered():
            return "line buffered"
        case FixedSize(size=size):
            return f"{size} bytes"
        case _:
            assert_never(mode)


def preload_variable(system: str | None = None) -> str:
    """Name of the loader variable that injects a shared library."""
    name = (system if system is not None else platform.system()).lower()
    if name == "darwin":
        return "DYLD_INSERT_LIBRARIES"
    return "LD_PRELOAD"


def build_buffer_env(
    options: ProgramOptions,
    *,
    preload: Path | None = None,
    base: Mapping[str, str] | None = None,
    system: str | None = None,
) -> dict[str, str]:
    """Return the variables to add to the child's environment.

    Parameters
    ----------
    options:
        The resolved buffering request.
    preload:
        Path of the adapter library, prepended to the loader variable
        when given.
    base:
        The environment the child would otherwise inherit; used to keep
        any existing preload entries.
    system:
        Override for :func:`platform.system`, for tests.
    """
    env: dict[str, str] = {}
    for attribute, variable in STREAM_VARIABLES:
        value = mode_env_value(getattr(options, attribute))
        if value is not None:
            env[variable] = value

    if preload is not None:
        variable = preload_variable(system)
        existing = (base or {}).get(variable, "")
        env[variable] = f"{preload}:{existing}" if existing else str(preload)
        if variable == "DYLD_INSERT_LIBRARIES":
            env["DYLD_FORCE_FLAT_NAMESPACE"] = "1"

    return env
