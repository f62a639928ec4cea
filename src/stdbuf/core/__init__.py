"""Core layer — pure option resolution and boundary detection.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem, environment or process I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from stdbuf.core.boundary_scanner import scan
from stdbuf.core.mode_parser import parse_mode, parse_size
from stdbuf.core.models import (
    Boundary,
    BufferMode,
    Default,
    FixedSize,
    LineBuffered,
    NoBoundary,
    ProgramOptions,
    ScanOutcome,
    ScanResult,
    Unbuffered,
)
from stdbuf.core.option_resolver import resolve_options
from stdbuf.core.protocols import CommandLauncher

__all__: list[str] = [
    "Boundary",
    "BufferMode",
    "CommandLauncher",
    "Default",
    "FixedSize",
    "LineBuffered",
    "NoBoundary",
    "ProgramOptions",
    "ScanOutcome",
    "ScanResult",
    "Unbuffered",
    "parse_mode",
    "parse_size",
    "resolve_options",
    "scan",
]
