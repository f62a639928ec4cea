"""Infrastructure: locate the child-side buffering adapter library.

Rules
-----
* Detection via filesystem existence checks only — no subprocess.
* No permanent environment modification.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from stdbuf.config import StdbufConfig


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PreloadStatus:
    """Result of a library detection search.

    Attributes
    ----------
    found : bool
        Whether a candidate file exists.
    path : Path | None
        Resolved path of the first existing candidate, or ``None``.
    searched : tuple[Path, ...]
        Every candidate checked, in order.
    """

    found: bool
    path: Path | None
    searched: tuple[Path, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def candidate_paths(config: StdbufConfig) -> tuple[Path, ...]:
    """Return the override (if any) followed by the standard locations."""
    if config.preload_library is None:
        return config.search_paths
    return (config.preload_library, *config.search_paths)


def detect_preload_library(config: StdbufConfig) -> PreloadStatus:
    """Search for the adapter library.

    Returns a :class:`PreloadStatus` regardless of whether the library
    is present — the caller decides whether to warn.
    """
    searched = candidate_paths(config)
    for candidate in searched:
        if candidate.is_file():
            return PreloadStatus(found=True, path=candidate.resolve(), searched=searched)
    return PreloadStatus(found=False, path=None, searched=searched)
