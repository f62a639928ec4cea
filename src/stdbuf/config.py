"""Runtime configuration read from the process environment.

The command-line grammar is fixed, so the only tunables are where the
child-side buffering library lives and how chatty developer logging is.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

LIBRARY_ENV_VAR: str = "STDBUF_LIBRARY"
LOG_LEVEL_ENV_VAR: str = "STDBUF_LOG_LEVEL"

DEFAULT_LOG_LEVEL: str = "WARNING"

DEFAULT_SEARCH_PATHS: tuple[Path, ...] = (
    Path("/usr/libexec/coreutils/libstdbuf.so"),
    Path("/usr/lib/coreutils/libstdbuf.so"),
    Path("/usr/local/libexec/coreutils/libstdbuf.so"),
    Path("/usr/lib64/coreutils/libstdbuf.so"),
    Path("/opt/homebrew/libexec/coreutils/libstdbuf.so"),
)
"""Locations where coreutils packages install ``libstdbuf.so``."""


@dataclass(frozen=True, slots=True)
class StdbufConfig:
    """Immutable configuration snapshot for a single invocation."""

    preload_library: Path | None = None
    """Explicit path to the buffering adapter library, if overridden."""

    log_level: str = DEFAULT_LOG_LEVEL
    """Level name for the ``stdbuf`` logger."""

    search_paths: tuple[Path, ...] = DEFAULT_SEARCH_PATHS
    """Candidate library locations searched after the override."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> StdbufConfig:
        """Build a config from *environ*; empty values count as unset."""
        library = environ.get(LIBRARY_ENV_VAR, "").strip()
        level = environ.get(LOG_LEVEL_ENV_VAR, "").strip()
        return cls(
            preload_library=Path(library) if library else None,
            log_level=level or DEFAULT_LOG_LEVEL,
        )
