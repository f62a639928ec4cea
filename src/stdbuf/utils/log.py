"""Developer logging setup.

User-facing diagnostics go through :mod:`stdbuf.cli.console`; this
module only wires the stdlib :mod:`logging` tree used for debug traces
of the launch path.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ROOT_LOGGER_NAME = "stdbuf"


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, falling back to WARNING."""
    value = logging.getLevelName(level.strip().upper())
    if isinstance(value, int):
        return value
    return logging.WARNING


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the ``stdbuf`` logger with a single stderr handler.

    Calling this more than once replaces the previous handler rather
    than stacking duplicates, and rebinds it to the current
    ``sys.stderr``.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    numeric = resolve_level(level)
    logger.setLevel(numeric)

    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
