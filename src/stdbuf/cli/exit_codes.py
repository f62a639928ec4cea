"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  Any
code not listed is the wrapped command's own exit status.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Help or version was printed."""

INVALID_OPTIONS: int = 125
"""No valid option list / command boundary could be established."""

UNEXPECTED_ERROR: int = 125
"""An unhandled exception escaped all known error boundaries."""

COMMAND_NOT_EXECUTABLE: int = 126
"""The command was found but could not be invoked."""

COMMAND_NOT_FOUND: int = 127
"""The command could not be found."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
