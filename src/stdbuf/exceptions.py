"""Custom exception hierarchy for stdbuf.

Every user-visible error condition maps to a subclass of
:class:`StdbufError` so that the CLI error boundary can render a clean
``stdbuf: <message>`` line without leaking stack traces.  Raw
:class:`OSError` from process launching must NEVER propagate beyond
the infrastructure layer.

Hierarchy
---------
StdbufError
├── InvalidModeError
│   └── LineBufferedInputError
├── MissingModeError
└── CommandLaunchError
    ├── CommandNotFoundError
    └── CommandNotExecutableError
"""

from __future__ import annotations


class StdbufError(Exception):
    """Base exception for all stdbuf errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Mode grammar ----------------------------------------------------------

class InvalidModeError(StdbufError):
    """Raised when a MODE token does not follow the mode grammar."""

    def __init__(self, token: str, *, message: str | None = None) -> None:
        super().__init__(message or f"invalid mode '{token}'")
        self.token: str = token
        """The offending MODE token exactly as the user typed it."""


class LineBufferedInputError(InvalidModeError):
    """Raised when ``L`` is requested for standard input."""

    def __init__(self, token: str = "L") -> None:
        super().__init__(token, message="line buffering stdin is meaningless")


# --- Option resolution -----------------------------------------------------

class MissingModeError(StdbufError):
    """Raised when none of ``-i``, ``-o`` or ``-e`` was supplied."""

    def __init__(self) -> None:
        super().__init__("you must specify a buffering mode option")


# --- Launch ----------------------------------------------------------------

class CommandLaunchError(StdbufError):
    """Raised when the wrapped command cannot be started."""

    exit_code: int = 126

    def __init__(self, command: str, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.command: str = command


class CommandNotFoundError(CommandLaunchError):
    """Raised when the wrapped command does not exist on PATH."""

    exit_code: int = 127


class CommandNotExecutableError(CommandLaunchError):
    """Raised when the wrapped command exists but could not be invoked."""

    exit_code: int = 126
