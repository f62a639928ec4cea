"""Protocols (interfaces) consumed by the CLI layer.

These define the contracts that infrastructure adapters must satisfy.
The CLI depends ONLY on these protocols — never on a concrete launcher
— so tests can substitute a recorder for the real ``exec``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from stdbuf.core.models import ProgramOptions


class CommandLauncher(Protocol):
    """Contract for backends that start the wrapped command.

    Any object that implements :meth:`launch` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def launch(self, options: ProgramOptions, command: Sequence[str]) -> int:
        """Run *command* with the buffering policy in *options*.

        ``command[0]`` is the program name, looked up on ``PATH``; the
        rest are its arguments.  Implementations that replace the
        current process never return on success; the others return the
        child's exit status.

        Raises
        ------
        CommandNotFoundError
            When ``command[0]`` cannot be found.
        CommandNotExecutableError
            When ``command[0]`` exists but could not be invoked.
        """
        ...  # pragma: no cover
