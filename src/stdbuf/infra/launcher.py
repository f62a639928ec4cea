"""Concrete :class:`~stdbuf.core.protocols.CommandLauncher` implementations.

This module is the **only** place in the codebase that starts the
wrapped command.  Every :class:`OSError` from ``exec``/``spawn`` is
caught here and re-raised as a
:class:`~stdbuf.exceptions.CommandLaunchError` subclass.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from stdbuf.config import StdbufConfig
from stdbuf.core.models import ProgramOptions
from stdbuf.exceptions import (
    CommandLaunchError,
    CommandNotExecutableError,
    CommandNotFoundError,
)
from stdbuf.infra.buffer_env import build_buffer_env
from stdbuf.infra.preload_detector import detect_preload_library

logger = logging.getLogger(__name__)


def build_child_env(
    options: ProgramOptions,
    config: StdbufConfig,
    environ: Mapping[str, str],
) -> dict[str, str]:
    """Return *environ* extended with the buffering contract for *options*."""
    status = detect_preload_library(config)
    if not status.found:
        logger.warning(
            "buffering library not found (searched: %s); "
            "set STDBUF_LIBRARY to its path",
            ", ".join(str(path) for path in status.searched),
        )

    extra = build_buffer_env(options, preload=status.path, base=environ)
    logger.debug("exporting %s", extra)

    env = dict(environ)
    env.update(extra)
    return env


def _launch_error(command: str, exc: OSError) -> CommandLaunchError:
    """Translate an ``exec``/``spawn`` failure into a typed error."""
    if isinstance(exc, FileNotFoundError):
        return CommandNotFoundError(
            command,
            f"failed to run command '{command}': No such file or directory",
            hint="Check the command name and your PATH.",
        )
    reason = exc.strerror or str(exc)
    return CommandNotExecutableError(
        command,
        f"failed to run command '{command}': {reason}",
    )


class _BaseLauncher:
    """Shared environment handling for the concrete launchers."""

    def __init__(
        self,
        config: StdbufConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._config: StdbufConfig = config if config is not None else StdbufConfig()
        self._environ: Mapping[str, str] = environ if environ is not None else os.environ

    def child_env(self, options: ProgramOptions) -> dict[str, str]:
        return build_child_env(options, self._config, self._environ)


class ExecLauncher(_BaseLauncher):
    """Replace the current process with the wrapped command (POSIX).

    The child inherits this process's PID, so its termination status
    is reported directly to whoever started ``stdbuf``.
    """

    def launch(self, options: ProgramOptions, command: Sequence[str]) -> int:
        env = self.child_env(options)
        logger.debug("exec %s", list(command))

        # Anything buffered here would be lost across exec.
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execvpe(command[0], list(command), env)
        except OSError as exc:
            raise _launch_error(command[0], exc) from exc


class SubprocessLauncher(_BaseLauncher):
    """Spawn the wrapped command and relay its exit status."""

    def launch(self, options: ProgramOptions, command: Sequence[str]) -> int:
        env = self.child_env(options)
        logger.debug("spawn %s", list(command))
        try:
            completed = subprocess.run(list(command), env=env, check=False)
        except OSError as exc:
            raise _launch_error(command[0], exc) from exc

        # A negative code means the child died from a signal.
        if completed.returncode < 0:
            return 128 - completed.returncode
        return completed.returncode


def default_launcher(
    config: StdbufConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> ExecLauncher | SubprocessLauncher:
    """Pick ``exec`` where the platform supports it, else spawn."""
    if os.name == "posix":
        return ExecLauncher(config, environ)
    return SubprocessLauncher(config, environ)
