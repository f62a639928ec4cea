"""CLI application entry point for stdbuf.

This module is the **sole error boundary** for the entire application.
It catches :class:`~stdbuf.exceptions.StdbufError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering one-line diagnostics on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No option grammar lives here — the boundary scan is delegated to the
  core layer and the launch to the infrastructure layer.
* Help and version go to stdout; every diagnostic goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping, Sequence

from stdbuf.cli import exit_codes
from stdbuf.cli.console import console, plain
from stdbuf.cli.help import PROG, help_text, version_text
from stdbuf.config import StdbufConfig
from stdbuf.core.boundary_scanner import scan
from stdbuf.core.models import Boundary, NeedsHelp, NeedsVersion, NoBoundary
from stdbuf.core.protocols import CommandLauncher
from stdbuf.exceptions import CommandLaunchError, StdbufError
from stdbuf.infra.buffer_env import describe_mode
from stdbuf.utils import assert_never
from stdbuf.utils.log import setup_logging

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

def _report_error(exc: StdbufError) -> None:
    """Print ``stdbuf: <message>`` and the optional hint to stderr."""
    message = f"{PROG}: {exc}"
    console.print(
        f"[bold red]{plain(message)}[/bold red]",
        fallback=message,
    )
    if exc.hint:
        console.print(
            f"[yellow]Hint:[/yellow] {plain(exc.hint)}",
            fallback=f"Hint: {exc.hint}",
        )


def _report_invalid_options(result: NoBoundary) -> None:
    if result.error is not None:
        _report_error(result.error)
    console.print("Invalid options")
    console.print(f"Try '{PROG} --help' for more information.")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    launcher: CommandLauncher | None = None,
) -> int:
    """Run the stdbuf CLI.

    Parameters
    ----------
    argv:
        Explicit argument list, program name excluded.  When ``None``
        (default), ``sys.argv[1:]`` is used.
    environ:
        Environment for configuration and for the child.  Defaults to
        :data:`os.environ`.
    launcher:
        Backend that starts the wrapped command.  Defaults to
        :func:`~stdbuf.infra.launcher.default_launcher`.

    Returns
    -------
    int
        OS process exit code — the wrapped command's own status when a
        launcher returns one.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    env = os.environ if environ is None else environ
    config = StdbufConfig.from_env(env)
    setup_logging(config.log_level)

    result = scan(args)
    match result:
        case NeedsHelp():
            print(help_text(), end="")
            return exit_codes.SUCCESS
        case NeedsVersion():
            print(version_text())
            return exit_codes.SUCCESS
        case NoBoundary():
            _report_invalid_options(result)
            return exit_codes.INVALID_OPTIONS
        case Boundary(options=options, index=index, command=command):
            logger.debug("program arg index = %d", index)
            logger.debug(
                "stdin=%s stdout=%s stderr=%s",
                describe_mode(options.stdin),
                describe_mode(options.stdout),
                describe_mode(options.stderr),
            )
            if launcher is None:
                from stdbuf.infra.launcher import default_launcher

                launcher = default_launcher(config, env)
            return launcher.launch(options, command)
        case _:
            assert_never(result)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CommandLaunchError as exc:
        _report_error(exc)
        sys.exit(exc.exit_code)
    except StdbufError as exc:
        _report_error(exc)
        sys.exit(exit_codes.INVALID_OPTIONS)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]", fallback="\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {plain(str(exc))}",
            fallback=(
                "Unexpected error. Please report this issue.\n"
                f"  {type(exc).__name__}: {exc}"
            ),
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
