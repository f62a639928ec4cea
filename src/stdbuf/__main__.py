"""Allow ``python -m stdbuf`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m stdbuf`` behaves identically to the ``stdbuf``
console script.
"""

from __future__ import annotations

from stdbuf.cli.app import cli

if __name__ == "__main__":
    cli()
