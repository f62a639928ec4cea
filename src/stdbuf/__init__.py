"""stdbuf — run a command with modified standard stream buffering.

Resolves ``-i/-o/-e MODE`` options into a validated buffering
configuration, locates where the wrapped command starts, and hands
both to a launcher that replaces the current process.
"""

from stdbuf.version import __version__

__all__: list[str] = ["__version__"]
