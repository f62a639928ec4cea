"""Infrastructure layer — operating-system integration.

This layer builds the child environment, searches for the buffering
adapter library, and starts the wrapped command.  Every raw
:class:`OSError` must be caught here and re-raised as a
:class:`~stdbuf.exceptions.StdbufError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from stdbuf.infra.buffer_env import build_buffer_env, describe_mode
from stdbuf.infra.launcher import ExecLauncher, SubprocessLauncher, default_launcher
from stdbuf.infra.preload_detector import PreloadStatus, detect_preload_library

__all__: list[str] = [
    "ExecLauncher",
    "PreloadStatus",
    "SubprocessLauncher",
    "build_buffer_env",
    "default_launcher",
    "describe_mode",
    "detect_preload_library",
]
