"""Shared pytest fixtures and configuration for the stdbuf test suite.

Guidelines
----------
* No test may exec or spawn a real process — launchers are mocked at
  the infra boundary or replaced by :class:`RecordingLauncher`.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state (e.g. whether libstdbuf is installed).
"""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from stdbuf.core.models import ProgramOptions


class RecordingLauncher:
    """Launcher double that records calls and returns a fixed status."""

    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.calls: list[tuple[ProgramOptions, tuple[str, ...]]] = []

    def launch(self, options: ProgramOptions, command: Sequence[str]) -> int:
        self.calls.append((options, tuple(command)))
        return self.status


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture(autouse=True)
def _gnu_option_permutation(monkeypatch: pytest.MonkeyPatch) -> None:
    """``POSIXLY_CORRECT`` would stop option matching at the first positional."""
    monkeypatch.delenv("POSIXLY_CORRECT", raising=False)
