"""Tests for buffering library detection (infra/preload_detector.py).

Every test builds its own candidate list under ``tmp_path`` — no
dependency on whether coreutils is installed.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from stdbuf.config import StdbufConfig
from stdbuf.infra.preload_detector import (
    PreloadStatus,
    candidate_paths,
    detect_preload_library,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


class TestCandidatePaths:
    def test_defaults_only(self) -> None:
        config = StdbufConfig(search_paths=(Path("/a.so"), Path("/b.so")))
        assert candidate_paths(config) == (Path("/a.so"), Path("/b.so"))

    def test_override_first(self) -> None:
        config = StdbufConfig(preload_library=Path("/custom.so"), search_paths=(Path("/a.so"),))
        assert candidate_paths(config) == (Path("/custom.so"), Path("/a.so"))


class TestDetectPreloadLibrary:
    def test_found_in_search_paths(self, tmp_path: Path) -> None:
        lib = _touch(tmp_path / "lib" / "libstdbuf.so")
        config = StdbufConfig(search_paths=(tmp_path / "missing.so", lib))
        status = detect_preload_library(config)
        assert status.found is True
        assert status.path == lib.resolve()

    def test_override_wins(self, tmp_path: Path) -> None:
        override = _touch(tmp_path / "override.so")
        default = _touch(tmp_path / "default.so")
        config = StdbufConfig(preload_library=override, search_paths=(default,))
        assert detect_preload_library(config).path == override.resolve()

    def test_directory_is_not_a_library(self, tmp_path: Path) -> None:
        config = StdbufConfig(search_paths=(tmp_path,))
        assert detect_preload_library(config).found is False

    def test_not_found(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.so"
        status = detect_preload_library(StdbufConfig(search_paths=(missing,)))
        assert status.found is False
        assert status.path is None
        assert status.searched == (missing,)


class TestPreloadStatus:
    def test_frozen(self) -> None:
        status = PreloadStatus(found=False, path=None, searched=())
        with pytest.raises(AttributeError):
            status.found = True  # type: ignore[misc]
