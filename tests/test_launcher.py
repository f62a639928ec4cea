"""Tests for the command launchers (infra/launcher.py).

``os.execvpe`` and ``subprocess.run`` are mocked — no process is ever
started.

Coverage:
* Child environment = inherited environment + buffering contract.
* ``ExecLauncher`` argument passing and OSError mapping.
* ``SubprocessLauncher`` exit-status relay, including signal deaths.
* Platform selection in ``default_launcher``.
* Missing-library warning.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from stdbuf.config import StdbufConfig
from stdbuf.core.models import LineBuffered, ProgramOptions, Unbuffered
from stdbuf.exceptions import CommandNotExecutableError, CommandNotFoundError
from stdbuf.infra import launcher as launcher_module
from stdbuf.infra.launcher import (
    ExecLauncher,
    SubprocessLauncher,
    build_child_env,
    default_launcher,
)

NO_LIBRARY = StdbufConfig(search_paths=())
OPTIONS = ProgramOptions(stdout=Unbuffered())


# ---------------------------------------------------------------------------
# build_child_env
# ---------------------------------------------------------------------------

class TestBuildChildEnv:
    def test_inherits_and_extends(self) -> None:
        env = build_child_env(OPTIONS, NO_LIBRARY, {"PATH": "/bin", "HOME": "/root"})
        assert env == {"PATH": "/bin", "HOME": "/root", "_STDBUF_O": "0"}

    def test_does_not_mutate_source(self) -> None:
        source = {"PATH": "/bin"}
        build_child_env(OPTIONS, NO_LIBRARY, source)
        assert source == {"PATH": "/bin"}

    def test_preload_added_when_library_found(self, tmp_path: Path) -> None:
        lib = tmp_path / "libstdbuf.so"
        lib.write_bytes(b"")
        config = StdbufConfig(preload_library=lib, search_paths=())
        with patch("stdbuf.infra.buffer_env.platform.system", return_value="Linux"):
            env = build_child_env(OPTIONS, config, {})
        assert env["LD_PRELOAD"] == str(lib.resolve())

    def test_warns_when_library_missing(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setattr(logging.getLogger("stdbuf"), "propagate", True)
        with caplog.at_level(logging.WARNING, logger="stdbuf"):
            build_child_env(OPTIONS, NO_LIBRARY, {})
        assert "buffering library not found" in caplog.text


# ---------------------------------------------------------------------------
# ExecLauncher
# ---------------------------------------------------------------------------

class TestExecLauncher:
    @patch("stdbuf.infra.launcher.os.execvpe")
    def test_execs_command_with_env(self, mock_exec: MagicMock) -> None:
        launcher = ExecLauncher(NO_LIBRARY, {"PATH": "/bin"})
        launcher.launch(ProgramOptions(stdout=LineBuffered()), ("grep", "-o", "x"))

        mock_exec.assert_called_once()
        file, args, env = mock_exec.call_args.args
        assert file == "grep"
        assert args == ["grep", "-o", "x"]
        assert env["_STDBUF_O"] == "L"
        assert env["PATH"] == "/bin"

    @patch("stdbuf.infra.launcher.os.execvpe", side_effect=FileNotFoundError(2, "No such file"))
    def test_not_found(self, _mock_exec: MagicMock) -> None:
        with pytest.raises(CommandNotFoundError) as exc_info:
            ExecLauncher(NO_LIBRARY, {}).launch(OPTIONS, ["nope"])
        assert exc_info.value.exit_code == 127
        assert exc_info.value.command == "nope"
        assert "nope" in str(exc_info.value)

    @patch("stdbuf.infra.launcher.os.execvpe", side_effect=PermissionError(13, "Permission denied"))
    def test_not_executable(self, _mock_exec: MagicMock) -> None:
        with pytest.raises(CommandNotExecutableError, match="Permission denied") as exc_info:
            ExecLauncher(NO_LIBRARY, {}).launch(OPTIONS, ["./script"])
        assert exc_info.value.exit_code == 126


# ---------------------------------------------------------------------------
# SubprocessLauncher
# ---------------------------------------------------------------------------

class TestSubprocessLauncher:
    @patch("stdbuf.infra.launcher.subprocess.run")
    def test_relays_exit_status(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(returncode=3)
        code = SubprocessLauncher(NO_LIBRARY, {}).launch(OPTIONS, ["cat", "f"])

        assert code == 3
        args, kwargs = mock_run.call_args
        assert args[0] == ["cat", "f"]
        assert kwargs["env"]["_STDBUF_O"] == "0"
        assert kwargs["check"] is False

    @patch("stdbuf.infra.launcher.subprocess.run")
    def test_signal_death(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(returncode=-9)
        assert SubprocessLauncher(NO_LIBRARY, {}).launch(OPTIONS, ["sleep"]) == 137

    @patch("stdbuf.infra.launcher.subprocess.run", side_effect=FileNotFoundError(2, "missing"))
    def test_not_found(self, _mock_run: MagicMock) -> None:
        with pytest.raises(CommandNotFoundError):
            SubprocessLauncher(NO_LIBRARY, {}).launch(OPTIONS, ["nope"])

    @patch("stdbuf.infra.launcher.subprocess.run", side_effect=OSError(8, "Exec format error"))
    def test_not_executable(self, _mock_run: MagicMock) -> None:
        with pytest.raises(CommandNotExecutableError, match="Exec format error"):
            SubprocessLauncher(NO_LIBRARY, {}).launch(OPTIONS, ["bad.bin"])


# ---------------------------------------------------------------------------
# default_launcher
# ---------------------------------------------------------------------------

class TestDefaultLauncher:
    def test_posix_uses_exec(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(launcher_module.os, "name", "posix")
        assert isinstance(default_launcher(NO_LIBRARY, {}), ExecLauncher)

    def test_windows_uses_subprocess(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(launcher_module.os, "name", "nt")
        assert isinstance(default_launcher(NO_LIBRARY, {}), SubprocessLauncher)
