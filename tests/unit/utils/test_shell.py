"""Unit tests for shell execution utilities."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from setupctl.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success_on_zero(self) -> None:
        """Exit status 0 is success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success is True

    def test_failure_on_nonzero(self) -> None:
        """Any other exit status is failure."""
        assert CommandResult(stdout="", stderr="", returncode=2).success is False

    def test_error_text_prefers_stderr(self) -> None:
        """error_text uses stderr when present."""
        result = CommandResult(stdout="out", stderr="  err\n", returncode=1)

        assert result.error_text == "err"

    def test_error_text_falls_back_to_stdout(self) -> None:
        """error_text uses stdout when stderr is empty."""
        result = CommandResult(stdout="No installed package found\n", stderr="", returncode=1)

        assert result.error_text == "No installed package found"


class TestRunCommand:
    """Tests for run_command."""

    @patch("setupctl.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """run_command captures stdout, stderr and exit status."""
        mock_run.return_value = MagicMock(stdout="hello\n", stderr="", returncode=0)

        result = run_command(["echo", "hello"])

        assert result == CommandResult(stdout="hello\n", stderr="", returncode=0)
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["encoding"] == "utf-8"
        assert kwargs["errors"] == "replace"
        assert kwargs["check"] is False

    @patch("setupctl.utils.shell.subprocess.run")
    def test_no_timeout_by_default(self, mock_run: MagicMock) -> None:
        """run_command waits for the command unless a timeout is given."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["winget", "install", "Git.Git"])

        assert mock_run.call_args.kwargs["timeout"] is None

    @patch("setupctl.utils.shell.subprocess.run")
    def test_passes_timeout_and_cwd(self, mock_run: MagicMock) -> None:
        """run_command forwards timeout and working directory."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["git", "status"], timeout=5.0, cwd="/tmp")

        assert mock_run.call_args.kwargs["timeout"] == 5.0
        assert mock_run.call_args.kwargs["cwd"] == "/tmp"

    @patch("setupctl.utils.shell.subprocess.run")
    def test_timeout_propagates(self, mock_run: MagicMock) -> None:
        """run_command lets TimeoutExpired propagate."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=1)

        with pytest.raises(subprocess.TimeoutExpired):
            run_command(["git", "fetch"], timeout=1)

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell script")
    def test_undecodable_output_is_replaced(self, tmp_path: Path) -> None:
        """Bytes that are not UTF-8 never raise while decoding."""
        script = tmp_path / "noisy"
        script.write_text("#!/bin/sh\nprintf 'ok \\377'\nexit 1\n")
        script.chmod(0o755)

        result = run_command([str(script)])

        assert result.returncode == 1
        assert result.stdout == "ok \ufffd"

    def test_raises_file_not_found(self) -> None:
        """run_command raises FileNotFoundError for missing commands."""
        with pytest.raises(FileNotFoundError):
            run_command(["nonexistent_command_xyz_12345"])


class TestCommandExists:
    """Tests for command_exists."""

    def test_found(self) -> None:
        """command_exists is True when shutil.which finds the command."""
        with patch("setupctl.utils.shell.shutil.which", return_value="/usr/bin/git"):
            assert command_exists("git") is True

    def test_missing(self) -> None:
        """command_exists is False when shutil.which returns None."""
        with patch("setupctl.utils.shell.shutil.which", return_value=None):
            assert command_exists("winget") is False
