"""Unit tests for the Scaffold wrapper."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from setupctl.models.outcome import ErrorKind, Outcome
from setupctl.models.scaffold import Framework, JsPackageManager
from setupctl.utils.shell import CommandResult
from setupctl.wrappers.scaffold import Scaffold


class TestScaffold:
    """Tests for Scaffold."""

    @patch("setupctl.wrappers.base.run_command")
    def test_runs_generator_once(self, mock_run: MagicMock, tmp_path: Path) -> None:
        """One generator command runs in the parent directory."""
        mock_run.return_value = CommandResult(stdout="", stderr="", returncode=0)

        outcome = Scaffold(Framework.REACT, "my-app", cwd=str(tmp_path)).run()

        assert outcome.success
        mock_run.assert_called_once()
        assert mock_run.call_args[0][0][:4] == ["npm", "create", "vite@latest", "my-app"]
        assert mock_run.call_args.kwargs["cwd"] == str(tmp_path)
        assert outcome.message == f"Created react project in {tmp_path / 'my-app'}"

    @pytest.mark.parametrize(
        "name", ["My-App", "_private", ".hidden", "has space", "a/b", "", "app\n"]
    )
    @patch("setupctl.wrappers.base.run_command")
    def test_invalid_names_rejected(self, mock_run: MagicMock, name: str) -> None:
        """Names npm would refuse never reach the generator."""
        outcome = Scaffold(Framework.VUE, name).run()

        mock_run.assert_not_called()
        assert outcome.error_kind == ErrorKind.INVALID_INPUT

    @patch("setupctl.wrappers.base.run_command")
    def test_existing_directory_rejected(self, mock_run: MagicMock, tmp_path: Path) -> None:
        """An existing target directory is refused."""
        (tmp_path / "site").mkdir()

        outcome = Scaffold(Framework.ASTRO, "site", cwd=str(tmp_path)).run()

        mock_run.assert_not_called()
        assert outcome.outcome == Outcome.NOT_ATTEMPTED

    @patch("setupctl.wrappers.base.run_command")
    def test_failure_hints_name_package_manager(self, mock_run: MagicMock, tmp_path: Path) -> None:
        """Failure hints mention the package manager used."""
        mock_run.return_value = CommandResult(stdout="", stderr="ENOTFOUND", returncode=1)

        outcome = Scaffold(
            Framework.NEXT, "web", JsPackageManager.PNPM, cwd=str(tmp_path)
        ).run()

        assert outcome.failed
        assert "pnpm" in outcome.hints[0]
