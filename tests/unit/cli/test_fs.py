"""Unit tests for file and folder commands."""

from pathlib import Path
from unittest.mock import patch

from setupctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestFsCommands:
    """Tests for setupctl fs ..."""

    def test_mkdir_twice(self, tmp_path: Path) -> None:
        """The second mkdir without --force fails."""
        target = tmp_path / "proj"

        first = runner.invoke(app, ["fs", "mkdir", str(target)])
        second = runner.invoke(app, ["fs", "mkdir", str(target)])

        assert first.exit_code == 0
        assert target.is_dir()
        assert second.exit_code == 1
        assert "already exists" in second.output

    def test_mkdir_force(self, tmp_path: Path) -> None:
        """--force accepts an existing directory."""
        result = runner.invoke(app, ["fs", "mkdir", str(tmp_path), "--force"])

        assert result.exit_code == 0

    def test_touch(self, tmp_path: Path) -> None:
        """touch creates a file with content."""
        target = tmp_path / "README.md"

        result = runner.invoke(app, ["fs", "touch", str(target), "--content", "# Hi"])

        assert result.exit_code == 0
        assert target.read_text() == "# Hi"

    def test_rm_file(self, tmp_path: Path) -> None:
        """rm deletes a file."""
        target = tmp_path / "a.txt"
        target.write_text("x")

        result = runner.invoke(app, ["fs", "rm", str(target)])

        assert result.exit_code == 0
        assert not target.exists()

    def test_rm_protected(self) -> None:
        """rm refuses protected paths without prompting or deleting."""
        with patch("setupctl.wrappers.files.shutil.rmtree") as mock_rmtree:
            result = runner.invoke(app, ["fs", "rm", "/usr", "--recursive"])

        assert result.exit_code == 1
        mock_rmtree.assert_not_called()
        assert "protected" in result.output

    def test_rm_recursive_confirm_declined(self, tmp_path: Path) -> None:
        """Declining the prompt keeps the directory."""
        target = tmp_path / "build"
        target.mkdir()

        result = runner.invoke(app, ["fs", "rm", str(target), "-r"], input="n\n")

        assert result.exit_code == 0
        assert target.exists()

    def test_rm_recursive_yes(self, tmp_path: Path) -> None:
        """--yes skips the prompt."""
        target = tmp_path / "build"
        (target / "obj").mkdir(parents=True)

        result = runner.invoke(app, ["fs", "rm", str(target), "-r", "--yes"])

        assert result.exit_code == 0
        assert not target.exists()

    def test_rm_configured_protection(self, tmp_path: Path) -> None:
        """Patterns from the config file are honoured."""
        target = tmp_path / "vault" / "secret.txt"
        target.parent.mkdir()
        target.write_text("x")
        config = tmp_path / "config.toml"
        config.write_text(f'protected_paths = ["{(tmp_path / "vault").as_posix()}"]\n')

        result = runner.invoke(app, ["--config", str(config), "fs", "rm", str(target)])

        assert result.exit_code == 1
        assert target.exists()
