"""Unit tests for git wrappers."""

from unittest.mock import MagicMock, patch

import pytest
from setupctl.models.outcome import ErrorKind, Outcome
from setupctl.utils.shell import CommandResult
from setupctl.wrappers.base import InvalidInputError
from setupctl.wrappers.git import (
    GitClone,
    GitCommit,
    GitPull,
    GitPush,
    GitStatus,
    GitSwitch,
    validate_branch_name,
)

OK = CommandResult(stdout="", stderr="", returncode=0)


class TestValidateBranchName:
    """Tests for branch name validation."""

    @pytest.mark.parametrize("name", ["main", "feature/login", "fix-1.2", "user/topic_x"])
    def test_valid(self, name: str) -> None:
        """Ordinary branch names pass."""
        validate_branch_name(name)

    @pytest.mark.parametrize(
        "name",
        ["", " ", "-x", "a..b", "a b", "topic.lock", "topic/", "a~1", "a^", "a:b", "a?", "a*", "a[b", "a\\b"],
    )
    def test_invalid(self, name: str) -> None:
        """Names git would refuse are rejected."""
        with pytest.raises(InvalidInputError):
            validate_branch_name(name)


class TestGitClone:
    """Tests for GitClone."""

    def test_args(self) -> None:
        """clone passes the URL and destination."""
        wrapper = GitClone("https://github.com/user/repo.git", "repo2")

        assert wrapper.build_args() == ["git", "clone", "https://github.com/user/repo.git", "repo2"]

    @pytest.mark.parametrize(
        "url",
        ["git@github.com:user/repo.git", "ssh://git@host/repo", "file:///srv/repo.git"],
    )
    def test_accepts_remote_forms(self, url: str) -> None:
        """SSH, scp-style and file URLs are accepted."""
        assert GitClone(url).check() is None

    @patch("setupctl.wrappers.base.run_command")
    def test_rejects_non_url(self, mock_run: MagicMock) -> None:
        """Something that is not a URL is rejected before git runs."""
        outcome = GitClone("just some words").run()

        mock_run.assert_not_called()
        assert outcome.outcome == Outcome.NOT_ATTEMPTED

    @patch("setupctl.wrappers.base.run_command")
    def test_existing_destination_hint(self, mock_run: MagicMock) -> None:
        """A clash with an existing directory gets a hint."""
        mock_run.return_value = CommandResult(
            stdout="",
            stderr="fatal: destination path 'repo' already exists and is not an empty directory.",
            returncode=128,
        )

        outcome = GitClone("https://github.com/user/repo.git").run()

        assert outcome.error_kind == ErrorKind.NONZERO_EXIT
        assert any("already exists" in h for h in outcome.hints)


class TestGitCommit:
    """Tests for GitCommit."""

    def test_args_stage_all(self) -> None:
        """By default tracked changes are staged with -a."""
        assert GitCommit("Fix typo").build_args() == ["git", "commit", "-a", "-m", "Fix typo"]

    def test_args_staged_only(self) -> None:
        """stage_all=False commits only the index."""
        assert GitCommit("Fix", stage_all=False).build_args() == ["git", "commit", "-m", "Fix"]

    @patch("setupctl.wrappers.base.run_command")
    def test_empty_message_rejected(self, mock_run: MagicMock) -> None:
        """A blank message never reaches git."""
        outcome = GitCommit("   ").run()

        mock_run.assert_not_called()
        assert outcome.error_kind == ErrorKind.INVALID_INPUT

    @patch("setupctl.wrappers.base.run_command")
    def test_success_message_from_output(self, mock_run: MagicMock) -> None:
        """The summary line from git is echoed."""
        mock_run.return_value = CommandResult(
            stdout="[main 1a2b3c4] Fix typo\n 1 file changed\n", stderr="", returncode=0
        )

        outcome = GitCommit("Fix typo").run()

        assert outcome.message == "Committed [main 1a2b3c4] Fix typo"

    @patch("setupctl.wrappers.base.run_command")
    def test_nothing_to_commit_hint(self, mock_run: MagicMock) -> None:
        """An empty commit explains how to stage files."""
        mock_run.return_value = CommandResult(
            stdout="nothing to commit, working tree clean\n", stderr="", returncode=1
        )

        outcome = GitCommit("Fix").run()

        assert outcome.failed
        assert any("git add" in h for h in outcome.hints)

    @patch("setupctl.wrappers.base.run_command")
    def test_not_a_repository_hint(self, mock_run: MagicMock) -> None:
        """Running outside a repository says so."""
        mock_run.return_value = CommandResult(
            stdout="",
            stderr="fatal: not a git repository (or any of the parent directories): .git",
            returncode=128,
        )

        outcome = GitCommit("Fix").run()

        assert any("git init" in h for h in outcome.hints)


class TestGitPush:
    """Tests for GitPush."""

    def test_args(self) -> None:
        """push uses remote and optional branch."""
        assert GitPush("origin").build_args() == ["git", "push", "origin"]
        assert GitPush("origin", "main", set_upstream=True).build_args() == [
            "git",
            "push",
            "-u",
            "origin",
            "main",
        ]

    def test_set_upstream_needs_branch(self) -> None:
        """--set-upstream without a branch is rejected."""
        outcome = GitPush("origin", set_upstream=True).run()

        assert outcome.outcome == Outcome.NOT_ATTEMPTED

    @patch("setupctl.wrappers.base.run_command")
    def test_rejected_push_hint(self, mock_run: MagicMock) -> None:
        """A rejected push suggests pulling first."""
        mock_run.return_value = CommandResult(
            stdout="",
            stderr="! [rejected] main -> main (fetch first)",
            returncode=1,
        )

        outcome = GitPush("origin", "main").run()

        assert any("pull" in h for h in outcome.hints)

    @patch("setupctl.wrappers.base.run_command")
    def test_auth_hint(self, mock_run: MagicMock) -> None:
        """Authentication failures mention credentials."""
        mock_run.return_value = CommandResult(
            stdout="",
            stderr="git@github.com: Permission denied (publickey).",
            returncode=128,
        )

        outcome = GitPush("origin").run()

        assert any("credentials" in h for h in outcome.hints)

    @patch("setupctl.wrappers.base.run_command")
    def test_success_message(self, mock_run: MagicMock) -> None:
        """Success names the target."""
        mock_run.return_value = OK

        outcome = GitPush("upstream", "dev").run()

        assert outcome.message == "Pushed to upstream/dev"


class TestGitPull:
    """Tests for GitPull."""

    @patch("setupctl.wrappers.base.run_command")
    def test_up_to_date(self, mock_run: MagicMock) -> None:
        """An up-to-date pull says so."""
        mock_run.return_value = CommandResult(stdout="Already up to date.\n", stderr="", returncode=0)

        outcome = GitPull("origin").run()

        assert outcome.message == "Already up to date"
        assert mock_run.call_args[0][0] == ["git", "pull", "origin"]

    @patch("setupctl.wrappers.base.run_command")
    def test_conflict_hint(self, mock_run: MagicMock) -> None:
        """Merge conflicts suggest resolving them."""
        mock_run.return_value = CommandResult(
            stdout="CONFLICT (content): Merge conflict in app.py\n", stderr="", returncode=1
        )

        outcome = GitPull("origin", "main").run()

        assert any("conflicts" in h for h in outcome.hints)


class TestGitSwitch:
    """Tests for GitSwitch."""

    def test_args(self) -> None:
        """switch uses -c when creating."""
        assert GitSwitch("dev").build_args() == ["git", "switch", "dev"]
        assert GitSwitch("dev", create=True).build_args() == ["git", "switch", "-c", "dev"]

    @patch("setupctl.wrappers.base.run_command")
    def test_invalid_branch_rejected(self, mock_run: MagicMock) -> None:
        """Invalid names never reach git."""
        outcome = GitSwitch("bad name").run()

        mock_run.assert_not_called()
        assert outcome.error_kind == ErrorKind.INVALID_INPUT

    @patch("setupctl.wrappers.base.run_command")
    def test_missing_branch_hint(self, mock_run: MagicMock) -> None:
        """An unknown branch suggests --create."""
        mock_run.return_value = CommandResult(
            stdout="", stderr="fatal: invalid reference: topic", returncode=128
        )

        outcome = GitSwitch("topic").run()

        assert any("--create" in h for h in outcome.hints)


class TestGitStatus:
    """Tests for GitStatus."""

    @patch("setupctl.wrappers.base.run_command")
    def test_clean(self, mock_run: MagicMock) -> None:
        """Only the branch line means a clean tree."""
        mock_run.return_value = CommandResult(stdout="## main...origin/main\n", stderr="", returncode=0)

        outcome = GitStatus().run()

        assert outcome.message == "Working tree clean"

    @patch("setupctl.wrappers.base.run_command")
    def test_changes_counted(self, mock_run: MagicMock) -> None:
        """Changed paths are counted."""
        mock_run.return_value = CommandResult(
            stdout="## main\n M app.py\n?? new.txt\n", stderr="", returncode=0
        )

        outcome = GitStatus(cwd="/repo").run()

        assert outcome.message == "2 changed path(s)"
        assert mock_run.call_args.kwargs["cwd"] == "/repo"
