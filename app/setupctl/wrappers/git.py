"""Git command wrappers.

Each wrapper runs exactly one git command in the given working
directory.
"""

import re
from typing import Any

from setupctl.utils.shell import CommandResult
from setupctl.wrappers.base import CommandWrapper, InvalidInputError

# https://, ssh://, git://, file:// and scp-style user@host:path remotes
_REMOTE_URL = re.compile(r"^(?:(?:https?|ssh|git|file)://\S+|[\w.-]+@[\w.-]+:\S+)$")
_INVALID_REF_CHARS = set(" ~^:?*[\\")


def validate_branch_name(branch: str) -> None:
    """Reject branch names git would refuse.

    Raises:
        InvalidInputError: If the name breaks git's ref naming rules.
    """
    if not branch or not branch.strip():
        raise InvalidInputError("Branch name cannot be empty")
    if branch.startswith("-"):
        raise InvalidInputError(f"Branch name cannot start with '-': {branch}")
    if ".." in branch or "@{" in branch or "//" in branch:
        raise InvalidInputError(f"Invalid branch name: {branch}")
    if branch.endswith((".lock", "/", ".")) or branch.startswith("/"):
        raise InvalidInputError(f"Invalid branch name: {branch}")
    bad = sorted(c for c in set(branch) if c in _INVALID_REF_CHARS or ord(c) < 32)
    if bad:
        raise InvalidInputError(
            f"Branch name contains invalid characters {''.join(bad)!r}: {branch}"
        )


class GitWrapper(CommandWrapper):
    """Common failure hints for git commands."""

    def failure_hints(self, result: CommandResult) -> list[str]:
        text = result.error_text.lower()
        if "not a git repository" in text:
            return ["Run this inside a git repository, or 'git init' first."]
        return []


class GitClone(GitWrapper):
    """git clone <url> [destination]."""

    name = "git clone"

    def __init__(self, url: str, destination: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.url = url.strip()
        self.destination = destination

    def validate(self) -> None:
        if not self.url:
            raise InvalidInputError("Repository URL cannot be empty")
        if not _REMOTE_URL.match(self.url):
            raise InvalidInputError(
                f"Not a repository URL: {self.url}",
                ["Use an https:// URL or an SSH remote like git@github.com:user/repo.git."],
            )

    def build_args(self) -> list[str]:
        args = ["git", "clone", self.url]
        if self.destination:
            args.append(self.destination)
        return args

    def success_message(self, result: CommandResult) -> str:
        return f"Cloned {self.url}"

    def failure_hints(self, result: CommandResult) -> list[str]:
        text = result.error_text.lower()
        hints: list[str] = []
        if "already exists" in text:
            hints.append("The destination directory already exists; pick another one.")
        if "permission denied" in text or "authentication" in text:
            hints.append("Check your SSH key or credentials for this host.")
        if "could not resolve host" in text:
            hints.append("Check your network connection and the host name.")
        return hints


class GitCommit(GitWrapper):
    """git commit [-a] -m <message>."""

    name = "git commit"

    def __init__(self, message: str, stage_all: bool = True, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.message = message
        self.stage_all = stage_all

    def validate(self) -> None:
        if not self.message or not self.message.strip():
            raise InvalidInputError("Commit message cannot be empty")

    def build_args(self) -> list[str]:
        args = ["git", "commit"]
        if self.stage_all:
            args.append("-a")
        return [*args, "-m", self.message]

    def success_message(self, result: CommandResult) -> str:
        # First line looks like "[main 1a2b3c4] message"
        first = result.stdout.strip().splitlines()[0] if result.stdout.strip() else ""
        return f"Committed {first}" if first else "Committed"

    def failure_hints(self, result: CommandResult) -> list[str]:
        hints = super().failure_hints(result)
        output = f"{result.stdout}\n{result.stderr}".lower()
        if "nothing to commit" in output or "no changes added" in output:
            hints.append("Stage new files with 'git add' first; -a only picks up tracked files.")
        if "user.email" in output or "user.name" in output:
            hints.append("Set your identity with 'git config --global user.name/user.email'.")
        return hints


class GitPush(GitWrapper):
    """git push [-u] <remote> [branch]."""

    name = "git push"

    def __init__(
        self,
        remote: str = "origin",
        branch: str | None = None,
        set_upstream: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.remote = remote
        self.branch = branch
        self.set_upstream = set_upstream

    def validate(self) -> None:
        if not self.remote or not self.remote.strip():
            raise InvalidInputError("Remote name cannot be empty")
        if self.branch is not None:
            validate_branch_name(self.branch)
        if self.set_upstream and self.branch is None:
            raise InvalidInputError("--set-upstream needs an explicit branch")

    def build_args(self) -> list[str]:
        args = ["git", "push"]
        if self.set_upstream:
            args.append("-u")
        args.append(self.remote)
        if self.branch:
            args.append(self.branch)
        return args

    def success_message(self, result: CommandResult) -> str:
        target = f"{self.remote}/{self.branch}" if self.branch else self.remote
        return f"Pushed to {target}"

    def failure_hints(self, result: CommandResult) -> list[str]:
        hints = super().failure_hints(result)
        text = result.error_text.lower()
        if "rejected" in text or "fetch first" in text:
            hints.append("The remote has new commits; pull before pushing.")
        if "no upstream" in text or "has no upstream" in text:
            hints.append("Pass the branch with --set-upstream to create the tracking branch.")
        if "does not appear to be a git repository" in text:
            hints.append(f"Check that the remote '{self.remote}' exists ('git remote -v').")
        if "permission denied" in text or "authentication" in text or "403" in text:
            hints.append("Check your credentials or SSH key for this remote.")
        return hints


class GitPull(GitWrapper):
    """git pull <remote> [branch]."""

    name = "git pull"

    def __init__(self, remote: str = "origin", branch: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.remote = remote
        self.branch = branch

    def validate(self) -> None:
        if not self.remote or not self.remote.strip():
            raise InvalidInputError("Remote name cannot be empty")
        if self.branch is not None:
            validate_branch_name(self.branch)

    def build_args(self) -> list[str]:
        args = ["git", "pull", self.remote]
        if self.branch:
            args.append(self.branch)
        return args

    def success_message(self, result: CommandResult) -> str:
        if "already up to date" in result.stdout.lower():
            return "Already up to date"
        return f"Pulled from {self.remote}"

    def failure_hints(self, result: CommandResult) -> list[str]:
        hints = super().failure_hints(result)
        output = f"{result.stdout}\n{result.stderr}".lower()
        if "conflict" in output:
            hints.append("Resolve the conflicts, then commit the merge.")
        if "would be overwritten" in output:
            hints.append("Commit or stash local changes before pulling.")
        return hints


class GitSwitch(GitWrapper):
    """git switch [-c] <branch>."""

    name = "git switch"

    def __init__(self, branch: str, create: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.branch = branch
        self.create = create

    def validate(self) -> None:
        validate_branch_name(self.branch)

    def build_args(self) -> list[str]:
        args = ["git", "switch"]
        if self.create:
            args.append("-c")
        return [*args, self.branch]

    def success_message(self, result: CommandResult) -> str:
        if self.create:
            return f"Created and switched to {self.branch}"
        return f"Switched to {self.branch}"

    def failure_hints(self, result: CommandResult) -> list[str]:
        hints = super().failure_hints(result)
        text = result.error_text.lower()
        if "invalid reference" in text:
            hints.append("The branch does not exist; use --create to make it.")
        if "already exists" in text:
            hints.append("The branch already exists; drop --create to switch to it.")
        if "would be overwritten" in text:
            hints.append("Commit or stash local changes before switching.")
        return hints


class GitStatus(GitWrapper):
    """git status --short --branch."""

    name = "git status"

    def build_args(self) -> list[str]:
        return ["git", "status", "--short", "--branch"]

    def success_message(self, result: CommandResult) -> str:
        changed = [line for line in result.stdout.splitlines() if not line.startswith("##")]
        if not changed:
            return "Working tree clean"
        return f"{len(changed)} changed path(s)"
