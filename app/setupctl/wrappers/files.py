"""File and folder wrappers.

These act through pathlib/shutil instead of spawning a process, but
follow the same validate/execute/interpret contract as the other
wrappers. The equivalent shell command is kept for display and dry-run.
"""

import logging
import shutil
from abc import abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from setupctl.core.protected import is_protected_path
from setupctl.models.outcome import CommandOutcome, ErrorKind, Outcome
from setupctl.wrappers.base import CommandWrapper, InvalidInputError

logger = logging.getLogger(__name__)

PERMISSION_HINT = "Check the permissions of the path and its parent directory."


class FileWrapper(CommandWrapper):
    """Base class for wrappers that change the filesystem directly."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.raw_path = path
        self.path = Path(path).expanduser()

    def validate(self) -> None:
        if not self.raw_path or not self.raw_path.strip():
            raise InvalidInputError("Path cannot be empty")

    @abstractmethod
    def perform(self) -> str:
        """Apply the change and return a confirmation message.

        Raises:
            OSError: If the filesystem operation fails.
        """

    def run(self) -> CommandOutcome:
        rejected = self.check()
        if rejected is not None:
            return rejected

        args = tuple(self.build_args())

        if self._dry_run:
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.SUCCESS,
                message=f"Dry-run: would run {' '.join(args)}",
                args=args,
            )

        logger.info("Executing: %s", " ".join(args))

        try:
            message = self.perform()
        except OSError as e:
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.FAILURE,
                message=f"{self.name} failed: {e}",
                error_kind=ErrorKind.EXCEPTION,
                hints=(PERMISSION_HINT,),
                args=args,
            )

        return CommandOutcome(
            command=self.name,
            outcome=Outcome.SUCCESS,
            message=message,
            args=args,
        )


class MakeDirectory(FileWrapper):
    """Create a directory and any missing parents.

    An existing path is left alone: without force this is a failure,
    with force an existing directory is accepted unchanged.
    """

    name = "mkdir"

    def __init__(self, path: str, force: bool = False, **kwargs: Any) -> None:
        super().__init__(path, **kwargs)
        self.force = force

    def validate(self) -> None:
        super().validate()
        if self.path.exists() or self.path.is_symlink():
            if not self.path.is_dir():
                raise InvalidInputError(
                    f"A file already exists at {self.path}",
                    ["Choose another name or remove the file first."],
                )
            if not self.force:
                raise InvalidInputError(
                    f"Directory already exists: {self.path}",
                    ["Pass --force to accept an existing directory."],
                )

    def build_args(self) -> list[str]:
        return ["mkdir", "-p", str(self.path)]

    def perform(self) -> str:
        if self.path.is_dir():
            return f"Directory already exists: {self.path}"
        self.path.mkdir(parents=True)
        return f"Created directory {self.path}"


class NewFile(FileWrapper):
    """Create a file, optionally with content.

    An existing file is only overwritten with force.
    """

    name = "new file"

    def __init__(
        self,
        path: str,
        force: bool = False,
        content: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(path, **kwargs)
        self.force = force
        self.content = content

    def validate(self) -> None:
        super().validate()
        if self.path.is_dir():
            raise InvalidInputError(f"A directory already exists at {self.path}")
        if self.path.exists() and not self.force:
            raise InvalidInputError(
                f"File already exists: {self.path}",
                ["Pass --force to overwrite it."],
            )

    def build_args(self) -> list[str]:
        return ["touch", str(self.path)]

    def perform(self) -> str:
        existed = self.path.exists()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.content, encoding="utf-8")
        if existed:
            return f"Overwrote {self.path}"
        return f"Created {self.path}"


class RemovePath(FileWrapper):
    """Delete a file, symlink or (with recursive) a directory tree.

    Protected system locations are refused before anything is touched.
    """

    name = "remove"

    def __init__(
        self,
        path: str,
        recursive: bool = False,
        protected_patterns: Iterable[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(path, **kwargs)
        self.recursive = recursive
        self.protected_patterns = list(protected_patterns)

    def validate(self) -> None:
        super().validate()
        if is_protected_path(str(self.path), self.protected_patterns):
            raise InvalidInputError(
                f"Refusing to remove protected path: {self.path}",
                ["System, credential and home directories cannot be removed with this command."],
            )
        if not self.path.exists() and not self.path.is_symlink():
            raise InvalidInputError(f"Path does not exist: {self.path}")
        if self.path.is_dir() and not self.path.is_symlink() and not self.recursive:
            raise InvalidInputError(
                f"{self.path} is a directory",
                ["Pass --recursive to remove a directory and its contents."],
            )

    def build_args(self) -> list[str]:
        if self.recursive:
            return ["rm", "-r", str(self.path)]
        return ["rm", str(self.path)]

    def perform(self) -> str:
        # Directories, but not symlinks to directories
        if self.path.is_dir() and not self.path.is_symlink():
            shutil.rmtree(self.path)
        else:
            self.path.unlink()
        return f"Removed {self.path}"
