"""Project scaffolding wrapper.

Runs one framework generator through a JavaScript package manager.
"""

import re
from pathlib import Path
from typing import Any

from setupctl.models.scaffold import Framework, JsPackageManager
from setupctl.utils.shell import CommandResult
from setupctl.wrappers.base import CommandWrapper, InvalidInputError

# npm package name rules; the project name doubles as the directory name
_PROJECT_NAME = re.compile(r"[a-z0-9][a-z0-9._-]*")
_MAX_NAME_LENGTH = 214


class Scaffold(CommandWrapper):
    """Create a new project from a framework template."""

    name = "new"

    def __init__(
        self,
        framework: Framework,
        project: str,
        package_manager: JsPackageManager = JsPackageManager.NPM,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.framework = framework
        self.project = project
        self.package_manager = package_manager

    @property
    def target(self) -> Path:
        """Directory the generator will create."""
        return Path(self._cwd or ".") / self.project

    def validate(self) -> None:
        if not self.project:
            raise InvalidInputError("Project name cannot be empty")
        if len(self.project) > _MAX_NAME_LENGTH:
            raise InvalidInputError(f"Project name is longer than {_MAX_NAME_LENGTH} characters")
        if not _PROJECT_NAME.fullmatch(self.project):
            raise InvalidInputError(
                f"Invalid project name: {self.project}",
                [
                    "Use lowercase letters, digits, '-', '_' or '.', "
                    "starting with a letter or digit."
                ],
            )
        if self.target.exists():
            raise InvalidInputError(
                f"Directory already exists: {self.target}",
                ["Choose another project name or remove the directory first."],
            )

    def build_args(self) -> list[str]:
        return self.framework.build_args(self.project, self.package_manager)

    def success_message(self, result: CommandResult) -> str:
        return f"Created {self.framework.value} project in {self.target}"

    def failure_hints(self, result: CommandResult) -> list[str]:
        return [
            f"Check that {self.package_manager.value} is installed and up to date.",
            "Generators download from the registry; check your network connection.",
        ]
