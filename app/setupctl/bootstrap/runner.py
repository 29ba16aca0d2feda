"""Bootstrap runner.

Installs every identifier from a list file, one package manager call per
identifier, in order. A failed install never stops the batch; there is
no retry and no rollback.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from setupctl.bootstrap.listfile import read_package_list
from setupctl.models.outcome import CommandOutcome, Outcome
from setupctl.models.package import PackageManager
from setupctl.utils.shell import CommandResult, command_exists
from setupctl.wrappers.base import CommandWrapper, InvalidInputError

logger = logging.getLogger(__name__)

# APPINSTALLER_CLI_ERROR_PACKAGE_ALREADY_INSTALLED, signed and unsigned
_WINGET_ALREADY_INSTALLED = {-1978335189, 0x8A15002B}


class BootstrapError(Exception):
    """Raised when a bootstrap run cannot start."""


class PackageInstall(CommandWrapper):
    """Install a single package identifier with exact matching."""

    def __init__(self, manager: PackageManager, package: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.manager = manager
        self.package = package
        self.name = f"{manager.value} install"

    def validate(self) -> None:
        if not self.package or not self.package.strip():
            raise InvalidInputError("Package identifier cannot be empty")

    def build_args(self) -> list[str]:
        return self.manager.install_args(self.package)

    def interpret(self, args: list[str], result: CommandResult) -> CommandOutcome:
        if self._already_installed(result):
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.SUCCESS,
                message=f"{self.package} is already installed",
                args=tuple(args),
                returncode=result.returncode,
                output=result.stdout,
            )
        return super().interpret(args, result)

    def success_message(self, result: CommandResult) -> str:
        return f"Installed {self.package}"

    def failure_hints(self, result: CommandResult) -> list[str]:
        return self.manager.failure_hints()

    def _already_installed(self, result: CommandResult) -> bool:
        if self.manager is not PackageManager.WINGET or result.success:
            return False
        # stdout also says "already installed" before an upgrade attempt
        return result.returncode in _WINGET_ALREADY_INSTALLED


@dataclass(frozen=True, slots=True)
class PackageResult:
    """Outcome of installing one identifier."""

    package: str
    outcome: CommandOutcome

    @property
    def success(self) -> bool:
        return self.outcome.success


@dataclass(slots=True)
class BootstrapSummary:
    """Ordered per-package results of a bootstrap run."""

    results: list[PackageResult] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    @property
    def failures(self) -> list[PackageResult]:
        return [r for r in self.results if not r.success]


class BootstrapRunner:
    """Install a list of packages through one package manager.

    Attributes:
        manager: Package manager used for every install.
        dry_run: If True, report commands without running them.
        timeout: Per-install timeout in seconds (None = no limit).
    """

    def __init__(
        self,
        manager: PackageManager,
        *,
        dry_run: bool = False,
        timeout: float | None = None,
    ) -> None:
        self.manager = manager
        self.dry_run = dry_run
        self.timeout = timeout

    def check_available(self) -> None:
        """Make sure the package manager can be run.

        Raises:
            BootstrapError: If the executable is not on PATH.
        """
        if self.dry_run:
            return
        if not command_exists(self.manager.executable):
            msg = f"{self.manager.executable} is not available on this system"
            raise BootstrapError(msg)

    def install(
        self,
        packages: list[str],
        on_result: Callable[[PackageResult], None] | None = None,
    ) -> BootstrapSummary:
        """Install packages one after another.

        Args:
            packages: Identifiers in install order.
            on_result: Called after each package finishes.

        Returns:
            BootstrapSummary with one result per package.

        Raises:
            BootstrapError: If the package manager is not available.
        """
        self.check_available()

        summary = BootstrapSummary()
        for package in packages:
            outcome = PackageInstall(
                self.manager,
                package,
                dry_run=self.dry_run,
                timeout=self.timeout,
            ).run()
            if outcome.failed:
                logger.info("Install of %s failed: %s", package, outcome.message)
            result = PackageResult(package=package, outcome=outcome)
            summary.results.append(result)
            if on_result is not None:
                on_result(result)

        return summary

    def run(
        self,
        list_file: Path,
        on_result: Callable[[PackageResult], None] | None = None,
    ) -> BootstrapSummary:
        """Read a list file and install every identifier in it.

        Raises:
            PackageListError: If the list file cannot be read.
            BootstrapError: If the package manager is not available.
        """
        packages = read_package_list(list_file)
        logger.info("Bootstrapping %d package(s) from %s", len(packages), list_file)
        return self.install(packages, on_result=on_result)
