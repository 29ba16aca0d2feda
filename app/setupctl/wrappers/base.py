"""Abstract base class for command wrappers.

A wrapper validates its arguments, runs exactly one external command and
turns the result into a CommandOutcome. Wrappers never raise for
command failures and never retry.
"""

import logging
import subprocess
from abc import ABC, abstractmethod

from setupctl.models.outcome import CommandOutcome, ErrorKind, Outcome
from setupctl.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised by validate() when arguments are rejected.

    Attributes:
        hints: Remediation hints to show alongside the message.
    """

    def __init__(self, message: str, hints: list[str] | None = None) -> None:
        super().__init__(message)
        self.hints = hints or []


class CommandWrapper(ABC):
    """Base class for all single-command wrappers.

    Subclasses implement build_args() and optionally validate(),
    success_message() and failure_hints().

    Attributes:
        dry_run: If True, report the command without executing it.
        timeout: Seconds before the command is abandoned (None = no limit).
        cwd: Working directory for the command.

    Example:
        >>> outcome = GitCommit("Fix typo").run()
        >>> if outcome.failed:
        ...     print(outcome.message, outcome.hints)
    """

    #: Display name used in messages, e.g. "git commit".
    name: str = "command"

    def __init__(
        self,
        *,
        dry_run: bool = False,
        timeout: float | None = None,
        cwd: str | None = None,
    ) -> None:
        self._dry_run = dry_run
        self._timeout = timeout
        self._cwd = cwd

    @property
    def dry_run(self) -> bool:
        """Check if wrapper is in dry-run mode."""
        return self._dry_run

    def validate(self) -> None:
        """Check arguments before anything runs.

        Raises:
            InvalidInputError: If an argument is rejected.
        """

    @abstractmethod
    def build_args(self) -> list[str]:
        """Build the command line to execute."""

    def success_message(self, result: CommandResult) -> str:
        """Confirmation text for a successful run."""
        return f"{self.name} completed"

    def failure_hints(self, result: CommandResult) -> list[str]:
        """Remediation hints for a non-zero exit."""
        return []

    def check(self) -> CommandOutcome | None:
        """Run validation only.

        Returns:
            A NOT_ATTEMPTED outcome if the input is rejected, None otherwise.
        """
        try:
            self.validate()
        except InvalidInputError as e:
            logger.debug("%s rejected input: %s", self.name, e)
            return self.rejected(str(e), e.hints)
        return None

    def run(self) -> CommandOutcome:
        """Validate, execute and interpret the wrapped command.

        Returns:
            CommandOutcome describing what happened.
        """
        rejected = self.check()
        if rejected is not None:
            return rejected

        args = self.build_args()

        if self._dry_run:
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.SUCCESS,
                message=f"Dry-run: would run {' '.join(args)}",
                args=tuple(args),
            )

        logger.info("Executing: %s", " ".join(args))

        try:
            result = run_command(args, timeout=self._timeout, cwd=self._cwd)
        except FileNotFoundError:
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.FAILURE,
                message=f"{args[0]} was not found",
                error_kind=ErrorKind.EXCEPTION,
                hints=(f"Check that {args[0]} is installed and on your PATH.",),
                args=tuple(args),
            )
        except subprocess.TimeoutExpired:
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.FAILURE,
                message=f"{self.name} timed out after {self._timeout:g}s",
                error_kind=ErrorKind.EXCEPTION,
                args=tuple(args),
            )
        except OSError as e:
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.FAILURE,
                message=f"Could not run {args[0]}: {e}",
                error_kind=ErrorKind.EXCEPTION,
                args=tuple(args),
            )

        return self.interpret(args, result)

    def interpret(self, args: list[str], result: CommandResult) -> CommandOutcome:
        """Turn a finished process into an outcome.

        Args:
            args: Command line that was executed.
            result: Captured process result.

        Returns:
            CommandOutcome for the run.
        """
        if result.success:
            return CommandOutcome(
                command=self.name,
                outcome=Outcome.SUCCESS,
                message=self.success_message(result),
                args=tuple(args),
                returncode=result.returncode,
                output=result.stdout,
            )

        logger.debug("%s exited with %d", self.name, result.returncode)
        detail = result.error_text or f"exit status {result.returncode}"
        return CommandOutcome(
            command=self.name,
            outcome=Outcome.FAILURE,
            message=f"{self.name} failed: {detail}",
            error_kind=ErrorKind.NONZERO_EXIT,
            hints=tuple(self.failure_hints(result)),
            args=tuple(args),
            returncode=result.returncode,
            output=result.stdout,
        )

    def rejected(self, message: str, hints: list[str] | None = None) -> CommandOutcome:
        """Build an outcome for input rejected before execution."""
        return CommandOutcome(
            command=self.name,
            outcome=Outcome.NOT_ATTEMPTED,
            message=message,
            error_kind=ErrorKind.INVALID_INPUT,
            hints=tuple(hints or []),
        )
