"""Outcome models for wrapped external commands.

This module defines the tri-state result of running a single external
command and the classification of what went wrong when it did not
succeed.
"""

from dataclasses import dataclass, field
from enum import Enum


class Outcome(Enum):
    """Result state of a wrapped command.

    Attributes:
        SUCCESS: The command ran and exited with status 0.
        FAILURE: The command ran (or tried to) and failed.
        NOT_ATTEMPTED: Input was rejected before anything was executed.
    """

    SUCCESS = "success"
    FAILURE = "failure"
    NOT_ATTEMPTED = "not-attempted"


class ErrorKind(Enum):
    """Why a command did not succeed.

    Attributes:
        INVALID_INPUT: Arguments were rejected before the external call.
        NONZERO_EXIT: The external command exited with a non-zero status.
        EXCEPTION: The external command could not be run at all.
    """

    INVALID_INPUT = "invalid-input"
    NONZERO_EXIT = "nonzero-exit"
    EXCEPTION = "exception"


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Outcome of one wrapper invocation.

    Attributes:
        command: Display name of the wrapper (e.g. "git commit").
        outcome: Tri-state result.
        message: Confirmation or error text for the user.
        error_kind: Failure classification, None on success.
        hints: Remediation hints to show after a failure.
        args: Command line that was (or would have been) executed.
        returncode: Process exit status, None if no process ran.
        output: Captured standard output of the command.
    """

    command: str
    outcome: Outcome
    message: str
    error_kind: ErrorKind | None = None
    hints: tuple[str, ...] = ()
    args: tuple[str, ...] = field(default_factory=tuple)
    returncode: int | None = None
    output: str = ""

    @property
    def success(self) -> bool:
        """Check if the command succeeded."""
        return self.outcome == Outcome.SUCCESS

    @property
    def failed(self) -> bool:
        """Check if the command did not succeed (failed or rejected)."""
        return not self.success

    @property
    def attempted(self) -> bool:
        """Check if an external command was actually invoked."""
        return self.outcome != Outcome.NOT_ATTEMPTED

    @property
    def command_line(self) -> str:
        """Command line as a single display string."""
        return " ".join(self.args)
