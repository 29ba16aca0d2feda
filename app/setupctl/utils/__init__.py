"""Utility modules for setupctl.

This module exports commonly used utility functions.
"""

from setupctl.utils.formatting import (
    console,
    err_console,
    print_error,
    print_hint,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)
from setupctl.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_hint",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "setup_logging",
]
