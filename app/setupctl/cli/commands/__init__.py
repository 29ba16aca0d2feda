"""CLI commands for setupctl.

This package contains all subcommand implementations.
"""

from setupctl.cli.commands import bootstrap, config, fs, git, new, wifi

__all__ = ["bootstrap", "config", "fs", "git", "new", "wifi"]
