"""Shared helpers for CLI commands.

Settings are loaded once per invocation and cached on the root context
so every command receives the same explicit configuration.
"""

from pathlib import Path

import typer
from rich.markup import escape

from setupctl.core.config import ConfigError, Settings, load_settings
from setupctl.models.outcome import CommandOutcome
from setupctl.utils.formatting import print_error


def get_settings(ctx: typer.Context) -> Settings:
    """Return the settings for this invocation, loading them on first use.

    Args:
        ctx: Current Typer context.

    Returns:
        Loaded Settings.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    obj = ctx.find_root().ensure_object(dict)
    settings = obj.get("settings")
    if isinstance(settings, Settings):
        return settings

    config_path: Path | None = obj.get("config_path")
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    obj["settings"] = settings
    return settings


def exit_for(outcome: CommandOutcome) -> None:
    """Exit with status 1 if the outcome did not succeed.

    Raises:
        typer.Exit: If the outcome failed.
    """
    if outcome.failed:
        raise typer.Exit(code=1)
