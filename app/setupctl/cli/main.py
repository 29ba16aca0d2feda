"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from setupctl import __version__
from setupctl.cli.commands import bootstrap, config, fs, git, new, wifi
from setupctl.utils.formatting import setup_logging

# Create main Typer app
app = typer.Typer(
    name="setupctl",
    help="Machine setup and everyday command wrappers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"setupctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Config file to use instead of ~/.config/setupctl/config.toml.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """setupctl - bootstrap a machine and wrap everyday commands.

    Installs applications from a package list and provides git, WiFi,
    file and scaffolding commands with readable errors and hints.
    """
    setup_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="bootstrap")(bootstrap.bootstrap)
app.add_typer(git.app, name="git")
app.add_typer(wifi.app, name="wifi")
app.add_typer(fs.app, name="fs")
app.command(name="new")(new.new_project)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
