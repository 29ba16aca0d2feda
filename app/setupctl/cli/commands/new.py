"""Project scaffolding command."""

from pathlib import Path
from typing import Annotated

import typer

from setupctl.cli.display import print_outcome
from setupctl.cli.types import exit_for, get_settings
from setupctl.models.scaffold import Framework, JsPackageManager
from setupctl.wrappers.scaffold import Scaffold


def new_project(
    ctx: typer.Context,
    framework: Annotated[
        Framework,
        typer.Argument(help="Framework template.", case_sensitive=False),
    ],
    name: Annotated[str, typer.Argument(help="Project and directory name.")],
    package_manager: Annotated[
        JsPackageManager | None,
        typer.Option(
            "--pm",
            "-p",
            help="Package manager that runs the generator (default from config).",
            case_sensitive=False,
            show_default=False,
        ),
    ] = None,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-d",
            help="Parent directory (default: current directory).",
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show the generator command without running it."),
    ] = False,
) -> None:
    """Create a new project from a framework template.

    Examples:
        setupctl new react my-app
        setupctl new next site --pm pnpm
    """
    settings = get_settings(ctx)
    outcome = Scaffold(
        framework,
        name,
        package_manager or settings.scaffold.package_manager,
        dry_run=dry_run,
        timeout=settings.command_timeout,
        cwd=str(directory) if directory is not None else None,
    ).run()
    print_outcome(outcome)
    exit_for(outcome)
