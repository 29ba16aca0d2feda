"""Bootstrap command implementation.

Installs every package listed in a list file, continuing past failures.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from setupctl.bootstrap.listfile import PackageListError
from setupctl.bootstrap.runner import BootstrapError, BootstrapRunner
from setupctl.cli.display import print_bootstrap_summary, print_package_result
from setupctl.cli.types import get_settings
from setupctl.models.package import PackageManager
from setupctl.utils.formatting import console, print_error, print_info, print_warning


def bootstrap(
    ctx: typer.Context,
    list_file: Annotated[
        Path | None,
        typer.Argument(
            help="Package list file (default: packages.txt in the config directory).",
            show_default=False,
        ),
    ] = None,
    manager: Annotated[
        PackageManager | None,
        typer.Option(
            "--manager",
            "-m",
            help="Package manager to install with (default from config).",
            case_sensitive=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show the install commands without running them.",
        ),
    ] = False,
) -> None:
    """Install every package in a list file.

    One install command runs per identifier, in file order. Blank lines
    and lines starting with # are skipped. A failed install is reported
    and the next package is tried; nothing is retried or rolled back.

    Examples:
        setupctl bootstrap                       # Default list, default manager
        setupctl bootstrap apps.txt --dry-run    # Preview commands
        setupctl bootstrap apps.txt -m choco     # Install with Chocolatey
    """
    settings = get_settings(ctx)
    path = list_file or settings.effective_package_list
    runner = BootstrapRunner(
        manager or settings.package_manager,
        dry_run=dry_run,
        timeout=settings.command_timeout,
    )

    console.print(
        f"[header]Bootstrapping from[/header] {escape(str(path))} "
        f"[muted]({runner.manager.value}{', dry run' if dry_run else ''})[/muted]"
    )

    try:
        summary = runner.run(path, on_result=print_package_result)
    except PackageListError as e:
        print_error(escape(str(e)))
        print_info("Run 'setupctl config init' to create a package list template.")
        raise typer.Exit(code=1) from e
    except BootstrapError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    except KeyboardInterrupt as e:
        print_warning("Interrupted; remaining packages were not installed.")
        raise typer.Exit(code=130) from e

    if summary.attempted == 0:
        print_warning(f"No packages listed in {escape(str(path))}.")
        return

    print_bootstrap_summary(summary)

    if summary.failed:
        raise typer.Exit(code=1)
