"""Configuration commands."""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from setupctl.bootstrap.listfile import LIST_TEMPLATE
from setupctl.cli.types import get_settings
from setupctl.core.config import ConfigError, Settings, save_settings
from setupctl.core.paths import ensure_config_dir, get_config_path, get_package_list_path
from setupctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and create the setupctl configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    settings = get_settings(ctx)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    table.add_row("package_manager", settings.package_manager.value)
    table.add_row("package_list", escape(str(settings.effective_package_list)))
    table.add_row(
        "command_timeout",
        "none" if settings.command_timeout is None else f"{settings.command_timeout:g}s",
    )
    table.add_row("git.default_remote", escape(settings.git.default_remote))
    table.add_row("git.default_branch", escape(settings.git.default_branch))
    table.add_row("wifi.interface", escape(settings.wifi.interface or "-"))
    table.add_row("scaffold.package_manager", settings.scaffold.package_manager.value)
    table.add_row("protected_paths", escape(", ".join(settings.protected_paths) or "-"))

    console.print(table)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the config file path."""
    config_path = ctx.find_root().ensure_object(dict).get("config_path") or get_config_path()
    typer.echo(str(config_path))


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default config file and an empty package list."""
    config_path = ctx.find_root().ensure_object(dict).get("config_path") or get_config_path()

    if config_path.exists() and not force:
        print_error(f"Config already exists: {escape(str(config_path))}")
        print_info("Pass --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(Settings(), config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    print_success(f"Wrote {escape(str(saved))}")

    list_path = get_package_list_path()
    if list_path.exists():
        print_info(f"Keeping existing package list {escape(str(list_path))}")
        return
    try:
        ensure_config_dir()
        list_path.write_text(LIST_TEMPLATE, encoding="utf-8")
    except RuntimeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"Failed to write {escape(str(list_path))}: {escape(str(e))}")
        raise typer.Exit(code=1) from e
    print_success(f"Wrote {escape(str(list_path))}")
