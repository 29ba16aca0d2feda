"""File and folder commands."""

from typing import Annotated

import typer

from setupctl.cli.display import print_outcome
from setupctl.cli.types import exit_for, get_settings
from setupctl.wrappers.files import MakeDirectory, NewFile, RemovePath

app = typer.Typer(
    help="Create and remove files and folders safely.",
    no_args_is_help=True,
)

ForceOption = Annotated[
    bool,
    typer.Option("--force", "-f", help="Accept or overwrite an existing path."),
]
DryRunOption = Annotated[
    bool,
    typer.Option("--dry-run", "-n", help="Show what would be done without changing anything."),
]


@app.command()
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create (parents included).")],
    force: ForceOption = False,
    dry_run: DryRunOption = False,
) -> None:
    """Create a directory."""
    outcome = MakeDirectory(path, force=force, dry_run=dry_run).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def touch(
    path: Annotated[str, typer.Argument(help="File to create.")],
    content: Annotated[
        str,
        typer.Option("--content", "-c", help="Text to write into the file."),
    ] = "",
    force: ForceOption = False,
    dry_run: DryRunOption = False,
) -> None:
    """Create a new file."""
    outcome = NewFile(path, force=force, content=content, dry_run=dry_run).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def rm(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="File or directory to remove.")],
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Remove a directory and its contents."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    dry_run: DryRunOption = False,
) -> None:
    """Remove a file or directory.

    System, credential and home directories are always refused.
    """
    settings = get_settings(ctx)
    wrapper = RemovePath(
        path,
        recursive=recursive,
        protected_patterns=settings.protected_paths,
        dry_run=dry_run,
    )

    if recursive and not yes and not dry_run:
        # Rejected paths are reported without prompting
        rejected = wrapper.check()
        if rejected is not None:
            print_outcome(rejected)
            exit_for(rejected)
        if not typer.confirm(f"Remove {wrapper.path} and everything in it?", default=False):
            raise typer.Exit(code=0)

    outcome = wrapper.run()
    print_outcome(outcome)
    exit_for(outcome)
