"""Git convenience commands."""

from pathlib import Path
from typing import Annotated

import typer

from setupctl.cli.display import print_outcome
from setupctl.cli.types import exit_for, get_settings
from setupctl.wrappers.git import GitClone, GitCommit, GitPull, GitPush, GitStatus, GitSwitch

app = typer.Typer(
    help="Run common git commands with readable errors.",
    no_args_is_help=True,
)

RepoOption = Annotated[
    Path | None,
    typer.Option(
        "--repo",
        "-C",
        help="Repository directory (default: current directory).",
        show_default=False,
    ),
]


def _cwd(repo: Path | None) -> str | None:
    return str(repo) if repo is not None else None


@app.command()
def clone(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="Repository URL.")],
    destination: Annotated[
        str | None,
        typer.Argument(help="Directory to clone into.", show_default=False),
    ] = None,
    repo: RepoOption = None,
) -> None:
    """Clone a repository."""
    settings = get_settings(ctx)
    outcome = GitClone(
        url,
        destination,
        timeout=settings.command_timeout,
        cwd=_cwd(repo),
    ).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def commit(
    ctx: typer.Context,
    message: Annotated[str, typer.Argument(help="Commit message.")],
    staged: Annotated[
        bool,
        typer.Option("--staged", help="Commit only what is already staged."),
    ] = False,
    repo: RepoOption = None,
) -> None:
    """Commit tracked changes (git commit -a -m MESSAGE)."""
    settings = get_settings(ctx)
    outcome = GitCommit(
        message,
        stage_all=not staged,
        timeout=settings.command_timeout,
        cwd=_cwd(repo),
    ).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def push(
    ctx: typer.Context,
    branch: Annotated[
        str | None,
        typer.Argument(
            help="Branch to push (default: git's push configuration).",
            show_default=False,
        ),
    ] = None,
    remote: Annotated[
        str | None,
        typer.Option(
            "--remote",
            "-r",
            help="Remote name (default from config).",
            show_default=False,
        ),
    ] = None,
    set_upstream: Annotated[
        bool,
        typer.Option("--set-upstream", "-u", help="Set the branch's upstream."),
    ] = False,
    repo: RepoOption = None,
) -> None:
    """Push commits to a remote."""
    settings = get_settings(ctx)
    outcome = GitPush(
        remote or settings.git.default_remote,
        branch,
        set_upstream=set_upstream,
        timeout=settings.command_timeout,
        cwd=_cwd(repo),
    ).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def pull(
    ctx: typer.Context,
    branch: Annotated[
        str | None,
        typer.Argument(help="Branch to pull.", show_default=False),
    ] = None,
    remote: Annotated[
        str | None,
        typer.Option(
            "--remote",
            "-r",
            help="Remote name (default from config).",
            show_default=False,
        ),
    ] = None,
    repo: RepoOption = None,
) -> None:
    """Pull from a remote."""
    settings = get_settings(ctx)
    outcome = GitPull(
        remote or settings.git.default_remote,
        branch,
        timeout=settings.command_timeout,
        cwd=_cwd(repo),
    ).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def switch(
    ctx: typer.Context,
    branch: Annotated[
        str | None,
        typer.Argument(help="Branch name (default from config).", show_default=False),
    ] = None,
    create: Annotated[
        bool,
        typer.Option("--create", "-c", help="Create the branch first."),
    ] = False,
    repo: RepoOption = None,
) -> None:
    """Switch to (or create) a branch."""
    settings = get_settings(ctx)
    outcome = GitSwitch(
        branch or settings.git.default_branch,
        create=create,
        timeout=settings.command_timeout,
        cwd=_cwd(repo),
    ).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def status(
    ctx: typer.Context,
    repo: RepoOption = None,
) -> None:
    """Show a short working tree status."""
    settings = get_settings(ctx)
    outcome = GitStatus(timeout=settings.command_timeout, cwd=_cwd(repo)).run()
    print_outcome(outcome, show_output=True)
    exit_for(outcome)
