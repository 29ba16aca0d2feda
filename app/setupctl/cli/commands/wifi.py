"""WiFi commands backed by netsh."""

from typing import Annotated

import typer
from rich.markup import escape

from setupctl.cli.display import print_outcome
from setupctl.cli.types import exit_for, get_settings
from setupctl.utils.formatting import console
from setupctl.wrappers.wifi import (
    WifiConnect,
    WifiDisconnect,
    WifiProfiles,
    WifiStatus,
    parse_profiles,
)

app = typer.Typer(
    help="Connect to saved WiFi networks (Windows netsh).",
    no_args_is_help=True,
)

InterfaceOption = Annotated[
    str | None,
    typer.Option(
        "--interface",
        "-i",
        help="Wireless interface name (default from config).",
        show_default=False,
    ),
]


@app.command("list")
def list_profiles(ctx: typer.Context) -> None:
    """List saved WiFi profiles."""
    settings = get_settings(ctx)
    outcome = WifiProfiles(timeout=settings.command_timeout).run()
    if outcome.failed:
        print_outcome(outcome)
        exit_for(outcome)
        return

    profiles = parse_profiles(outcome.output)
    if not profiles:
        console.print("[muted]No saved profiles.[/muted]")
        return
    for profile in profiles:
        console.print(f"  {escape(profile)}")


@app.command()
def connect(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Saved profile (network) name.")],
    interface: InterfaceOption = None,
) -> None:
    """Connect to a saved network."""
    settings = get_settings(ctx)
    outcome = WifiConnect(
        name,
        interface or settings.wifi.interface,
        timeout=settings.command_timeout,
    ).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def disconnect(ctx: typer.Context, interface: InterfaceOption = None) -> None:
    """Disconnect from the current network."""
    settings = get_settings(ctx)
    outcome = WifiDisconnect(
        interface or settings.wifi.interface,
        timeout=settings.command_timeout,
    ).run()
    print_outcome(outcome)
    exit_for(outcome)


@app.command()
def status(ctx: typer.Context) -> None:
    """Show wireless interface status."""
    settings = get_settings(ctx)
    outcome = WifiStatus(timeout=settings.command_timeout).run()
    print_outcome(outcome, show_output=True)
    exit_for(outcome)
