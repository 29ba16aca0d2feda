"""Shared Rich display functions for outcomes and bootstrap results."""

from rich.markup import escape
from rich.table import Table

from setupctl.bootstrap.runner import BootstrapSummary, PackageResult
from setupctl.models.outcome import CommandOutcome
from setupctl.utils.formatting import console, print_error, print_hint, print_success


def print_outcome(outcome: CommandOutcome, show_output: bool = False) -> None:
    """Print a wrapper outcome with its hints.

    Args:
        outcome: Outcome to display.
        show_output: If True, echo the captured command output on success.
    """
    if outcome.success:
        print_success(escape(outcome.message))
        if show_output and outcome.output.strip():
            console.print(escape(outcome.output.rstrip()), highlight=False)
        return

    print_error(escape(outcome.message))
    for hint in outcome.hints:
        print_hint(escape(hint))


def print_package_result(result: PackageResult) -> None:
    """Print a single bootstrap line as soon as the install finishes."""
    status = "[success]OK[/success]  " if result.success else "[error]FAIL[/error]"
    console.print(
        f"  {status}  {escape(result.package)} [muted]{escape(result.outcome.message)}[/muted]"
    )


def create_results_table(summary: BootstrapSummary) -> Table:
    """Create a Rich table of failed installs with their hints.

    Args:
        summary: Finished bootstrap summary.

    Returns:
        Rich Table with one row per failed package.
    """
    table = Table(
        title="Failed Installs",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Package", no_wrap=True)
    table.add_column("Exit", justify="right", width=12)
    table.add_column("Error")

    for result in summary.failures:
        code = result.outcome.returncode
        table.add_row(
            f"[error]{escape(result.package)}[/error]",
            "-" if code is None else str(code),
            f"[muted]{escape(result.outcome.message)}[/muted]",
        )

    return table


def print_bootstrap_summary(summary: BootstrapSummary) -> None:
    """Print attempted/succeeded/failed counts for a bootstrap run."""
    if summary.failed == 0:
        print_success(f"All {summary.succeeded} package(s) installed successfully.")
        return

    console.print(create_results_table(summary))
    hints = summary.failures[0].outcome.hints
    for hint in hints:
        print_hint(escape(hint))
    console.print(
        f"\n{summary.attempted} attempted: "
        f"[success]{summary.succeeded} succeeded[/success], "
        f"[error]{summary.failed} failed[/error]"
    )
