"""Console rendering of ranked language metrics."""

from rich.console import Console
from rich.table import Table

from .constants import LogMessage
from .models import RankedEntry


def format_entry(entry: RankedEntry) -> str:
    """Format a ranked entry as a plain-text block.

    Args:
        entry: Ranked language metrics.

    Returns:
        str: Multi-line text with the rate and totals for the language.
    """
    return (
        f"🔹 **{entry.language}**\n"
        f"  - Acceptance Rate: **{entry.acceptance_rate:.2f}%**\n"
        f"  - Total Suggestions: {entry.total_suggestions}, "
        f"Total Acceptances: {entry.total_acceptances}\n"
        "---"
    )


def build_table(entries: list[RankedEntry]) -> Table:
    table = Table(title=LogMessage.REPORT_HEADER)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Language", style="bold cyan")
    table.add_column("Acceptance Rate", justify="right", style="green")
    table.add_column("Suggestions", justify="right")
    table.add_column("Acceptances", justify="right")

    for position, entry in enumerate(entries, 1):
        table.add_row(
            str(position),
            entry.language,
            f"{entry.acceptance_rate:.2f}%",
            f"{entry.total_suggestions:,}",
            f"{entry.total_acceptances:,}",
        )
    return table


def print_report(
    entries: list[RankedEntry],
    *,
    console: Console | None = None,
    plain: bool = False,
) -> None:
    """Print ranked entries to the console.

    Args:
        entries: Entries in rank order.
        console: Console to print to; a default stdout console when omitted.
        plain: Print plain-text blocks instead of a table.
    """
    console = console or Console()

    if not entries:
        console.print(f"[yellow]{LogMessage.EMPTY_REPORT}[/yellow]")
        return

    if plain:
        console.print(f"--- {LogMessage.REPORT_HEADER} ---", markup=False)
        for entry in entries:
            console.print(format_entry(entry), markup=False)
        return

    console.print(build_table(entries))
