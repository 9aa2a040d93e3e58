"""Summary table rendering."""

from collections.abc import Iterable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.measure import Measurement
from rich.table import Table

from .store import RepoStatus, RepositoryRecord

# Upper bound used when measuring the table's natural width
UNBOUNDED_WIDTH = 100_000

STATUS_STYLES = {
    RepoStatus.SUCCESS: "green",
    RepoStatus.FAILED: "red",
    RepoStatus.PENDING: "yellow",
    RepoStatus.UNKNOWN: "yellow",
}


def build_summary_table(
    records: Iterable[RepositoryRecord], show_detail: bool = False
) -> Table:
    """Build a bordered table with one row per repository."""
    table = Table(box=box.ASCII, show_lines=False)
    table.add_column("Directory", no_wrap=True)
    table.add_column("Remote", style="cyan", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    if show_detail:
        table.add_column("Detail", style="dim", no_wrap=True)

    for record in records:
        style = STATUS_STYLES.get(record.status, "white")
        row = [
            escape(str(record.path)),
            escape(record.remote),
            f"[{style}]{record.status}[/{style}]",
        ]
        if show_detail:
            row.append(escape(record.detail))
        table.add_row(*row)

    return table


def print_summary(
    records: Iterable[RepositoryRecord],
    console: Console | None = None,
    show_detail: bool = False,
) -> None:
    """Print the summary table to the console (stdout by default).

    The table is laid out at its natural width even when that is wider
    than the console, so no cell is shortened and no column is dropped.
    """
    console = console or Console()
    table = build_summary_table(records, show_detail=show_detail)

    needed = table_width(console, table)
    previous = console.width
    if needed > previous:
        console.width = needed
    try:
        console.print(table, crop=False)
    finally:
        console.width = previous


def table_width(console: Console, table: Table) -> int:
    """Width the table needs to render every cell in full."""
    options = console.options.update_width(UNBOUNDED_WIDTH)
    return Measurement.get(console, options, table).maximum
