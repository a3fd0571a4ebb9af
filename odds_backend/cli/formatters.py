"""Rich formatting for odds lookup results."""

from rich.table import Table

from odds_backend.lines import FetchResult, FetchStatus

STATUS_STYLES = {
    FetchStatus.FOUND: "green",
    FetchStatus.NO_MATCH: "yellow",
    FetchStatus.NO_EVENTS: "yellow",
    FetchStatus.SKIPPED: "dim",
    FetchStatus.UPSTREAM_FAILED: "red",
}


def format_status(result: FetchResult) -> str:
    """One-line, color-coded description of what the lookup did."""
    style = STATUS_STYLES.get(result.status, "white")
    line = f"[{style}]{result.status.value}[/{style}]"
    if result.error:
        line += f" [dim]({result.error})[/dim]"
    return line


def format_best_price_table(result: FetchResult) -> Table:
    """Format the best price of a lookup as a Rich table.

    Args:
        result: Completed lookup

    Returns:
        Rich Table with one row per response field
    """
    table = Table(
        title="Best Price",
        caption=f"market: {result.market}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Field", justify="left", style="white")
    table.add_column("Value", justify="right", style="magenta")

    fields = result.to_result()
    if not fields:
        table.add_row("[dim]No price found[/dim]", "")
        return table

    for name, value in fields.items():
        table.add_row(name, str(value))
    return table
