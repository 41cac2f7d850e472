"""Display utilities for the transfer summary."""

from rich.console import Console
from rich.table import Table

from bytepace.domain import RateLimitConfig, format_rate

from .transfer import TransferStats

console = Console(stderr=True)


def _format_bytes(count: int) -> str:
    for name, unit in (("GiB", 1 << 30), ("MiB", 1 << 20), ("KiB", 1 << 10)):
        if count >= unit:
            return f"{count / unit:.1f} {name} ({count:,} bytes)"
    return f"{count:,} bytes"


def build_summary(stats: TransferStats, config: RateLimitConfig) -> Table:
    """Build the summary table for a finished transfer."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()

    table.add_row("Transferred", _format_bytes(stats.bytes_transferred))
    table.add_row("Elapsed", f"{stats.elapsed:.2f} s")
    table.add_row("Effective rate", format_rate(stats.rate))
    table.add_row(
        "Limit",
        f"{format_rate(config.rate)} ({config.slice_budget:,} bytes / {config.interval_ms} ms)",
    )
    return table


def display_summary(stats: TransferStats, config: RateLimitConfig) -> None:
    """Print the transfer summary to stderr."""
    console.print(build_summary(stats, config))


def display_error(message: str) -> None:
    """Print an error message to stderr."""
    console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
