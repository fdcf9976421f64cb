"""Rich-based terminal output for gamma exposure reports.

Uses ``rich.console.Console`` for all output. Color scheme:
green = positive dealer gamma, red = negative, yellow = the zero-gamma level.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from Gamma_Exposure.models.exposure import GammaExposureReport
from Gamma_Exposure.reporting.formatters import format_exposure, format_price, summary_rows

logger = logging.getLogger(__name__)

# Shared console instance for terminal output
console = Console()

# --- Color scheme ---
COLOR_POSITIVE: str = "green"
COLOR_NEGATIVE: str = "red"
COLOR_ZERO_GAMMA: str = "yellow"
COLOR_HEADER: str = "bold cyan"
COLOR_MUTED: str = "dim"


def _exposure_color(exposure: float) -> str:
    """Map an exposure sign to its terminal color."""
    if exposure > 0:
        return COLOR_POSITIVE
    if exposure < 0:
        return COLOR_NEGATIVE
    return COLOR_MUTED


def _render_series(report: GammaExposureReport) -> None:
    """Per-price exposure table in ascending price order."""
    table = Table(title="Gamma Exposure by Price", show_lines=False)
    table.add_column("Price", justify="right", style="bold")
    table.add_column("Gamma Exposure", justify="right")

    for entry in report.prices:
        color = _exposure_color(entry.gamma_exposure)
        table.add_row(
            format_price(entry.price),
            f"[{color}]{format_exposure(entry.gamma_exposure)}[/{color}]",
        )

    console.print(table)


def _render_summary(report: GammaExposureReport) -> None:
    """Scalar statistics block."""
    console.print("\n[bold]Summary[/bold]", style=COLOR_HEADER)

    summary_table = Table(show_header=False, box=None, padding=(0, 2))
    summary_table.add_column("Statistic", style="bold")
    summary_table.add_column("Value", justify="right")

    for label, value in summary_rows(report):
        summary_table.add_row(label, value)

    console.print(summary_table)

    if report.zero_gamma_level is not None:
        console.print(
            f"  [{COLOR_ZERO_GAMMA}]Dealer gamma flips sign near "
            f"{format_price(report.zero_gamma_level)}[/{COLOR_ZERO_GAMMA}]"
        )


def render_report(report: GammaExposureReport, *, title: str) -> None:
    """Render a complete gamma exposure report to the terminal.

    Args:
        report: The summarized exposure report.
        title: Header line, e.g. ``"SPY | model | as of 2025-01-15"``.
    """
    console.print()
    console.print(Panel(title, title="Gamma Exposure Report", style=COLOR_HEADER))

    if report.prices:
        _render_series(report)
    else:
        console.print(f"  [{COLOR_MUTED}]No price levels.[/{COLOR_MUTED}]")

    _render_summary(report)
    logger.debug("Rendered report with %d price levels", len(report.prices))
