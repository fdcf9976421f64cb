"""CLI entry point for the gamma exposure engine.

Provides the ``gamma-exposure`` command with one subcommand per
aggregation strategy. Both read an option chain JSON file, build the
exposure map, summarize it, and print either a rich report or JSON.

This is the ONLY module where terminal output outside ``reporting`` is
allowed. All other modules use ``logging``.
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from Gamma_Exposure.analysis.pipeline import build_report
from Gamma_Exposure.config import load_settings
from Gamma_Exposure.logging_config import configure_logging
from Gamma_Exposure.models.enums import ExposureStrategy
from Gamma_Exposure.reporting.formatters import report_to_json
from Gamma_Exposure.reporting.terminal import render_report
from Gamma_Exposure.services.option_chain import load_option_chain
from Gamma_Exposure.utils.exceptions import GammaExposureError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(name="gamma-exposure", help="Dealer gamma exposure from option chains")

# Rich console for error output
console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Shared option types
# ---------------------------------------------------------------------------

ChainFile = Annotated[
    Path,
    typer.Argument(help="Option chain JSON (list or {'options': {'option': [...]}})"),
]
JsonFlag = Annotated[bool, typer.Option("--json", help="Print the report as JSON")]
StrictFlag = Annotated[
    bool,
    typer.Option("--strict", help="Fail when a weighted average price is undefined"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="JSON settings file overriding GEX_* env vars"),
]
VerboseFlag = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]
QuietFlag = Annotated[bool, typer.Option("--quiet", "-q", help="Suppress info logging")]


def _parse_as_of(value: str | None) -> datetime.date:
    """Parse ``--as-of`` or default to today's local date."""
    if not value:
        return datetime.date.today()
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as exc:
        msg = f"expected YYYY-MM-DD, got {value!r}"
        raise typer.BadParameter(msg, param_hint="--as-of") from exc


def _run(
    chain_file: Path,
    strategy: ExposureStrategy,
    *,
    now: datetime.date | None,
    as_json: bool,
    strict: bool,
    config: Path | None,
) -> None:
    """Load, compute, and print one report; map domain errors to exit code 1."""
    settings = load_settings(config)

    try:
        chain = load_option_chain(chain_file)
        report = build_report(chain, strategy, now=now, strict=strict, settings=settings)
    except GammaExposureError as exc:
        logger.debug("Report failed", exc_info=True)
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(report_to_json(report))
        return

    title_parts = [chain_file.name, strategy.value]
    if now is not None:
        title_parts.append(f"as of {now.isoformat()}")
    render_report(report, title=" | ".join(title_parts))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def direct(
    chain_file: ChainFile,
    as_json: JsonFlag = False,
    strict: StrictFlag = False,
    config: ConfigOption = None,
    verbose: VerboseFlag = False,
    quiet: QuietFlag = False,
) -> None:
    """Per-strike exposure from each contract's quoted gamma."""
    configure_logging(verbose=verbose, quiet=quiet)
    _run(
        chain_file,
        ExposureStrategy.DIRECT,
        now=None,
        as_json=as_json,
        strict=strict,
        config=config,
    )


@app.command()
def aggregate(
    chain_file: ChainFile,
    as_of: Annotated[
        str | None,
        typer.Option("--as-of", help="Valuation date YYYY-MM-DD (default: today)"),
    ] = None,
    as_json: JsonFlag = False,
    strict: StrictFlag = False,
    config: ConfigOption = None,
    verbose: VerboseFlag = False,
    quiet: QuietFlag = False,
) -> None:
    """Modelled exposure curve across every strike in the chain."""
    configure_logging(verbose=verbose, quiet=quiet)
    _run(
        chain_file,
        ExposureStrategy.MODEL,
        now=_parse_as_of(as_of),
        as_json=as_json,
        strict=strict,
        config=config,
    )


if __name__ == "__main__":
    app()
