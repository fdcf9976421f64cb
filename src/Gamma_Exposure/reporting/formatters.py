"""Shared formatting utilities for terminal and JSON reports.

All functions accept a :class:`GammaExposureReport` or its parts, never
raw dicts, and format prices only at this output boundary.
"""

from __future__ import annotations

from decimal import Decimal

from Gamma_Exposure.models.exposure import GammaExposureReport

# Placeholder for undefined statistics (empty subset centroid, no zero crossing)
NOT_AVAILABLE: str = "n/a"

JSON_INDENT: int = 2


def format_price(price: Decimal | float | None) -> str:
    """Format a price level with two decimals, or ``n/a`` when undefined."""
    if price is None:
        return NOT_AVAILABLE
    return f"{price:,.2f}"


def format_exposure(exposure: float) -> str:
    """Format a signed exposure value with an explicit sign."""
    return f"{exposure:+,.4f}"


def summary_rows(report: GammaExposureReport) -> list[tuple[str, str]]:
    """Label/value pairs for the report's scalar statistics, display order."""
    return [
        ("Average |Exposure|", format_exposure(report.average_absolute_exposure)),
        ("Average Positive", format_exposure(report.average_positive_exposure)),
        ("Average Negative", format_exposure(report.average_negative_exposure)),
        ("Maximum", format_exposure(report.maximum)),
        ("Minimum", format_exposure(report.minimum)),
        ("Absolute Maximum", format_exposure(report.absolute_maximum)),
        ("Weighted |Exposure| Price", format_price(report.weighted_average_absolute_price)),
        ("Weighted Positive Price", format_price(report.weighted_average_positive_price)),
        ("Weighted Negative Price", format_price(report.weighted_average_negative_price)),
        ("Zero Gamma Level", format_price(report.zero_gamma_level)),
    ]


def report_to_json(report: GammaExposureReport, *, indent: int | None = JSON_INDENT) -> str:
    """Serialize a report to JSON with prices as fixed-point strings."""
    return report.model_dump_json(indent=indent)
