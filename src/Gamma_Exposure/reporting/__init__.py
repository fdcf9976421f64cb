"""Reporting module: terminal output and JSON serialization.

Re-exports all public functions so consumers can import directly:
    from Gamma_Exposure.reporting import render_report, report_to_json
"""

from Gamma_Exposure.reporting.formatters import (
    format_exposure,
    format_price,
    report_to_json,
    summary_rows,
)
from Gamma_Exposure.reporting.terminal import render_report

__all__ = [
    # Formatters
    "format_exposure",
    "format_price",
    "report_to_json",
    "summary_rows",
    # Terminal
    "render_report",
]
