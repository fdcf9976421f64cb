"""Gamma exposure analytics engine.

Re-exports all public functions so consumers can import directly:
    from Gamma_Exposure.analysis import build_direct_exposure, summarize
"""

from Gamma_Exposure.analysis.bsm import gamma, gamma_curve
from Gamma_Exposure.analysis.exposure import (
    build_aggregate_exposure,
    build_direct_exposure,
    build_price_grid,
    guard_gamma,
)
from Gamma_Exposure.analysis.pipeline import build_report, gamma_exposure, gamma_exposure_aggregate
from Gamma_Exposure.analysis.statistics import find_zero_gamma_level, summarize

__all__ = [
    # BSM
    "gamma",
    "gamma_curve",
    # Exposure
    "build_aggregate_exposure",
    "build_direct_exposure",
    "build_price_grid",
    "guard_gamma",
    # Statistics
    "find_zero_gamma_level",
    "summarize",
    # Pipeline
    "build_report",
    "gamma_exposure",
    "gamma_exposure_aggregate",
]
