"""End-to-end report builders: aggregate a chain, then summarize it.

``gamma_exposure`` backs the per-strike view from quoted Greeks;
``gamma_exposure_aggregate`` backs the modelled dealer-gamma curve.
"""

import datetime
import logging
from collections.abc import Sequence

from Gamma_Exposure.analysis.exposure import build_aggregate_exposure, build_direct_exposure
from Gamma_Exposure.analysis.statistics import summarize
from Gamma_Exposure.config import ExposureSettings
from Gamma_Exposure.models.enums import ExposureStrategy
from Gamma_Exposure.models.exposure import GammaExposureReport
from Gamma_Exposure.models.options import OptionContract

logger = logging.getLogger(__name__)


def gamma_exposure(
    chain: Sequence[OptionContract],
    *,
    strict: bool = False,
    settings: ExposureSettings | None = None,
) -> GammaExposureReport:
    """Summarize exposure built from each contract's quoted gamma."""
    exposures = build_direct_exposure(chain, settings=settings)
    return summarize(exposures, strict=strict, settings=settings)


def gamma_exposure_aggregate(
    chain: Sequence[OptionContract],
    now: datetime.date,
    *,
    strict: bool = False,
    settings: ExposureSettings | None = None,
) -> GammaExposureReport:
    """Summarize exposure modelled across every strike of the chain."""
    exposures = build_aggregate_exposure(chain, now, settings=settings)
    return summarize(exposures, strict=strict, settings=settings)


def build_report(
    chain: Sequence[OptionContract],
    strategy: ExposureStrategy,
    *,
    now: datetime.date | None = None,
    strict: bool = False,
    settings: ExposureSettings | None = None,
) -> GammaExposureReport:
    """Dispatch to the report builder for *strategy*.

    Args:
        chain: Option contracts for one underlying.
        strategy: DIRECT or MODEL.
        now: Valuation date for MODEL. Defaults to today's local date.
        strict: Forwarded to :func:`summarize`.
        settings: Forwarded to the aggregator and summarizer.
    """
    logger.info("Building %s gamma exposure report for %d contracts", strategy, len(chain))

    match strategy:
        case ExposureStrategy.DIRECT:
            return gamma_exposure(chain, strict=strict, settings=settings)
        case ExposureStrategy.MODEL:
            valuation_date = now if now is not None else datetime.date.today()
            return gamma_exposure_aggregate(
                chain, valuation_date, strict=strict, settings=settings
            )
        case _:
            msg = f"Unknown exposure strategy: {strategy!r}"
            raise ValueError(msg)
