"""Reduce an exposure map into a GammaExposureReport.

The reduction is a single fold over price-ordered entries into an immutable
accumulator, so permuting the input map cannot change the result.

Conventions carried by the report:
- ``maximum``/``minimum``/``absolute_maximum`` start from 0.0, not from the
  first entry; an all-negative map reports ``maximum == 0.0``.
- Subset averages divide by ``max(count, 1)``; an empty subset averages 0.0.
- ``average_absolute_exposure`` divides by the sum of the floored counts.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from decimal import Decimal
from functools import reduce

from Gamma_Exposure.config import DEFAULT_SETTINGS, ExposureSettings
from Gamma_Exposure.models.exposure import (
    DEFAULT_PRICE_PRECISION,
    GammaExposure,
    GammaExposureReport,
    PriceLike,
    normalize_exposure_map,
)
from Gamma_Exposure.utils.exceptions import ArithmeticDegeneracyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Accumulator:
    positive_sum: float = 0.0
    positive_count: int = 0
    negative_sum: float = 0.0
    negative_count: int = 0
    weighted_positive_sum: float = 0.0
    weighted_negative_sum: float = 0.0
    maximum: float = 0.0
    minimum: float = 0.0
    absolute_maximum: float = 0.0


def _fold_entry(acc: _Accumulator, entry: tuple[Decimal, float]) -> _Accumulator:
    price, exposure = entry
    weighted = float(price) * exposure

    if exposure >= 0:
        acc = replace(
            acc,
            positive_sum=acc.positive_sum + exposure,
            positive_count=acc.positive_count + 1,
            weighted_positive_sum=acc.weighted_positive_sum + weighted,
        )
    else:
        acc = replace(
            acc,
            negative_sum=acc.negative_sum + exposure,
            negative_count=acc.negative_count + 1,
            weighted_negative_sum=acc.weighted_negative_sum + weighted,
        )

    return replace(
        acc,
        maximum=max(acc.maximum, exposure),
        minimum=min(acc.minimum, exposure),
        absolute_maximum=max(acc.absolute_maximum, abs(exposure)),
    )


def _centroid(
    weighted_sum: float,
    exposure_sum: float,
    *,
    field: str,
    strict: bool,
) -> float | None:
    """Exposure-weighted average price, or None for a zero denominator."""
    if exposure_sum == 0:
        if strict:
            msg = f"cannot compute {field}: exposures in this subset sum to zero"
            raise ArithmeticDegeneracyError(msg, field=field)
        return None
    return weighted_sum / exposure_sum


def find_zero_gamma_level(
    exposures: Mapping[PriceLike, float],
    precision: int = DEFAULT_PRICE_PRECISION,
) -> float | None:
    """Price where the exposure curve first changes sign, walking up in price.

    An entry of exactly 0.0 sitting between opposite signs is returned as is;
    otherwise the crossing is linearly interpolated between the two
    bracketing prices. Returns None if the curve never crosses zero.
    """
    series = sorted(normalize_exposure_map(exposures, precision).items())

    previous: tuple[Decimal, float] | None = None
    pending_zero: Decimal | None = None

    for price, exposure in series:
        if exposure == 0:
            if previous is not None and pending_zero is None:
                pending_zero = price
            continue

        if previous is not None and (previous[1] > 0) != (exposure > 0):
            if pending_zero is not None:
                return float(pending_zero)
            low_price, low_exposure = previous
            ratio = low_exposure / (low_exposure - exposure)
            return float(low_price) + (float(price) - float(low_price)) * ratio

        previous = (price, exposure)
        pending_zero = None

    return None


def summarize(
    exposures: Mapping[PriceLike, float],
    *,
    strict: bool = False,
    settings: ExposureSettings | None = None,
) -> GammaExposureReport:
    """Compute summary statistics and the price-sorted series for a map.

    Keys may be Decimals, numbers or numeric strings; they are normalized to
    the configured price precision (colliding keys are summed).

    Args:
        exposures: Price level to net gamma exposure.
        strict: Raise instead of reporting ``None`` when the positive or
            negative subset's exposures sum to zero.
        settings: Supplies the price precision. Defaults apply if None.

    Returns:
        An immutable report with prices in ascending numeric order.

    Raises:
        ArithmeticDegeneracyError: If the map is empty, if every exposure is
            exactly zero, or (with ``strict``) if a subset centroid is undefined.
        MalformedInputError: If a key or an exposure is not a finite number.
    """
    cfg = settings if settings is not None else DEFAULT_SETTINGS

    if not exposures:
        raise ArithmeticDegeneracyError(
            "cannot summarize an empty exposure map",
            field="prices",
        )

    series = sorted(normalize_exposure_map(exposures, cfg.price_precision).items())
    acc = reduce(_fold_entry, series, _Accumulator())

    positive_count = max(acc.positive_count, 1)
    negative_count = max(acc.negative_count, 1)

    absolute_sum = abs(acc.positive_sum) + abs(acc.negative_sum)
    if absolute_sum == 0:
        raise ArithmeticDegeneracyError(
            "cannot compute weighted_average_absolute_price: every exposure is zero",
            field="weighted_average_absolute_price",
        )
    weighted_absolute = (
        abs(acc.weighted_positive_sum) + abs(acc.weighted_negative_sum)
    ) / absolute_sum

    report = GammaExposureReport(
        prices=[GammaExposure(price=price, gamma_exposure=exposure) for price, exposure in series],
        average_absolute_exposure=absolute_sum / (positive_count + negative_count),
        average_positive_exposure=acc.positive_sum / positive_count,
        average_negative_exposure=acc.negative_sum / negative_count,
        maximum=acc.maximum,
        minimum=acc.minimum,
        absolute_maximum=acc.absolute_maximum,
        weighted_average_absolute_price=weighted_absolute,
        weighted_average_positive_price=_centroid(
            acc.weighted_positive_sum,
            acc.positive_sum,
            field="weighted_average_positive_price",
            strict=strict,
        ),
        weighted_average_negative_price=_centroid(
            acc.weighted_negative_sum,
            acc.negative_sum,
            field="weighted_average_negative_price",
            strict=strict,
        ),
        zero_gamma_level=find_zero_gamma_level(dict(series), cfg.price_precision),
    )

    logger.debug(
        "Summarized %d prices: %d positive, %d negative, abs max %.6g",
        len(series),
        acc.positive_count,
        acc.negative_count,
        acc.absolute_maximum,
    )
    return report
