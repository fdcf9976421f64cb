"""Per-price gamma exposure aggregation from an option chain.

Two strategies:
- direct: trust each contract's quoted gamma, evaluated at its own strike
- model: recompute gamma for every contract at every distinct strike in the
  chain, giving a dealer-gamma curve across hypothetical underlying prices

Sign convention: calls add positive dealer gamma, puts subtract it.
"""

import datetime
import logging
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from Gamma_Exposure.analysis.bsm import gamma_curve
from Gamma_Exposure.config import DEFAULT_SETTINGS, ExposureSettings
from Gamma_Exposure.models.exposure import ExposureMap, PriceGrid, normalize_price
from Gamma_Exposure.models.options import OptionContract

logger = logging.getLogger(__name__)

# Gamma is evaluated "as of now", so t is always zero in T - t
TIME_NOW: float = 0.0


def guard_gamma(value: float, threshold: float = DEFAULT_SETTINGS.gamma_guard_threshold) -> float:
    """Return *value*, or 0.0 if it is NaN or its magnitude exceeds *threshold*.

    This is a data-quality filter for bad upstream quotes, not a property
    of gamma itself.
    """
    if value != value or abs(value) > threshold:  # NaN check without numpy
        return 0.0
    return value


def _guard_gamma_array(
    values: npt.NDArray[np.float64],
    threshold: float,
) -> npt.NDArray[np.float64]:
    """Vectorized :func:`guard_gamma`."""
    rejected = np.isnan(values) | (np.abs(values) > threshold)
    return np.where(rejected, 0.0, values)


def build_direct_exposure(
    chain: Sequence[OptionContract],
    *,
    settings: ExposureSettings | None = None,
) -> ExposureMap:
    """Aggregate quoted gamma * open interest per strike.

    Contracts without Greeks are skipped. Contracts sharing a strike
    (different expirations) are summed.

    Args:
        chain: Option contracts for one underlying.
        settings: Guard threshold and price precision. Defaults apply if None.

    Returns:
        Mapping of cent-normalized strike to net exposure.
    """
    cfg = settings if settings is not None else DEFAULT_SETTINGS
    exposures: ExposureMap = {}
    skipped = 0
    guarded = 0

    for contract in chain:
        if contract.greeks is None:
            skipped += 1
            continue

        quoted = contract.greeks.gamma
        checked = guard_gamma(quoted, cfg.gamma_guard_threshold)
        if checked != quoted:
            guarded += 1
            logger.debug(
                "Discarding corrupt gamma %r at strike %s",
                quoted,
                contract.strike,
            )

        exposure = checked * contract.open_interest
        if contract.is_put:
            exposure = -exposure

        key = normalize_price(contract.strike, cfg.price_precision)
        exposures[key] = exposures.get(key, 0.0) + exposure

    logger.debug(
        "Direct exposure: %d contracts, %d without greeks, %d guarded, %d strikes",
        len(chain),
        skipped,
        guarded,
        len(exposures),
    )
    return exposures


def build_price_grid(
    chain: Sequence[OptionContract],
    precision: int = DEFAULT_SETTINGS.price_precision,
) -> PriceGrid:
    """Distinct cent-rounded strikes across the whole chain, ascending.

    Contracts without Greeks still contribute their strike.
    """
    return tuple(sorted({normalize_price(contract.strike, precision) for contract in chain}))


def build_aggregate_exposure(
    chain: Sequence[OptionContract],
    now: datetime.date,
    *,
    settings: ExposureSettings | None = None,
) -> ExposureMap:
    """Model gamma exposure at every strike of the chain for every contract.

    For each contract, gamma is recomputed from its implied volatility
    (0.0 when Greeks are missing, which yields zero gamma) at every price in
    the grid, guarded, scaled by open interest, sign-flipped for puts, and
    accumulated under the grid price. Expired contracts are not filtered;
    a non-positive time to expiration produces zero gamma.

    Cost is O(contracts x distinct strikes); each contract is evaluated
    across the whole grid in one numpy pass.

    Args:
        chain: Option contracts for one underlying.
        now: Valuation date used for time to expiration.
        settings: Guard threshold, day count and price precision.

    Returns:
        Mapping of every grid price to net modelled exposure. Empty for an
        empty chain.
    """
    cfg = settings if settings is not None else DEFAULT_SETTINGS
    grid = build_price_grid(chain, cfg.price_precision)
    if not grid:
        return {}

    grid_prices = np.array([float(price) for price in grid], dtype=np.float64)
    totals = np.zeros_like(grid_prices)

    for contract in chain:
        sigma = contract.greeks.implied_volatility if contract.greeks is not None else 0.0
        expiration_time = contract.days_to_expiration(now) / cfg.days_per_year

        curve = gamma_curve(sigma, expiration_time, TIME_NOW, grid_prices, float(contract.strike))
        contribution = _guard_gamma_array(curve, cfg.gamma_guard_threshold) * contract.open_interest
        if contract.is_put:
            totals -= contribution
        else:
            totals += contribution

    logger.debug(
        "Aggregate exposure: %d contracts across %d grid prices (as of %s)",
        len(chain),
        len(grid),
        now.isoformat(),
    )
    return {price: float(total) for price, total in zip(grid, totals, strict=True)}
