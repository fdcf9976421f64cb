"""Black-Scholes gamma for European-style options.

Implements the closed-form gamma with zero drift:
- scalar ``gamma`` for a single (price, strike) pair
- vectorized ``gamma_curve`` for one contract across many prices

Degenerate inputs (non-positive volatility, time, price or strike) yield
0.0 instead of raising, so callers can feed raw chain data straight in.

References:
    Hull, J.C. "Options, Futures, and Other Derivatives" (11th ed.)
    Chapter 19: The Greek Letters
"""

import math

import numpy as np
import numpy.typing as npt
from scipy.stats import norm

type FloatArray = npt.NDArray[np.float64]


def _d1(
    price: float,
    strike: float,
    time_remaining: float,
    sigma: float,
) -> float:
    """Compute d1 in the BSM formula with zero drift.

    d1 = (ln(S/K) + (sigma^2/2) * (T - t)) / (sigma * sqrt(T - t))
    """
    numerator = math.log(price / strike) + (sigma * sigma / 2.0) * time_remaining
    denominator = sigma * math.sqrt(time_remaining)
    return numerator / denominator


def _is_degenerate(sigma: float, time_remaining: float, strike: float) -> bool:
    """True when the gamma formula is undefined for these contract inputs."""
    return not (sigma > 0 and time_remaining > 0 and strike > 0)


def gamma(
    sigma: float,
    time_to_expiration: float,
    time_now: float,
    price: float,
    strike: float,
) -> float:
    """Compute Black-Scholes gamma.

    gamma = phi(d1) / (S * sigma * sqrt(T - t))

    Args:
        sigma: Implied volatility (annualized).
        time_to_expiration: Expiration time T in years.
        time_now: Current time t in years (usually 0).
        price: Underlying price S at which gamma is evaluated.
        strike: Option strike price K.

    Returns:
        Gamma, or 0.0 when sigma <= 0, T - t <= 0, S <= 0 or K <= 0
        (NaN inputs also land here, since every comparison is False).
    """
    time_remaining = time_to_expiration - time_now
    if _is_degenerate(sigma, time_remaining, strike) or not price > 0:
        return 0.0

    d1_val = _d1(price, strike, time_remaining, sigma)
    return float(norm.pdf(d1_val)) / (price * sigma * math.sqrt(time_remaining))


def gamma_curve(
    sigma: float,
    time_to_expiration: float,
    time_now: float,
    prices: npt.ArrayLike,
    strike: float,
) -> FloatArray:
    """Evaluate gamma for one contract at every price in *prices*.

    Same semantics as :func:`gamma`, element-wise: non-positive prices
    produce 0.0 and a degenerate contract produces an all-zero array.
    """
    price_arr = np.asarray(prices, dtype=np.float64)
    result = np.zeros_like(price_arr)

    time_remaining = time_to_expiration - time_now
    if _is_degenerate(sigma, time_remaining, strike):
        return result

    valid = price_arr > 0
    if not valid.any():
        return result

    sqrt_t = math.sqrt(time_remaining)
    valid_prices = price_arr[valid]
    d1_vals = (np.log(valid_prices / strike) + (sigma * sigma / 2.0) * time_remaining) / (
        sigma * sqrt_t
    )
    result[valid] = norm.pdf(d1_vals) / (valid_prices * sigma * sqrt_t)
    return result
