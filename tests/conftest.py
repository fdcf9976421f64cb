"""Shared test fixtures for the gamma exposure test suite.

Provides realistic sample contracts and chains so tests don't need to
inline large construction blocks.
"""

import datetime
from collections.abc import Callable
from decimal import Decimal

import pytest

from Gamma_Exposure.models import OptionContract, OptionGreeks, OptionType

VALUATION_DATE: datetime.date = datetime.date(2025, 1, 15)
EXPIRATION_30D: datetime.date = VALUATION_DATE + datetime.timedelta(days=30)


def make_contract(
    strike: str | float,
    option_type: OptionType = OptionType.CALL,
    *,
    open_interest: int = 100,
    gamma: float | None = 0.05,
    implied_volatility: float = 0.20,
    expiration_date: datetime.date = EXPIRATION_30D,
) -> OptionContract:
    """Build a contract; ``gamma=None`` produces a contract without Greeks."""
    greeks = (
        None
        if gamma is None
        else OptionGreeks(gamma=gamma, implied_volatility=implied_volatility)
    )
    return OptionContract(
        strike=Decimal(str(strike)),
        expiration_date=expiration_date,
        option_type=option_type,
        open_interest=open_interest,
        greeks=greeks,
    )


@pytest.fixture()
def contract_factory() -> Callable[..., OptionContract]:
    """Expose :func:`make_contract` to tests."""
    return make_contract


@pytest.fixture()
def valuation_date() -> datetime.date:
    """Fixed 'today' used for time-to-expiration."""
    return VALUATION_DATE


@pytest.fixture()
def sample_option_greeks() -> OptionGreeks:
    """Typical near-the-money SPY Greeks."""
    return OptionGreeks(gamma=0.032, implied_volatility=0.18)


@pytest.fixture()
def sample_option_contract(sample_option_greeks: OptionGreeks) -> OptionContract:
    """A valid SPY call with Greeks, 30 days from the valuation date."""
    return OptionContract(
        strike=Decimal("590.00"),
        expiration_date=EXPIRATION_30D,
        option_type=OptionType.CALL,
        open_interest=12_450,
        greeks=sample_option_greeks,
    )


@pytest.fixture()
def sample_chain() -> list[OptionContract]:
    """Small two-expiration chain around 100 with calls, puts, and a gap in Greeks."""
    later = EXPIRATION_30D + datetime.timedelta(days=28)
    return [
        make_contract("95", OptionType.PUT, open_interest=400, gamma=0.030),
        make_contract("95", OptionType.CALL, open_interest=50, gamma=0.030),
        make_contract("100", OptionType.PUT, open_interest=250, gamma=0.055),
        make_contract("100", OptionType.CALL, open_interest=300, gamma=0.055),
        make_contract("100", OptionType.CALL, open_interest=120, gamma=0.040, expiration_date=later),
        make_contract("105", OptionType.CALL, open_interest=500, gamma=0.028),
        make_contract("110", OptionType.CALL, open_interest=80, gamma=None),
    ]


@pytest.fixture()
def tradier_payload() -> dict[str, object]:
    """Brokerage-style chain envelope with ``mid_iv`` and extra Greek fields."""
    return {
        "options": {
            "option": [
                {
                    "symbol": "SPY250214C00590000",
                    "underlying": "SPY",
                    "strike": 590.0,
                    "expiration_date": "2025-02-14",
                    "option_type": "call",
                    "open_interest": 12450,
                    "greeks": {
                        "delta": 0.52,
                        "gamma": 0.032,
                        "theta": -0.21,
                        "mid_iv": 0.18,
                    },
                },
                {
                    "symbol": "SPY250214P00585000",
                    "underlying": "SPY",
                    "strike": 585.0,
                    "expiration_date": "2025-02-14",
                    "option_type": "put",
                    "open_interest": 9800,
                    "greeks": None,
                },
            ]
        }
    }
