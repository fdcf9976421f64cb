"""StrEnum types for the gamma exposure domain.

Values are lowercase strings matching the brokerage feed.
Use enum members in business logic, never raw strings.
"""

from enum import StrEnum


class OptionType(StrEnum):
    """Type of option contract."""

    CALL = "call"
    PUT = "put"


class ExposureStrategy(StrEnum):
    """How per-price exposure is aggregated from an option chain."""

    DIRECT = "direct"
    MODEL = "model"
