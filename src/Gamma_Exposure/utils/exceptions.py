"""Custom exception hierarchy for the gamma exposure engine.

All domain-specific exceptions inherit from GammaExposureError so callers can
catch a single type at the CLI or RPC boundary.
"""


class GammaExposureError(Exception):
    """Base exception for all gamma exposure computation failures."""


class MalformedInputError(GammaExposureError):
    """Raised when a strike, date, option type, or chain payload fails to parse.

    Attributes:
        source: Where the bad input came from (file name or ``"chain"``).
        index: Position of the offending contract in the chain, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str,
        index: int | None = None,
    ) -> None:
        self.source = source
        self.index = index
        super().__init__(message)


class ArithmeticDegeneracyError(GammaExposureError):
    """Raised when a statistic has no defined value (empty map, zero denominator).

    Attributes:
        field: Name of the report field that could not be computed.
    """

    def __init__(self, message: str, *, field: str) -> None:
        self.field = field
        super().__init__(message)
