"""Exposure map types and the summary report model.

Price levels are held as cent-quantized ``Decimal`` values from the moment
they enter a map until the JSON boundary, where they serialize as strings.
Sorting therefore always compares numbers, never text.
"""

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final

from pydantic import BaseModel, ConfigDict, field_serializer

from Gamma_Exposure.utils.exceptions import MalformedInputError

# --- Price key normalization ---
DEFAULT_PRICE_PRECISION: Final[int] = 2

type ExposureMap = dict[Decimal, float]
type PriceGrid = tuple[Decimal, ...]
type PriceLike = Decimal | float | int | str


def normalize_price(value: PriceLike, precision: int = DEFAULT_PRICE_PRECISION) -> Decimal:
    """Quantize a price to a fixed number of decimal places for use as a map key.

    ``100``, ``100.0``, ``"100.00"`` and ``Decimal("100.004")`` all map to
    ``Decimal("100.00")``. Floats go through ``str()`` first so binary noise
    such as ``100.00000000001`` collapses onto the intended cent.

    Raises:
        MalformedInputError: If *value* is not a finite number.
    """
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        msg = f"price {value!r} is not a number"
        raise MalformedInputError(msg, source="price") from exc

    if not number.is_finite():
        msg = f"price {value!r} is not a finite number"
        raise MalformedInputError(msg, source="price")

    quantum = Decimal(1).scaleb(-precision)
    try:
        return number.quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        msg = f"price {value!r} has too many digits at {precision} decimal places"
        raise MalformedInputError(msg, source="price") from exc


def normalize_exposure_map(
    exposures: Mapping[PriceLike, float],
    precision: int = DEFAULT_PRICE_PRECISION,
) -> ExposureMap:
    """Re-key a mapping onto normalized prices, summing keys that collide.

    Raises:
        MalformedInputError: If a key is not a finite number, or an exposure
            (or the sum of colliding exposures) is NaN or infinite.
    """
    normalized: ExposureMap = {}
    for price, exposure in exposures.items():
        key = normalize_price(price, precision)
        total = normalized.get(key, 0.0) + float(exposure)
        if not math.isfinite(total):
            msg = f"exposure {exposure!r} at price {price!r} is not a finite number"
            raise MalformedInputError(msg, source="exposure")
        normalized[key] = total
    return normalized


class GammaExposure(BaseModel):
    """Net gamma exposure at a single price level."""

    model_config = ConfigDict(frozen=True)

    price: Decimal
    gamma_exposure: float

    @field_serializer("price")
    def serialize_price(self, value: Decimal) -> str:
        """Serialize the price as a fixed-point string (``"100.00"``)."""
        return f"{value:f}"


class GammaExposureReport(BaseModel):
    """Summary statistics over one exposure map.

    ``minimum``, ``maximum`` and ``absolute_maximum`` are seeded at 0.0, so
    a map with no positive entries reports ``maximum == 0.0`` rather than
    its largest negative value (and symmetrically for ``minimum``).
    Subset centroids are ``None`` when the subset's exposures sum to zero.
    """

    model_config = ConfigDict(frozen=True)

    prices: list[GammaExposure]
    average_absolute_exposure: float
    average_positive_exposure: float
    average_negative_exposure: float
    maximum: float
    minimum: float
    absolute_maximum: float
    weighted_average_absolute_price: float
    weighted_average_positive_price: float | None = None
    weighted_average_negative_price: float | None = None
    zero_gamma_level: float | None = None

    def as_series(self) -> list[tuple[Decimal, float]]:
        """Return ``(price, exposure)`` pairs in ascending price order."""
        return [(entry.price, entry.gamma_exposure) for entry in self.prices]
