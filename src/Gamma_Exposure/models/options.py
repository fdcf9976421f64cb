"""Option chain models consumed read-only by the exposure engine.

OptionContract is frozen because chain data is a point-in-time snapshot.
Gamma is deliberately NOT range-checked here: corrupt upstream values are
neutralised by the exposure guard, not rejected, so one bad quote does not
abort a whole chain.
"""

import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer

from Gamma_Exposure.models.enums import OptionType


class OptionGreeks(BaseModel):
    """Quoted Greeks attached to a contract by the data vendor.

    ``implied_volatility`` also accepts the vendor's ``mid_iv`` key.
    Any other Greeks present in the payload are ignored.
    """

    model_config = ConfigDict(frozen=True)

    gamma: float
    implied_volatility: float = Field(
        default=0.0,
        validation_alias=AliasChoices("implied_volatility", "mid_iv"),
    )


class OptionContract(BaseModel):
    """A single option contract as delivered in an option chain."""

    model_config = ConfigDict(frozen=True)

    strike: Decimal = Field(gt=0)
    expiration_date: datetime.date
    option_type: OptionType
    open_interest: int = Field(ge=0)
    greeks: OptionGreeks | None = None

    @field_serializer("strike")
    def serialize_decimal(self, value: Decimal) -> str:
        """Serialize Decimal fields as strings to preserve precision."""
        return str(value)

    def days_to_expiration(self, now: datetime.date) -> int:
        """Calendar days from *now* until expiration. Negative once expired."""
        return (self.expiration_date - now).days

    @property
    def is_put(self) -> bool:
        return self.option_type == OptionType.PUT
