"""Pydantic v2 models, enums, and type definitions.

Re-exports all public models so consumers can import directly:
    from Gamma_Exposure.models import OptionContract, OptionType, GammaExposureReport
"""

from Gamma_Exposure.models.enums import ExposureStrategy, OptionType
from Gamma_Exposure.models.exposure import (
    ExposureMap,
    GammaExposure,
    GammaExposureReport,
    PriceGrid,
    normalize_exposure_map,
    normalize_price,
)
from Gamma_Exposure.models.options import OptionContract, OptionGreeks

__all__ = [
    # Enums
    "ExposureStrategy",
    "OptionType",
    # Options
    "OptionContract",
    "OptionGreeks",
    # Exposure
    "ExposureMap",
    "GammaExposure",
    "GammaExposureReport",
    "PriceGrid",
    "normalize_exposure_map",
    "normalize_price",
]
