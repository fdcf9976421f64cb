"""Engine settings with JSON file and environment variable overrides.

Priority: explicit JSON file > ``GEX_*`` environment variables > defaults.
A missing or unreadable settings file is not fatal; defaults apply.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# |gamma| above this is treated as a corrupt quote and contributes zero exposure
GAMMA_GUARD_THRESHOLD: Final[float] = 1.0
DAYS_PER_YEAR: Final[int] = 365
PRICE_PRECISION: Final[int] = 2

ENV_PREFIX: Final[str] = "GEX_"


class ExposureSettings(BaseModel):
    """Tunable policy knobs for the exposure aggregators and summarizer."""

    model_config = ConfigDict(frozen=True)

    gamma_guard_threshold: float = Field(default=GAMMA_GUARD_THRESHOLD, gt=0)
    days_per_year: int = Field(default=DAYS_PER_YEAR, gt=0)
    price_precision: int = Field(default=PRICE_PRECISION, ge=0, le=8)


DEFAULT_SETTINGS: Final[ExposureSettings] = ExposureSettings()


def _env_overrides() -> dict[str, str]:
    """Collect ``GEX_<FIELD>`` environment variables for known fields."""
    overrides: dict[str, str] = {}
    for name in ExposureSettings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value:
            overrides[name] = value
    return overrides


def _load_file(path: Path) -> dict[str, object] | None:
    """Read a flat JSON settings object, or None if it cannot be used."""
    if not path.exists():
        logger.warning("Settings file %s not found, ignoring", path)
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        logger.warning("Failed to read settings file %s, ignoring", path)
        return None
    if not isinstance(data, dict):
        logger.warning("Settings file %s is not a JSON object, ignoring", path)
        return None
    return data


def load_settings(path: Path | str | None = None) -> ExposureSettings:
    """Resolve engine settings from file, environment, and defaults.

    Invalid values from the environment or file are logged and dropped
    rather than aborting, falling back to the next source.
    """
    merged: dict[str, object] = {}

    env_values = _env_overrides()
    try:
        ExposureSettings.model_validate(env_values)
        merged.update(env_values)
    except ValidationError as exc:
        logger.warning("Ignoring invalid GEX_* environment settings: %s", exc)

    if path is not None:
        file_values = _load_file(Path(path))
        if file_values is not None:
            try:
                ExposureSettings.model_validate({**merged, **file_values})
                merged.update(file_values)
            except ValidationError as exc:
                logger.warning("Ignoring invalid settings file %s: %s", path, exc)

    settings = ExposureSettings.model_validate(merged)
    logger.debug("Resolved settings: %s", settings.model_dump())
    return settings
