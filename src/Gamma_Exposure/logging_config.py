"""Logging setup for the ``gamma-exposure`` CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
and levels are installed here, once, by the CLI entry point.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# LOG_LEVEL_<KEY> env var -> package logger it tunes
_MODULE_LOGGERS: dict[str, str] = {
    "ANALYSIS": "Gamma_Exposure.analysis",
    "SERVICES": "Gamma_Exposure.services",
    "REPORTING": "Gamma_Exposure.reporting",
}


def _level_from_name(name: str | None) -> int | None:
    """Translate ``"debug"``/``"INFO"``/... to a logging level, None if unknown."""
    if not name:
        return None
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else None


def _resolve_root_level(level: str, *, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    requested = level or os.environ.get("LOG_LEVEL", "")
    resolved = _level_from_name(requested)
    return resolved if resolved is not None else logging.INFO


def _apply_module_overrides() -> None:
    for key, logger_name in _MODULE_LOGGERS.items():
        resolved = _level_from_name(os.environ.get(f"LOG_LEVEL_{key}"))
        if resolved is not None:
            logging.getLogger(logger_name).setLevel(resolved)


def configure_logging(
    *,
    level: str = "",
    verbose: bool = False,
    quiet: bool = False,
) -> None:
    """Install the root handler and apply per-package level overrides.

    Priority for the root level: verbose > quiet > *level* > ``LOG_LEVEL``
    env var > INFO. Any previous root configuration is replaced.
    ``LOG_LEVEL_ANALYSIS``, ``LOG_LEVEL_SERVICES`` and ``LOG_LEVEL_REPORTING``
    tune the matching package loggers; unknown level names are ignored.
    """
    root_level = _resolve_root_level(level, verbose=verbose, quiet=quiet)
    logging.basicConfig(level=root_level, format=LOG_FORMAT, force=True)
    _apply_module_overrides()
