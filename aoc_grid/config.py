"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Union

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    debug: bool = False


def _debug_from_env() -> bool:
    return os.environ.get("AOC_GRID_DEBUG", "0").lower() in {"1", "true", "yes"}


def _parse_level(value: Union[str, int]) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{value}'")
    return level


def load_settings(overrides: Optional[Dict[str, object]] = None) -> Settings:
    """Return :class:`Settings` from the environment merged with optional overrides.

    Recognised keys are ``log_level`` and ``debug``; ``debug`` forces ``DEBUG``.
    """
    params: Dict[str, object] = {
        "log_level": os.environ.get("AOC_GRID_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        "debug": _debug_from_env(),
    }
    if overrides:
        unknown = set(overrides) - set(params)
        if unknown:
            raise ValueError(f"Unknown settings: {sorted(unknown)}")
        params.update(overrides)
    debug = bool(params["debug"])
    level = logging.DEBUG if debug else _parse_level(params["log_level"])  # type: ignore[arg-type]
    return Settings(log_level=level, debug=debug)


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach a stream handler to the package logger if it has none, and set its level."""
    settings = settings or load_settings()
    logger = logging.getLogger("aoc_grid")
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger


__all__ = ["Settings", "load_settings", "configure_logging", "LOG_FORMAT"]
