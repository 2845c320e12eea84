"""
Host-side configuration and one-time initialization.

The numeric core reads no settings. The hosting application builds an
`EngineConfig` (directly or from the environment) and calls `init()` once at
startup to wire up logging for the `dex_units` logger tree.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

PACKAGE_LOGGER = "dex_units"
HANDLER_NAME = "dex_units.stream"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    """Settings passed to `init()`.

    debug_amounts forces DEBUG so every degraded conversion and every
    raw-vs-formatted guess is logged.
    """

    log_level: str = "WARNING"
    debug_amounts: bool = False
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(cls, prefix: str = "DEX_UNITS_", dotenv_path: Optional[str] = None) -> "EngineConfig":
        load_dotenv(dotenv_path)
        return cls(
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "WARNING").strip().upper(),
            debug_amounts=_env_bool(f"{prefix}DEBUG_AMOUNTS", "false"),
            log_format=os.getenv(f"{prefix}LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )

    @property
    def level(self) -> int:
        if self.debug_amounts:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.strip().upper())
        return level if isinstance(level, int) else logging.WARNING


def init(config: Optional[EngineConfig] = None) -> logging.Logger:
    """Configure the package logger; safe to call more than once."""
    config = config or EngineConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level)

    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.log_format))

    logger.debug("dex_units initialised (level=%s)", logging.getLevelName(config.level))
    return logger


__all__ = [
    "PACKAGE_LOGGER",
    "DEFAULT_LOG_FORMAT",
    "EngineConfig",
    "init",
]
