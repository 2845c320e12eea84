from __future__ import annotations

import logging
from typing import Iterator

import pytest

from dex_units.config import HANDLER_NAME, PACKAGE_LOGGER


# -----------------------------
# Balances seen in the wild (12-decimal P3D token)
# -----------------------------

P3D_DECIMALS = "12"
P3D_RAW = "24795503631344215"
P3D_FORMATTED = "24795.503631344215"


@pytest.fixture()
def p3d_decimals() -> str:
    return P3D_DECIMALS


@pytest.fixture()
def p3d_raw_balance() -> str:
    return P3D_RAW


@pytest.fixture()
def p3d_formatted_balance() -> str:
    return P3D_FORMATTED


# -----------------------------
# Logging / environment isolation
# -----------------------------

@pytest.fixture()
def package_logger() -> Iterator[logging.Logger]:
    """Yield the package logger and undo whatever init() did to it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    for h in list(logger.handlers):
        if h.get_name() == HANDLER_NAME:
            logger.removeHandler(h)
    logger.setLevel(level)


@pytest.fixture()
def isolated_env(monkeypatch):
    """Make DEX_UNITS_* vars revert to 'unset' after the test, even if load_dotenv wrote them."""
    for key in ("DEX_UNITS_LOG_LEVEL", "DEX_UNITS_DEBUG_AMOUNTS", "DEX_UNITS_LOG_FORMAT"):
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    return monkeypatch
