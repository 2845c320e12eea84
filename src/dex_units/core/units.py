"""
Unit conversion between raw on-chain integers and human decimal amounts.

- `from_base_units`: raw smallest-unit amount / 10**decimals (display side).
- `to_base_units`: decimal amount * 10**decimals, floored (submission side,
  never sends more than the user typed).

Both run in a local Decimal context wide enough for the operands plus guard
digits, so even 30+ digit supplies convert exactly.

Alignment notes:
# - Apply `from_base_units` exactly once per raw value. An already-formatted
#   value must go through `dex_units.balance.resolve_balance` instead, which
#   will not divide it again.
"""

from __future__ import annotations

import logging
from decimal import Decimal, ROUND_FLOOR, localcontext
from typing import Any

from .numeric import NumberLike, coerce_decimals, plain_str, scale_by_ten, to_decimal, working_precision
from .sanitize import clean

logger = logging.getLogger(__name__)


def base_units_to_decimal(raw: NumberLike, decimals: Any = None) -> Decimal:
    """Decimal form of `from_base_units` for callers that keep computing."""
    scale = coerce_decimals(decimals)
    d = to_decimal(clean(raw))
    return scale_by_ten(d, -scale)


def from_base_units(raw: NumberLike, decimals: Any = None) -> str:
    """Raw integer amount -> human decimal string.

    >>> from_base_units("87,987,100,000", "10")
    '8.79871'
    """
    return plain_str(base_units_to_decimal(raw, decimals))


def to_base_units_int(value: NumberLike, decimals: Any = None) -> int:
    """Human amount -> raw integer, floored toward negative infinity."""
    scale = coerce_decimals(decimals)
    d = to_decimal(clean(value))
    with localcontext() as ctx:
        ctx.prec = working_precision(d, extra=scale)
        q = d.scaleb(scale).to_integral_value(rounding=ROUND_FLOOR)
    logger.debug("to_base_units: %s @%d -> %s", d, scale, q)
    return int(q)


def to_base_units(value: NumberLike, decimals: Any = None) -> str:
    """Human amount -> raw integer digit string (for extrinsic/contract calls)."""
    return str(to_base_units_int(value, decimals))


__all__ = [
    "base_units_to_decimal",
    "from_base_units",
    "to_base_units_int",
    "to_base_units",
]
