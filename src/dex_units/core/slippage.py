"""
Percentage adjustments for trade bounds and amount selectors.

All math stays in Decimal end to end: quote previews recompute these on every
keystroke, and float rounding would compound across calls.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from .numeric import NumberLike, plain_str, to_decimal, working_precision
from .sanitize import clean

_HUNDRED = Decimal(100)


def _share(a: Decimal, p: Decimal) -> Decimal:
    """a * p / 100, exact."""
    with localcontext() as ctx:
        ctx.prec = working_precision(a, p, extra=2)
        return (a * p).scaleb(-2)


def reduce_by_percent(amount: NumberLike, percent: NumberLike) -> str:
    """amount - amount*percent/100 (minimum-received bound)."""
    a = to_decimal(clean(amount))
    p = to_decimal(clean(percent))
    delta = _share(a, p)
    with localcontext() as ctx:
        ctx.prec = working_precision(a, delta)
        return plain_str(a - delta)


def increase_by_percent(amount: NumberLike, percent: NumberLike) -> str:
    """amount + amount*percent/100 (maximum-sold bound)."""
    a = to_decimal(clean(amount))
    p = to_decimal(clean(percent))
    delta = _share(a, p)
    with localcontext() as ctx:
        ctx.prec = working_precision(a, delta)
        return plain_str(a + delta)


def percent_of(amount: NumberLike, percent: NumberLike) -> str:
    """amount*percent/100 with percent clamped to [0, 100]."""
    a = to_decimal(clean(amount))
    p = min(max(to_decimal(clean(percent)), Decimal(0)), _HUNDRED)
    return plain_str(_share(a, p))


__all__ = [
    "reduce_by_percent",
    "increase_by_percent",
    "percent_of",
]
