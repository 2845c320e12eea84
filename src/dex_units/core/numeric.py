"""
Decimal plumbing shared by the core modules.

- Values are parsed into `decimal.Decimal` and never pass through `float`
  arithmetic (a float *input* is read via its shortest repr, not its binary
  expansion).
- Every computation runs in a `localcontext()` sized by `working_precision`,
  so the global decimal context is never touched.
- Output is always positional notation (`plain_str`); exponent strings such as
  '1E+21' or '1E-7' never escape the core.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Union

from .constants import (
    DEFAULT_DECIMAL_PRECISION,
    GUARD_DIGITS,
    MAX_ADJUSTED_EXPONENT,
    MAX_TOKEN_DECIMALS,
)
from .exc import AmountDomainError

logger = logging.getLogger(__name__)

#: Anything the public surface accepts as a number.
NumberLike = Union[str, int, float, Decimal, None]


# ----------------------------
# Parsing
# ----------------------------

def to_decimal(value: Any) -> Decimal:
    """Strictly parse `value` into a finite Decimal.

    Raises AmountDomainError for None, booleans, NaN, infinities, text that is
    not a decimal literal, and magnitudes beyond MAX_ADJUSTED_EXPONENT. Callers
    that must not raise catch it.
    """
    if value is None or isinstance(value, bool):
        raise AmountDomainError(f"to_decimal: unsupported value {value!r}")
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        # repr() is the shortest string that round-trips the float.
        d = Decimal(repr(value))
        if value.is_integer():
            # repr(1e15) is '1000000000000000.0'; whole floats carry no point.
            d = d.to_integral_value()
    elif isinstance(value, str):
        try:
            d = Decimal(value.strip())
        except InvalidOperation as exc:
            raise AmountDomainError(f"to_decimal: not a decimal literal {value!r}") from exc
    else:
        raise AmountDomainError(f"to_decimal: unsupported type {type(value).__name__}")
    if not d.is_finite():
        raise AmountDomainError(f"to_decimal: non-finite value {value!r}")
    if d.is_zero():
        if abs(d.as_tuple().exponent) > MAX_ADJUSTED_EXPONENT:
            return Decimal(0)
    elif abs(d.adjusted()) > MAX_ADJUSTED_EXPONENT:
        raise AmountDomainError(f"to_decimal: exponent out of range {value!r}")
    return d


def coerce_decimals(decimals: Any) -> int:
    """Token decimal scale from int/str/None.

    Anything unusable becomes 0; scales above MAX_TOKEN_DECIMALS are clamped.
    """
    if decimals is None or isinstance(decimals, bool):
        return 0
    if isinstance(decimals, int):
        scale = max(decimals, 0)
    else:
        try:
            scale = max(int(to_decimal(decimals)), 0)
        except AmountDomainError:
            logger.debug("coerce_decimals: %r is not a scale, using 0", decimals)
            return 0
    if scale > MAX_TOKEN_DECIMALS:
        logger.debug("coerce_decimals: scale %d clamped to %d", scale, MAX_TOKEN_DECIMALS)
        return MAX_TOKEN_DECIMALS
    return scale


# ----------------------------
# Precision
# ----------------------------

def working_precision(*values: Decimal, extra: int = 0) -> int:
    """Context precision that keeps add/mul/scaleb over `values` exact.

    Each operand contributes its digit count plus the magnitude of its
    exponent (the widest alignment it can force), then GUARD_DIGITS on top.
    """
    need = extra
    for v in values:
        t = v.as_tuple()
        need += len(t.digits) + abs(int(t.exponent))
    return max(DEFAULT_DECIMAL_PRECISION, need + GUARD_DIGITS)


def scale_by_ten(d: Decimal, places: int) -> Decimal:
    """Return d * 10**places without rounding."""
    with localcontext() as ctx:
        ctx.prec = working_precision(d, extra=abs(places))
        return d.scaleb(places)


# ----------------------------
# Rendering
# ----------------------------

def plain_str(d: Decimal, trim: bool = True) -> str:
    """Positional-notation string for `d` (never exponential).

    trim=True drops trailing fractional zeros and a dangling point, matching
    decimal.js `toFixed()` with no argument.
    """
    if not d.is_finite():
        raise AmountDomainError("plain_str: non-finite Decimal")
    if d.is_zero():
        d = d.copy_abs()
    s = format(d, "f")
    if trim and "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


__all__ = [
    "NumberLike",
    "to_decimal",
    "coerce_decimals",
    "working_precision",
    "scale_by_ten",
    "plain_str",
]
