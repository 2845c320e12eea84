"""
Display formatting helpers (compact notation, truncation, positional strings).

Everything returns a string for the rendering layer and never raises;
unparsable input renders as '0'.
"""

from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext

from .constants import COMPACT_FALLBACK_PLACES, COMPACT_TIERS
from .numeric import NumberLike, plain_str, scale_by_ten, to_decimal, working_precision
from .sanitize import clean

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Fixed-place rendering
# ---------------------------------------------------------------------------

def _fixed(d: Decimal, places: int) -> str:
    """Round half-up to `places` fractional digits, keeping trailing zeros."""
    with localcontext() as ctx:
        ctx.prec = working_precision(d, extra=places)
        q = d.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return plain_str(q, trim=False)


def _trim(body: str, trim_all: bool) -> str:
    if "." not in body:
        return body
    if trim_all:
        return body.rstrip("0").rstrip(".")
    if body.endswith(".0"):
        return body[:-2]
    return body


# ---------------------------------------------------------------------------
# Compact notation
# ---------------------------------------------------------------------------

def format_compact(value: NumberLike) -> str:
    """Abbreviate `value` with K/M/B suffixes.

    Examples: 1500000 -> '1.5M', 2000 -> '2K', 12.5 -> '12.5', 0.00012 -> '0.0001'.
    Negative values mirror the positive formatting with a leading '-'.
    """
    d = to_decimal(clean(value))
    if d.is_zero():
        return "0"

    sign = "-" if d < 0 else ""
    mag = d.copy_abs()
    for threshold, shift, suffix, places, trim_all in COMPACT_TIERS:
        if mag >= threshold:
            body = _trim(_fixed(scale_by_ten(mag, -shift), places), trim_all)
            break
    else:
        suffix = ""
        body = _trim(_fixed(mag, COMPACT_FALLBACK_PLACES), True)

    if body == "0":
        # Below display resolution; no '-0'.
        return "0"
    return f"{sign}{body}{suffix}"


# ---------------------------------------------------------------------------
# Truncation / positional strings
# ---------------------------------------------------------------------------

def truncate_decimals(value: NumberLike, places: int = 2) -> str:
    """Cut (not round) the fractional part of `value` to `places` digits.

    Digits that survive are returned verbatim, so '1.50' stays '1.50'.
    """
    s = clean(value)
    if "." not in s:
        return s
    int_part, frac = s.split(".", 1)
    frac = frac[: max(places, 0)]
    out = f"{int_part}.{frac}" if frac else int_part
    if not out.strip("-0."):
        return "0"
    return out


def to_plain_string(value: NumberLike) -> str:
    """Any numeric input -> shortest positional string ('1e-7' -> '0.0000001')."""
    return plain_str(to_decimal(clean(value)))


__all__ = [
    "format_compact",
    "truncate_decimals",
    "to_plain_string",
]
