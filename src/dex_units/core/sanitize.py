"""
Input sanitation: heterogeneous numeric inputs -> canonical digit string.

Upstream collaborators hand over balances as locale-grouped strings
('87,987,100,000', '87 987 100 000'), plain digit strings, or native numbers
that may already exceed float's exact-integer range. `clean` folds all of
these into one positional-notation string that Decimal can parse.

Never raises: missing or unparsable input becomes '0'.
"""

from __future__ import annotations

import logging
import re

from .exc import AmountDomainError
from .numeric import NumberLike, plain_str, to_decimal

logger = logging.getLogger(__name__)

# Commas and any whitespace (\s covers NBSP and narrow NBSP used as group separators).
_GROUPING_RE = re.compile(r"[,\s]")

# Already-positional literal; kept as written (modulo sign and dangling point) so
# trailing zeros and the point survive.
_PLAIN_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$", re.ASCII)


def clean(value: NumberLike) -> str:
    """Sanitize `value` into a plain decimal string (idempotent).

    - str: grouping characters are removed; exponent literals are expanded.
    - int / Decimal: rendered exactly.
    - float: read via its shortest repr, then expanded (1e21 -> '1000000000000000000000').
    - None, '', NaN, inf, garbage, |exponent| > MAX_ADJUSTED_EXPONENT: '0'.
    - '+5' -> '5', '5.' -> '5', '.5' -> '0.5', '-0' -> '0'.
    """
    if value is None:
        return "0"
    plain = False
    if isinstance(value, str):
        value = _GROUPING_RE.sub("", value)
        if not value:
            return "0"
        plain = _PLAIN_RE.match(value) is not None
    try:
        d = to_decimal(value)
    except AmountDomainError:
        logger.debug("clean: unparsable input %r -> '0'", value)
        return "0"
    if d.is_zero():
        return "0"
    if plain:
        return _canonical(value)
    return plain_str(d, trim=False)


def _canonical(s: str) -> str:
    sign = "-" if s[0] == "-" else ""
    s = s.lstrip("+-").rstrip(".")
    if s.startswith("."):
        s = "0" + s
    return sign + s


__all__ = ["clean"]
