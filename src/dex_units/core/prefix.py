"""
Parser for SI-prefixed quantity strings such as '110.4089 µKSM'.

Fee estimates from the node come back pre-formatted with a milli or micro
prefix glued to the token symbol. `parse_prefixed_amount` pulls out the first
numeric literal, applies the prefix, and returns the value in the token's
base display unit.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Any

from .constants import UNIT_PREFIXES
from .exc import AmountDomainError
from .numeric import scale_by_ten, to_decimal

logger = logging.getLogger(__name__)

_PREFIX_CLASS = "".join(re.escape(p) for p in UNIT_PREFIXES)

# number, optional prefix, then the unit code. re.ASCII keeps \w to [A-Za-z0-9_]
# so a micro sign is only ever read as the prefix. The unit must start with a
# letter, otherwise a bare "12345" would split into 1234 and a unit "5".
_QUANTITY_RE = re.compile(
    r"(\d+\.?\d*)\s*([" + _PREFIX_CLASS + r"])?[^\W\d]\w*",
    re.ASCII,
)


def parse_prefixed_amount(text: Any) -> Decimal:
    """Return the amount in `text` scaled to the base unit.

    '110.4089 µKSM' -> Decimal('0.0001104089')
    '1.9200 mWND'   -> Decimal('0.0019200')
    '0.001919 WND'  -> Decimal('0.001919')

    No match (or a non-string) yields Decimal(0).
    """
    if not isinstance(text, str):
        logger.debug("parse_prefixed_amount: non-string input %r -> 0", text)
        return Decimal(0)

    match = _QUANTITY_RE.search(text.replace(",", ""))
    if match is None:
        logger.debug("parse_prefixed_amount: no quantity in %r -> 0", text)
        return Decimal(0)

    literal, prefix = match.group(1), match.group(2)
    try:
        value = to_decimal(literal)
    except AmountDomainError:
        return Decimal(0)
    if prefix:
        value = scale_by_ten(value, UNIT_PREFIXES[prefix])
    return value


__all__ = ["parse_prefixed_amount"]
