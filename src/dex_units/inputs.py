"""
Checks applied to amounts typed into the swap and liquidity forms.

- too-many-decimals guard (`check_decimal_places` / `ensure_decimal_places`)
- native balance vs amount + network fee (`covers_amount_with_fee`)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import localcontext
from typing import Any

from .core.exc import AmountDomainError, DecimalPlacesError
from .core.fmt import to_plain_string
from .core.numeric import NumberLike, coerce_decimals, to_decimal, working_precision
from .core.prefix import parse_prefixed_amount
from .core.sanitize import clean

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecimalPlacesCheck:
    """Result of the decimal-places guard; the default instance means 'ok'."""

    token_symbol: str = ""
    is_error: bool = False
    decimals_allowed: int = 0


def fractional_digits(value: NumberLike) -> int:
    """Number of significant fractional digits ('1.50' -> 1)."""
    s = to_plain_string(value)
    return len(s.split(".", 1)[1]) if "." in s else 0


def check_decimal_places(value: NumberLike, decimals: Any, token_symbol: str = "") -> DecimalPlacesCheck:
    allowed = coerce_decimals(decimals)
    if fractional_digits(value) > allowed:
        return DecimalPlacesCheck(token_symbol=token_symbol, is_error=True, decimals_allowed=allowed)
    return DecimalPlacesCheck()


def ensure_decimal_places(value: NumberLike, decimals: Any, token_symbol: str = "") -> str:
    """Strict form of `check_decimal_places`; returns the positional amount.

    Raises DecimalPlacesError when the amount is finer than the token allows.
    """
    check = check_decimal_places(value, decimals, token_symbol)
    if check.is_error:
        raise DecimalPlacesError(to_plain_string(value), check.decimals_allowed, token_symbol=token_symbol)
    return to_plain_string(value)


def covers_amount_with_fee(balance: NumberLike, amount: NumberLike, fee: Any) -> bool:
    """True if `balance - fee >= amount`, all in human units.

    `fee` may be a prefixed quantity string ('1.9200 mWND') or a plain number.
    """
    b = to_decimal(clean(balance))
    a = to_decimal(clean(amount))
    if isinstance(fee, str):
        try:
            f = to_decimal(fee.replace(",", ""))
        except AmountDomainError:
            f = parse_prefixed_amount(fee)
    else:
        f = to_decimal(clean(fee))
    with localcontext() as ctx:
        ctx.prec = working_precision(b, f)
        remaining = b - f
    logger.debug("covers_amount_with_fee: balance=%s fee=%s amount=%s", b, f, a)
    return a <= remaining


__all__ = [
    "DecimalPlacesCheck",
    "fractional_digits",
    "check_decimal_places",
    "ensure_decimal_places",
    "covers_amount_with_fee",
]
