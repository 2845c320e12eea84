"""
Balance resolution: decide raw-vs-formatted once, convert at most once.

Wallet and pool services hand the UI balances of mixed provenance. Some are
raw smallest-unit integers, some were already divided by 10**decimals
upstream. Running `from_base_units` on the latter divides twice and a
24795.5 balance renders as 0.0000000247955.

Resolution order:
- `RawBalance` -> `from_base_units`, exactly once.
- `FormattedBalance` -> truncated to the token's decimal places, never divided.
- `NativeBalance` / untagged values -> `classify_balance` heuristic:
  a decimal point after sanitation means formatted, otherwise raw.

Alignment notes:
# - The heuristic misreads a formatted whole number ('1000') as raw. Producers
#   that know the provenance should tag the value instead of relying on it.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from .core.datatypes import BalanceKind, FormattedBalance, NativeBalance, RawBalance, TaggedBalance
from .core.fmt import truncate_decimals
from .core.numeric import NumberLike, coerce_decimals
from .core.sanitize import clean
from .core.units import from_base_units

logger = logging.getLogger(__name__)

BalanceInput = Union[TaggedBalance, NumberLike]


def classify_balance(value: NumberLike) -> BalanceKind:
    """Guess whether an untagged balance is raw or already formatted."""
    if "." in clean(value):
        return BalanceKind.FORMATTED
    return BalanceKind.RAW


def resolve_balance(balance: BalanceInput, decimals: Any = None) -> str:
    """Human-unit string for `balance`, dividing by 10**decimals at most once.

    Missing input resolves to '0'.
    """
    scale = coerce_decimals(decimals)

    if isinstance(balance, RawBalance):
        return from_base_units(balance.value, scale)
    if isinstance(balance, FormattedBalance):
        return truncate_decimals(balance.value, scale)

    value = balance.value if isinstance(balance, NativeBalance) else balance
    kind = classify_balance(value)
    logger.debug("resolve_balance: untagged %r classified as %s", value, kind.value)
    if kind is BalanceKind.FORMATTED:
        return truncate_decimals(value, scale)
    return from_base_units(value, scale)


def _is_missing(balance: BalanceInput) -> bool:
    value = balance.value if isinstance(balance, (RawBalance, FormattedBalance, NativeBalance)) else balance
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def balance_for_max_click(balance: BalanceInput, decimals: Any = None) -> str:
    """Value to drop into an amount field when the user clicks 'max'.

    Same resolution as `resolve_balance`, but a missing balance gives '' (an
    empty field) and the result never carries more than `decimals` places.
    """
    if _is_missing(balance):
        return ""
    scale = coerce_decimals(decimals)
    return truncate_decimals(resolve_balance(balance, scale), scale)


__all__ = [
    "BalanceInput",
    "classify_balance",
    "resolve_balance",
    "balance_for_max_click",
]
