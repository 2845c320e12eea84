"""
Top-level API for dex_units.

Token-amount conversion and display formatting for the DEX client:
  - core: Decimal primitives (sanitize, unit conversion, slippage, compact
    formatting, prefixed-unit parsing)
  - balance: raw-vs-formatted balance resolution (no double conversion)
  - inputs: checks on user-entered amounts
  - config: host-side `init()` for logging

Every numeric function is pure and stateless; only `init()` touches process
state (the `dex_units` logger).
"""

from __future__ import annotations

from .core import (
    clean,
    from_base_units,
    to_base_units,
    to_base_units_int,
    base_units_to_decimal,
    reduce_by_percent,
    increase_by_percent,
    percent_of,
    format_compact,
    truncate_decimals,
    to_plain_string,
    parse_prefixed_amount,
    BalanceKind,
    RawBalance,
    FormattedBalance,
    NativeBalance,
    AmountDomainError,
    DecimalPlacesError,
)
from .balance import classify_balance, resolve_balance, balance_for_max_click
from .inputs import (
    DecimalPlacesCheck,
    check_decimal_places,
    ensure_decimal_places,
    covers_amount_with_fee,
)
from .config import EngineConfig, init

__all__ = [
    # sanitize / units
    "clean",
    "from_base_units",
    "to_base_units",
    "to_base_units_int",
    "base_units_to_decimal",
    # slippage
    "reduce_by_percent",
    "increase_by_percent",
    "percent_of",
    # display
    "format_compact",
    "truncate_decimals",
    "to_plain_string",
    "parse_prefixed_amount",
    # balances
    "BalanceKind",
    "RawBalance",
    "FormattedBalance",
    "NativeBalance",
    "classify_balance",
    "resolve_balance",
    "balance_for_max_click",
    # inputs
    "DecimalPlacesCheck",
    "check_decimal_places",
    "ensure_decimal_places",
    "covers_amount_with_fee",
    # errors
    "AmountDomainError",
    "DecimalPlacesError",
    # host setup
    "EngineConfig",
    "init",
]
