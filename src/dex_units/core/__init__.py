"""
DEX Units Core
==============

Pure numeric primitives for token amounts: sanitation, raw<->decimal unit
conversion, percentage adjustments, display formatting and prefixed-unit
parsing.

All arithmetic is Decimal-based and runs in local contexts; no module here
keeps state or touches the global decimal context, so every function is safe
to call from any thread.
"""

# NOTE:
#   Public conversion/formatting functions never raise on bad input; they
#   degrade to '0' (or Decimal(0)) and log at DEBUG. The strict parser
#   `to_decimal` is exported for callers that prefer an exception.

# Constants
from .constants import (
    DEFAULT_DECIMAL_PRECISION,
    GUARD_DIGITS,
    MAX_TOKEN_DECIMALS,
    MAX_ADJUSTED_EXPONENT,
    UNIT_PREFIXES,
)

# Decimal plumbing
from .numeric import (
    NumberLike,
    to_decimal,
    coerce_decimals,
    plain_str,
)

# Sanitation
from .sanitize import clean

# Unit conversion
from .units import (
    base_units_to_decimal,
    from_base_units,
    to_base_units,
    to_base_units_int,
)

# Percentages
from .slippage import (
    reduce_by_percent,
    increase_by_percent,
    percent_of,
)

# Display
from .fmt import (
    format_compact,
    truncate_decimals,
    to_plain_string,
)

# Prefixed quantities
from .prefix import parse_prefixed_amount

# Provenance tags
from .datatypes import (
    BalanceKind,
    RawBalance,
    FormattedBalance,
    NativeBalance,
    TaggedBalance,
)

# Exceptions
from .exc import AmountDomainError, DecimalPlacesError

__all__ = [
    # constants
    "DEFAULT_DECIMAL_PRECISION",
    "GUARD_DIGITS",
    "MAX_TOKEN_DECIMALS",
    "MAX_ADJUSTED_EXPONENT",
    "UNIT_PREFIXES",
    # numeric
    "NumberLike",
    "to_decimal",
    "coerce_decimals",
    "plain_str",
    # sanitize
    "clean",
    # units
    "base_units_to_decimal",
    "from_base_units",
    "to_base_units",
    "to_base_units_int",
    # slippage
    "reduce_by_percent",
    "increase_by_percent",
    "percent_of",
    # fmt
    "format_compact",
    "truncate_decimals",
    "to_plain_string",
    # prefix
    "parse_prefixed_amount",
    # datatypes
    "BalanceKind",
    "RawBalance",
    "FormattedBalance",
    "NativeBalance",
    "TaggedBalance",
    # exceptions
    "AmountDomainError",
    "DecimalPlacesError",
]
