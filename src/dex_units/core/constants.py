"""
DEX Units Core Constants
========================

Precision floors, display tiers and unit-prefix scales shared by the core
modules. Everything here is immutable data; no module in `core` reads or
writes process-wide state.
"""

# NOTE: Decimal precision here is a *floor*. Each operation raises it to fit
#       its operands (see numeric.working_precision), so large raw balances
#       never lose digits.

from decimal import Decimal
from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------

#: Minimum number of significant digits for any local Decimal context.
DEFAULT_DECIMAL_PRECISION: int = 28

#: Extra digits kept beyond what the operands strictly require.
GUARD_DIGITS: int = 4

#: Upper end of token decimal scales seen on supported chains. Larger scales
#: are clamped to this.
MAX_TOKEN_DECIMALS: int = 18

#: Largest |adjusted exponent| accepted from input. Beyond it a literal such as
#: "1e999999" would expand to megabytes of digits, so it is treated as unparsable.
MAX_ADJUSTED_EXPONENT: int = 1000


# ---------------------------------------------------------------------------
# Compact notation tiers (first match wins)
# ---------------------------------------------------------------------------

#: (threshold, shift, suffix, places, trim_all_zeros); value is scaled by 10**-shift.
#: trim_all_zeros=False only drops a trailing ".0"; True strips every trailing zero.
COMPACT_TIERS: Tuple[Tuple[Decimal, int, str, int, bool], ...] = (
    (Decimal("1e9"), 9, "B", 1, False),
    (Decimal("1e6"), 6, "M", 1, False),
    (Decimal("1e3"), 3, "K", 1, False),
    (Decimal("1"), 0, "", 2, True),
)

#: Tier applied to magnitudes below the last threshold.
COMPACT_FALLBACK_PLACES: int = 4


# ---------------------------------------------------------------------------
# Unit prefixes (power-of-ten shift applied to the numeric literal)
# ---------------------------------------------------------------------------

MICRO_SIGN: str = "µ"   # µ as emitted by polkadot-js formatBalance
GREEK_MU: str = "μ"     # μ, accepted for pasted input

UNIT_PREFIXES: Dict[str, int] = {
    "m": -3,
    MICRO_SIGN: -6,
    GREEK_MU: -6,
}


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "GUARD_DIGITS",
    "MAX_TOKEN_DECIMALS",
    "MAX_ADJUSTED_EXPONENT",
    "COMPACT_TIERS",
    "COMPACT_FALLBACK_PLACES",
    "MICRO_SIGN",
    "GREEK_MU",
    "UNIT_PREFIXES",
]
