"""
Core exception types for dex_units.core.

These are dependency-free and may be imported by all core modules. Public
conversion and formatting functions catch them and degrade to a zero value;
only the strict helpers let them propagate.
"""

__all__ = [
    "AmountDomainError",
    "DecimalPlacesError",
]


class AmountDomainError(Exception):
    """Raised when a value is not a finite decimal number (NaN, inf, garbage text)."""
    pass


class DecimalPlacesError(Exception):
    """Raised when an entered amount has more fractional digits than its token allows.

    Attributes
    ----------
    value : str
        The offending amount in positional notation.
    decimals_allowed : int
        The token's decimal scale.
    token_symbol : str
        Symbol of the token, for messages (may be empty).
    """

    def __init__(self, value, decimals_allowed, *, token_symbol=""):
        label = f" {token_symbol}" if token_symbol else ""
        super().__init__(
            f"Amount {value}{label} has more than {decimals_allowed} decimal places"
        )
        self.value = value
        self.decimals_allowed = decimals_allowed
        self.token_symbol = token_symbol
