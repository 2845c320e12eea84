import pytest
from decimal import Decimal

from dex_units.core.exc import DecimalPlacesError
from dex_units.inputs import (
    DecimalPlacesCheck,
    check_decimal_places,
    covers_amount_with_fee,
    ensure_decimal_places,
    fractional_digits,
)


# -----------------------------
# Decimal places guard
# -----------------------------

@pytest.mark.parametrize(
    "value,expected",
    [("1.123", 3), ("1.1200", 2), ("5", 0), ("1e-7", 7), (None, 0), ("1,234.5", 1)],
)
def test_fractional_digits(value, expected):
    assert fractional_digits(value) == expected


def test_check_decimal_places_error():
    print("[decimals-guard] 1.123 DOT with 2 allowed -> error")
    assert check_decimal_places("1.123", 2, "DOT") == DecimalPlacesCheck(
        token_symbol="DOT", is_error=True, decimals_allowed=2
    )


@pytest.mark.parametrize(
    "value,decimals",
    [("1.12", 2), ("1.1200", 2), ("5", 0), (None, 12), ("0.000001", "6")],
)
def test_check_decimal_places_ok(value, decimals):
    check = check_decimal_places(value, decimals, "DOT")
    assert check == DecimalPlacesCheck()
    assert not check.is_error


def test_check_decimal_places_string_scale():
    assert check_decimal_places("0.5", "0").is_error


def test_ensure_decimal_places():
    assert ensure_decimal_places("1.50", 2) == "1.5"
    with pytest.raises(DecimalPlacesError) as excinfo:
        ensure_decimal_places("0.1234567", 6, "USDT")
    err = excinfo.value
    print("[ensure-decimals] ->", err)
    assert err.value == "0.1234567"
    assert err.decimals_allowed == 6
    assert err.token_symbol == "USDT"


# -----------------------------
# Balance vs amount + fee
# -----------------------------

@pytest.mark.parametrize(
    "balance,amount,fee,expected",
    [
        ("10", "9.99", "1.9200 mWND", True),
        ("10", "9.999", "1.9200 mWND", False),
        ("10", "9.5", "0.5", True),
        ("10", "9.6", "0.5", False),
        ("10", "9.5", Decimal("0.5"), True),
        ("1", "1", "n/a", True),
        ("1,000", "999.9998", "110.4089 µKSM", True),
        ("1,000", "999.9999", "110.4089 µKSM", False),
    ],
)
def test_covers_amount_with_fee(balance, amount, fee, expected):
    out = covers_amount_with_fee(balance, amount, fee)
    print(f"[fee-check] balance={balance} amount={amount} fee={fee!r} -> {out}")
    assert out is expected
