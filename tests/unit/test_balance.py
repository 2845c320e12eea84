import pytest
from decimal import Decimal

from dex_units.balance import balance_for_max_click, classify_balance, resolve_balance
from dex_units.core.datatypes import BalanceKind, FormattedBalance, NativeBalance, RawBalance


# -----------------------------
# Classification heuristic
# -----------------------------

@pytest.mark.parametrize(
    "value,kind",
    [
        ("24795.503631344215", BalanceKind.FORMATTED),
        ("24795503631344215", BalanceKind.RAW),
        ("24,795,503,631,344,215", BalanceKind.RAW),
        (24795.5036, BalanceKind.FORMATTED),
        (1e15, BalanceKind.RAW),
        (123456789.0, BalanceKind.RAW),
        (123456789, BalanceKind.RAW),
        (None, BalanceKind.RAW),
        ("1,234.5", BalanceKind.FORMATTED),
    ],
)
def test_classify_balance(value, kind):
    print(f"[classify] {value!r} -> expect {kind.value}")
    assert classify_balance(value) is kind


# -----------------------------
# Untagged resolution
# -----------------------------

def test_resolve_formatted_is_not_divided_again():
    print("[resolve] formatted 24795.5036 @12 must stay > 24000")
    out = resolve_balance("24795.5036", "12")
    assert out == "24795.5036"
    assert Decimal(out) > 24000


def test_resolve_raw_is_divided_once(p3d_raw_balance, p3d_formatted_balance, p3d_decimals):
    assert resolve_balance(p3d_raw_balance, p3d_decimals) == p3d_formatted_balance


def test_resolve_is_stable_on_its_own_output(p3d_raw_balance, p3d_decimals):
    print("[resolve-twice] feeding a resolved balance back must not shrink it")
    once = resolve_balance(p3d_raw_balance, p3d_decimals)
    assert resolve_balance(once, p3d_decimals) == once


def test_resolve_formatted_truncates_to_scale():
    assert resolve_balance("1.123456789", 6) == "1.123456"


@pytest.mark.parametrize("value", [None, "", "garbage"])
def test_resolve_missing_is_zero(value):
    assert resolve_balance(value, 12) == "0"


# -----------------------------
# Tagged resolution
# -----------------------------

def test_tagged_raw():
    assert resolve_balance(RawBalance("1,000,000,000,000"), 12) == "1"


def test_tagged_formatted_whole_number_kept():
    print("[tagged] FormattedBalance('1000') stays 1000; untagged '1000' is read as raw")
    assert resolve_balance(FormattedBalance("1000"), 12) == "1000"
    assert resolve_balance("1000", 12) == "0.000000001"


def test_tagged_formatted_truncates():
    assert resolve_balance(FormattedBalance("1.123456789"), "6") == "1.123456"


@pytest.mark.parametrize(
    "native,decimals,expected",
    [
        (123456789, "6", "123.456789"),
        (24795.5036, "12", "24795.5036"),
        (1e15, "12", "1000"),
        (1e16, "12", "10000"),
        (123456789.0, "6", "123.456789"),
    ],
)
def test_tagged_native_uses_heuristic(native, decimals, expected):
    assert resolve_balance(NativeBalance(native), decimals) == expected


def test_missing_decimals_means_no_scaling():
    assert resolve_balance(RawBalance("12345"), None) == "12345"


# -----------------------------
# Max click
# -----------------------------

@pytest.mark.parametrize("value", [None, "", "   ", RawBalance(None)])
def test_max_click_missing_is_empty(value):
    assert balance_for_max_click(value, "12") == ""


def test_max_click_formatted_and_raw(p3d_raw_balance, p3d_formatted_balance, p3d_decimals):
    assert balance_for_max_click(p3d_formatted_balance, p3d_decimals) == p3d_formatted_balance
    assert balance_for_max_click(p3d_raw_balance, p3d_decimals).startswith("24795.")


def test_max_click_zero_and_truncation():
    assert balance_for_max_click(0, "12") == "0"
    assert balance_for_max_click("1.1234567", "6") == "1.123456"


def test_max_click_whole_float_is_raw():
    print("[max-click] 123456789.0 is a native raw balance, not a formatted one")
    assert balance_for_max_click(123456789.0, "6") == "123.456789"
