"""
Balance provenance tags.

A balance that reaches the display layer is either still in raw smallest
units or already divided by 10**decimals. Producers that know which one they
hold wrap the value in `RawBalance` or `FormattedBalance`; only untagged or
`NativeBalance` values fall back to the heuristic in `dex_units.balance`.

These datatypes are immutable and carry the value exactly as received
(grouping characters included); sanitation happens at resolution time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .numeric import NumberLike


class BalanceKind(Enum):
    """Outcome of raw-vs-formatted classification."""

    RAW = "raw"
    FORMATTED = "formatted"


@dataclass(frozen=True)
class RawBalance:
    """Smallest-unit integer amount from a ledger/wallet query."""

    value: NumberLike


@dataclass(frozen=True)
class FormattedBalance:
    """Amount already expressed in the token's human unit."""

    value: NumberLike


@dataclass(frozen=True)
class NativeBalance:
    """Native number of unknown provenance (may already have lost precision)."""

    value: Union[int, float]


TaggedBalance = Union[RawBalance, FormattedBalance, NativeBalance]


__all__ = [
    "BalanceKind",
    "RawBalance",
    "FormattedBalance",
    "NativeBalance",
    "TaggedBalance",
]
