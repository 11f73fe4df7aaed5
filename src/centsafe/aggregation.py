"""
aggregation.py — Sum, extremes and central tendency over Money values

Every function takes a non-empty iterable of Money sharing currency and scale
and raises InvalidAmountError on empty input. sum_or_zero() is the one
empty-safe variant.

Note: ``sum``, ``min`` and ``max`` shadow the builtins inside this module on
purpose; use them qualified (``aggregation.sum(prices)``).
"""

from __future__ import annotations
from typing import Iterable, Optional

from .core import Money, assert_all_same_currency, zero
from .currency import CurrencyRegistry
from .errors import InvalidAmountError
from .rounding import bankers_round


def _checked(moneys: Iterable[Money], operation: str) -> list[Money]:
    items = list(moneys)
    if not items:
        raise InvalidAmountError(f"Cannot compute {operation} of an empty sequence")
    for item in items:
        if not isinstance(item, Money):
            raise TypeError(f"{operation}() expects Money, got {type(item).__name__}")
    assert_all_same_currency(items)
    return items


def sum(moneys: Iterable[Money]) -> Money:
    items = _checked(moneys, "sum")
    total = 0
    for money in items:
        total += money.amount
    first = items[0]
    return Money(total, first.currency, first.scale)


def sum_or_zero(
    moneys: Iterable[Money],
    currency: str,
    *,
    registry: Optional[CurrencyRegistry] = None,
) -> Money:
    """sum(), or zero(currency) when there is nothing to add."""
    items = list(moneys)
    if not items:
        return zero(currency, registry=registry)
    return sum(items)


def min(moneys: Iterable[Money]) -> Money:
    items = _checked(moneys, "min")
    smallest = items[0]
    for money in items[1:]:
        if money.amount < smallest.amount:
            smallest = money
    return smallest


def max(moneys: Iterable[Money]) -> Money:
    items = _checked(moneys, "max")
    largest = items[0]
    for money in items[1:]:
        if money.amount > largest.amount:
            largest = money
    return largest


def average(moneys: Iterable[Money]) -> Money:
    """
    Arithmetic mean, rounded half-to-even to the currency's scale.

        average([1.00, 2.00])          -> 1.50
        average([0.01, 0.02])          -> 0.02   (1.5 cents -> 2)
        average([0.01, 0.02, 0.02, 0.00]) -> 0.01   (1.25 cents -> 1)
    """
    items = _checked(moneys, "average")
    total = 0
    for money in items:
        total += money.amount
    first = items[0]
    return Money(bankers_round(total, len(items)), first.currency, first.scale)


def median(moneys: Iterable[Money]) -> Money:
    """
    Middle value; for an even count, the average() of the two central values.
    """
    items = _checked(moneys, "median")
    ordered = sorted(items, key=lambda m: m.amount)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return average([ordered[mid - 1], ordered[mid]])
    return ordered[mid]
