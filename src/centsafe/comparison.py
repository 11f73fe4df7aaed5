"""
comparison.py — Currency-checked comparisons

Unlike ``==`` (which simply answers False for different currencies), these
functions raise CurrencyMismatchError when the currencies differ.
"""

from __future__ import annotations
from typing import Literal

from .core import Money, assert_same_currency


def equals(a: Money, b: Money) -> bool:
    assert_same_currency(a, b)
    return a.amount == b.amount


def greater_than(a: Money, b: Money) -> bool:
    assert_same_currency(a, b)
    return a.amount > b.amount


def greater_than_or_equal(a: Money, b: Money) -> bool:
    assert_same_currency(a, b)
    return a.amount >= b.amount


def less_than(a: Money, b: Money) -> bool:
    assert_same_currency(a, b)
    return a.amount < b.amount


def less_than_or_equal(a: Money, b: Money) -> bool:
    assert_same_currency(a, b)
    return a.amount <= b.amount


def is_positive(money: Money) -> bool:
    return money.amount > 0


def is_negative(money: Money) -> bool:
    return money.amount < 0


def is_zero(money: Money) -> bool:
    return money.amount == 0


def compare(a: Money, b: Money) -> Literal[-1, 0, 1]:
    """-1 if a < b, 0 if equal, 1 if a > b."""
    assert_same_currency(a, b)
    if a.amount < b.amount:
        return -1
    if a.amount > b.amount:
        return 1
    return 0
