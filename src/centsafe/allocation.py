"""
allocation.py — Proportional allocation with an exact total

================================================================================
LARGEST REMAINDER METHOD
================================================================================

Splitting 100.00 USD three ways has no exact answer in cents. The Largest
Remainder Method (Hare-Niemeyer) gives the fairest integer answer:

1. Compute each bucket's ideal share  amount * ratio / total_ratio
2. Floor it: that is the bucket's base amount
3. The fractional part left over is the bucket's remainder
4. sum(base) falls short of amount by a few units (the residual)
5. Hand out the residual one unit at a time, largest remainder first

    allocate(of("100.00", "USD"), [1, 1, 1])     -> [33.34, 33.33, 33.33]
    allocate(of("100.00", "USD"), [60, 25, 15])  -> [60.00, 25.00, 15.00]
    allocate(of("7", "JPY"), [1, 1, 1])          -> [3, 2, 2]

INVARIANT: sum(allocate(m, ratios)) == m, for every m and every valid ratio
set. The result is checked before returning.

Why the residual is never negative: ratios are scaled to integers at 15
digits and the ratio total is their exact integer sum, so the ideal shares
add up to ``amount`` exactly. Floor division rounds every share toward
-infinity (negative amounts included), hence sum(base) <= amount and
0 <= residual < number of buckets. The negative-residual branch below is
kept as a guard with a bounded number of steps.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from .conversion import Number, number_to_decimal_string, parse_decimal_to_minor_units
from .core import Money
from .errors import InvalidAmountError

# Decimal digits kept when reading ratios and ranking remainders
RATIO_PRECISION = 15
_RATIO_FACTOR = 10 ** RATIO_PRECISION

# Maximum number of buckets
MAX_ALLOCATION_PARTS = 10_000


@dataclass
class _Bucket:
    index: int
    weight: int
    amount: int
    remainder: int


def _scale_ratio(ratio: Number) -> int:
    try:
        text = number_to_decimal_string(ratio)
        scaled = parse_decimal_to_minor_units(text, RATIO_PRECISION)
    except InvalidAmountError as exc:
        raise InvalidAmountError(f"Invalid ratio: {ratio!r}") from exc
    if text.startswith("-") and text.strip("-0."):
        raise InvalidAmountError("Ratios cannot be negative")
    return scaled


def allocate(money: Money, ratios: Iterable[Number]) -> list[Money]:
    """
    Allocate ``money`` proportionally to ``ratios``.

    Ratios may be int, float, Decimal or decimal strings; they are read as
    text, so 0.1 means exactly 0.1. Zero ratios receive zero.

    Returns:
        One Money per ratio, in the order of ``ratios``, summing to ``money``

    Raises:
        InvalidAmountError: empty ratios, too many ratios, a negative ratio,
            or ratios summing to zero
    """
    if not isinstance(money, Money):
        raise TypeError(f"allocate() expects Money, got {type(money).__name__}")

    ratios = list(ratios)
    if not ratios:
        raise InvalidAmountError("Ratios cannot be empty")
    if len(ratios) > MAX_ALLOCATION_PARTS:
        raise InvalidAmountError(
            f"Too many ratios: {len(ratios)} > {MAX_ALLOCATION_PARTS}"
        )

    weights = [_scale_ratio(r) for r in ratios]
    total_weight = sum(weights)
    if total_weight == 0:
        raise InvalidAmountError("Sum of ratios cannot be zero")

    if len(weights) == 1:
        return [money]

    buckets = []
    for index, weight in enumerate(weights):
        if weight == 0:
            buckets.append(_Bucket(index, 0, 0, 0))
            continue
        ideal = money.amount * _RATIO_FACTOR * weight // total_weight
        base, remainder = divmod(ideal, _RATIO_FACTOR)
        buckets.append(_Bucket(index, weight, base, remainder))

    residual = money.amount - sum(b.amount for b in buckets)

    # Largest remainder first; zero-ratio buckets last among ties
    ranked = sorted(buckets, key=lambda b: (b.remainder, b.weight > 0), reverse=True)
    count = len(ranked)

    step = 0
    while residual > 0:
        ranked[step % count].amount += 1
        residual -= 1
        step += 1

    step = 0
    max_steps = len(ratios) * 2
    while residual < 0 and step < max_steps:
        ranked[count - 1 - (step % count)].amount -= 1
        residual += 1
        step += 1

    allocated = sum(b.amount for b in buckets)
    if allocated != money.amount:
        raise RuntimeError(
            f"Allocation invariant violated: sum {allocated} != original {money.amount}"
        )

    return [Money(b.amount, money.currency, money.scale) for b in buckets]


def split(money: Money, count: int) -> list[Money]:
    """
    Split ``money`` into ``count`` parts differing by at most one minor unit.

        split(of("100.00", "USD"), 3) -> [33.34, 33.33, 33.33]
        split(of("10.00", "USD"), 4)  -> [2.50, 2.50, 2.50, 2.50]

    Raises:
        InvalidAmountError: if count is not a positive int
    """
    if not isinstance(count, int) or isinstance(count, bool) or count <= 0:
        raise InvalidAmountError(f"Count must be a positive integer, got {count!r}")
    if count > MAX_ALLOCATION_PARTS:
        raise InvalidAmountError(f"Count exceeds the limit of {MAX_ALLOCATION_PARTS}")
    return allocate(money, [1] * count)
