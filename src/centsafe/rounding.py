"""
rounding.py — Integer rounding primitives

================================================================================
BANKER'S ROUNDING
================================================================================

Round-half-to-even on integers only. A value exactly halfway between two
candidates goes to the even one:

    bankers_round(25, 10)  ->  2     (2.5 -> 2)
    bankers_round(35, 10)  ->  4     (3.5 -> 4)
    bankers_round(-25, 10) -> -2     (symmetric around zero)

Rounding halves always up (HALF_UP) biases long sums upwards; half-to-even
does not. Python's round() behaves the same way on floats.

The halfway test is ``remainder * 2 == divisor``. Comparing the remainder
with ``divisor // 2`` would misclassify odd divisors, because the integer
division truncates (7 // 2 == 3, yet 3/7 is not a half).

================================================================================
"""

from __future__ import annotations
from enum import Enum

from .errors import DivisionByZeroError


class RoundingMode(str, Enum):
    """
    What to do with decimal digits beyond a currency's scale.

    - TRUNCATE: drop the excess digits (toward zero). Default for parsing.
    - ROUND: banker's rounding (half-to-even).
    """
    TRUNCATE = "truncate"
    ROUND = "round"


def bankers_round(value: int, divisor: int) -> int:
    """
    Divide ``value`` by ``divisor`` and round half-to-even.

    Raises:
        DivisionByZeroError: if divisor is 0
    """
    if divisor == 0:
        raise DivisionByZeroError("Cannot divide by zero")

    negative = (value < 0) != (divisor < 0)
    abs_value = abs(value)
    abs_divisor = abs(divisor)

    quotient, remainder = divmod(abs_value, abs_divisor)

    if remainder * 2 == abs_divisor:
        result = quotient if quotient % 2 == 0 else quotient + 1
    elif remainder <= abs_divisor // 2:
        result = quotient
    else:
        result = quotient + 1

    return -result if negative else result


def round_to_scale(value: int, from_scale: int, to_scale: int) -> int:
    """
    Re-express a scaled integer at another scale.

    Scaling up is exact; scaling down uses banker's rounding.

        round_to_scale(12345, 3, 2)  -> 1234   (12.345 -> 12.34)
        round_to_scale(12355, 3, 2)  -> 1236   (12.355 -> 12.36)
        round_to_scale(1234, 2, 4)   -> 123400
    """
    if to_scale >= from_scale:
        return value * 10 ** (to_scale - from_scale)
    return bankers_round(value, 10 ** (from_scale - to_scale))
