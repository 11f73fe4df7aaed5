"""
conversion.py — Decimal string <-> minor unit integer

All conversions are string based. A decimal string is split on the dot and
the digits are glued back together as an integer, so "0.1" at scale 2 is
exactly 10, never 10.000000000000002.

    parse_decimal_to_minor_units("1234.56", 2)        -> 123456
    parse_decimal_to_minor_units("1.005", 2)          -> 100     (truncate)
    parse_decimal_to_minor_units("1.005", 2, "round") -> 100     (half-to-even)
    parse_decimal_to_minor_units("1.015", 2, "round") -> 102
    minor_units_to_decimal(-5, 2)                     -> "-0.05"
"""

from __future__ import annotations
from decimal import Decimal
from typing import Union
import math
import re

from .errors import InvalidAmountError
from .rounding import RoundingMode, round_to_scale

_DIGITS = re.compile(r"[0-9]+")

Number = Union[int, float, Decimal, str]


def number_to_decimal_string(value: Number) -> str:
    """
    Plain decimal text for a native number, never in exponent notation.

    Floats use their shortest round-trip repr (``0.1`` -> ``"0.1"``), so the
    text shows exactly what the float already is, artifacts included.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Booleans are not amounts: {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidAmountError(f"Amount must be finite, got {value!r}")
        text = repr(value)
        if "e" in text or "E" in text:
            text = format(Decimal(text), "f")
        return text
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidAmountError(f"Amount must be finite, got {value!r}")
        return format(value, "f")
    if isinstance(value, str):
        return value.strip()
    raise InvalidAmountError(
        f"Unsupported amount type: {type(value).__name__}"
    )


def parse_decimal_to_minor_units(
    value: str,
    scale: int,
    mode: Union[RoundingMode, str] = RoundingMode.TRUNCATE,
) -> int:
    """
    Parse a decimal string into an integer at ``scale`` decimal places.

    Fractions shorter than ``scale`` are zero-padded (exact). Longer fractions
    are truncated or banker's-rounded depending on ``mode``.

    Raises:
        InvalidAmountError: if the string is not a plain decimal number
    """
    if not isinstance(value, str):
        raise InvalidAmountError(
            f"Expected a decimal string, got {type(value).__name__}"
        )
    mode = RoundingMode(mode)

    text = value.strip()
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    integer_part, _, fraction = text.partition(".")
    if not integer_part and not fraction:
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if integer_part and not _DIGITS.fullmatch(integer_part):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if fraction and not _DIGITS.fullmatch(fraction):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    integer_part = integer_part or "0"

    if len(fraction) <= scale:
        minor = int(integer_part + fraction.ljust(scale, "0"))
    elif mode is RoundingMode.TRUNCATE:
        minor = int(integer_part + fraction[:scale])
    else:
        full_precision = int(integer_part + fraction)
        minor = round_to_scale(full_precision, len(fraction), scale)

    return -minor if negative else minor


def minor_units_to_decimal(amount: int, scale: int) -> str:
    """Render a scaled integer as a plain decimal string."""
    if scale == 0:
        return str(amount)

    digits = str(abs(amount)).rjust(scale + 1, "0")
    text = f"{digits[:-scale]}.{digits[-scale:]}"
    return f"-{text}" if amount < 0 else text
