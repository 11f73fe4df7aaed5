"""
core.py — Money domain primitive

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   Integers in minor units (cents for USD, fils for KWD, ...), held in a
   Python int: arbitrary precision, never floating point.

2. TYPE SAFETY
   Operations across currencies raise CurrencyMismatchError.
   Money + int / Money < float raise TypeError (explicit conversion required).

3. IMMUTABILITY
   Frozen, slotted dataclass. Every operation returns a new instance.
   No side effects, safe to share across threads.

4. SCALE FROM THE REGISTRY
   Every factory reads the scale from the currency registry (USD=2, JPY=0,
   KWD=3). Two Money of the same currency therefore always share a scale;
   only direct construction can break that, and the assertions catch it.

5. ONE CONTROLLED ROUNDING
   multiply/divide/percentage carry 18 extra decimal digits through the
   integer computation and round exactly once, half-to-even, at the end.

================================================================================
USAGE
================================================================================

    price = of("33.33", "USD")
    price * 3                       # 99.99 USD
    of("10.00", "USD") / 3          # 3.33 USD
    percentage(of("200", "EUR"), "7.5")   # 15.00 EUR

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence, Union
import math
import re

from .conversion import (
    Number,
    minor_units_to_decimal,
    number_to_decimal_string,
    parse_decimal_to_minor_units,
)
from .currency import CurrencyRegistry, resolve_registry
from .diagnostics import FLOAT_ARTIFACT, emit_diagnostic
from .errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    ScaleMismatchError,
)
from .rounding import RoundingMode, bankers_round

# Extended precision for factors and divisors (decimal digits)
MULTIPLY_PRECISION = 18
_PRECISION_FACTOR = 10 ** MULTIPLY_PRECISION

_INTEGER_TEXT = re.compile(r"-?[0-9]+")


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    Domain Primitive for monetary amounts.

    INVARIANTS:
    1. amount is always an int (no floating point)
    2. currency is an uppercase code, scale a non-negative int
    3. Operations across currencies raise CurrencyMismatchError
    4. Every transformation returns a new instance

    Build instances with the factories (of, of_rounded, from_minor_units,
    zero). Calling Money(...) directly skips the registry and is only meant
    for deserialization layers that already hold a trusted scale.

    SERIALIZATION:
        Use to_json()/from_json() from centsafe.serialization.
        The format is {"amount": "123.45", "currency": "USD"}.
        NEVER serialize as float.
    """
    amount: int
    currency: str
    scale: int

    def __post_init__(self) -> None:
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise InvalidAmountError(
                f"amount must be an int in minor units, got {type(self.amount).__name__}"
            )
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise InvalidAmountError("currency must be a non-empty code")
        if not isinstance(self.scale, int) or isinstance(self.scale, bool) or self.scale < 0:
            raise InvalidAmountError(f"scale must be a non-negative int, got {self.scale!r}")
        object.__setattr__(self, "currency", self.currency.strip().upper())

    # -------------------------------------------------------------------------
    # Arithmetic (type-safe)
    # -------------------------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money + {type(other).__name__}. "
                f"Use of() or from_minor_units() to convert."
            )
        return add(self, other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money - {type(other).__name__}."
            )
        return subtract(self, other)

    def __neg__(self) -> Money:
        return negate(self)

    def __abs__(self) -> Money:
        return absolute(self)

    def __mul__(self, factor: Number) -> Money:
        """
        Multiply by a quantity or rate.

        Factors are int, Decimal, decimal strings, or floats (converted
        through their repr, so 1.1 means exactly 1.1).
        """
        if isinstance(factor, Money):
            raise TypeError("Money cannot be multiplied by Money.")
        return multiply(self, factor)

    def __rmul__(self, factor: Number) -> Money:
        return self.__mul__(factor)

    def __truediv__(self, divisor: Number) -> Money:
        if isinstance(divisor, Money):
            raise TypeError("Money cannot be divided by Money.")
        return divide(self, divisor)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return (
                self.amount == other.amount
                and self.currency == other.currency
                and self.scale == other.scale
            )
        return NotImplemented

    def __lt__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._check_same_currency(other)
        return self.amount >= other.amount

    def _check_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot compare Money with {type(other).__name__}")
        assert_same_currency(self, other)

    def __hash__(self) -> int:
        return hash((self.amount, self.currency, self.scale))

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def minor_units(self) -> int:
        """Value in minor units (cents, ...). Same as amount."""
        return self.amount

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{minor_units_to_decimal(self.amount, self.scale)} {self.currency}"

    def __repr__(self) -> str:
        return f"Money({str(self)!r})"


def _with_amount(money: Money, amount: int) -> Money:
    return Money(amount, money.currency, money.scale)


def _require_money(value: object, operation: str) -> Money:
    if not isinstance(value, Money):
        raise TypeError(f"{operation}() expects Money, got {type(value).__name__}")
    return value


# ==============================================================================
# FACTORIES
# ==============================================================================

def _looks_like_float_artifact(text: str) -> bool:
    """True when a float's repr shows binary representation error."""
    _, _, fraction = text.lstrip("-").partition(".")
    if not fraction.strip("0"):
        return False
    return len(fraction) > 10 or "0000" in fraction or "9999" in fraction


def _amount_text(amount: Number, currency: str) -> str:
    text = number_to_decimal_string(amount)
    if isinstance(amount, float) and _looks_like_float_artifact(text):
        emit_diagnostic(
            FLOAT_ARTIFACT,
            f"Float {text} for {currency} looks like a binary rounding artifact; "
            f"pass a decimal string instead",
            value=amount,
            text=text,
            currency=currency,
        )
    return text


def of(
    amount: Number,
    currency: str,
    rounding_mode: Union[RoundingMode, str] = RoundingMode.TRUNCATE,
    *,
    registry: Optional[CurrencyRegistry] = None,
) -> Money:
    """
    Build Money from a major-unit amount ("123.45", 123, Decimal("1.5")).

    Digits beyond the currency's scale are truncated unless
    ``rounding_mode="round"`` (banker's rounding).

    Raises:
        UnknownCurrencyError: if the currency is not registered
        InvalidAmountError: if the amount is malformed
    """
    info = resolve_registry(registry).get(currency)
    text = _amount_text(amount, info.code)
    minor = parse_decimal_to_minor_units(text, info.decimal_places, rounding_mode)
    return Money(minor, info.code, info.decimal_places)


def of_rounded(
    amount: Number,
    currency: str,
    *,
    registry: Optional[CurrencyRegistry] = None,
) -> Money:
    """of() with banker's rounding of excess digits."""
    return of(amount, currency, RoundingMode.ROUND, registry=registry)


from_major_units = of


def from_minor_units(
    minor_units: Union[int, float, Decimal, str],
    currency: str,
    *,
    registry: Optional[CurrencyRegistry] = None,
) -> Money:
    """
    Build Money from minor units (cents, ...). No conversion, full precision.

    Raises:
        InvalidAmountError: for non-integral, non-finite or non-numeric input
    """
    info = resolve_registry(registry).get(currency)

    if isinstance(minor_units, bool):
        raise InvalidAmountError("Minor units must be an integer, got bool")
    if isinstance(minor_units, int):
        value = minor_units
    elif isinstance(minor_units, float):
        if not math.isfinite(minor_units) or not minor_units.is_integer():
            raise InvalidAmountError(
                f"Minor units must be a finite integer, got {minor_units!r}"
            )
        value = int(minor_units)
    elif isinstance(minor_units, Decimal):
        if not minor_units.is_finite() or minor_units != minor_units.to_integral_value():
            raise InvalidAmountError(
                f"Minor units must be a finite integer, got {minor_units!r}"
            )
        value = int(minor_units)
    elif isinstance(minor_units, str) and _INTEGER_TEXT.fullmatch(minor_units.strip()):
        value = int(minor_units.strip())
    else:
        raise InvalidAmountError(f"Invalid minor units: {minor_units!r}")

    return Money(value, info.code, info.decimal_places)


def zero(currency: str, *, registry: Optional[CurrencyRegistry] = None) -> Money:
    """Zero for a currency. Handy as the start value of a sum."""
    info = resolve_registry(registry).get(currency)
    return Money(0, info.code, info.decimal_places)


# ==============================================================================
# ASSERTIONS
# ==============================================================================

def assert_same_currency(a: Money, b: Money) -> None:
    """
    Raises:
        CurrencyMismatchError: different currency codes
        ScaleMismatchError: same code, different scale
    """
    if a.currency != b.currency:
        raise CurrencyMismatchError(a.currency, b.currency)
    if a.scale != b.scale:
        raise ScaleMismatchError(a.currency, a.scale, b.scale)


def assert_all_same_currency(moneys: Sequence[Money]) -> None:
    """Pairwise check against the first element. Empty input passes."""
    if len(moneys) < 2:
        return
    first = moneys[0]
    for money in moneys[1:]:
        assert_same_currency(first, money)


# ==============================================================================
# ARITHMETIC
# ==============================================================================

def _scaled_factor(value: Number) -> int:
    """A factor as an integer with MULTIPLY_PRECISION implied decimals."""
    return parse_decimal_to_minor_units(
        number_to_decimal_string(value), MULTIPLY_PRECISION
    )


def add(a: Money, b: Money) -> Money:
    _require_money(a, "add")
    _require_money(b, "add")
    assert_same_currency(a, b)
    return _with_amount(a, a.amount + b.amount)


def subtract(a: Money, b: Money) -> Money:
    _require_money(a, "subtract")
    _require_money(b, "subtract")
    assert_same_currency(a, b)
    return _with_amount(a, a.amount - b.amount)


def negate(money: Money) -> Money:
    _require_money(money, "negate")
    return _with_amount(money, -money.amount)


def absolute(money: Money) -> Money:
    _require_money(money, "absolute")
    return _with_amount(money, abs(money.amount))


def multiply(money: Money, factor: Number) -> Money:
    """
    Multiply by a factor, rounding once (half-to-even) to the money's scale.

    The factor is read at 18 decimal digits, so the raw product carries
    scale + 18 digits before the single rounding step:

        multiply(of("33.33", "USD"), 3)       -> 99.99 USD
        multiply(of("10.00", "USD"), "0.125") -> 1.25 USD
        multiply(of("0.05", "USD"), "0.5")    -> 0.02 USD   (2.5 -> 2)
    """
    _require_money(money, "multiply")
    scaled = _scaled_factor(factor)
    return _with_amount(money, bankers_round(money.amount * scaled, _PRECISION_FACTOR))


def divide(money: Money, divisor: Number) -> Money:
    """
    Divide by a number, rounding once (half-to-even) to the money's scale.

        divide(of("10.00", "USD"), 3) -> 3.33 USD

    Raises:
        DivisionByZeroError: if the divisor reads as zero at 18 digits
    """
    _require_money(money, "divide")
    scaled = _scaled_factor(divisor)
    if scaled == 0:
        raise DivisionByZeroError("Cannot divide by zero")
    return _with_amount(money, bankers_round(money.amount * _PRECISION_FACTOR, scaled))


def percentage(money: Money, percent: Number) -> Money:
    """
    ``percent`` percent of ``money`` (percentage(m, 15) is 15% of m).

    Same result as multiply(money, percent / 100), with the division by 100
    folded into the integer divisor.
    """
    _require_money(money, "percentage")
    scaled = _scaled_factor(percent)
    return _with_amount(
        money, bankers_round(money.amount * scaled, 100 * _PRECISION_FACTOR)
    )
