"""
serialization.py — Money at the data exchange boundary

================================================================================
FORMATS
================================================================================

JSON / database:   {"amount": "123.45", "currency": "USD"}
Compact string:    "123.45 USD"

The amount is always a decimal string, never a float. The reading direction
(from_json, from_database, deserialize) re-parses through of(), so the scale
always comes from the currency registry, not from the input's digits:
{"amount": "1.5", "currency": "USD"} reads as 1.50 USD.

================================================================================
"""

from __future__ import annotations
from typing import Any, Optional

from .conversion import minor_units_to_decimal
from .core import Money, of
from .currency import CurrencyRegistry
from .diagnostics import LOSSY_CONVERSION, emit_diagnostic
from .errors import AmountOverflowError, InvalidAmountError
from .schemas import DatabaseMoneyModel, MoneyModel, validate_model

# Largest integer a float (and a JSON/JavaScript number) represents exactly
MAX_SAFE_INTEGER = 2 ** 53 - 1


def to_json(money: Money) -> dict[str, str]:
    return {
        "amount": minor_units_to_decimal(money.amount, money.scale),
        "currency": money.currency,
    }


def from_json(data: Any, *, registry: Optional[CurrencyRegistry] = None) -> Money:
    """
    Raises:
        InvalidAmountError: if ``data`` is not {"amount": str, "currency": str}
    """
    return validate_model(MoneyModel, data).to_money(registry=registry)


def to_database(money: Money) -> dict[str, str]:
    return to_json(money)


def from_database(data: Any, *, registry: Optional[CurrencyRegistry] = None) -> Money:
    return validate_model(DatabaseMoneyModel, data).to_money(registry=registry)


def serialize(money: Money) -> str:
    """Compact form: "123.45 USD"."""
    return f"{minor_units_to_decimal(money.amount, money.scale)} {money.currency}"


def deserialize(text: str, *, registry: Optional[CurrencyRegistry] = None) -> Money:
    """
    Inverse of serialize().

    Raises:
        InvalidAmountError: unless ``text`` is exactly "<amount> <currency>"
    """
    if not isinstance(text, str):
        raise InvalidAmountError(f"Expected a string, got {type(text).__name__}")
    parts = text.split()
    if len(parts) != 2:
        raise InvalidAmountError(
            f"Invalid serialized money {text!r}: expected 'AMOUNT CURRENCY'"
        )
    amount, currency = parts
    return of(amount, currency, registry=registry)


# ==============================================================================
# UNIT EXPORTS
# ==============================================================================

def to_minor_units(money: Money) -> int:
    """
    Minor units, guaranteed to survive a round trip through a float/JSON number.

    Raises:
        AmountOverflowError: if |amount| > MAX_SAFE_INTEGER
    """
    if abs(money.amount) > MAX_SAFE_INTEGER:
        raise AmountOverflowError(money.amount, MAX_SAFE_INTEGER)
    return money.amount


def to_minor_units_bigint(money: Money) -> int:
    """Minor units, unbounded."""
    return money.amount


def to_minor_units_string(money: Money) -> str:
    return str(money.amount)


def to_major_units(money: Money) -> float:
    """
    Major units as a float. LOSSY: for display or legacy interop only.

    Emits a ``lossy_conversion`` diagnostic. Prefer to_major_units_string().
    """
    text = minor_units_to_decimal(money.amount, money.scale)
    emit_diagnostic(
        LOSSY_CONVERSION,
        f"to_major_units({text} {money.currency}) returns a float and may lose "
        f"precision; use to_major_units_string() for exact values",
        amount=text,
        currency=money.currency,
    )
    return float(text)


def to_major_units_string(money: Money) -> str:
    """Major units as an exact decimal string ("123.45")."""
    return minor_units_to_decimal(money.amount, money.scale)


to_decimal = to_major_units_string
