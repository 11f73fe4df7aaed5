"""
errors.py — Error taxonomy for money operations

Every failure is raised synchronously, at the point where it is detected.
No operation ever returns a partial or degraded Money.

Each error also inherits the closest builtin exception, so generic handlers
(`except ValueError`, `except ZeroDivisionError`, ...) keep working.
"""

from __future__ import annotations


class MoneyError(Exception):
    """Base error for all money operations."""
    pass


# Currency errors
class CurrencyMismatchError(MoneyError, TypeError):
    """Operands carry different currency codes."""
    def __init__(self, currency_a: str, currency_b: str):
        self.currency_a = currency_a
        self.currency_b = currency_b
        super().__init__(
            f"Currency mismatch: {currency_a} vs {currency_b}. "
            f"Convert explicitly before combining."
        )


class ScaleMismatchError(MoneyError, ValueError):
    """Same currency, inconsistent scale (only reachable via direct construction)."""
    def __init__(self, currency: str, scale_a: int, scale_b: int):
        self.currency = currency
        self.scale_a = scale_a
        self.scale_b = scale_b
        super().__init__(
            f"Scale mismatch for {currency}: {scale_a} vs {scale_b}"
        )


class UnknownCurrencyError(MoneyError, LookupError):
    """Currency code not present in the registry."""
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown currency: {code!r}")


# Amount errors
class InvalidAmountError(MoneyError, ValueError):
    """Malformed amount, invalid ratio set or empty aggregation input."""
    pass


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Zero divisor."""
    pass


class AmountOverflowError(MoneyError, OverflowError):
    """Minor-unit export does not fit the safe-integer range."""
    def __init__(self, amount: int, limit: int):
        self.amount = amount
        self.limit = limit
        super().__init__(
            f"Amount {amount} exceeds the safe integer range (±{limit}). "
            f"Use to_minor_units_bigint() or to_minor_units_string()."
        )
