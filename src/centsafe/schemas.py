"""
schemas.py — Pydantic models for the data exchange shapes

Validation happens at the boundary, before anything reaches the integer
core. Pydantic's ValidationError is translated to InvalidAmountError so
callers deal with a single error family.

Amounts travel as decimal strings; a JSON number is rejected rather than
silently read through a float.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Annotated, Any, Optional, Type, TypeVar

from pydantic import AfterValidator, BaseModel, Field, TypeAdapter, ValidationError

from .core import Money, of
from .conversion import minor_units_to_decimal
from .currency import Currency, CurrencyRegistry
from .errors import InvalidAmountError

CURRENCY_CODE_PATTERN = r"^[A-Z]{3}$"
AMOUNT_PATTERN = r"^-?\d+(\.\d+)?$"

ModelT = TypeVar("ModelT", bound=BaseModel)


class MoneyModel(BaseModel):
    """JSON shape: {"amount": "123.45", "currency": "USD"}."""

    amount: str = Field(..., pattern=AMOUNT_PATTERN, description="Decimal amount as string")
    currency: str = Field(..., pattern=CURRENCY_CODE_PATTERN, description="ISO 4217 code")

    model_config = {"frozen": True}

    def to_money(self, *, registry: Optional[CurrencyRegistry] = None) -> Money:
        return of(self.amount, self.currency, registry=registry)

    @classmethod
    def from_money(cls, money: Money) -> MoneyModel:
        return cls(
            amount=minor_units_to_decimal(money.amount, money.scale),
            currency=money.currency,
        )


class DatabaseMoneyModel(MoneyModel):
    """Database row shape. Same fields as the JSON shape."""
    pass


class CurrencyModel(BaseModel):
    """Payload for registering a custom currency."""

    code: str = Field(..., min_length=1, max_length=12)
    numeric_code: int = Field(0, ge=0)
    name: str = Field(..., min_length=1)
    decimal_places: int = Field(..., ge=0, le=18)
    symbol: Optional[str] = None

    model_config = {"frozen": True}

    def to_currency(self) -> Currency:
        return Currency(
            code=self.code,
            numeric_code=self.numeric_code,
            name=self.name,
            decimal_places=self.decimal_places,
            symbol=self.symbol,
        )


def _check_ratios(ratios: list[Decimal]) -> list[Decimal]:
    if any(r < 0 for r in ratios):
        raise ValueError("Ratios cannot be negative")
    if sum(ratios) == 0:
        raise ValueError("Sum of ratios cannot be zero")
    return ratios


AllocationRatios = Annotated[list[Decimal], Field(min_length=1), AfterValidator(_check_ratios)]

_ratios_adapter: TypeAdapter[list[Decimal]] = TypeAdapter(AllocationRatios)


def validate_model(model: Type[ModelT], data: Any) -> ModelT:
    """
    Validate ``data`` against ``model``.

    Raises:
        InvalidAmountError: if the payload does not match
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidAmountError(
            f"Invalid {model.__name__} payload: {exc.error_count()} error(s): "
            + "; ".join(err["msg"] for err in exc.errors())
        ) from exc


def validate_allocation_ratios(ratios: Any) -> list[Decimal]:
    """
    Check a ratio list before it reaches allocate(): non-empty, no negative
    entry, positive sum.

    Raises:
        InvalidAmountError: if the ratios are unusable
    """
    try:
        return _ratios_adapter.validate_python(ratios)
    except ValidationError as exc:
        raise InvalidAmountError(
            "Invalid allocation ratios: "
            + "; ".join(err["msg"] for err in exc.errors())
        ) from exc
