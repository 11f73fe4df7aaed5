"""
conditions.py — Money predicates for rule/condition evaluators

================================================================================
ADAPTER
================================================================================

Rule engines (automation rules, budget alerts, import filters) compare a
field of a record against a configured value. Both sides usually arrive as
JSON, so every operator accepts either a Money or the exchange shape
{"amount": "123.45", "currency": "USD"}.

    result = evaluate("money_gt", {"amount": "150.00", "currency": "USD"},
                      {"amount": "100.00", "currency": "USD"}, field="total")
    result.passed   # True
    result.reason   # "total (150.00 USD) is greater than 100.00 USD"

Operators are looked up by name in OPERATORS. Hosts can add their own with
register_operator().

PROPERTIES:
- Deterministic: same operands -> same result
- Strict: comparing different currencies raises CurrencyMismatchError
  instead of answering False
- Traceable: every result carries a human-readable reason

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Sequence
import logging

from . import comparison
from .core import Money, assert_same_currency
from .errors import InvalidAmountError
from .schemas import MoneyModel, validate_model
from .serialization import serialize

logger = logging.getLogger(__name__)


def to_money(value: Any) -> Money:
    """
    Coerce an operand to Money.

    Raises:
        InvalidAmountError: for None or any shape other than Money /
            {"amount": str, "currency": str}
    """
    if isinstance(value, Money):
        return value
    if isinstance(value, Mapping):
        return validate_model(MoneyModel, dict(value)).to_money()
    raise InvalidAmountError(f"Cannot convert {value!r} to Money")


# ==============================================================================
# OPERATORS
# ==============================================================================

@dataclass(frozen=True)
class MoneyOperator:
    """
    A named predicate.

    ``verb`` and ``negation`` phrase the outcome in reasons.
    ``arity`` counts operands: 1 for sign checks (no expected value),
    2 for comparisons, 3 for between (expected is a pair).
    """
    name: str
    description: str
    evaluate: Callable[..., bool]
    verb: str
    negation: str
    arity: int = 2


@dataclass(frozen=True)
class ConditionResult:
    """Result of evaluating one operator."""
    operator: str
    passed: bool
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operator": self.operator,
            "passed": self.passed,
            "reason": self.reason,
        }


def _between(actual: Money, low: Money, high: Money) -> bool:
    assert_same_currency(actual, low)
    assert_same_currency(actual, high)
    return low.amount <= actual.amount <= high.amount


def _comparison(name: str, description: str, verb: str, negation: str,
                fn: Callable[[Money, Money], bool]) -> MoneyOperator:
    return MoneyOperator(name, description, fn, verb, negation, arity=2)


def _sign_check(name: str, description: str, verb: str, negation: str,
                fn: Callable[[Money], bool]) -> MoneyOperator:
    return MoneyOperator(name, description, fn, verb, negation, arity=1)


OPERATORS: Dict[str, MoneyOperator] = {
    op.name: op
    for op in (
        _comparison("money_eq", "Check if two Money values are equal",
                    "equals", "does not equal", comparison.equals),
        _comparison("money_neq", "Check if two Money values are not equal",
                    "does not equal", "equals", lambda a, b: not comparison.equals(a, b)),
        _comparison("money_gt", "Check if Money value is greater than expected",
                    "is greater than", "is not greater than", comparison.greater_than),
        _comparison("money_gte", "Check if Money value is greater than or equal to expected",
                    "is greater than or equal to", "is less than",
                    comparison.greater_than_or_equal),
        _comparison("money_lt", "Check if Money value is less than expected",
                    "is less than", "is not less than", comparison.less_than),
        _comparison("money_lte", "Check if Money value is less than or equal to expected",
                    "is less than or equal to", "is greater than",
                    comparison.less_than_or_equal),
        MoneyOperator("money_between", "Check if Money value is between two values (inclusive)",
                      _between, "is between", "is not between", arity=3),
        _sign_check("money_positive", "Check if Money value is positive (> 0)",
                    "is positive", "is not positive", comparison.is_positive),
        _sign_check("money_negative", "Check if Money value is negative (< 0)",
                    "is negative", "is not negative", comparison.is_negative),
        _sign_check("money_zero", "Check if Money value is zero",
                    "is zero", "is not zero", comparison.is_zero),
    )
}


def register_operator(operator: MoneyOperator) -> MoneyOperator:
    """Add or replace an operator."""
    OPERATORS[operator.name] = operator
    logger.debug("Registered money operator %s", operator.name)
    return operator


def get_operator(name: str) -> MoneyOperator:
    try:
        return OPERATORS[name]
    except KeyError:
        raise LookupError(f"Unknown money operator: {name!r}") from None


# ==============================================================================
# EVALUATION
# ==============================================================================

def _operands(operator: MoneyOperator, expected: Any) -> list[Money]:
    if operator.arity == 1:
        return []
    if operator.arity == 3:
        if (
            not isinstance(expected, Sequence)
            or isinstance(expected, (str, bytes))
            or len(expected) != 2
        ):
            raise InvalidAmountError(
                f"{operator.name} expects a pair of Money values, got {expected!r}"
            )
        return [to_money(expected[0]), to_money(expected[1])]
    return [to_money(expected)]


def _reason(operator: MoneyOperator, passed: bool, field_name: str,
            actual: Money, operands: list[Money]) -> str:
    subject = f"{field_name} ({serialize(actual)})"
    verb = operator.verb if passed else operator.negation
    if not operands:
        return f"{subject} {verb}"
    if operator.arity == 3:
        low, high = operands
        return f"{subject} {verb} {serialize(low)} and {serialize(high)}"
    return f"{subject} {verb} {serialize(operands[0])}"


def evaluate(
    name: str,
    actual: Any,
    expected: Optional[Any] = None,
    *,
    field: str = "value",
) -> ConditionResult:
    """
    Evaluate operator ``name`` on ``actual`` (and ``expected``).

    Raises:
        LookupError: unknown operator name
        InvalidAmountError: operand cannot be read as Money
        CurrencyMismatchError: operands in different currencies
    """
    operator = get_operator(name)
    actual_money = to_money(actual)
    operands = _operands(operator, expected)

    passed = bool(operator.evaluate(actual_money, *operands))
    return ConditionResult(
        operator=operator.name,
        passed=passed,
        reason=_reason(operator, passed, field, actual_money, operands),
    )
