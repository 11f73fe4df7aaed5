"""
centsafe — Exact monetary values on scaled integers

Amounts are integers in minor units (cents, fils, ...). Arithmetic,
allocation, aggregation, parsing and serialization never pass through
binary floating point, and no operation loses or invents a minor unit.

================================================================================
QUICK START
================================================================================

Basic usage:

    from centsafe import of, add, allocate, to_json

    price = of("10.00", "USD")
    total = add(price, of("5.25", "USD"))     # 15.25 USD
    total * 3                                 # 45.75 USD

    # Fair split (sum ALWAYS equals the original)
    allocate(of("100.00", "USD"), [1, 1, 1])  # [33.34, 33.33, 33.33]

    to_json(total)   # {"amount": "15.25", "currency": "USD"}

Aggregation:

    from centsafe import aggregation

    aggregation.sum(prices)
    aggregation.median(prices)

Locale-aware input:

    from centsafe import parse

    parse("R$ 1.234,56", "pt-BR", "BRL")      # 1234.56 BRL

Rule engines:

    from centsafe.conditions import evaluate

    evaluate("money_gte", invoice_total, {"amount": "100.00", "currency": "USD"})

================================================================================
"""

import logging

from . import aggregation
from .aggregation import average, median, sum_or_zero
from .allocation import allocate, split
from .comparison import (
    compare,
    equals,
    greater_than,
    greater_than_or_equal,
    is_negative,
    is_positive,
    is_zero,
    less_than,
    less_than_or_equal,
)
from .conversion import minor_units_to_decimal, parse_decimal_to_minor_units
from .core import (
    Money,
    absolute,
    add,
    assert_all_same_currency,
    assert_same_currency,
    divide,
    from_major_units,
    from_minor_units,
    multiply,
    negate,
    of,
    of_rounded,
    percentage,
    subtract,
    zero,
)
from .currency import (
    ISO_4217_CURRENCIES,
    Currency,
    CurrencyRegistry,
    clear_custom_currencies,
    get_all_currencies,
    get_currency,
    get_default_registry,
    has_currency,
    register_currency,
    set_default_registry,
    unregister_currency,
)
from .diagnostics import Diagnostic, diagnostic_hook, set_diagnostic_hook
from .errors import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    MoneyError,
    ScaleMismatchError,
    UnknownCurrencyError,
)
from .parsing import format, format_amount, parse
from .rounding import RoundingMode, bankers_round, round_to_scale
from .serialization import (
    deserialize,
    from_database,
    from_json,
    serialize,
    to_database,
    to_decimal,
    to_json,
    to_major_units,
    to_major_units_string,
    to_minor_units,
    to_minor_units_bigint,
    to_minor_units_string,
)

__version__ = "1.0.0"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Value type
    "Money",
    "RoundingMode",
    # Factories
    "of",
    "of_rounded",
    "from_major_units",
    "from_minor_units",
    "zero",
    # Assertions
    "assert_same_currency",
    "assert_all_same_currency",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "percentage",
    "negate",
    "absolute",
    # Comparison
    "equals",
    "greater_than",
    "greater_than_or_equal",
    "less_than",
    "less_than_or_equal",
    "is_positive",
    "is_negative",
    "is_zero",
    "compare",
    # Allocation
    "allocate",
    "split",
    # Aggregation (sum/min/max live in centsafe.aggregation)
    "aggregation",
    "sum_or_zero",
    "average",
    "median",
    # Rounding and conversion
    "bankers_round",
    "round_to_scale",
    "parse_decimal_to_minor_units",
    "minor_units_to_decimal",
    # Serialization
    "to_json",
    "from_json",
    "to_database",
    "from_database",
    "serialize",
    "deserialize",
    "to_minor_units",
    "to_minor_units_bigint",
    "to_minor_units_string",
    "to_major_units",
    "to_major_units_string",
    "to_decimal",
    # Parsing and formatting
    "parse",
    "format",
    "format_amount",
    # Currency registry
    "Currency",
    "CurrencyRegistry",
    "ISO_4217_CURRENCIES",
    "get_currency",
    "has_currency",
    "register_currency",
    "unregister_currency",
    "get_all_currencies",
    "clear_custom_currencies",
    "get_default_registry",
    "set_default_registry",
    # Diagnostics
    "Diagnostic",
    "diagnostic_hook",
    "set_diagnostic_hook",
    # Errors
    "MoneyError",
    "CurrencyMismatchError",
    "ScaleMismatchError",
    "InvalidAmountError",
    "DivisionByZeroError",
    "UnknownCurrencyError",
    "AmountOverflowError",
]
