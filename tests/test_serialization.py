"""
test_serialization.py — JSON, database and compact string shapes
"""

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from centsafe import (
    AmountOverflowError,
    InvalidAmountError,
    UnknownCurrencyError,
    deserialize,
    from_database,
    from_json,
    from_minor_units,
    of,
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
from centsafe.serialization import MAX_SAFE_INTEGER


# ==============================================================================
# UNIT TESTS: JSON / database
# ==============================================================================

class TestJson:

    def test_to_json(self):
        assert to_json(of("123.45", "USD")) == {"amount": "123.45", "currency": "USD"}

    def test_to_json_is_json_serializable(self):
        text = json.dumps(to_json(of("-0.05", "EUR")))
        assert json.loads(text) == {"amount": "-0.05", "currency": "EUR"}

    def test_to_json_zero_decimals(self):
        assert to_json(of("1000", "JPY"))["amount"] == "1000"

    def test_from_json(self):
        assert from_json({"amount": "123.45", "currency": "USD"}) == of("123.45", "USD")

    def test_from_json_takes_scale_from_registry(self):
        m = from_json({"amount": "1.5", "currency": "USD"})
        assert m.amount == 150
        assert m.scale == 2

    def test_from_json_truncates_extra_digits(self):
        assert from_json({"amount": "1.239", "currency": "USD"}).amount == 123

    def test_from_json_with_registry(self, isolated_registry):
        m = from_json({"amount": "1.0001", "currency": "TST"}, registry=isolated_registry)
        assert m.amount == 10001

    @pytest.mark.parametrize("payload", [
        {"amount": 123.45, "currency": "USD"},
        {"amount": "12,34", "currency": "USD"},
        {"amount": "1e5", "currency": "USD"},
        {"amount": "10.00", "currency": "usd"},
        {"amount": "10.00", "currency": "US"},
        {"amount": "10.00"},
        {"currency": "USD"},
        "10.00 USD",
        None,
    ])
    def test_from_json_invalid(self, payload):
        with pytest.raises(InvalidAmountError):
            from_json(payload)

    def test_from_json_unknown_currency(self):
        with pytest.raises(UnknownCurrencyError):
            from_json({"amount": "1.00", "currency": "XYZ"})

    def test_database_shape(self):
        m = of("99.90", "BRL")
        row = to_database(m)
        assert row == {"amount": "99.90", "currency": "BRL"}
        assert from_database(row) == m

    def test_from_database_invalid(self):
        with pytest.raises(InvalidAmountError):
            from_database({"amount": None, "currency": "BRL"})


# ==============================================================================
# UNIT TESTS: Compact string
# ==============================================================================

class TestCompactString:

    def test_serialize(self):
        assert serialize(of("123.45", "USD")) == "123.45 USD"
        assert serialize(of("1.5", "KWD")) == "1.500 KWD"

    def test_deserialize(self):
        assert deserialize("123.45 USD") == of("123.45", "USD")

    def test_deserialize_tolerates_extra_whitespace(self):
        assert deserialize("  -7.10   EUR ") == of("-7.10", "EUR")

    def test_deserialize_lowercase_code(self):
        assert deserialize("5 jpy") == of("5", "JPY")

    @pytest.mark.parametrize("text", ["123.45", "123.45 USD extra", "", "USD"])
    def test_deserialize_wrong_token_count(self, text):
        with pytest.raises(InvalidAmountError):
            deserialize(text)

    def test_deserialize_bad_amount(self):
        with pytest.raises(InvalidAmountError):
            deserialize("abc USD")

    def test_deserialize_non_string(self):
        with pytest.raises(InvalidAmountError):
            deserialize(12345)


# ==============================================================================
# UNIT TESTS: Unit exports
# ==============================================================================

class TestUnitExports:

    def test_to_minor_units(self):
        assert to_minor_units(of("123.45", "USD")) == 12345

    def test_to_minor_units_at_limit(self):
        assert to_minor_units(from_minor_units(MAX_SAFE_INTEGER, "USD")) == MAX_SAFE_INTEGER
        assert to_minor_units(from_minor_units(-MAX_SAFE_INTEGER, "USD")) == -MAX_SAFE_INTEGER

    def test_to_minor_units_overflow(self):
        with pytest.raises(AmountOverflowError) as exc_info:
            to_minor_units(from_minor_units(MAX_SAFE_INTEGER + 1, "USD"))
        assert exc_info.value.limit == MAX_SAFE_INTEGER

    def test_overflow_is_an_overflow_error(self):
        with pytest.raises(OverflowError):
            to_minor_units(from_minor_units(-(MAX_SAFE_INTEGER + 1), "USD"))

    def test_bigint_and_string_are_unbounded(self):
        big = from_minor_units(10 ** 30, "USD")
        assert to_minor_units_bigint(big) == 10 ** 30
        assert to_minor_units_string(big) == "1" + "0" * 30

    def test_to_major_units_string(self):
        assert to_major_units_string(of("-0.05", "USD")) == "-0.05"
        assert to_decimal(of("1000", "JPY")) == "1000"

    def test_to_major_units_is_lossy_and_reported(self, diagnostics):
        assert to_major_units(of("123.45", "USD")) == 123.45
        assert [d.code for d in diagnostics] == ["lossy_conversion"]
        assert diagnostics[0].context["currency"] == "USD"


# ==============================================================================
# PROPERTY-BASED TESTS
# ==============================================================================

class TestSerializationProperties:

    @given(
        minor=st.integers(min_value=-10**18, max_value=10**18),
        currency=st.sampled_from(["USD", "JPY", "KWD", "CLF", "EUR"]),
    )
    @settings(max_examples=500)
    def test_json_round_trip(self, minor, currency):
        m = from_minor_units(minor, currency)
        assert from_json(to_json(m)) == m

    @given(
        minor=st.integers(min_value=-10**18, max_value=10**18),
        currency=st.sampled_from(["USD", "JPY", "KWD"]),
    )
    @settings(max_examples=500)
    def test_compact_round_trip(self, minor, currency):
        m = from_minor_units(minor, currency)
        assert deserialize(serialize(m)) == m
