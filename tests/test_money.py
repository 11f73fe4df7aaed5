"""
test_money.py — Test suite for the Money domain primitive

================================================================================
TEST STRUCTURE
================================================================================

1. UNIT TESTS
   Deterministic tests for specific cases and edge cases.

2. PROPERTY-BASED TESTS (Hypothesis)
   Properties that must hold for ANY input. Hypothesis generates
   thousands of random cases looking for a counterexample.

3. INVARIANT TESTS
   The invariants declared in core.py actually hold.

================================================================================
"""

import dataclasses
from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from centsafe import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    Money,
    ScaleMismatchError,
    UnknownCurrencyError,
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


# ==============================================================================
# TEST HELPERS
# ==============================================================================

@st.composite
def money_strategy(draw, currency=None, min_value=-10_000_00, max_value=10_000_00):
    """Random Money for property testing."""
    if currency is None:
        currency = draw(st.sampled_from(["EUR", "USD", "GBP"]))
    minor_units = draw(st.integers(min_value=min_value, max_value=max_value))
    return from_minor_units(minor_units, currency)


# ==============================================================================
# UNIT TESTS: Factories
# ==============================================================================

class TestFactories:

    def test_of_from_string(self):
        m = of("123.45", "USD")
        assert m.amount == 12345
        assert m.currency == "USD"
        assert m.scale == 2

    def test_of_from_int(self):
        assert of(100, "EUR").minor_units == 10000

    def test_of_from_decimal(self):
        assert of(Decimal("1.5"), "USD").amount == 150

    def test_of_lowercase_code(self):
        assert of("1", "usd").currency == "USD"

    def test_of_truncates_by_default(self):
        assert of("99.999", "EUR").amount == 9999

    def test_of_rounding_mode(self):
        assert of("1.005", "USD", "round").amount == 100
        assert of("1.015", "USD", "round").amount == 102

    def test_of_rounded(self):
        assert of_rounded("2.675", "USD").amount == 268

    def test_from_major_units_is_of(self):
        assert from_major_units("10.00", "USD") == of("10.00", "USD")

    def test_jpy_has_no_decimals(self):
        m = of(1000, "JPY")
        assert m.amount == 1000
        assert str(m) == "1000 JPY"

    def test_kwd_has_three_decimals(self):
        assert str(from_minor_units(1500, "KWD")) == "1.500 KWD"

    def test_zero(self):
        m = zero("EUR")
        assert m.is_zero()
        assert m.scale == 2

    def test_unknown_currency(self):
        with pytest.raises(UnknownCurrencyError):
            of("1.00", "XYZ")

    @pytest.mark.parametrize("bad", ["abc", "", "1,00", "1.2.3", True, None])
    def test_malformed_amount(self, bad):
        with pytest.raises(InvalidAmountError):
            of(bad, "USD")

    def test_non_finite_float(self):
        with pytest.raises(InvalidAmountError):
            of(float("inf"), "USD")


class TestFloatDiagnostics:

    def test_clean_float_is_silent(self, diagnostics):
        assert of(19.99, "USD").amount == 1999
        assert diagnostics == []

    def test_artifact_float_emits_diagnostic(self, diagnostics):
        m = of(0.1 + 0.2, "USD")
        assert m.amount == 30
        assert len(diagnostics) == 1
        assert diagnostics[0].code == "float_artifact"
        assert diagnostics[0].context["currency"] == "USD"

    def test_run_of_nines_emits_diagnostic(self, diagnostics):
        of(1.1999999, "USD")
        assert [d.code for d in diagnostics] == ["float_artifact"]

    def test_strings_never_emit(self, diagnostics):
        of("0.30000000000000004", "USD")
        assert diagnostics == []

    def test_integral_float_is_silent(self, diagnostics):
        of(100.0, "USD")
        assert diagnostics == []


class TestFromMinorUnits:

    def test_int(self):
        assert from_minor_units(12345, "USD").amount == 12345

    def test_integral_float(self):
        assert from_minor_units(100.0, "USD").amount == 100

    def test_integral_decimal(self):
        assert from_minor_units(Decimal("250"), "USD").amount == 250

    def test_integer_string(self):
        assert from_minor_units("-42", "USD").amount == -42

    def test_big_int_is_exact(self):
        big = 10 ** 30 + 1
        assert from_minor_units(big, "USD").amount == big

    @pytest.mark.parametrize("bad", [
        1.5, float("nan"), float("inf"), Decimal("1.5"), "1.5", "abc", True, None,
    ])
    def test_rejected(self, bad):
        with pytest.raises(InvalidAmountError):
            from_minor_units(bad, "USD")


# ==============================================================================
# UNIT TESTS: Construction and immutability
# ==============================================================================

class TestMoneyValue:

    def test_immutable(self):
        m = of("1.00", "USD")
        with pytest.raises(dataclasses.FrozenInstanceError):
            m.amount = 5

    def test_direct_construction_validates(self):
        with pytest.raises(InvalidAmountError):
            Money(1.5, "USD", 2)
        with pytest.raises(InvalidAmountError):
            Money(100, "", 2)
        with pytest.raises(InvalidAmountError):
            Money(100, "USD", -1)

    def test_str_and_repr(self):
        m = of("-0.05", "USD")
        assert str(m) == "-0.05 USD"
        assert repr(m) == "Money('-0.05 USD')"

    def test_hashable(self):
        assert len({of("1.00", "USD"), of("1", "USD"), of("1.00", "EUR")}) == 2

    def test_equality_includes_currency(self):
        assert of("1.00", "USD") != of("1.00", "EUR")

    def test_equality_with_other_types(self):
        assert of("1.00", "USD") != 100
        assert of("0", "USD") != 0


# ==============================================================================
# UNIT TESTS: Assertions
# ==============================================================================

class TestAssertions:

    def test_same_currency_passes(self):
        assert_same_currency(of("1", "USD"), of("2", "USD"))

    def test_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            assert_same_currency(of("1", "USD"), of("1", "EUR"))
        assert exc_info.value.currency_a == "USD"
        assert exc_info.value.currency_b == "EUR"

    def test_scale_mismatch_needs_direct_construction(self):
        a = of("1.00", "USD")
        b = Money(1000, "USD", 3)
        with pytest.raises(ScaleMismatchError) as exc_info:
            assert_same_currency(a, b)
        assert exc_info.value.scale_a == 2
        assert exc_info.value.scale_b == 3

    def test_all_same_currency_empty_and_single(self):
        assert_all_same_currency([])
        assert_all_same_currency([of("1", "USD")])

    def test_all_same_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            assert_all_same_currency([of("1", "USD"), of("1", "USD"), of("1", "GBP")])


# ==============================================================================
# UNIT TESTS: Arithmetic
# ==============================================================================

class TestArithmetic:

    def test_add(self):
        assert add(of("10.00", "USD"), of("5.25", "USD")).amount == 1525

    def test_subtract(self):
        assert subtract(of("10.00", "USD"), of("15.25", "USD")).amount == -525

    def test_add_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            add(of("1", "USD"), of("1", "EUR"))

    def test_add_requires_money(self):
        with pytest.raises(TypeError):
            add(of("1", "USD"), 100)

    def test_negate_and_absolute(self):
        m = of("-3.50", "USD")
        assert negate(m).amount == 350
        assert absolute(m).amount == 350
        assert absolute(negate(m)).amount == 350

    def test_multiply_by_int(self):
        assert multiply(of("33.33", "USD"), 3).amount == 9999

    def test_multiply_by_decimal_string(self):
        assert multiply(of("10.00", "USD"), "0.125").amount == 125

    def test_multiply_rounds_half_to_even(self):
        # 0.05 * 0.5 = 0.025 -> 0.02
        assert multiply(of("0.05", "USD"), "0.5").amount == 2
        # 0.15 * 0.5 = 0.075 -> 0.08
        assert multiply(of("0.15", "USD"), "0.5").amount == 8

    def test_multiply_by_float_reads_repr(self):
        assert multiply(of("100.00", "USD"), 1.1).amount == 11000

    def test_multiply_negative(self):
        assert multiply(of("10.00", "USD"), -2).amount == -2000

    def test_divide(self):
        assert divide(of("10.00", "USD"), 3).amount == 333

    def test_divide_half_to_even(self):
        # 0.05 / 2 = 0.025 -> 0.02, 0.07 / 2 = 0.035 -> 0.04
        assert divide(of("0.05", "USD"), 2).amount == 2
        assert divide(of("0.07", "USD"), 2).amount == 4

    def test_divide_by_fraction(self):
        assert divide(of("1.00", "USD"), "0.25").amount == 400

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            divide(of("10.00", "USD"), 0)
        with pytest.raises(DivisionByZeroError):
            divide(of("10.00", "USD"), "0.0000000000000000001")

    def test_percentage(self):
        assert percentage(of("200", "EUR"), "7.5").amount == 1500
        assert percentage(of("100.00", "USD"), 15).amount == 1500

    def test_percentage_rounds_half_to_even(self):
        # 12.5% of 0.20 = 0.025 -> 0.02
        assert percentage(of("0.20", "USD"), "12.5").amount == 2

    def test_jpy_multiply(self):
        assert multiply(of("100", "JPY"), "1.5").amount == 150

    def test_invalid_factor(self):
        with pytest.raises(InvalidAmountError):
            multiply(of("1", "USD"), "abc")


class TestOperators:

    def test_plus_minus(self):
        a, b = of("10.00", "USD"), of("2.50", "USD")
        assert (a + b).amount == 1250
        assert (a - b).amount == 750
        assert (-a).amount == -1000
        assert abs(-a) == a

    def test_mul_and_rmul(self):
        m = of("33.33", "USD")
        assert m * 3 == 3 * m
        assert (m * 3).amount == 9999

    def test_truediv(self):
        assert (of("10.00", "USD") / 3).amount == 333

    def test_money_plus_number_is_refused(self):
        with pytest.raises(TypeError):
            of("1", "USD") + 1
        with pytest.raises(TypeError):
            of("1", "USD") - 1

    def test_money_times_money_is_refused(self):
        with pytest.raises(TypeError):
            of("1", "USD") * of("2", "USD")
        with pytest.raises(TypeError):
            of("1", "USD") / of("2", "USD")

    def test_ordering(self):
        a, b = of("1.00", "USD"), of("2.00", "USD")
        assert a < b <= b
        assert b > a >= a
        assert sorted([b, a]) == [a, b]

    def test_ordering_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            of("1", "USD") < of("1", "EUR")

    def test_ordering_with_number(self):
        with pytest.raises(TypeError):
            of("1", "USD") < 5

    def test_sign_helpers(self):
        assert of("0.01", "USD").is_positive()
        assert of("-0.01", "USD").is_negative()
        assert of("0", "USD").is_zero()


# ==============================================================================
# PROPERTY-BASED TESTS
# ==============================================================================

class TestArithmeticProperties:

    @given(
        a=money_strategy(currency="EUR"),
        b=money_strategy(currency="EUR"),
    )
    @settings(max_examples=500)
    def test_add_subtract_inverse(self, a, b):
        assert subtract(add(a, b), b) == a

    @given(
        a=money_strategy(currency="EUR"),
        b=money_strategy(currency="EUR"),
    )
    @settings(max_examples=500)
    def test_add_commutative(self, a, b):
        assert a + b == b + a

    @given(a=money_strategy(currency="EUR"))
    @settings(max_examples=200)
    def test_double_negation(self, a):
        assert -(-a) == a

    @given(
        a=money_strategy(currency="USD"),
        n=st.integers(min_value=-1000, max_value=1000),
    )
    @settings(max_examples=300)
    def test_multiply_by_int_is_exact(self, a, n):
        assert multiply(a, n).amount == a.amount * n

    @given(
        a=money_strategy(currency="USD"),
        n=st.integers(min_value=1, max_value=1000),
    )
    @settings(max_examples=300)
    def test_multiply_then_divide_roundtrips(self, a, n):
        assert divide(multiply(a, n), n) == a

    @given(a=money_strategy())
    @settings(max_examples=200)
    def test_percentage_100_is_identity(self, a):
        assert percentage(a, 100) == a
