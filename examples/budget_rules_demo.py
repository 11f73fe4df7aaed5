#!/usr/bin/env python3
"""
budget_rules_demo.py — Free-text input and money rules

Expense lines arrive as text typed by people in different countries. Each
line is parsed for its locale and checked against a budget rule; anything
suspicious goes through the diagnostic hook instead of being printed by the
library.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from centsafe import InvalidAmountError, diagnostic_hook, format, of, parse, to_json
from centsafe.conditions import evaluate
from centsafe.diagnostics import configure_logging


EXPENSES = [
    ("Hotel Lisboa", "1.234,56 €", "pt-PT", "EUR"),
    ("Taxi Sao Paulo", "R$ 87,40", "pt-BR", "BRL"),
    ("Conference NYC", "$2,499.00", "en-US", "USD"),
    ("Refund NYC", "($150.00)", "en-US", "USD"),
    ("Typo", "1.234.56", "en-US", "USD"),
]

LIMITS = {
    "EUR": {"amount": "1000.00", "currency": "EUR"},
    "BRL": {"amount": "500.00", "currency": "BRL"},
    "USD": {"amount": "2500.00", "currency": "USD"},
}


def review_expenses():
    print("=" * 60)
    print("EXPENSE REVIEW")
    print("=" * 60)
    print()

    for label, text, locale, currency in EXPENSES:
        try:
            amount = parse(text, locale, currency)
        except InvalidAmountError as exc:
            print(f"  {label:16s} REJECTED: {exc}")
            continue

        result = evaluate("money_lte", amount, LIMITS[currency], field=label)
        status = "OK  " if result.passed else "OVER"
        print(f"  {status} {format(amount, locale):>14s}  {result.reason}")
    print()


def show_diagnostics():
    print("=" * 60)
    print("DIAGNOSTICS")
    print("=" * 60)
    print()

    seen = []
    with diagnostic_hook(seen.append):
        legacy_total = 0.1 + 0.2
        amount = of(legacy_total, "USD")

    print(f"Legacy float: {legacy_total!r}")
    print(f"As Money:     {amount} -> {to_json(amount)}")
    for diagnostic in seen:
        print(f"Hook got:     {diagnostic.code}: {diagnostic.message}")
    print()


if __name__ == "__main__":
    configure_logging(logging.INFO)
    review_expenses()
    show_diagnostics()
