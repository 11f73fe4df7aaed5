#!/usr/bin/env python3
"""
split_bill.py — Splitting a shared bill without losing a cent

================================================================================
THE BUG
================================================================================

    >>> 100.0 / 3 * 3
    100.0
    >>> round(100.0 / 3, 2) * 3
    99.99

Rounding every share on its own loses a cent. Do it a few thousand times a
day and the books no longer balance.

================================================================================
THE FIX
================================================================================

Allocate in integer minor units with the Largest Remainder Method: the
shares ALWAYS add up to the bill.

    from centsafe import of, allocate

    allocate(of("100.00", "USD"), [1, 1, 1])   # [33.34, 33.33, 33.33]

================================================================================
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from centsafe import (
    aggregation,
    allocate,
    average,
    median,
    of,
    percentage,
    serialize,
    split,
    to_json,
)


def demonstrate_bug():
    """Rounding each share independently."""
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    print()
    share = round(100.0 / 3, 2)
    print(f"Each share:  {share}")
    print(f"Three times: {share * 3}")
    print()


def demonstrate_split():
    """Equal and weighted splits."""
    print("=" * 60)
    print("EQUAL SPLIT")
    print("=" * 60)
    print()

    bill = of("100.00", "USD")
    tip = percentage(bill, 15)
    total = bill + tip
    shares = split(total, 3)

    print(f"Bill:  {bill}")
    print(f"Tip:   {tip}")
    print(f"Total: {total}")
    for i, share in enumerate(shares, 1):
        print(f"  Guest {i}: {share}")
    print(f"Sum of shares: {aggregation.sum(shares)}")
    print()

    print("=" * 60)
    print("WEIGHTED SPLIT (by what each guest ordered)")
    print("=" * 60)
    print()

    ordered = [of("42.50", "USD"), of("31.20", "USD"), of("26.30", "USD")]
    weights = [o.amount for o in ordered]
    shares = allocate(total, weights)
    for i, (o, share) in enumerate(zip(ordered, shares), 1):
        print(f"  Guest {i}: ordered {o}, pays {share}")
    print(f"Sum of shares: {aggregation.sum(shares)}")
    print()


def demonstrate_statistics():
    """Central tendency without floats."""
    print("=" * 60)
    print("STATISTICS")
    print("=" * 60)
    print()

    tabs = [of(v, "EUR") for v in ["12.00", "8.75", "15.10", "9.99"]]
    print(f"Cheapest: {aggregation.min(tabs)}")
    print(f"Dearest:  {aggregation.max(tabs)}")
    print(f"Average:  {average(tabs)}")
    print(f"Median:   {median(tabs)}")
    print()

    print("Exchange shapes:")
    print(f"  JSON:    {to_json(tabs[0])}")
    print(f"  Compact: {serialize(tabs[0])!r}")
    print()


if __name__ == "__main__":
    demonstrate_bug()
    demonstrate_split()
    demonstrate_statistics()
