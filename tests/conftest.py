"""
conftest.py — Shared fixtures

Every test starts from the pristine ISO table: custom currencies and the
diagnostic hook are reset around each test.
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from centsafe import Currency, CurrencyRegistry, clear_custom_currencies
from centsafe.diagnostics import set_diagnostic_hook


@pytest.fixture(autouse=True)
def _reset_global_state():
    clear_custom_currencies()
    previous = set_diagnostic_hook(None)
    yield
    clear_custom_currencies()
    set_diagnostic_hook(previous)


@pytest.fixture
def isolated_registry():
    """A private registry with one custom token (TST, 4 decimals)."""
    registry = CurrencyRegistry()
    registry.register(Currency("TST", 0, "Test Token", 4, "T$"))
    return registry


@pytest.fixture
def diagnostics():
    """Collects every Diagnostic emitted during the test."""
    seen = []
    set_diagnostic_hook(seen.append)
    return seen
