"""
parsing.py — Locale-aware parsing and minimal formatting

Separators come from CLDR data through Babel, so "1.234,56" means 1234.56 in
pt-BR and is rejected in en-US (two decimal points).

    parse("R$ 1.234,56", "pt-BR", "BRL")   -> 1234.56 BRL
    parse("($1,234.56)", "en-US", "USD")   -> -1234.56 USD
    format(of("1234.56", "BRL"), "pt-BR")  -> "R$1.234,56"

Formatting is intentionally minimal: one fixed pattern per locale, the
currency's scale as fraction digits. Both directions go through Decimal
built from the exact decimal string, never through float.
"""

from __future__ import annotations
from decimal import Decimal, localcontext
from typing import Optional, Union
import re

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    format_currency,
    format_decimal,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
)

from .conversion import minor_units_to_decimal
from .core import Money, of
from .currency import CurrencyRegistry, resolve_registry
from .errors import InvalidAmountError

DEFAULT_LOCALE = "en-US"

_ASCII_DIGITS = "0123456789"


def _load_locale(locale: Union[str, Locale]) -> Locale:
    if isinstance(locale, Locale):
        return locale
    try:
        return Locale.parse(str(locale).replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise InvalidAmountError(f"Unknown locale: {locale!r}") from exc


def parse(
    formatted: str,
    locale: Union[str, Locale],
    currency: str,
    *,
    registry: Optional[CurrencyRegistry] = None,
) -> Money:
    """
    Parse a locale-formatted amount ("$1,234.56", "R$ 1.234,56", "(€5.00)").

    Negative amounts are recognized by a leading minus sign or by
    parentheses around the whole text.

    Raises:
        InvalidAmountError: unknown locale, more than one decimal separator,
            or no parsable amount
        UnknownCurrencyError: if the currency is not registered
    """
    if not isinstance(formatted, str):
        raise InvalidAmountError(f"Expected a string, got {type(formatted).__name__}")

    loc = _load_locale(locale)
    info = resolve_registry(registry).get(currency)
    decimal_sep = get_decimal_symbol(loc)
    group_sep = get_group_symbol(loc)
    minus_sign = get_minus_sign_symbol(loc)

    text = formatted.strip()
    wrapped = text.startswith("(") and text.endswith(")")

    if minus_sign != "-":
        text = text.replace(minus_sign, "-")
    text = text.replace("−", "-")
    if info.symbol:
        text = text.replace(info.symbol, "")
    text = re.sub(re.escape(info.code), "", text, flags=re.IGNORECASE)

    kept = {decimal_sep, group_sep, "-"}
    cleaned = "".join(ch for ch in text if ch in _ASCII_DIGITS or ch in kept)
    negative = wrapped or cleaned.startswith("-")

    if cleaned.count(decimal_sep) > 1:
        raise InvalidAmountError(
            f"Invalid amount {formatted!r} for locale {loc}: "
            f"more than one decimal separator {decimal_sep!r}"
        )

    normalized = (
        cleaned.replace(group_sep, "")
        .replace(decimal_sep, ".")
        .replace("-", "")
    )
    if negative:
        normalized = f"-{normalized}"

    return of(normalized, info.code, registry=registry)


def format(
    money: Money,
    locale: Union[str, Locale] = DEFAULT_LOCALE,
    *,
    hide_symbol: bool = False,
) -> str:
    """Render with the locale's separators and the currency's scale."""
    loc = _load_locale(locale)
    text = minor_units_to_decimal(money.amount, money.scale)
    pattern = "#,##0" + ("." + "0" * money.scale if money.scale else "")

    with localcontext() as ctx:
        ctx.prec = len(text) + 10
        value = Decimal(text)
        if hide_symbol:
            return format_decimal(value, format=pattern, locale=loc)
        return format_currency(
            value,
            money.currency,
            format="¤" + pattern,
            locale=loc,
            currency_digits=False,
        )


def format_amount(money: Money, locale: Union[str, Locale] = DEFAULT_LOCALE) -> str:
    """format() without the currency symbol."""
    return format(money, locale, hide_symbol=True)
