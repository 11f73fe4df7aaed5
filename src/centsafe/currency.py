"""
currency.py — Currency metadata and registry

================================================================================
ISO 4217
================================================================================

ISO 4217 defines, per currency:
- Alphabetic code (EUR, USD, ...)
- Numeric code (978, 840, ...)
- Minor unit (number of decimals)

The decimals are what matter here: they are the *scale* of every Money in
that currency (USD=2, JPY=0, KWD=3, CLF=4).

================================================================================
REGISTRY
================================================================================

`CurrencyRegistry` resolves codes case-insensitively: custom registrations
first, then the static ISO table. One process-wide default instance backs the
module-level functions; tests and multi-tenant hosts can build their own and
pass it explicitly (``of("1.00", "TST", registry=my_registry)``).

The override map is plain mutable state and is not locked. Register custom
currencies at startup, or synchronize externally.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import logging

from .errors import InvalidAmountError, UnknownCurrencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Currency:
    """Currency metadata. ``decimal_places`` is the scale of its Money values."""
    code: str
    numeric_code: int
    name: str
    decimal_places: int
    symbol: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidAmountError("Currency code must be a non-empty string")
        if (
            not isinstance(self.decimal_places, int)
            or isinstance(self.decimal_places, bool)
            or self.decimal_places < 0
        ):
            raise InvalidAmountError(
                f"decimal_places must be a non-negative int, got {self.decimal_places!r}"
            )
        object.__setattr__(self, "code", self.code.strip().upper())

    @property
    def multiplier(self) -> int:
        """Conversion factor major -> minor unit."""
        return 10 ** self.decimal_places


def _iso(code: str, numeric: int, name: str, decimals: int, symbol: Optional[str]) -> tuple[str, Currency]:
    return code, Currency(code, numeric, name, decimals, symbol)


ISO_4217_CURRENCIES: Mapping[str, Currency] = dict([
    # Americas
    _iso("USD", 840, "US Dollar", 2, "$"),
    _iso("CAD", 124, "Canadian Dollar", 2, "CA$"),
    _iso("MXN", 484, "Mexican Peso", 2, "MX$"),
    _iso("BRL", 986, "Brazilian Real", 2, "R$"),
    _iso("ARS", 32, "Argentine Peso", 2, "$"),
    _iso("CLP", 152, "Chilean Peso", 0, "$"),
    _iso("CLF", 990, "Unidad de Fomento", 4, "UF"),
    _iso("COP", 170, "Colombian Peso", 2, "$"),
    _iso("PEN", 604, "Sol", 2, "S/"),
    _iso("UYU", 858, "Peso Uruguayo", 2, "$U"),
    _iso("PYG", 600, "Guarani", 0, "₲"),
    _iso("BOB", 68, "Boliviano", 2, "Bs"),
    # Europe
    _iso("EUR", 978, "Euro", 2, "€"),
    _iso("GBP", 826, "Pound Sterling", 2, "£"),
    _iso("CHF", 756, "Swiss Franc", 2, "CHF"),
    _iso("SEK", 752, "Swedish Krona", 2, "kr"),
    _iso("NOK", 578, "Norwegian Krone", 2, "kr"),
    _iso("DKK", 208, "Danish Krone", 2, "kr."),
    _iso("ISK", 352, "Iceland Krona", 0, "kr"),
    _iso("PLN", 985, "Zloty", 2, "zł"),
    _iso("CZK", 203, "Czech Koruna", 2, "Kč"),
    _iso("HUF", 348, "Forint", 2, "Ft"),
    _iso("RON", 946, "Romanian Leu", 2, "lei"),
    _iso("BGN", 975, "Bulgarian Lev", 2, "лв"),
    _iso("RSD", 941, "Serbian Dinar", 2, "дин."),
    _iso("UAH", 980, "Hryvnia", 2, "₴"),
    _iso("RUB", 643, "Russian Ruble", 2, "₽"),
    _iso("TRY", 949, "Turkish Lira", 2, "₺"),
    # Asia / Pacific
    _iso("JPY", 392, "Yen", 0, "¥"),
    _iso("CNY", 156, "Yuan Renminbi", 2, "CN¥"),
    _iso("HKD", 344, "Hong Kong Dollar", 2, "HK$"),
    _iso("TWD", 901, "New Taiwan Dollar", 2, "NT$"),
    _iso("KRW", 410, "Won", 0, "₩"),
    _iso("SGD", 702, "Singapore Dollar", 2, "S$"),
    _iso("INR", 356, "Indian Rupee", 2, "₹"),
    _iso("IDR", 360, "Rupiah", 2, "Rp"),
    _iso("THB", 764, "Baht", 2, "฿"),
    _iso("VND", 704, "Dong", 0, "₫"),
    _iso("PHP", 608, "Philippine Peso", 2, "₱"),
    _iso("MYR", 458, "Malaysian Ringgit", 2, "RM"),
    _iso("PKR", 586, "Pakistan Rupee", 2, "Rs"),
    _iso("AUD", 36, "Australian Dollar", 2, "A$"),
    _iso("NZD", 554, "New Zealand Dollar", 2, "NZ$"),
    # Middle East / Africa
    _iso("AED", 784, "UAE Dirham", 2, "د.إ"),
    _iso("SAR", 682, "Saudi Riyal", 2, "﷼"),
    _iso("ILS", 376, "New Israeli Sheqel", 2, "₪"),
    _iso("KWD", 414, "Kuwaiti Dinar", 3, "KD"),
    _iso("BHD", 48, "Bahraini Dinar", 3, "BD"),
    _iso("OMR", 512, "Rial Omani", 3, "﷼"),
    _iso("JOD", 400, "Jordanian Dinar", 3, "JD"),
    _iso("IQD", 368, "Iraqi Dinar", 3, "ع.د"),
    _iso("LYD", 434, "Libyan Dinar", 3, "LD"),
    _iso("TND", 788, "Tunisian Dinar", 3, "DT"),
    _iso("EGP", 818, "Egyptian Pound", 2, "E£"),
    _iso("MAD", 504, "Moroccan Dirham", 2, "MAD"),
    _iso("ZAR", 710, "Rand", 2, "R"),
    _iso("NGN", 566, "Naira", 2, "₦"),
    _iso("KES", 404, "Kenyan Shilling", 2, "KSh"),
    _iso("UGX", 800, "Uganda Shilling", 0, "USh"),
    _iso("XAF", 950, "CFA Franc BEAC", 0, "FCFA"),
    _iso("XOF", 952, "CFA Franc BCEAO", 0, "CFA"),
])


class CurrencyRegistry:
    """
    Code -> Currency lookup: custom overrides on top of a static table.

    PROPERTIES:
    - Case-insensitive: "usd" and "USD" resolve to the same entry
    - Overrides win over the static table
    - The static table is never mutated
    """

    def __init__(self, table: Optional[Mapping[str, Currency]] = None):
        self._table: Mapping[str, Currency] = ISO_4217_CURRENCIES if table is None else table
        self._overrides: dict[str, Currency] = {}

    @staticmethod
    def _normalize(code: str) -> str:
        if not isinstance(code, str):
            raise UnknownCurrencyError(str(code))
        return code.strip().upper()

    def get(self, code: str) -> Currency:
        """
        Resolve a currency code.

        Raises:
            UnknownCurrencyError: if the code is neither registered nor ISO
        """
        key = self._normalize(code)
        currency = self._overrides.get(key) or self._table.get(key)
        if currency is None:
            raise UnknownCurrencyError(key)
        return currency

    def has(self, code: str) -> bool:
        try:
            self.get(code)
        except UnknownCurrencyError:
            return False
        return True

    def register(self, currency: Currency) -> Currency:
        """Add or overwrite a custom currency."""
        if not isinstance(currency, Currency):
            raise TypeError(
                f"register() expects a Currency, got {type(currency).__name__}"
            )
        self._overrides[currency.code] = currency
        logger.debug(
            "Registered currency %s (decimal_places=%d)",
            currency.code, currency.decimal_places,
        )
        return currency

    def unregister(self, code: str) -> bool:
        """Remove a custom currency. Static entries cannot be removed."""
        removed = self._overrides.pop(self._normalize(code), None)
        if removed is not None:
            logger.debug("Unregistered currency %s", removed.code)
        return removed is not None

    def all(self) -> dict[str, Currency]:
        """Static table merged with overrides (overrides win)."""
        merged = dict(self._table)
        merged.update(self._overrides)
        return merged

    def clear(self) -> None:
        """Drop every custom registration."""
        self._overrides.clear()
        logger.debug("Cleared custom currencies")

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.has(code)

    def __repr__(self) -> str:
        return f"CurrencyRegistry(static={len(self._table)}, custom={len(self._overrides)})"


# ==============================================================================
# PROCESS-WIDE DEFAULT
# ==============================================================================

_default_registry = CurrencyRegistry()


def get_default_registry() -> CurrencyRegistry:
    return _default_registry


def set_default_registry(registry: CurrencyRegistry) -> CurrencyRegistry:
    """Replace the process-wide registry. Returns the previous one."""
    global _default_registry
    previous = _default_registry
    _default_registry = registry
    return previous


def resolve_registry(registry: Optional[CurrencyRegistry]) -> CurrencyRegistry:
    return _default_registry if registry is None else registry


def get_currency(code: str) -> Currency:
    return _default_registry.get(code)


def has_currency(code: str) -> bool:
    return _default_registry.has(code)


def register_currency(currency: Currency) -> Currency:
    return _default_registry.register(currency)


def unregister_currency(code: str) -> bool:
    return _default_registry.unregister(code)


def get_all_currencies() -> dict[str, Currency]:
    return _default_registry.all()


def clear_custom_currencies() -> None:
    _default_registry.clear()
