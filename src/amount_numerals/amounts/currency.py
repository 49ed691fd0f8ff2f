"""Currency metadata and placement of currency symbols around amounts."""

from __future__ import annotations

import re
from enum import IntEnum

from pydantic import BaseModel, ConfigDict

DEFAULT_CURRENCY_SYMBOL = "¤"


class CurrencyDisplaySymbol(IntEnum):
    NONE = 0
    SYMBOL = 1
    CODE = 2
    UNIT = 3
    NAME = 4


class CurrencyDisplayLocation(IntEnum):
    NONE = 0
    BEFORE_AMOUNT = 1
    AFTER_AMOUNT = 2


class CurrencyDisplayType(BaseModel):
    """Which currency text to show and on which side of the amount."""

    model_config = ConfigDict(frozen=True)

    symbol: CurrencyDisplaySymbol = CurrencyDisplaySymbol.SYMBOL
    location: CurrencyDisplayLocation = CurrencyDisplayLocation.BEFORE_AMOUNT
    separator: str = ""


class CurrencyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    symbol: str | None = None
    plural_symbol: str | None = None
    unit: str = ""
    fraction: int = 2


class CurrencyPrependAndAppendText(BaseModel):
    prepend_text: str | None = None
    append_text: str | None = None


ALL_CURRENCIES: dict[str, CurrencyInfo] = {
    info.code: info
    for info in (
        CurrencyInfo(code="USD", symbol="$", unit="Dollar"),
        CurrencyInfo(code="EUR", symbol="€", unit="Euro"),
        CurrencyInfo(code="GBP", symbol="£", unit="Pound"),
        CurrencyInfo(code="CHF", symbol="CHF", unit="Franc"),
        CurrencyInfo(code="JPY", symbol="¥", unit="Yen", fraction=0),
        CurrencyInfo(code="CNY", symbol="¥", unit="Yuan"),
        CurrencyInfo(code="INR", symbol="₹", unit="Rupee"),
        CurrencyInfo(code="RUB", symbol="₽", unit="Ruble"),
        CurrencyInfo(code="BRL", symbol="R$", unit="Real"),
        CurrencyInfo(code="MXN", symbol="MX$", unit="Peso"),
        CurrencyInfo(code="KRW", symbol="₩", unit="Won", fraction=0),
        CurrencyInfo(code="IRR", symbol="﷼", unit="Rial", fraction=0),
        CurrencyInfo(code="EGP", symbol="E£", unit="Pound"),
        CurrencyInfo(code="SAR", symbol="ر.س", unit="Riyal"),
        CurrencyInfo(code="MMK", symbol="K", plural_symbol="Ks", unit="Kyat"),
        CurrencyInfo(code="KWD", symbol="د.ك", unit="Dinar", fraction=3),
        CurrencyInfo(code="SEK", symbol="kr", unit="Krona"),
        CurrencyInfo(code="NOK", symbol="kr", unit="Krone"),
        CurrencyInfo(code="DKK", symbol="kr", unit="Krone"),
    )
}


def get_currency_fraction(currency_code: str | None) -> int | None:
    """Number of minor-unit digits for *currency_code* (2 for USD, 0 for JPY)."""
    if not currency_code:
        return None
    info = ALL_CURRENCIES.get(currency_code)
    return info.fraction if info else None


def get_amount_prepend_and_append_currency_symbol(
    display_type: CurrencyDisplayType | None,
    currency_code: str,
    currency_unit: str,
    currency_name: str,
    is_plural: bool,
) -> CurrencyPrependAndAppendText | None:
    if display_type is None:
        return None

    symbol = ""

    if display_type.symbol == CurrencyDisplaySymbol.SYMBOL:
        info = ALL_CURRENCIES.get(currency_code)
        if info and info.symbol:
            symbol = info.symbol
            if is_plural and info.plural_symbol:
                symbol = info.plural_symbol
        if not symbol:
            symbol = DEFAULT_CURRENCY_SYMBOL
    elif display_type.symbol == CurrencyDisplaySymbol.CODE:
        symbol = currency_code
    elif display_type.symbol == CurrencyDisplaySymbol.UNIT:
        symbol = currency_unit
    elif display_type.symbol == CurrencyDisplaySymbol.NAME:
        symbol = currency_name

    if display_type.location == CurrencyDisplayLocation.BEFORE_AMOUNT:
        return CurrencyPrependAndAppendText(prepend_text=symbol)
    if display_type.location == CurrencyDisplayLocation.AFTER_AMOUNT:
        return CurrencyPrependAndAppendText(append_text=symbol)
    return None


def append_currency_symbol(
    value: str,
    display_type: CurrencyDisplayType | None,
    currency_code: str,
    currency_unit: str = "",
    currency_name: str = "",
    is_plural: bool = False,
) -> str:
    """Place the currency symbol/code/unit/name before or after *value*."""
    texts = get_amount_prepend_and_append_currency_symbol(
        display_type, currency_code, currency_unit, currency_name, is_plural
    )
    if texts is None:
        return value

    separator = display_type.separator if display_type else ""
    result = value
    if texts.prepend_text:
        result = texts.prepend_text + separator + result
    if texts.append_text:
        result = result + separator + texts.append_text
    return result


def strip_currency(raw_string: str) -> tuple[str, str | None]:
    """Strip currency symbol/code from amount string. Returns (amount_str, currency_code)."""
    s = raw_string.strip()

    # ISO codes
    iso_match = re.match(r'^([A-Z]{3})\s*([^A-Z].*)$', s)
    if iso_match:
        return iso_match.group(2).strip(), iso_match.group(1)
    iso_match = re.match(r'^(.*[^A-Z])\s*([A-Z]{3})$', s)
    if iso_match:
        return iso_match.group(1).strip(), iso_match.group(2)

    # Shared symbols ("$", "kr") resolve to the first code in ALL_CURRENCIES
    for symbol, code in _SYMBOLS_LONGEST_FIRST:
        if s.startswith(symbol):
            return s[len(symbol):].strip(), code
        if s.endswith(symbol):
            return s[:-len(symbol)].strip(), code

    return s, None


_SYMBOLS_LONGEST_FIRST: list[tuple[str, str]] = sorted(
    ((info.symbol, code) for code, info in ALL_CURRENCIES.items() if info.symbol),
    key=lambda pair: len(pair[0]),
    reverse=True,
)
