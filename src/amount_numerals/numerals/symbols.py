"""Decimal separator and digit grouping symbol registries."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum

from amount_numerals.numerals.registry import build_index

LANGUAGE_DEFAULT_TYPE = 0


class DecimalSeparator(IntEnum):
    """Glyph between the integer and fractional part of an amount."""

    DOT = 1, "Dot", "."
    COMMA = 2, "Comma", ","

    DEFAULT = DOT

    def __new__(cls, type_id: int, type_name: str, symbol: str):
        obj = int.__new__(cls, type_id)
        obj._value_ = type_id
        obj.type_name = type_name
        obj.symbol = symbol
        return obj

    @property
    def type_id(self) -> int:
        return self._value_

    @classmethod
    def values(cls) -> list[DecimalSeparator]:
        return list(cls)

    @classmethod
    def value_of(cls, type_id: int) -> DecimalSeparator | None:
        return cls._value2member_map_.get(type_id)

    @classmethod
    def parse(cls, type_name: str) -> DecimalSeparator | None:
        return _DECIMAL_SEPARATORS_BY_NAME.get(type_name)

    @classmethod
    def from_symbol(cls, symbol: str) -> DecimalSeparator | None:
        return _DECIMAL_SEPARATORS_BY_SYMBOL.get(symbol)


class DigitGroupingSymbol(IntEnum):
    """Glyph inserted between digit groups of the integer part."""

    DOT = 1, "Dot", "."
    COMMA = 2, "Comma", ","
    SPACE = 3, "Space", " "
    APOSTROPHE = 4, "Apostrophe", "'"

    DEFAULT = COMMA

    def __new__(cls, type_id: int, type_name: str, symbol: str):
        obj = int.__new__(cls, type_id)
        obj._value_ = type_id
        obj.type_name = type_name
        obj.symbol = symbol
        return obj

    @property
    def type_id(self) -> int:
        return self._value_

    @classmethod
    def values(cls) -> list[DigitGroupingSymbol]:
        return list(cls)

    @classmethod
    def value_of(cls, type_id: int) -> DigitGroupingSymbol | None:
        return cls._value2member_map_.get(type_id)

    @classmethod
    def parse(cls, type_name: str) -> DigitGroupingSymbol | None:
        return _GROUPING_SYMBOLS_BY_NAME.get(type_name)

    @classmethod
    def from_symbol(cls, symbol: str) -> DigitGroupingSymbol | None:
        return _GROUPING_SYMBOLS_BY_SYMBOL.get(symbol)


_DECIMAL_SEPARATORS_BY_NAME: Mapping[str, DecimalSeparator] = build_index(
    DecimalSeparator, lambda s: s.type_name, "decimal separator name"
)
_DECIMAL_SEPARATORS_BY_SYMBOL: Mapping[str, DecimalSeparator] = build_index(
    DecimalSeparator, lambda s: s.symbol, "decimal separator symbol"
)
_GROUPING_SYMBOLS_BY_NAME: Mapping[str, DigitGroupingSymbol] = build_index(
    DigitGroupingSymbol, lambda s: s.type_name, "digit grouping symbol name"
)
_GROUPING_SYMBOLS_BY_SYMBOL: Mapping[str, DigitGroupingSymbol] = build_index(
    DigitGroupingSymbol, lambda s: s.symbol, "digit grouping symbol"
)
