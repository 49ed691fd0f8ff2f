"""Digit grouping algorithms for the integer part of an amount.

The grouping functions take the integer digits only, most significant first.
Sign and fractional part are the caller's business.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import IntEnum

from amount_numerals.numerals.registry import build_index

LANGUAGE_DEFAULT_TYPE = 0


def group_none(digits: Sequence[str], grouping_symbol: str = "") -> str:
    return "".join(digits)


def group_thousands(digits: Sequence[str], grouping_symbol: str) -> str:
    """Insert *grouping_symbol* every 3 digits from the right: ``123,456``."""
    if len(digits) <= 3:
        return "".join(digits)

    parts: list[str] = []
    for position, digit in enumerate(reversed(digits)):
        if position > 0 and position % 3 == 0:
            parts.append(grouping_symbol)
        parts.append(digit)
    return "".join(reversed(parts))


def group_indian(digits: Sequence[str], grouping_symbol: str) -> str:
    """Lakh/crore grouping: last 3 digits, then pairs: ``12,34,567``."""
    if len(digits) <= 3:
        return "".join(digits)

    parts: list[str] = []
    for position, digit in enumerate(reversed(digits)):
        if position == 3 or (position > 3 and (position - 3) % 2 == 0):
            parts.append(grouping_symbol)
        parts.append(digit)
    return "".join(reversed(parts))


class DigitGroupingType(IntEnum):
    """How the integer digits of an amount are grouped."""

    NONE = 1, "None", "None", False
    THOUSANDS_SEPARATOR = 2, "ThousandsSeparator", "Thousands Separator", True
    INDIAN_NUMBER_GROUPING = 3, "IndianNumberGrouping", "Indian Number Grouping", True

    DEFAULT = THOUSANDS_SEPARATOR

    def __new__(cls, type_id: int, type_name: str, display_name: str, enabled: bool):
        obj = int.__new__(cls, type_id)
        obj._value_ = type_id
        obj.type_name = type_name
        obj.display_name = display_name
        obj.enabled = enabled
        return obj

    @property
    def type_id(self) -> int:
        return self._value_

    def format(self, digits: Sequence[str], grouping_symbol: str) -> str:
        if self is DigitGroupingType.THOUSANDS_SEPARATOR:
            return group_thousands(digits, grouping_symbol)
        if self is DigitGroupingType.INDIAN_NUMBER_GROUPING:
            return group_indian(digits, grouping_symbol)
        return group_none(digits, grouping_symbol)

    @classmethod
    def values(cls) -> list[DigitGroupingType]:
        return list(cls)

    @classmethod
    def value_of(cls, type_id: int) -> DigitGroupingType | None:
        return cls._value2member_map_.get(type_id)

    @classmethod
    def parse(cls, type_name: str) -> DigitGroupingType | None:
        return _GROUPING_TYPES_BY_NAME.get(type_name)


_GROUPING_TYPES_BY_NAME: Mapping[str, DigitGroupingType] = build_index(
    DigitGroupingType, lambda t: t.type_name, "digit grouping type name"
)
