"""Digit alphabets and conversion between native and Western Arabic digits.

Every numeral system stores its ten digits as contiguous code points starting
at ``digit_zero``, so digit *d* is ``chr(ord(digit_zero) + d)``.  The tables
are derived once when the enum is created and never change afterwards.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from enum import IntEnum
from types import MappingProxyType

from amount_numerals.numerals.registry import RegistryConflictError, build_index

LANGUAGE_DEFAULT_TYPE = 0

WESTERN_ARABIC_DIGITS = "0123456789"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class NumeralSystem(IntEnum):
    """A decimal digit alphabet identified by a stable integer id."""

    WESTERN_ARABIC_NUMERALS = 1, "WesternArabicNumerals", "Western Arabic Numerals", "0"
    EASTERN_ARABIC_NUMERALS = 2, "EasternArabicNumerals", "Eastern Arabic Numerals", "٠"
    PERSIAN_DIGITS = 3, "PersianDigits", "Persian Digits", "۰"
    BURMESE_NUMERALS = 4, "BurmeseNumerals", "Burmese Numerals", "၀"
    DEVANAGARI_NUMERALS = 5, "DevanagariNumerals", "Devanagari Numerals", "०"

    DEFAULT = WESTERN_ARABIC_NUMERALS

    def __new__(cls, type_id: int, type_name: str, display_name: str, digit_zero: str):
        obj = int.__new__(cls, type_id)
        obj._value_ = type_id
        obj.type_name = type_name
        obj.display_name = display_name
        obj.digit_zero = digit_zero
        obj.double_digit_zero = digit_zero + digit_zero
        obj._digits = tuple(chr(ord(digit_zero) + i) for i in range(10))
        obj._digit_values = MappingProxyType({digit: i for i, digit in enumerate(obj._digits)})
        obj.textual_all_digits = "".join(obj._digits)
        obj._to_localized = str.maketrans(WESTERN_ARABIC_DIGITS, obj.textual_all_digits)
        obj._to_western_arabic = str.maketrans(obj.textual_all_digits, WESTERN_ARABIC_DIGITS)
        return obj

    @property
    def type_id(self) -> int:
        return self._value_

    def get_all_digits(self) -> list[str]:
        """Return a fresh list of the ten digits, indexed by digit value."""
        return list(self._digits)

    def is_digit(self, digit: str) -> bool:
        return digit in self._digit_values

    def get_localized_digit(self, digit: int) -> str:
        """Return the glyph for *digit*, or ``""`` when it is not in 0..9."""
        if not isinstance(digit, int) or digit < 0 or digit > 9:
            return ""
        return self._digits[digit]

    def parse_int(self, value: str) -> int | float:
        """Parse an integer written in this numeral system.

        Returns ``math.nan`` for empty or unparsable text.
        """
        if not value:
            return math.nan

        if self is NumeralSystem.WESTERN_ARABIC_NUMERALS:
            return _parse_base10_int(value)

        return _parse_base10_int(self.replace_localized_digits_to_western_arabic_digits(value))

    def format_number(self, value: int | float | Decimal) -> str:
        """Render *value* in base 10 using this system's digits."""
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return str(value)

        text = _to_base10_string(value)

        if self is NumeralSystem.WESTERN_ARABIC_NUMERALS:
            return text

        if value == 0:
            return self.digit_zero

        return self.replace_western_arabic_digits_to_localized_digits(text)

    def replace_western_arabic_digits_to_localized_digits(self, value: str | None) -> str:
        if not value:
            return ""
        return value.translate(self._to_localized)

    def replace_localized_digits_to_western_arabic_digits(self, value: str | None) -> str:
        if not value:
            return ""
        return value.translate(self._to_western_arabic)

    @classmethod
    def values(cls) -> list[NumeralSystem]:
        return list(cls)

    @classmethod
    def value_of(cls, type_id: int) -> NumeralSystem | None:
        return cls._value2member_map_.get(type_id)

    @classmethod
    def parse(cls, type_name: str) -> NumeralSystem | None:
        return _BY_TYPE_NAME.get(type_name)

    @classmethod
    def detect(cls, digit: str) -> NumeralSystem | None:
        """Return the numeral system that owns the glyph *digit*."""
        return _DIGIT_TO_NUMERAL_SYSTEM.get(digit)

    @classmethod
    def to_number(cls, digit: str) -> int | None:
        """Return the value (0-9) of *digit* in whichever system owns it."""
        return _DIGIT_TO_VALUE.get(digit)


def _parse_base10_int(value: str) -> int | float:
    text = value.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return math.nan
    return int(text)


def _to_base10_string(value: int | float | Decimal) -> str:
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if value.is_integer():
        return str(int(value))
    # 1e-07 renders as 0.0000001
    return format(Decimal(repr(value)), "f")


def _build_digit_indexes() -> tuple[Mapping[str, NumeralSystem], Mapping[str, int]]:
    owners: dict[str, NumeralSystem] = {}
    values: dict[str, int] = {}
    for system in NumeralSystem:
        for value, digit in enumerate(system.get_all_digits()):
            if digit in owners:
                raise RegistryConflictError(
                    f"Digit {digit!r} is claimed by both {owners[digit].type_name} and {system.type_name}"
                )
            owners[digit] = system
            values[digit] = value
    return MappingProxyType(owners), MappingProxyType(values)


_BY_TYPE_NAME: Mapping[str, NumeralSystem] = build_index(
    NumeralSystem, lambda system: system.type_name, "numeral system type name"
)
_DIGIT_TO_NUMERAL_SYSTEM, _DIGIT_TO_VALUE = _build_digit_indexes()
