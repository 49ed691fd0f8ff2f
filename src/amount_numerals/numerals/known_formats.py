"""Catalog of real-world amount text conventions and format detection.

Each ``KnownAmountFormat`` pairs a decimal separator with an optional digit
grouping symbol.  Detection is used when the format of a batch of amounts
(e.g. an imported file) is unknown and has to be inferred before parsing.

Grouping in the validation patterns is lenient: any run of digits may sit
between two grouping symbols, so ``1,23,4567.8`` is accepted by the
comma-grouped format.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Mapping
from enum import StrEnum

import structlog

from amount_numerals.models.number_format import NumberFormatOptions
from amount_numerals.numerals.digit_grouping import DigitGroupingType
from amount_numerals.numerals.numeral_system import NumeralSystem
from amount_numerals.numerals.registry import build_index
from amount_numerals.numerals.symbols import DecimalSeparator, DigitGroupingSymbol

logger = structlog.get_logger(__name__)


def _regular_grouping_pattern(symbol: DigitGroupingSymbol | None) -> re.Pattern[str] | None:
    if symbol is None:
        return None
    g = re.escape(symbol.symbol)
    # 1,234,567 or 12,34,567
    return re.compile(rf"[0-9]{{1,3}}(?:{g}[0-9]{{3}})+|[0-9]{{1,2}}(?:{g}[0-9]{{2}})*{g}[0-9]{{3}}")


class KnownAmountFormat(StrEnum):
    """One decimal separator / grouping symbol combination.

    The member value is the composite key
    ``"<decimal separator id>-<grouping symbol id or 0>"``.
    """

    DOT_DECIMAL_SEPARATOR = (
        "1234.56", DecimalSeparator.DOT, None, r"-?[0-9]+(\.[0-9]+)?"
    )
    COMMA_DECIMAL_SEPARATOR = (
        "1234,56", DecimalSeparator.COMMA, None, r"-?[0-9]+(,[0-9]+)?"
    )
    DOT_DECIMAL_SEPARATOR_WITH_COMMA_GROUPING_SYMBOL = (
        "1,234.56", DecimalSeparator.DOT, DigitGroupingSymbol.COMMA, r"-?([0-9]+,)*[0-9]+(\.[0-9]+)?"
    )
    COMMA_DECIMAL_SEPARATOR_WITH_DOT_GROUPING_SYMBOL = (
        "1.234,56", DecimalSeparator.COMMA, DigitGroupingSymbol.DOT, r"-?([0-9]+\.)*[0-9]+(,[0-9]+)?"
    )
    DOT_DECIMAL_SEPARATOR_WITH_SPACE_GROUPING_SYMBOL = (
        "1 234.56", DecimalSeparator.DOT, DigitGroupingSymbol.SPACE, r"-?([0-9]+ )*[0-9]+(\.[0-9]+)?"
    )
    COMMA_DECIMAL_SEPARATOR_WITH_SPACE_GROUPING_SYMBOL = (
        "1 234,56", DecimalSeparator.COMMA, DigitGroupingSymbol.SPACE, r"-?([0-9]+ )*[0-9]+(,[0-9]+)?"
    )
    DOT_DECIMAL_SEPARATOR_WITH_APOSTROPHE_GROUPING_SYMBOL = (
        "1'234.56", DecimalSeparator.DOT, DigitGroupingSymbol.APOSTROPHE, r"-?([0-9]+')*[0-9]+(\.[0-9]+)?"
    )
    COMMA_DECIMAL_SEPARATOR_WITH_APOSTROPHE_GROUPING_SYMBOL = (
        "1'234,56", DecimalSeparator.COMMA, DigitGroupingSymbol.APOSTROPHE, r"-?([0-9]+')*[0-9]+(,[0-9]+)?"
    )

    def __new__(
        cls,
        example: str,
        decimal_separator: DecimalSeparator,
        digit_grouping_symbol: DigitGroupingSymbol | None,
        pattern: str,
    ):
        key = f"{decimal_separator.type_id}-{digit_grouping_symbol.type_id if digit_grouping_symbol else 0}"
        obj = str.__new__(cls, key)
        obj._value_ = key
        obj.example = example
        obj.decimal_separator = decimal_separator
        obj.digit_grouping_symbol = digit_grouping_symbol
        obj._regex = re.compile(pattern)
        obj._regular_grouping = _regular_grouping_pattern(digit_grouping_symbol)
        return obj

    @property
    def type_key(self) -> str:
        return self._value_

    def is_valid(self, amount: str) -> bool:
        return self._regex.fullmatch(amount) is not None

    def has_regular_grouping(self, amount: str) -> bool:
        """Whether the digit groups of *amount* have thousands or lakh widths.

        ``is_valid`` accepts any group width, so this is what tells ``1,234``
        apart from ``1,5``.  Amounts without a grouping symbol are regular.
        """
        if self._regular_grouping is None:
            return True
        integer_part = amount.lstrip("-").split(self.decimal_separator.symbol, 1)[0]
        if self.digit_grouping_symbol.symbol not in integer_part:
            return True
        return self._regular_grouping.fullmatch(integer_part) is not None

    def parse_amount(self, amount: str) -> float:
        """Return the value of *amount* under this format, or NaN if invalid."""
        if not self.is_valid(amount):
            return math.nan

        text = amount
        if self.digit_grouping_symbol is not None:
            text = text.replace(self.digit_grouping_symbol.symbol, "")
        text = text.replace(self.decimal_separator.symbol, ".")
        return float(text)

    def to_number_format_options(
        self, numeral_system: NumeralSystem = NumeralSystem.DEFAULT
    ) -> NumberFormatOptions:
        """Options that render amounts the way this format writes them."""
        if self.digit_grouping_symbol is None:
            return NumberFormatOptions(
                numeral_system=numeral_system,
                digit_grouping=DigitGroupingType.NONE,
                digit_grouping_symbol="",
                decimal_separator=self.decimal_separator.symbol,
            )
        return NumberFormatOptions(
            numeral_system=numeral_system,
            digit_grouping=DigitGroupingType.THOUSANDS_SEPARATOR,
            digit_grouping_symbol=self.digit_grouping_symbol.symbol,
            decimal_separator=self.decimal_separator.symbol,
        )

    @classmethod
    def values(cls) -> list[KnownAmountFormat]:
        return list(cls)

    @classmethod
    def value_of(cls, type_key: str) -> KnownAmountFormat | None:
        return _FORMATS_BY_KEY.get(type_key)

    @classmethod
    def detect(cls, amount: str) -> list[KnownAmountFormat] | None:
        """Return every format *amount* is valid under, or None if none."""
        result = [fmt for fmt in cls if fmt.is_valid(amount)]
        return result or None

    @classmethod
    def detect_multi(cls, amounts: Iterable[str]) -> list[KnownAmountFormat] | None:
        """Return the formats that every one of *amounts* is valid under.

        A single sample matching no format fails the whole batch.
        """
        counts: Counter[KnownAmountFormat] = Counter()
        total = 0

        for amount in amounts:
            detected = cls.detect(amount)
            if detected is None:
                logger.debug("amount_format_detection_failed", amount=amount, sample_index=total)
                return None
            counts.update(detected)
            total += 1

        result = [fmt for fmt in cls if total > 0 and counts[fmt] == total]
        if not result:
            logger.debug("amount_format_no_common_format", sample_count=total)
            return None
        return result


_FORMATS_BY_KEY: Mapping[str, KnownAmountFormat] = build_index(
    KnownAmountFormat, lambda fmt: fmt.type_key, "known amount format key"
)
