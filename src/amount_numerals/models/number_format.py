"""Option bundles and value types threaded through formatting and parsing.

``NumberFormatOptions`` describes how a number should be rendered for one
user or one import source.  Collaborators build it from their own settings
and pass it to :mod:`amount_numerals.amounts.formatting`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from amount_numerals.numerals.digit_grouping import DigitGroupingType
from amount_numerals.numerals.numeral_system import NumeralSystem
from amount_numerals.numerals.symbols import DecimalSeparator, DigitGroupingSymbol

HiddenAmount = Literal["***"]

HIDDEN_AMOUNT: HiddenAmount = "***"
INCOMPLETE_AMOUNT_SUFFIX = "+"


class NumberFormatOptions(BaseModel):
    """How to render a number: digits, grouping and decimal separator."""

    model_config = ConfigDict(frozen=True)

    numeral_system: NumeralSystem = NumeralSystem.DEFAULT
    digit_grouping: DigitGroupingType = DigitGroupingType.DEFAULT
    digit_grouping_symbol: str = DigitGroupingSymbol.DEFAULT.symbol
    decimal_separator: str = Field(default=DecimalSeparator.DEFAULT.symbol, min_length=1)
    decimal_number_count: int | None = Field(default=None, ge=0, le=20)
    trim_tail_zero: bool = False

    @model_validator(mode="after")
    def _check_separators(self) -> NumberFormatOptions:
        for label, symbol in (
            ("decimal_separator", self.decimal_separator),
            ("digit_grouping_symbol", self.digit_grouping_symbol),
        ):
            if any(NumeralSystem.detect(ch) is not None for ch in symbol):
                raise ValueError(f"{label} must not contain digits: {symbol!r}")

        if self.digit_grouping.enabled and not self.digit_grouping_symbol:
            raise ValueError("digit_grouping_symbol is required when digit grouping is enabled")
        # Checked with grouping off too
        if self.digit_grouping_symbol == self.decimal_separator:
            raise ValueError(
                f"digit_grouping_symbol and decimal_separator are both {self.decimal_separator!r}"
            )
        return self


class NumberWithSuffix(BaseModel):
    """A lower-bound amount, e.g. a total missing an exchange rate."""

    value: float
    suffix: str = INCOMPLETE_AMOUNT_SUFFIX


class ParsedAmount(BaseModel):
    """Result of parsing user-entered or imported amount text."""

    value: float
    original_string: str
    numeral_system: NumeralSystem = NumeralSystem.DEFAULT
    amount_format: str | None = None
    currency: str | None = None
