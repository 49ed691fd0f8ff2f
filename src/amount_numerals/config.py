"""Number formatting configuration via environment variables with AMOUNT_ prefix."""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from amount_numerals.amounts.currency import (
    CurrencyDisplayLocation,
    CurrencyDisplaySymbol,
    CurrencyDisplayType,
)
from amount_numerals.models.number_format import NumberFormatOptions
from amount_numerals.numerals.digit_grouping import DigitGroupingType
from amount_numerals.numerals.numeral_system import NumeralSystem
from amount_numerals.numerals.symbols import DecimalSeparator, DigitGroupingSymbol


class Settings(BaseSettings):
    """Default number format for callers that have no per-user preference.

    All settings are read from environment variables prefixed with ``AMOUNT_``.
    Enum-valued settings take the registry id or type name, e.g.
    ``AMOUNT_NUMERAL_SYSTEM=5`` or ``AMOUNT_NUMERAL_SYSTEM=DevanagariNumerals``.
    """

    model_config = SettingsConfigDict(env_prefix="AMOUNT_")

    # ── Digits & separators ───────────────────────────────────────────────
    numeral_system: NumeralSystem = NumeralSystem.DEFAULT
    digit_grouping: DigitGroupingType = DigitGroupingType.DEFAULT
    digit_grouping_symbol: DigitGroupingSymbol = DigitGroupingSymbol.DEFAULT
    decimal_separator: DecimalSeparator = DecimalSeparator.DEFAULT
    decimal_number_count: int | None = Field(default=None, ge=0, le=20)
    trim_tail_zero: bool = False

    # ── Currency display ──────────────────────────────────────────────────
    currency_code: str = "USD"
    currency_display_symbol: CurrencyDisplaySymbol = CurrencyDisplaySymbol.SYMBOL
    currency_display_location: CurrencyDisplayLocation = CurrencyDisplayLocation.BEFORE_AMOUNT
    currency_display_separator: str = ""

    # ── Parsing ───────────────────────────────────────────────────────────
    strict_parsing: bool = False

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = "INFO"

    @field_validator(
        "numeral_system",
        "digit_grouping",
        "digit_grouping_symbol",
        "decimal_separator",
        "currency_display_symbol",
        "currency_display_location",
        mode="before",
    )
    @classmethod
    def _registry_id_or_type_name(cls, value: Any, info: ValidationInfo) -> Any:
        """Accept ``"5"`` as well as ``"DevanagariNumerals"`` from the environment."""
        if not isinstance(value, str):
            return value
        text = value.strip()
        if text.isdigit():
            return int(text)
        parse = getattr(cls.model_fields[info.field_name].annotation, "parse", None)
        member = parse(text) if parse else None
        return member if member is not None else value

    @model_validator(mode="after")
    def _check_separator_pair(self) -> Settings:
        if self.digit_grouping_symbol.symbol == self.decimal_separator.symbol:
            raise ValueError(
                f"AMOUNT_DIGIT_GROUPING_SYMBOL and AMOUNT_DECIMAL_SEPARATOR are both "
                f"{self.decimal_separator.type_name}; set the other one too"
            )
        return self

    def number_format_options(self) -> NumberFormatOptions:
        return NumberFormatOptions(
            numeral_system=self.numeral_system,
            digit_grouping=self.digit_grouping,
            digit_grouping_symbol=self.digit_grouping_symbol.symbol,
            decimal_separator=self.decimal_separator.symbol,
            decimal_number_count=self.decimal_number_count,
            trim_tail_zero=self.trim_tail_zero,
        )

    def currency_display_type(self) -> CurrencyDisplayType:
        return CurrencyDisplayType(
            symbol=self.currency_display_symbol,
            location=self.currency_display_location,
            separator=self.currency_display_separator,
        )
