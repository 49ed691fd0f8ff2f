"""Test localized number and amount formatting."""
from decimal import Decimal

import pytest

from amount_numerals.amounts.currency import CurrencyDisplayLocation, CurrencyDisplaySymbol, CurrencyDisplayType
from amount_numerals.amounts.formatting import (
    format_amount,
    format_amount_to_western_arabic_without_grouping,
    format_display_amount,
    format_number,
)
from amount_numerals.amounts.parsing import parse_amount
from amount_numerals.models.number_format import HIDDEN_AMOUNT, NumberFormatOptions, NumberWithSuffix
from amount_numerals.numerals.digit_grouping import DigitGroupingType
from amount_numerals.numerals.numeral_system import NumeralSystem


class TestFormatNumber:
    def test_default_options(self):
        assert format_number(1234567.891) == "1,234,567.891"

    def test_integer(self, default_options):
        assert format_number(123456, default_options) == "123,456"

    def test_below_grouping_threshold(self, default_options):
        assert format_number(999, default_options) == "999"

    def test_negative(self, default_options):
        assert format_number(-1234567, default_options) == "-1,234,567"

    def test_eu_separators(self, eu_options):
        assert format_number(1234.56, eu_options) == "1.234,56"

    def test_no_grouping(self):
        options = NumberFormatOptions(digit_grouping=DigitGroupingType.NONE)
        assert format_number(1234567, options) == "1234567"

    def test_fixed_decimal_count(self):
        options = NumberFormatOptions(decimal_number_count=2)
        assert format_number(1234.5, options) == "1,234.50"

    def test_round_half_up(self):
        options = NumberFormatOptions(decimal_number_count=2)
        assert format_number(2.345, options) == "2.35"

    def test_trim_tail_zero(self):
        options = NumberFormatOptions(decimal_number_count=2, trim_tail_zero=True)
        assert format_number(1234.5, options) == "1,234.5"
        assert format_number(12.0, options) == "12"

    def test_negative_zero_after_rounding(self):
        options = NumberFormatOptions(decimal_number_count=2)
        assert format_number(-0.001, options) == "0.00"

    def test_decimal_input(self, default_options):
        assert format_number(Decimal("1234.50"), default_options) == "1,234.50"

    def test_devanagari_indian(self, devanagari_indian_options):
        assert format_number(1234567, devanagari_indian_options) == "१२,३४,५६७"

    def test_persian_fraction(self, persian_options):
        assert format_number(-1234.5, persian_options) == "-۱,۲۳۴.۵"

    def test_non_finite(self, persian_options):
        assert format_number(float("nan"), persian_options) == "nan"
        assert format_number(float("inf"), persian_options) == "inf"


class TestFormatAmount:
    def test_minor_units(self):
        assert format_amount(123456789) == "1,234,567.89"

    def test_small_negative(self):
        assert format_amount(-5) == "-0.05"

    def test_zero(self):
        assert format_amount(0) == "0.00"

    def test_zero_fraction_currency(self):
        assert format_amount(100, fraction_digits=0) == "100"

    def test_three_fraction_digits(self):
        assert format_amount(1234, fraction_digits=3) == "1.234"

    def test_explicit_decimal_count_rounds(self):
        options = NumberFormatOptions(decimal_number_count=0)
        assert format_amount(123456, options) == "1,235"

    def test_persian_zero(self, persian_options):
        assert format_amount(0, persian_options) == "۰.۰۰"

    def test_indian_grouping(self):
        options = NumberFormatOptions(digit_grouping=DigitGroupingType.INDIAN_NUMBER_GROUPING)
        assert format_amount(123456789) != format_amount(123456789, options)
        assert format_amount(123456789, options) == "12,34,567.89"

    def test_western_without_grouping(self):
        assert format_amount_to_western_arabic_without_grouping(-123456) == "-1234.56"


class TestFormatDisplayAmount:
    def test_hidden_amount(self, persian_options):
        assert format_display_amount(HIDDEN_AMOUNT, persian_options) == "***"

    def test_hidden_amount_with_currency(self, persian_options):
        result = format_display_amount(HIDDEN_AMOUNT, persian_options, "USD", CurrencyDisplayType())
        assert result == "$***"

    def test_number_with_suffix(self):
        result = format_display_amount(NumberWithSuffix(value=123456), None, "USD", CurrencyDisplayType())
        assert result == "$1,234.56+"

    def test_currency_fraction_applied(self):
        display = CurrencyDisplayType(
            symbol=CurrencyDisplaySymbol.CODE, location=CurrencyDisplayLocation.AFTER_AMOUNT, separator=" "
        )
        assert format_display_amount(1000, None, "JPY", display) == "1,000 JPY"

    def test_without_currency(self, devanagari_indian_options):
        assert format_display_amount(12345678, devanagari_indian_options) == "१,२३,४५६.७८"

    def test_unsupported_text(self):
        with pytest.raises(ValueError):
            format_display_amount("12.34")


class TestFloatAndDecimalEdges:
    def test_integral_float_has_no_fraction(self):
        assert format_number(1234.0) == "1,234"
        assert format_number(-0.0) == "0"

    def test_parsed_value_renders_back(self, eu_options):
        assert format_number(parse_amount("1.234,00", eu_options), eu_options) == "1.234"

    def test_tiny_float(self):
        assert format_number(1e-07) == "0.0000001"

    def test_huge_decimal_with_fraction_digits(self):
        options = NumberFormatOptions(digit_grouping=DigitGroupingType.NONE, digit_grouping_symbol="",
                                      decimal_number_count=2)
        assert format_number(Decimal("1E+70"), options) == "1" + "0" * 70 + ".00"

    def test_huge_float_with_fraction_digits(self):
        options = NumberFormatOptions(decimal_number_count=2)
        assert format_number(1e70, options).endswith(".00")

    def test_non_finite_decimal(self, persian_options):
        assert format_number(Decimal("Infinity"), persian_options) == "Infinity"
        assert format_number(Decimal("NaN")) == "NaN"

    def test_huge_minor_units(self):
        assert format_amount(10 ** 30) == f"{10 ** 28:,}.00"
