"""Test numeral system digit tables, parsing and formatting."""
import math

import pytest

from amount_numerals.numerals.numeral_system import LANGUAGE_DEFAULT_TYPE, NumeralSystem

ROUND_TRIP_VALUES = [0, 1, -1, 9, 10, 123456789, -42]


class TestRegistry:
    def test_values_in_registration_order(self):
        assert NumeralSystem.values() == [
            NumeralSystem.WESTERN_ARABIC_NUMERALS,
            NumeralSystem.EASTERN_ARABIC_NUMERALS,
            NumeralSystem.PERSIAN_DIGITS,
            NumeralSystem.BURMESE_NUMERALS,
            NumeralSystem.DEVANAGARI_NUMERALS,
        ]

    def test_default_is_western_arabic(self):
        assert NumeralSystem.DEFAULT is NumeralSystem.WESTERN_ARABIC_NUMERALS

    def test_value_of(self):
        assert NumeralSystem.value_of(2) is NumeralSystem.EASTERN_ARABIC_NUMERALS
        assert NumeralSystem.value_of(5).type_name == "DevanagariNumerals"

    def test_value_of_unknown(self):
        assert NumeralSystem.value_of(LANGUAGE_DEFAULT_TYPE) is None
        assert NumeralSystem.value_of(99) is None

    def test_parse_type_name(self):
        assert NumeralSystem.parse("PersianDigits") is NumeralSystem.PERSIAN_DIGITS
        assert NumeralSystem.parse("Klingon") is None

    def test_display_names(self):
        assert NumeralSystem.BURMESE_NUMERALS.display_name == "Burmese Numerals"
        assert NumeralSystem.WESTERN_ARABIC_NUMERALS.type_id == 1

    def test_detect(self):
        assert NumeralSystem.detect("٣") is NumeralSystem.EASTERN_ARABIC_NUMERALS
        assert NumeralSystem.detect("۳") is NumeralSystem.PERSIAN_DIGITS
        assert NumeralSystem.detect("၃") is NumeralSystem.BURMESE_NUMERALS
        assert NumeralSystem.detect("३") is NumeralSystem.DEVANAGARI_NUMERALS
        assert NumeralSystem.detect("3") is NumeralSystem.WESTERN_ARABIC_NUMERALS

    def test_detect_non_digit(self):
        assert NumeralSystem.detect("a") is None
        assert NumeralSystem.detect(",") is None

    def test_to_number(self):
        assert NumeralSystem.to_number("७") == 7
        assert NumeralSystem.to_number("0") == 0
        assert NumeralSystem.to_number("x") is None


class TestDigits:
    @pytest.mark.parametrize("system", list(NumeralSystem))
    def test_digits_are_contiguous(self, system):
        for d in range(10):
            assert ord(system.get_localized_digit(d)) == ord(system.digit_zero) + d

    def test_get_all_digits_returns_copy(self):
        digits = NumeralSystem.PERSIAN_DIGITS.get_all_digits()
        digits[0] = "x"
        assert NumeralSystem.PERSIAN_DIGITS.get_all_digits()[0] == "۰"

    def test_textual_all_digits(self):
        assert NumeralSystem.WESTERN_ARABIC_NUMERALS.textual_all_digits == "0123456789"
        assert NumeralSystem.DEVANAGARI_NUMERALS.double_digit_zero == "००"

    def test_out_of_range_digit_is_empty(self):
        system = NumeralSystem.EASTERN_ARABIC_NUMERALS
        assert system.get_localized_digit(-1) == ""
        assert system.get_localized_digit(10) == ""
        assert system.get_localized_digit(1.5) == ""

    def test_is_digit(self):
        assert NumeralSystem.BURMESE_NUMERALS.is_digit("၉") is True
        assert NumeralSystem.BURMESE_NUMERALS.is_digit("9") is False


class TestParseInt:
    def test_western_arabic(self):
        assert NumeralSystem.WESTERN_ARABIC_NUMERALS.parse_int("-42") == -42

    def test_localized(self):
        assert NumeralSystem.PERSIAN_DIGITS.parse_int("۱۲۳") == 123
        assert NumeralSystem.DEVANAGARI_NUMERALS.parse_int("-४२") == -42

    def test_surrounding_whitespace(self):
        assert NumeralSystem.WESTERN_ARABIC_NUMERALS.parse_int(" 42 ") == 42

    def test_empty_is_nan(self):
        assert math.isnan(NumeralSystem.WESTERN_ARABIC_NUMERALS.parse_int(""))

    def test_garbage_is_nan(self):
        assert math.isnan(NumeralSystem.WESTERN_ARABIC_NUMERALS.parse_int("12abc"))
        assert math.isnan(NumeralSystem.PERSIAN_DIGITS.parse_int("۱,۲۳۴"))

    def test_other_system_digits_are_nan(self):
        # Devanagari digits are not Western Arabic digits
        assert math.isnan(NumeralSystem.WESTERN_ARABIC_NUMERALS.parse_int("१२"))


class TestFormatNumber:
    @pytest.mark.parametrize("system", list(NumeralSystem))
    @pytest.mark.parametrize("value", ROUND_TRIP_VALUES)
    def test_round_trip(self, system, value):
        assert system.parse_int(system.format_number(value)) == value

    @pytest.mark.parametrize("system", [s for s in NumeralSystem if s is not NumeralSystem.WESTERN_ARABIC_NUMERALS])
    def test_zero_is_digit_zero(self, system):
        assert system.format_number(0) == system.digit_zero

    def test_western_zero(self):
        assert NumeralSystem.WESTERN_ARABIC_NUMERALS.format_number(0) == "0"

    def test_non_finite_passes_through(self):
        assert NumeralSystem.PERSIAN_DIGITS.format_number(float("nan")) == "nan"
        assert NumeralSystem.PERSIAN_DIGITS.format_number(float("-inf")) == "-inf"

    def test_fraction(self):
        assert NumeralSystem.DEVANAGARI_NUMERALS.format_number(1.5) == "१.५"

    def test_tiny_float_is_positional(self):
        assert NumeralSystem.WESTERN_ARABIC_NUMERALS.format_number(1e-07) == "0.0000001"
        assert NumeralSystem.PERSIAN_DIGITS.format_number(1e-07) == "۰.۰۰۰۰۰۰۱"

    def test_integral_float(self):
        assert NumeralSystem.WESTERN_ARABIC_NUMERALS.format_number(-42.0) == "-42"

    def test_negative(self):
        assert NumeralSystem.EASTERN_ARABIC_NUMERALS.format_number(-123) == "-١٢٣"


class TestTransliteration:
    @pytest.mark.parametrize("system", list(NumeralSystem))
    def test_preserves_non_digits(self, system):
        source = "-1,234.50"
        localized = system.replace_western_arabic_digits_to_localized_digits(source)

        assert len(localized) == len(source)
        for original, converted in zip(source, localized):
            if original.isdigit():
                assert converted == system.get_localized_digit(int(original))
            else:
                assert converted == original

    def test_back_to_western(self):
        system = NumeralSystem.BURMESE_NUMERALS
        assert system.replace_localized_digits_to_western_arabic_digits("-၁,၂၃၄.၅၀") == "-1,234.50"

    def test_foreign_digits_untouched(self):
        # Persian digits are not Devanagari digits
        assert NumeralSystem.DEVANAGARI_NUMERALS.replace_localized_digits_to_western_arabic_digits("१۲") == "1۲"

    def test_empty(self):
        assert NumeralSystem.PERSIAN_DIGITS.replace_western_arabic_digits_to_localized_digits("") == ""
        assert NumeralSystem.PERSIAN_DIGITS.replace_localized_digits_to_western_arabic_digits(None) == ""
