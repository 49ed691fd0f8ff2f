"""Shared test fixtures."""
import pytest
import structlog

from amount_numerals.models.number_format import NumberFormatOptions
from amount_numerals.numerals.digit_grouping import DigitGroupingType
from amount_numerals.numerals.numeral_system import NumeralSystem


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def default_options():
    return NumberFormatOptions()


@pytest.fixture
def eu_options():
    """1.234,56 style."""
    return NumberFormatOptions(digit_grouping_symbol=".", decimal_separator=",")


@pytest.fixture
def devanagari_indian_options():
    return NumberFormatOptions(
        numeral_system=NumeralSystem.DEVANAGARI_NUMERALS,
        digit_grouping=DigitGroupingType.INDIAN_NUMBER_GROUPING,
    )


@pytest.fixture
def persian_options():
    return NumberFormatOptions(numeral_system=NumeralSystem.PERSIAN_DIGITS)
