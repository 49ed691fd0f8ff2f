"""Render numbers and minor-unit amounts as localized text.

The pipeline is: round (optional) -> trim zeros (optional) -> group the
integer digits -> join the fraction with the decimal separator ->
transliterate Western Arabic digits into the target numeral system.
Separators are never digit glyphs, so transliterating last keeps them intact.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from amount_numerals.amounts.currency import (
    ALL_CURRENCIES,
    CurrencyDisplayType,
    append_currency_symbol,
    get_currency_fraction,
)
from amount_numerals.models.number_format import (
    HIDDEN_AMOUNT,
    HiddenAmount,
    NumberFormatOptions,
    NumberWithSuffix,
)
from amount_numerals.numerals.digit_grouping import DigitGroupingType

DEFAULT_FRACTION_DIGITS = 2


def format_number(value: int | float | Decimal, options: NumberFormatOptions | None = None) -> str:
    """Format *value* according to *options* (defaults: ``1,234.5``)."""
    options = options or NumberFormatOptions()

    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return str(value)
    if isinstance(value, Decimal) and not value.is_finite():
        return str(value)

    text = _to_plain_decimal_string(value, options.decimal_number_count, options.trim_tail_zero)

    negative = text.startswith("-")
    if negative:
        text = text[1:]

    integer_part, _, fraction = text.partition(".")
    result = options.digit_grouping.format(list(integer_part), options.digit_grouping_symbol)
    if fraction:
        result += options.decimal_separator + fraction
    if negative:
        result = "-" + result

    return options.numeral_system.replace_western_arabic_digits_to_localized_digits(result)


def format_amount(
    amount: int,
    options: NumberFormatOptions | None = None,
    fraction_digits: int = DEFAULT_FRACTION_DIGITS,
) -> str:
    """Format an amount stored in minor units (e.g. cents).

    ``decimal_number_count`` defaults to *fraction_digits* when the options
    leave it unset, so ``123456`` renders as ``1,234.56``.
    """
    options = options or NumberFormatOptions()
    if options.decimal_number_count is None:
        options = options.model_copy(update={"decimal_number_count": fraction_digits})
    return format_number(Decimal(f"{int(amount)}E-{fraction_digits}"), options)


def format_display_amount(
    amount: int | HiddenAmount | NumberWithSuffix,
    options: NumberFormatOptions | None = None,
    currency_code: str | None = None,
    display_type: CurrencyDisplayType | None = None,
) -> str:
    """Format an amount for display, honouring the hidden-amount sentinel.

    The sentinel is returned as-is (with the currency placed around it) and
    never transliterated.  A ``NumberWithSuffix`` renders as the formatted
    value followed by its suffix, after any currency text.
    """
    fraction_digits = get_currency_fraction(currency_code)
    if fraction_digits is None:
        fraction_digits = DEFAULT_FRACTION_DIGITS

    suffix = ""
    if isinstance(amount, str):
        if amount != HIDDEN_AMOUNT:
            raise ValueError(f"Unsupported amount text: {amount!r}")
        text = HIDDEN_AMOUNT
        is_plural = True
    else:
        if isinstance(amount, NumberWithSuffix):
            suffix = amount.suffix
            amount = round(amount.value)
        text = format_amount(amount, options, fraction_digits)
        is_plural = abs(amount) != 10 ** fraction_digits

    if currency_code and display_type is not None:
        info = ALL_CURRENCIES.get(currency_code)
        text = append_currency_symbol(
            text,
            display_type,
            currency_code,
            currency_unit=info.unit if info else "",
            currency_name=currency_code,
            is_plural=is_plural,
        )

    return text + suffix


def format_amount_to_western_arabic_without_grouping(
    amount: int, fraction_digits: int = DEFAULT_FRACTION_DIGITS
) -> str:
    """Plain ``-1234.56`` form used for exports and editable inputs."""
    options = NumberFormatOptions(digit_grouping=DigitGroupingType.NONE, digit_grouping_symbol="")
    return format_amount(amount, options, fraction_digits)


def _to_plain_decimal_string(
    value: int | float | Decimal, decimal_number_count: int | None, trim_tail_zero: bool
) -> str:
    if isinstance(value, float):
        # 1234.0 renders as 1234, like an int
        number = Decimal(int(value)) if value.is_integer() else Decimal(repr(value))
    else:
        number = Decimal(value)

    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction digits
        ctx.prec = max(ctx.prec, number.adjusted() + (decimal_number_count or 0) + 2)
        if decimal_number_count is not None:
            number = number.quantize(Decimal(1).scaleb(-decimal_number_count), rounding=ROUND_HALF_UP)
        if number == 0:
            number = number.copy_abs()
        text = format(number, "f")

    if trim_tail_zero and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
