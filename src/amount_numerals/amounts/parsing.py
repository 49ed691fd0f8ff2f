"""Parse localized amount text back into numbers.

Handles:
- Any registered numeral system ("١٬٢٣٤" style input is transliterated first)
- The decimal separator / grouping symbol from ``NumberFormatOptions``
- Currency symbols and ISO codes: "€ 1.234,56", "$1,234.56", "1.234,56 EUR"
- Negative: "(23,66)", "23.66-", "-23.66", "- 23,66"

Anything else left in the text (letters, stray symbols, digits from a second
numeral system) makes the amount invalid.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import lru_cache

import structlog

from amount_numerals.amounts.currency import strip_currency
from amount_numerals.models.number_format import NumberFormatOptions, ParsedAmount
from amount_numerals.numerals.known_formats import KnownAmountFormat
from amount_numerals.numerals.numeral_system import NumeralSystem

logger = structlog.get_logger(__name__)


class InvalidAmountFormatError(ValueError):
    """Amount text does not match the expected number format."""


def detect_numeral_system(text: str) -> NumeralSystem | None:
    """Return the numeral system of the first digit glyph in *text*."""
    for ch in text or "":
        system = NumeralSystem.detect(ch)
        if system is not None:
            return system
    return None


def parse_amount(
    raw_string: str,
    options: NumberFormatOptions | None = None,
    *,
    strict: bool = False,
) -> float:
    """Parse a localized amount string to float.

    Without *options* the numeral system is detected from the text and the
    default separators (``,`` grouping, ``.`` decimal) apply.  Invalid text
    returns ``math.nan``, or raises ``InvalidAmountFormatError`` when
    *strict* is set.
    """
    canonical = _to_canonical(raw_string, options, strict)
    if canonical is None:
        return math.nan
    return float(canonical)


def parse_amount_to_minor_units(
    raw_string: str,
    options: NumberFormatOptions | None = None,
    fraction_digits: int = 2,
    *,
    strict: bool = False,
) -> int | None:
    """Parse an amount string into minor units (``"1,234.56"`` -> ``123456``).

    Extra fractional digits are rounded half-up.  Returns None for invalid
    text unless *strict* is set.
    """
    canonical = _to_canonical(raw_string, options, strict)
    if canonical is None:
        return None
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(canonical) + fraction_digits)
        minor = Decimal(canonical).scaleb(fraction_digits).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(minor)


def parse_amounts(
    samples: Sequence[str],
    options: NumberFormatOptions | None = None,
    *,
    strict: bool = False,
) -> tuple[list[ParsedAmount], KnownAmountFormat] | None:
    """Infer one known amount format for a batch of samples and parse them all.

    When more than one format fits every sample, the choice prefers formats
    whose digit groups have regular widths in every sample, then the format
    *options* describe (default ``1,234.56``), then a format whose grouping
    symbol actually occurs, then registry order.  Returns None when any
    sample fits no format or the samples share no common format, or raises
    ``InvalidAmountFormatError`` instead when *strict* is set.
    """
    preferred = options or NumberFormatOptions()

    normalized: list[tuple[str, NumeralSystem, str | None]] = []
    for raw in samples:
        negative, amount_text, currency = _split_sign_and_currency(raw)
        system = detect_numeral_system(amount_text) or NumeralSystem.DEFAULT
        amount_text = system.replace_localized_digits_to_western_arabic_digits(amount_text)
        normalized.append(("-" + amount_text if negative else amount_text, system, currency))

    texts = [text for text, _, _ in normalized]
    formats = KnownAmountFormat.detect_multi(texts)
    if formats is None:
        logger.warning("amount_batch_format_undetected", sample_count=len(samples))
        if strict:
            raise InvalidAmountFormatError("No known amount format fits every sample")
        return None

    chosen = _choose_format(formats, texts, preferred)
    if len(formats) > 1:
        logger.info(
            "amount_batch_format_ambiguous",
            candidates=[fmt.example for fmt in formats],
            chosen=chosen.example,
        )

    parsed = [
        ParsedAmount(
            value=chosen.parse_amount(text),
            original_string=raw,
            numeral_system=system,
            amount_format=chosen.type_key,
            currency=currency,
        )
        for raw, (text, system, currency) in zip(samples, normalized)
    ]
    return parsed, chosen


def _choose_format(
    formats: list[KnownAmountFormat], texts: list[str], preferred: NumberFormatOptions
) -> KnownAmountFormat:
    preferred_grouping = preferred.digit_grouping_symbol if preferred.digit_grouping.enabled else ""

    def rank(fmt: KnownAmountFormat) -> tuple[bool, bool, bool, int]:
        grouping = fmt.digit_grouping_symbol.symbol if fmt.digit_grouping_symbol else ""
        return (
            not all(fmt.has_regular_grouping(text) for text in texts),
            (fmt.decimal_separator.symbol, grouping) != (preferred.decimal_separator, preferred_grouping),
            not (grouping and any(grouping in text for text in texts)),
            formats.index(fmt),
        )

    return min(formats, key=rank)


def _split_sign(text: str) -> tuple[bool, str]:
    if text.startswith("(") and text.endswith(")"):
        return True, text[1:-1].strip()
    if text.startswith("-"):
        return True, text[1:].lstrip()
    if text.endswith("-"):
        return True, text[:-1].rstrip()
    return False, text


def _split_sign_and_currency(raw_string: str) -> tuple[bool, str, str | None]:
    """Peel sign and currency in either nesting: "-$5", "$-5", "(€ 23,66)", "23,66- €"."""
    negative, text = _split_sign(raw_string.strip())
    text, currency = strip_currency(text)
    if not negative:
        negative, text = _split_sign(text)
    return negative, text, currency


def _to_canonical(raw_string: str, options: NumberFormatOptions | None, strict: bool) -> str | None:
    """Normalize amount text to ``-1234.56`` form, or None if invalid."""
    if not raw_string or not raw_string.strip():
        return _reject(raw_string, "empty amount string", strict)

    negative, cleaned, _ = _split_sign_and_currency(raw_string)

    if not cleaned:
        return _reject(raw_string, "no numeric content", strict)

    if options is not None:
        system = options.numeral_system
        grouping_symbol = options.digit_grouping_symbol
        decimal_separator = options.decimal_separator
    else:
        system = detect_numeral_system(cleaned) or NumeralSystem.DEFAULT
        defaults = NumberFormatOptions()
        grouping_symbol = defaults.digit_grouping_symbol
        decimal_separator = defaults.decimal_separator

    cleaned = system.replace_localized_digits_to_western_arabic_digits(cleaned)

    if not _amount_pattern(grouping_symbol, decimal_separator).fullmatch(cleaned):
        return _reject(raw_string, "does not match number format", strict)

    if grouping_symbol and grouping_symbol != decimal_separator:
        cleaned = cleaned.replace(grouping_symbol, "")
    cleaned = cleaned.replace(decimal_separator, ".")

    return "-" + cleaned if negative else cleaned


@lru_cache(maxsize=32)
def _amount_pattern(grouping_symbol: str, decimal_separator: str) -> re.Pattern[str]:
    decimal = re.escape(decimal_separator)
    if grouping_symbol and grouping_symbol != decimal_separator:
        grouping = re.escape(grouping_symbol)
        return re.compile(rf"([0-9]+{grouping})*[0-9]+({decimal}[0-9]+)?")
    return re.compile(rf"[0-9]+({decimal}[0-9]+)?")


def _reject(raw_string: str, reason: str, strict: bool) -> None:
    logger.debug("amount_parse_failed", raw=raw_string, reason=reason)
    if strict:
        raise InvalidAmountFormatError(f"Cannot parse amount {raw_string!r}: {reason}")
    return None
