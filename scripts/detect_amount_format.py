#!/usr/bin/env python3
"""Detect the number format of a file of amounts and print the parsed values.

Usage:
    python scripts/detect_amount_format.py <amounts.txt>

The file holds one amount per line, e.g. exported from a bank statement.
"""
import sys
from pathlib import Path

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from amount_numerals.amounts.formatting import format_number
from amount_numerals.amounts.parsing import InvalidAmountFormatError, parse_amounts
from amount_numerals.config import Settings
from amount_numerals.numerals.known_formats import KnownAmountFormat
from amount_numerals.utils.logging import bind_import_context, get_logger, setup_logging


def main(path_arg: str) -> None:
    """Detect and parse the amounts in a single file."""
    path = Path(path_arg).expanduser()
    if not path.exists():
        print(f"Error: File not found: {path_arg}")
        sys.exit(1)

    settings = Settings()
    setup_logging(settings.log_level)
    logger = get_logger("detect_amount_format")
    bind_import_context(path.name)

    samples = [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
    logger.info("amount_samples_loaded", path=str(path), sample_count=len(samples))

    candidates = KnownAmountFormat.detect_multi(samples)
    print(f"Samples: {len(samples)}")
    print("-" * 50)
    if candidates:
        print(f"Candidate formats: {', '.join(fmt.example for fmt in candidates)}")

    options = settings.number_format_options()
    try:
        result = parse_amounts(samples, options, strict=settings.strict_parsing)
    except InvalidAmountFormatError as e:
        print(f"Error: {e}")
        sys.exit(1)
    if result is None:
        print("Error: No known amount format fits every sample")
        sys.exit(1)

    parsed, chosen = result
    print(f"Chosen format: {chosen.example} ({chosen.type_key})")

    for amount in parsed:
        print(f"{amount.original_string!r:>20} -> {format_number(amount.value, options)}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/detect_amount_format.py <amounts.txt>")
        sys.exit(1)

    main(sys.argv[1])
