from __future__ import annotations

import logging

from .digits import digits_from_int, int_from_digits
from .errors import AmountErrorCode, AmountParseError, create_error
from .normalize import normalize_amount, split_amount, validate_decimals

logger = logging.getLogger(__name__)


def parse_amount_to_base_units(amount: str, decimals: int) -> int:
    """Parse a human readable amount into integer base units.

    All arithmetic is done on digit strings and ``int``; the result is
    exactly ``amount * 10**decimals``. Input with more fractional digits than
    the token supports is rejected instead of rounded.

    Examples:
        >>> parse_amount_to_base_units("2.01", 6)
        2010000
        >>> parse_amount_to_base_units("1,000.50", 6)
        1000500000
        >>> parse_amount_to_base_units("100", 18)
        100000000000000000000

    Raises:
        AmountParseError: with one of the ``AmountErrorCode`` values.
    """
    try:
        validate_decimals(decimals)
        normalized = normalize_amount(amount, decimals)
        integer_part, fractional_part = split_amount(normalized)

        if len(fractional_part) > decimals:
            raise create_error(
                AmountErrorCode.EXCESSIVE_PRECISION,
                f'Amount "{amount}" has {len(fractional_part)} decimal places, '
                f"but token only supports {decimals}. "
                "Please reduce precision to avoid unintended rounding.",
            )
    except AmountParseError as exc:
        logger.debug("Rejected amount %r (decimals=%r): %s", amount, decimals, exc.code.value)
        raise

    padded_fraction = fractional_part.ljust(decimals, "0")
    integer_part = integer_part.lstrip("0") or "0"
    if integer_part == "0":
        combined = padded_fraction.lstrip("0") or "0"
    else:
        combined = integer_part + padded_fraction
    return int_from_digits(combined)


def format_base_units_to_amount(base_units: int, decimals: int) -> str:
    """Format integer base units as a canonical decimal string.

    Inverse of :func:`parse_amount_to_base_units`. The output never contains
    an exponent, grouping commas or trailing fractional zeros.

    Examples:
        >>> format_base_units_to_amount(2010000, 6)
        '2.01'
        >>> format_base_units_to_amount(500000, 6)
        '0.5'
    """
    try:
        if isinstance(base_units, bool) or not isinstance(base_units, int):
            raise create_error(
                AmountErrorCode.INVALID_FORMAT,
                f"base_units must be an int, received {type(base_units).__name__}.",
            )
        validate_decimals(decimals)
        if base_units < 0:
            raise create_error(
                AmountErrorCode.NEGATIVE_AMOUNT,
                "Negative base units are not supported.",
            )
    except AmountParseError as exc:
        logger.debug("Rejected base units %r (decimals=%r): %s", base_units, decimals, exc.code.value)
        raise

    digits = digits_from_int(base_units)
    if decimals == 0:
        return digits

    if len(digits) <= decimals:
        fraction = digits.rjust(decimals, "0").rstrip("0")
        return "0." + fraction if fraction else "0"

    integer_part = digits[:-decimals]
    fractional_part = digits[-decimals:].rstrip("0")
    if not fractional_part:
        return integer_part
    return f"{integer_part}.{fractional_part}"
