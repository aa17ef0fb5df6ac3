from __future__ import annotations

import re

from .constants import MAX_EXPONENT
from .errors import AmountErrorCode, create_error

_SCIENTIFIC_RE = re.compile(r"([0-9]+)(?:\.([0-9]+))?[eE]([+-]?[0-9]+)")


def _parse_exponent(text: str, value: str, max_decimals: int) -> int:
    negative = text.startswith("-")
    magnitude = text.lstrip("+-").lstrip("0") or "0"
    # Compared by length first so int() never sees an unbounded string.
    if len(magnitude) > len(str(MAX_EXPONENT)) or int(magnitude) > MAX_EXPONENT:
        if negative:
            raise create_error(
                AmountErrorCode.SCIENTIFIC_NOTATION_PRECISION,
                f'Scientific notation "{value}" expands to more than {MAX_EXPONENT} decimal places, '
                f"but token only supports {max_decimals}.",
            )
        raise create_error(
            AmountErrorCode.INVALID_FORMAT,
            f'Exponent in "{value}" exceeds the maximum of {MAX_EXPONENT}.',
        )
    exponent = int(magnitude)
    return -exponent if negative else exponent


def expand_scientific_notation(value: str, max_decimals: int) -> str:
    """Rewrite ``value`` in scientific notation as a plain decimal string.

    The mantissa digits are shifted by moving the decimal point, so no
    floating point value is ever produced. ``"1.5e-3"`` becomes ``"0.0015"``
    and ``"2.5e3"`` becomes ``"2500"``.

    Raises:
        AmountParseError: ``INVALID_FORMAT`` if ``value`` is not
            ``digits(.digits)?[eE][+-]?digits`` or its exponent exceeds
            ``MAX_EXPONENT``, or
            ``SCIENTIFIC_NOTATION_PRECISION`` if the expanded value needs
            more than ``max_decimals`` fractional digits.
    """
    match = _SCIENTIFIC_RE.fullmatch(value)
    if match is None:
        raise create_error(
            AmountErrorCode.INVALID_FORMAT,
            f'Invalid scientific notation format: "{value}".',
        )

    integer_digits, fraction_digits, exponent = match.groups()
    digits = integer_digits + (fraction_digits or "")
    position = len(integer_digits) + _parse_exponent(exponent, value, max_decimals)

    # Measured before the zeros are materialised so a huge negative
    # exponent fails without allocating the padded string.
    fraction_length = max(len(digits) - position, 0)
    if fraction_length > max_decimals:
        raise create_error(
            AmountErrorCode.SCIENTIFIC_NOTATION_PRECISION,
            f'Scientific notation "{value}" expands to {fraction_length} decimal places, '
            f"but token only supports {max_decimals}.",
        )

    if position <= 0:
        return "0." + "0" * -position + digits
    if position >= len(digits):
        return digits + "0" * (position - len(digits))
    return digits[:position] + "." + digits[position:]
