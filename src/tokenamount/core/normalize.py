from __future__ import annotations

import re
from typing import Any, Tuple

from .constants import MAX_DECIMALS
from .errors import AmountErrorCode, create_error
from .scientific import expand_scientific_notation

# Control whitespace, Unicode space separators, line separators and the byte
# order mark. Unlike str.strip(), \x1c-\x1f and \x85 are not trimmed.
_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# ASCII only: str.isdigit and \d also accept other Unicode digits.
_DECIMAL_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def validate_decimals(decimals: Any) -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
        raise create_error(
            AmountErrorCode.INVALID_DECIMALS,
            f"Invalid decimals value: {decimals!r}. Must be a non-negative integer <= {MAX_DECIMALS}.",
        )
    return decimals


def normalize_amount(amount: Any, decimals: int) -> str:
    """Reduce a user supplied amount to plain ``digits(.digits)?`` form.

    Surrounding whitespace and every grouping comma are removed and
    scientific notation is expanded. Comma positions are not checked, so
    ``"1,0,0"`` normalizes to ``"100"``. The sign is checked before commas
    are stripped so ``"-1,000"`` is reported as negative.
    """
    if not isinstance(amount, str):
        raise create_error(
            AmountErrorCode.INVALID_FORMAT,
            f"Amount must be a string, received {type(amount).__name__}.",
        )

    trimmed = amount.strip(_WHITESPACE)
    if not trimmed:
        raise create_error(AmountErrorCode.EMPTY_STRING, "Amount cannot be empty.")

    if trimmed.startswith("-"):
        raise create_error(
            AmountErrorCode.NEGATIVE_AMOUNT,
            f'Negative amounts are not allowed: "{amount}".',
        )

    value = trimmed.replace(",", "")
    if "e" in value or "E" in value:
        value = expand_scientific_notation(value, decimals)

    if _DECIMAL_RE.fullmatch(value) is None:
        raise create_error(
            AmountErrorCode.INVALID_FORMAT,
            f'Invalid amount format: "{amount}". '
            'Expected a positive number (e.g., "100", "2.50", "1,000.00").',
        )
    return value


def split_amount(value: str) -> Tuple[str, str]:
    integer_part, _, fractional_part = value.partition(".")
    return integer_part, fractional_part
