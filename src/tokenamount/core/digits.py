from __future__ import annotations

import sys
from typing import Dict

# floor(log10(2) * 10**5)
_LOG10_2_SCALED = 30102


def _max_str_digits() -> int:
    # 0 means unlimited; interpreters before 3.11 have no limit at all.
    getter = getattr(sys, "get_int_max_str_digits", None)
    return getter() if getter is not None else 0


def _pow10(exponent: int, powers: Dict[int, int]) -> int:
    power = powers.get(exponent)
    if power is None:
        power = powers[exponent] = 10**exponent
    return power


def int_from_digits(digits: str) -> int:
    """Convert an ASCII digit string of any length to ``int``.

    Strings longer than the interpreter's int/str conversion limit are split
    in half recursively, so the recursion depth is logarithmic in the length.
    """
    limit = _max_str_digits()
    if not limit or len(digits) <= limit:
        return int(digits, 10)
    return _int_from_halves(digits, limit, {})


def _int_from_halves(digits: str, limit: int, powers: Dict[int, int]) -> int:
    if len(digits) <= limit:
        return int(digits, 10)
    split = len(digits) // 2
    high = _int_from_halves(digits[:-split], limit, powers)
    low = _int_from_halves(digits[-split:], limit, powers)
    return high * _pow10(split, powers) + low


def digits_from_int(value: int) -> str:
    """Render a non-negative ``int`` of any size as a decimal digit string."""
    limit = _max_str_digits()
    # 8**limit < 10**limit, so this many bits always fit the limit.
    if not limit or value.bit_length() <= 3 * limit:
        return str(value)
    return _digits_from_halves(value, limit, {})


def _digits_from_halves(value: int, limit: int, powers: Dict[int, int]) -> str:
    if value < _pow10(limit, powers):
        return str(value)
    split = value.bit_length() * _LOG10_2_SCALED // 100000 // 2
    high, low = divmod(value, _pow10(split, powers))
    return _digits_from_halves(high, limit, powers) + _digits_from_halves(low, limit, powers).zfill(split)
