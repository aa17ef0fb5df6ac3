"""Amount codec primitives."""

from .chains import CHAINS, Chain, as_chain, find_chain
from .constants import MAX_DECIMALS, MAX_EXPONENT
from .errors import AmountErrorCode, AmountParseError, create_error
from .normalize import normalize_amount, validate_decimals
from .scientific import expand_scientific_notation
from .units import format_base_units_to_amount, parse_amount_to_base_units

__all__ = [
    "Chain",
    "CHAINS",
    "as_chain",
    "find_chain",
    "MAX_DECIMALS",
    "MAX_EXPONENT",
    "AmountErrorCode",
    "AmountParseError",
    "create_error",
    "normalize_amount",
    "validate_decimals",
    "expand_scientific_notation",
    "parse_amount_to_base_units",
    "format_base_units_to_amount",
]
