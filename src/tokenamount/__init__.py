"""tokenamount - exact decimal amount codec for blockchain token base units."""

from ._version import __version__
from .core import (
    AmountErrorCode,
    AmountParseError,
    MAX_DECIMALS,
    expand_scientific_notation,
    format_base_units_to_amount,
    parse_amount_to_base_units,
)
from .tokens import DEFAULT_TOKENS, TokenInfo, TokenRegistry

__all__ = [
    "__version__",
    "AmountErrorCode",
    "AmountParseError",
    "MAX_DECIMALS",
    "expand_scientific_notation",
    "parse_amount_to_base_units",
    "format_base_units_to_amount",
    "DEFAULT_TOKENS",
    "TokenInfo",
    "TokenRegistry",
]
