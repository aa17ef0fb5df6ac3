from .defaults import DEFAULT_TOKENS
from .registry import TokenRegistry
from .types import TokenInfo

__all__ = [
    "DEFAULT_TOKENS",
    "TokenInfo",
    "TokenRegistry",
]
