from __future__ import annotations

import logging
from typing import Dict, List, Optional

from eth_utils import is_hex_address, to_checksum_address

from tokenamount.core.chains import Chain, find_chain
from tokenamount.core.units import format_base_units_to_amount, parse_amount_to_base_units

from .defaults import DEFAULT_TOKENS
from .types import TokenInfo

logger = logging.getLogger(__name__)


def _chain_name(chain: Chain | str) -> str:
    if isinstance(chain, Chain):
        return chain.name
    if isinstance(chain, str) and chain.strip():
        return chain.strip().lower()
    raise ValueError(f"Invalid chain: {chain!r}")


class TokenRegistry:
    """Per-chain mapping of token symbols to :class:`TokenInfo`.

    Any chain name is accepted; names are trimmed and lower-cased. Symbols
    are case-insensitive and stored upper-cased. Addresses on known EVM
    chains must be 20-byte hex and are kept in checksum form; every other
    chain keeps the address exactly as registered.
    """

    def __init__(self) -> None:
        self._tokens: Dict[str, Dict[str, TokenInfo]] = {}

    def register_token(self, chain: Chain | str, symbol: str, token: TokenInfo) -> "TokenRegistry":
        name = _chain_name(chain)
        known = find_chain(chain)
        if known is not None and known.evm:
            if not is_hex_address(token.address):
                raise ValueError(f"Invalid token address for {name}: {token.address}")
            token = TokenInfo(address=to_checksum_address(token.address), decimals=token.decimals)
        key = symbol.upper()
        self._tokens.setdefault(name, {})[key] = token
        logger.debug("Registered %s on %s (%s, decimals=%d)", key, name, token.address, token.decimals)
        return self

    def register_defaults(self, chain: Chain | str) -> "TokenRegistry":
        name = _chain_name(chain)
        for symbol, token in DEFAULT_TOKENS.get(name, {}).items():
            self.register_token(name, symbol, token)
        return self

    def get_token_info(self, chain: Chain | str, symbol: str) -> Optional[TokenInfo]:
        tokens = self._tokens.get(_chain_name(chain))
        if tokens is None:
            return None
        return tokens.get(symbol.upper())

    def get_registered_tokens(self, chain: Chain | str) -> List[str]:
        return list(self._tokens.get(_chain_name(chain), {}))

    def require_token_info(self, chain: Chain | str, symbol: str) -> TokenInfo:
        info = self.get_token_info(chain, symbol)
        if info is None:
            name = _chain_name(chain)
            available = self.get_registered_tokens(name)
            raise ValueError(
                f'Token symbol "{symbol}" not registered for {name}. '
                f"Available tokens: {', '.join(available) if available else 'none'}"
            )
        return info

    def parse_amount(self, chain: Chain | str, symbol: str, amount: str) -> int:
        """Parse ``amount`` of ``symbol`` into base units using its registered decimals."""
        return parse_amount_to_base_units(amount, self.require_token_info(chain, symbol).decimals)

    def format_amount(self, chain: Chain | str, symbol: str, base_units: int) -> str:
        return format_base_units_to_amount(base_units, self.require_token_info(chain, symbol).decimals)
