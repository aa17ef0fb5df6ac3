from __future__ import annotations

from dataclasses import dataclass

from tokenamount.core.normalize import validate_decimals


@dataclass(frozen=True)
class TokenInfo:
    """Contract address and decimal places of a registered token."""

    address: str
    decimals: int

    def __post_init__(self) -> None:
        validate_decimals(self.decimals)
