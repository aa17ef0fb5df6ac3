from __future__ import annotations

from typing import Dict

from tokenamount.core.chains import (
    ARBITRUM,
    AVALANCHE,
    BASE,
    BNB,
    ETHEREUM,
    OPTIMISM,
    PLASMA,
    POLYGON,
    SOLANA,
    TON,
    TRON,
)

from .types import TokenInfo

DEFAULT_TOKENS: Dict[str, Dict[str, TokenInfo]] = {
    ETHEREUM.name: {
        "USDT": TokenInfo(address="0xdAC17F958D2ee523a2206206994597C13D831ec7", decimals=6),
        "XAUT": TokenInfo(address="0x68749665FF8D2d112Fa859AA293F07A622782F38", decimals=6),
    },
    POLYGON.name: {
        "USDT": TokenInfo(address="0xc2132D05D31c914a87C6611C10748AEb04B58e8F", decimals=6),
    },
    ARBITRUM.name: {
        "USDT": TokenInfo(address="0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", decimals=6),
    },
    OPTIMISM.name: {
        "USDT": TokenInfo(address="0x94b008aA00579c1307B0EF2c499aD98a8ce58e58", decimals=6),
    },
    BASE.name: {
        "USDT": TokenInfo(address="0xfde4C96c8593536E31F229EA8f37b2ADa2699bb2", decimals=6),
    },
    AVALANCHE.name: {
        "USDT": TokenInfo(address="0x9702230A8Ea53601f5cD2dc00fDBc13d4dF4A8c7", decimals=6),
    },
    BNB.name: {
        "USDT": TokenInfo(address="0x55d398326f99059fF775485246999027B3197955", decimals=18),
    },
    PLASMA.name: {
        "USDT": TokenInfo(address="0xB8CE59FC3717ada4C02eaDF9682A9e934F625ebb", decimals=6),
    },
    TRON.name: {
        "USDT": TokenInfo(address="TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t", decimals=6),
    },
    TON.name: {
        "USDT": TokenInfo(address="EQCxE6mUtQJKFnGfaROTKOt1lZbDiiX1kCixRv7Nw2Id_sDs", decimals=6),
    },
    SOLANA.name: {
        "USDT": TokenInfo(address="Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB", decimals=6),
    },
}
