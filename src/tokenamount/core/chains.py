from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Chain:
    name: str
    evm: bool


ETHEREUM = Chain(name="ethereum", evm=True)
POLYGON = Chain(name="polygon", evm=True)
ARBITRUM = Chain(name="arbitrum", evm=True)
OPTIMISM = Chain(name="optimism", evm=True)
BASE = Chain(name="base", evm=True)
AVALANCHE = Chain(name="avalanche", evm=True)
BNB = Chain(name="bnb", evm=True)
PLASMA = Chain(name="plasma", evm=True)
BITCOIN = Chain(name="bitcoin", evm=False)
SOLANA = Chain(name="solana", evm=False)
SPARK = Chain(name="spark", evm=False)
TON = Chain(name="ton", evm=False)
TRON = Chain(name="tron", evm=False)

CHAINS: Dict[str, Chain] = {
    chain.name: chain
    for chain in (
        ETHEREUM,
        POLYGON,
        ARBITRUM,
        OPTIMISM,
        BASE,
        AVALANCHE,
        BNB,
        PLASMA,
        BITCOIN,
        SOLANA,
        SPARK,
        TON,
        TRON,
    )
}


def find_chain(chain: Chain | str) -> Optional[Chain]:
    if isinstance(chain, Chain):
        return chain
    if isinstance(chain, str):
        return CHAINS.get(chain.strip().lower())
    return None


def as_chain(chain: Chain | str) -> Chain:
    found = find_chain(chain)
    if found is None:
        raise ValueError(f"Unsupported chain: {chain}")
    return found
