"""
Chain identification types and utilities.

Every chain the client knows about belongs to exactly one execution family
(``ChainContext``). The context decides:
- which dispatcher adapter signs and sends for that chain
- how a 32-byte wire address is rendered as a native address
- which persisted wallet marker is used for the chain

Chain ids follow the wallet's own notion of a network id:
- EVM chains use their standard integer chain IDs (e.g., 1 for Ethereum)
- Non-EVM chains use string identifiers (e.g., "solana", "osmosis-1")
"""

from __future__ import annotations

from enum import Enum
from typing import Union

ChainId = Union[int, str]

SOLANA_CHAIN_ID = "solana"


class ChainContext(str, Enum):
    """Execution family of a chain. Values match the persisted marker keys."""

    ETH = "Ethereum"
    SOLANA = "Solana"
    SUI = "Sui"
    APTOS = "Aptos"
    COSMOS = "Cosmos"
    SEI = "Sei"


def is_evm_context(context: ChainContext) -> bool:
    """Check if the context is EVM-compatible."""
    return context == ChainContext.ETH


def is_solana_context(context: ChainContext) -> bool:
    """Check if the context is the Solana family (token accounts are ATAs)."""
    return context == ChainContext.SOLANA


def is_evm_chain_id(chain_id: ChainId) -> bool:
    """Check if the chain ID looks like an EVM chain ID."""
    return isinstance(chain_id, int) and not isinstance(chain_id, bool)


def normalize_chain_id(chain_id: ChainId) -> ChainId:
    """
    Canonicalize a chain id reported by a wallet.

    Wallets report EVM chain ids as ints, decimal strings or hex strings
    ("0x1"); all of those collapse to the int form. Other ids are returned
    stripped.

    Examples:
        >>> normalize_chain_id("0x89")
        137
        >>> normalize_chain_id("osmosis-1")
        'osmosis-1'
    """
    if is_evm_chain_id(chain_id):
        return chain_id
    value = str(chain_id).strip()
    if value.lower().startswith("0x"):
        try:
            return int(value, 16)
        except ValueError:
            return value
    if value.isdigit():
        return int(value)
    return value


__all__ = [
    "ChainId",
    "ChainContext",
    "SOLANA_CHAIN_ID",
    "is_evm_context",
    "is_solana_context",
    "is_evm_chain_id",
    "normalize_chain_id",
]
