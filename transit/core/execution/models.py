"""
Execution request models shared by the dispatcher and its adapters.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class UnsignedTransaction:
    """A protocol-built transaction waiting for the wallet's signature."""
    chain: str
    transaction: Any                            # Context-specific payload
    network: str = "Mainnet"
    description: str = ""
    parallelizable: bool = False
    signers: List[Any] = field(default_factory=list)   # Extra Solana signers

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chain": self.chain,
            "network": self.network,
            "transaction": self.transaction,
            "description": self.description,
            "parallelizable": self.parallelizable,
        }


@dataclass
class AssetInfo:
    """A token to add to the wallet's watch list (EIP-747)."""
    address: str
    symbol: str
    decimals: int
    image: Optional[str] = None

    def to_watch_request(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "address": self.address,
            "symbol": self.symbol,
            "decimals": self.decimals,
        }
        if self.image:
            options["image"] = self.image
        return {"type": "ERC20", "options": options}
