"""Explorer links for a transfer's source transaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import Settings, settings as default_settings


@dataclass(frozen=True)
class ExplorerInfo:
    url: str
    name: str
    api_url: str


def get_explorer_info(route: str, tx_hash: str, config: Optional[Settings] = None) -> ExplorerInfo:
    """Explorer page and status API for a transfer initiated on ``route``."""
    config = config or default_settings

    if route.startswith("MayanSwap"):
        return ExplorerInfo(
            url=f"https://explorer.mayan.finance/swap/{tx_hash}",
            name="Mayan Explorer",
            api_url=f"{config.mayan_api_url.rstrip('/')}/v3/swap/trx/{tx_hash}",
        )

    suffix = "" if config.is_mainnet else "?network=TESTNET"
    return ExplorerInfo(
        url=f"{config.wormscan_url}tx/{tx_hash}{suffix}",
        name="Wormholescan",
        api_url=f"{config.wormhole_api_url}api/v1/operations?txHash={tx_hash}",
    )
