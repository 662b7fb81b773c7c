"""Cosmos wallet adapter.

Signing for Cosmos chains is handled by the gateway flow upstream; the
adapter only moves the wallet between chains.
"""

from ...chain_types import ChainContext, ChainId
from ...wallet.models import Wallet
from .base import ChainAdapter


class CosmosAdapter(ChainAdapter):
    context = ChainContext.COSMOS

    async def switch_chain(self, wallet: Wallet, chain_id: ChainId) -> None:
        await wallet.switch_chain(str(chain_id))
