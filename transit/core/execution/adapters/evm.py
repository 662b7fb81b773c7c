"""EVM wallet adapter (injected providers, WalletConnect, ...)."""

from typing import Any, Dict, Optional

from eth_utils import to_checksum_address

from ...bridge.models import ChainConfig
from ...chain_types import ChainContext, ChainId, is_evm_chain_id, normalize_chain_id
from ...wallet.models import Wallet
from ..models import AssetInfo, UnsignedTransaction
from .base import ChainAdapter

_ADDRESS_FIELDS = ("from", "to")


class EvmAdapter(ChainAdapter):
    context = ChainContext.ETH

    async def sign_and_send(
        self,
        wallet: Wallet,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]] = None,
    ) -> str:
        transaction = tx.transaction
        if isinstance(transaction, dict):
            transaction = dict(transaction)
            for key in _ADDRESS_FIELDS:
                if transaction.get(key):
                    transaction[key] = to_checksum_address(transaction[key])
            tx = UnsignedTransaction(
                chain=tx.chain,
                transaction=transaction,
                network=tx.network,
                description=tx.description,
                parallelizable=tx.parallelizable,
                signers=tx.signers,
            )
        result = await self._send(wallet, tx, chain, options)
        return result.id

    async def switch_chain(self, wallet: Wallet, chain_id: ChainId) -> None:
        chain_id = normalize_chain_id(chain_id)
        if not is_evm_chain_id(chain_id):
            raise ValueError(f"EVM chain id must be an integer, got {chain_id!r}")
        await wallet.switch_chain(chain_id)

    async def watch_asset(self, wallet: Wallet, asset: AssetInfo) -> None:
        request = asset.to_watch_request()
        request["options"]["address"] = to_checksum_address(asset.address)
        await wallet.watch_asset(request)
