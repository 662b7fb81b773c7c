"""Aptos wallet adapter."""

from typing import Any, Dict, Optional

from ...bridge.models import ChainConfig
from ...chain_types import ChainContext
from ...wallet.models import Wallet
from ..models import UnsignedTransaction
from .base import ChainAdapter


class AptosAdapter(ChainAdapter):
    context = ChainContext.APTOS

    def _build_request(
        self,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        # Aptos wallets take the entry-function payload directly
        request = super()._build_request(tx, chain, options)
        request["payload"] = request.pop("transaction")
        return request

    async def sign_and_send(
        self,
        wallet: Wallet,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]] = None,
    ) -> str:
        result = await self._send(wallet, tx, chain, options)
        return result.id
