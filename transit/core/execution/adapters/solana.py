"""Solana wallet adapter."""

from typing import Any, Dict, Optional

from ....config import settings
from ...bridge.models import ChainConfig
from ...chain_types import ChainContext
from ...wallet.models import Wallet
from ..models import UnsignedTransaction
from .base import ChainAdapter


class SolanaAdapter(ChainAdapter):
    context = ChainContext.SOLANA

    def _build_request(
        self,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        request = super()._build_request(tx, chain, options)
        request["signers"] = list(tx.signers)
        request["rpcUrl"] = settings.solana_rpc_url
        request.setdefault("options", {}).setdefault("commitment", "confirmed")
        return request

    async def sign_and_send(
        self,
        wallet: Wallet,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]] = None,
    ) -> str:
        result = await self._send(wallet, tx, chain, options)
        # the transaction signature doubles as its id
        return result.id
