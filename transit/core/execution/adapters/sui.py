"""Sui wallet adapter."""

from typing import Any, Dict, Optional

from ...bridge.models import ChainConfig
from ...chain_types import ChainContext
from ...wallet.models import Wallet
from ..models import UnsignedTransaction
from .base import ChainAdapter


class SuiAdapter(ChainAdapter):
    context = ChainContext.SUI

    async def sign_and_send(
        self,
        wallet: Wallet,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]] = None,
    ) -> str:
        result = await self._send(wallet, tx, chain, options)
        return result.id
