"""
Base interface for per-context chain adapters.

An adapter knows how to phrase wallet requests for one execution family.
The wallet itself is passed on every call; adapters hold no session state.
"""

import logging
from abc import ABC
from typing import Any, ClassVar, Dict, Optional

from ...bridge.models import ChainConfig, NetworkInfo
from ...chain_types import ChainContext, ChainId
from ...errors import UnimplementedContextError, WalletNotSupportedError
from ...wallet.models import SendTransactionResult, Wallet
from ..models import AssetInfo, UnsignedTransaction


class ChainAdapter(ABC):
    """Wallet operations for a single chain context."""

    context: ClassVar[ChainContext]

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self.context.value

    async def sign_and_send(
        self,
        wallet: Wallet,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Sign ``tx`` with ``wallet`` and broadcast it; returns the tx id."""
        raise UnimplementedContextError(self.name, operation="signAndSend")

    async def switch_chain(self, wallet: Wallet, chain_id: ChainId) -> None:
        raise WalletNotSupportedError(f"{self.name} wallets cannot switch chains", operation="switchChain")

    async def watch_asset(self, wallet: Wallet, asset: AssetInfo) -> None:
        raise WalletNotSupportedError(f"{self.name} wallets cannot watch assets", operation="watchAsset")

    async def disconnect(self, wallet: Wallet) -> None:
        await wallet.disconnect()

    def get_address(self, wallet: Wallet) -> Optional[str]:
        return wallet.get_address()

    def get_network_info(self, wallet: Wallet) -> NetworkInfo:
        return wallet.get_network_info()

    def _build_request(
        self,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        request = tx.to_dict()
        request["chainId"] = chain.chain_id
        if options:
            request["options"] = dict(options)
        return request

    async def _send(
        self,
        wallet: Wallet,
        tx: UnsignedTransaction,
        chain: ChainConfig,
        options: Optional[Dict[str, Any]],
    ) -> SendTransactionResult:
        request = self._build_request(tx, chain, options)
        self._logger.debug("Sending %s transaction on %s: %s", self.name, chain.key, tx.description)
        return await wallet.sign_and_send_transaction(request)
