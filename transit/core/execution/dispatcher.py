"""
Chain dispatcher.

Routes wallet operations to the adapter of the chain's execution context:

- sign_and_send: EVM, Solana, Sui, Aptos
- switch_chain: EVM, Cosmos (other contexts have no switching concept)
- watch_asset: EVM only
- disconnect: any bound wallet

Adapters are resolved through ``AdapterRegistry``, which imports an adapter
module the first time its context is used and reuses the instance after.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, Dict, FrozenSet, Optional, Union

from ..bridge.chain_registry import ChainRegistry
from ..chain_types import ChainContext, ChainId, normalize_chain_id
from ..errors import (
    InvalidContextError,
    UnimplementedContextError,
    WalletNotConnectedError,
    WalletNotSupportedError,
)
from ..wallet.models import TransferWallet, Wallet
from ..wallet.registry import WalletSessionRegistry
from .adapters.base import ChainAdapter
from .models import AssetInfo, UnsignedTransaction

AdapterFactory = Union[str, Callable[[], ChainAdapter]]

DEFAULT_ADAPTERS: Dict[ChainContext, str] = {
    ChainContext.ETH: "transit.core.execution.adapters.evm:EvmAdapter",
    ChainContext.SOLANA: "transit.core.execution.adapters.solana:SolanaAdapter",
    ChainContext.SUI: "transit.core.execution.adapters.sui:SuiAdapter",
    ChainContext.APTOS: "transit.core.execution.adapters.aptos:AptosAdapter",
    ChainContext.COSMOS: "transit.core.execution.adapters.cosmos:CosmosAdapter",
}

SIGNING_CONTEXTS: FrozenSet[ChainContext] = frozenset(
    {ChainContext.ETH, ChainContext.SOLANA, ChainContext.SUI, ChainContext.APTOS}
)
SWITCHING_CONTEXTS: FrozenSet[ChainContext] = frozenset({ChainContext.ETH, ChainContext.COSMOS})


def _load_factory(path: str) -> Callable[[], ChainAdapter]:
    module_name, _, attr = path.partition(":")
    module = importlib.import_module(module_name)
    return getattr(module, attr)


class AdapterRegistry:
    """Context -> adapter table with load-once semantics."""

    def __init__(
        self,
        factories: Optional[Dict[ChainContext, AdapterFactory]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._factories: Dict[ChainContext, AdapterFactory] = dict(
            DEFAULT_ADAPTERS if factories is None else factories
        )
        self._loaded: Dict[ChainContext, ChainAdapter] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, context: ChainContext, factory: AdapterFactory) -> None:
        self._factories[context] = factory
        self._loaded.pop(context, None)

    def get(self, context: ChainContext) -> ChainAdapter:
        adapter = self._loaded.get(context)
        if adapter is not None:
            return adapter

        factory = self._factories.get(context)
        if factory is None:
            raise UnimplementedContextError(ChainContext(context).value, operation="adapter")
        if isinstance(factory, str):
            factory = _load_factory(factory)

        adapter = factory()
        self._loaded[context] = adapter
        self._logger.debug("Loaded %s adapter", ChainContext(context).value)
        return adapter

    def is_loaded(self, context: ChainContext) -> bool:
        return context in self._loaded

    def supports(self, context: ChainContext) -> bool:
        return context in self._factories


class ChainDispatcher:
    """Runs wallet operations for the wallets held by a session registry."""

    def __init__(
        self,
        wallets: WalletSessionRegistry,
        chains: Optional[ChainRegistry] = None,
        adapters: Optional[AdapterRegistry] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._wallets = wallets
        self._chains = chains or wallets.chains
        self._adapters = adapters or AdapterRegistry()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def adapters(self) -> AdapterRegistry:
        return self._adapters

    def _require_wallet(self, role: TransferWallet) -> Wallet:
        role = TransferWallet(role)
        wallet = self._wallets.get_wallet(role)
        if wallet is None:
            raise WalletNotConnectedError(role.value)
        return wallet

    async def sign_and_send(
        self,
        chain: str,
        tx: UnsignedTransaction,
        role: TransferWallet,
        options: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Sign and broadcast ``tx`` with the wallet bound to ``role``."""
        chain_config = self._chains.get_chain(chain)
        wallet = self._require_wallet(role)

        if chain_config.context not in SIGNING_CONTEXTS:
            raise UnimplementedContextError(chain_config.context.value, operation="signAndSend")

        adapter = self._adapters.get(chain_config.context)
        tx_id = await adapter.sign_and_send(wallet, tx, chain_config, options or {})
        self._logger.info("Sent transaction %s on %s", tx_id, chain_config.key)
        return tx_id

    async def switch_chain(self, chain_id: ChainId, role: TransferWallet) -> Optional[str]:
        """Move the role's wallet to ``chain_id``; returns the wallet address."""
        wallet = self._require_wallet(role)
        target = normalize_chain_id(chain_id)

        current = wallet.get_network_info().chain_id
        if current is not None and normalize_chain_id(current) == target:
            return wallet.get_address()

        chain_config = self._chains.get_chain_by_chain_id(target)

        if chain_config.context in SWITCHING_CONTEXTS:
            adapter = self._adapters.get(chain_config.context)
            try:
                await adapter.switch_chain(wallet, chain_config.chain_id)
            except WalletNotSupportedError as exc:
                # many wallets can't switch; the transfer flow continues anyway
                self._logger.info("Chain switch to %s not supported: %s", chain_config.key, exc)

        return wallet.get_address()

    async def watch_asset(self, asset: AssetInfo, role: TransferWallet) -> None:
        """Ask the role's EVM wallet to track ``asset``."""
        wallet = self._require_wallet(role)
        binding = self._wallets.get(role)
        if binding.context != ChainContext.ETH:
            raise InvalidContextError(
                "watchAsset",
                expected=ChainContext.ETH.value,
                actual=binding.context.value,
                role=TransferWallet(role).value,
            )
        adapter = self._adapters.get(ChainContext.ETH)
        await adapter.watch_asset(wallet, asset)

    async def disconnect(self, role: TransferWallet) -> None:
        binding = self._wallets.get(role)
        if binding is None:
            return
        if self._adapters.supports(binding.context):
            await self._adapters.get(binding.context).disconnect(binding.wallet)
        else:
            await binding.wallet.disconnect()
