"""
Wallet session registry.

Tracks at most one connected wallet per transfer role and reacts to
provider-driven lifecycle events:
- ``disconnect``: detach listeners, clear the binding, forget the wallet
- ``accountsChanged``: disconnect when the account list is empty or the
  first account is no longer the bound address

The registry is constructed at application start and passed to its users;
``close()`` tears it down.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from ...config import settings
from ..bridge.chain_registry import ChainRegistry, get_chain_registry
from ..bridge.models import ChainConfig
from ..chain_types import ChainContext
from .models import (
    Subscription,
    TransferWallet,
    Wallet,
    WalletBinding,
    WalletData,
    WalletEvent,
)
from .storage import WalletMarkerStore, create_marker_store, wallet_marker_key

WalletOptionsProvider = Callable[[ChainConfig], Awaitable[List[WalletData]]]
EventHook = Callable[[Dict[str, Any]], None]


class WalletSessionRegistry:
    """Holds the sending and receiving wallet bindings."""

    def __init__(
        self,
        chains: Optional[ChainRegistry] = None,
        *,
        store: Optional[WalletMarkerStore] = None,
        storage_prefix: Optional[str] = None,
        wallet_options: Optional[WalletOptionsProvider] = None,
        restore_skip: Optional[Sequence[str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._chains = chains or get_chain_registry()
        self._store = store or create_marker_store()
        self._prefix = storage_prefix or settings.storage_prefix
        self._wallet_options = wallet_options
        self._restore_skip = set(restore_skip if restore_skip is not None else settings.restore_skip_wallets)
        self._logger = logger or logging.getLogger(__name__)
        self._bindings: Dict[TransferWallet, Optional[WalletBinding]] = {
            TransferWallet.SENDING: None,
            TransferWallet.RECEIVING: None,
        }
        self._hooks: List[EventHook] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def chains(self) -> ChainRegistry:
        return self._chains

    def get(self, role: TransferWallet) -> Optional[WalletBinding]:
        return self._bindings[TransferWallet(role)]

    def get_wallet(self, role: TransferWallet) -> Optional[Wallet]:
        binding = self.get(role)
        return binding.wallet if binding else None

    def get_address(self, role: TransferWallet) -> Optional[str]:
        binding = self.get(role)
        return binding.address if binding else None

    def marker_key(self, context: ChainContext) -> str:
        return wallet_marker_key(self._prefix, context)

    def accepted_chains(self, context: Optional[ChainContext] = None) -> List[str]:
        return self._chains.accepted_chains(context)

    def add_event_hook(self, hook: EventHook) -> None:
        """Register a callback for ``wallet.connect`` notifications."""
        self._hooks.append(hook)

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    async def connect(self, role: TransferWallet, chain: str, wallet_data: WalletData) -> WalletBinding:
        """Connect ``wallet_data`` for ``role`` on ``chain``, replacing any prior binding."""
        role = TransferWallet(role)
        chain_config = self._chains.get_chain(chain)
        self._release(role)

        wallet = wallet_data.wallet
        await wallet.connect(chain_id=chain_config.chain_id)

        binding = WalletBinding(
            wallet=wallet,
            name=wallet_data.name,
            address=wallet.get_address(),
            context=chain_config.context,
            chain=chain_config.key,
            icon=wallet.get_icon(),
        )
        marker_key = self.marker_key(chain_config.context)

        # clear the wallet when the user disconnects from outside the app
        async def on_disconnect(*_args: Any) -> None:
            if binding.subscription is not None:
                binding.subscription.unsubscribe()
            for bound_role, bound in self._bindings.items():
                if bound is binding:
                    self._bindings[bound_role] = None
            self._store.remove(marker_key)
            self._logger.info("Wallet %s disconnected", binding.name)

        # when the user switches or drops the active account, stop acting
        # under the stale address
        async def on_accounts_changed(accounts: Optional[Sequence[str]] = None, *_args: Any) -> None:
            accounts = list(accounts or [])
            if not accounts or (binding.address and accounts[0] != binding.address):
                await wallet.disconnect()

        binding.subscription = Subscription(
            wallet,
            {
                WalletEvent.DISCONNECT.value: on_disconnect,
                WalletEvent.ACCOUNTS_CHANGED.value: on_accounts_changed,
            },
        ).subscribe()

        self._bindings[role] = binding
        self._store.set(marker_key, wallet_data.name)
        self._logger.info("Connected %s wallet %s on %s", role.value, wallet_data.name, chain_config.key)
        self._emit(
            {
                "type": "wallet.connect",
                "details": {
                    "side": role.value,
                    "chain": chain_config.key,
                    "wallet": wallet_data.name.lower(),
                },
            }
        )
        return binding

    def swap(self) -> None:
        """Exchange the sending and receiving bindings."""
        sending = self._bindings[TransferWallet.SENDING]
        self._bindings[TransferWallet.SENDING] = self._bindings[TransferWallet.RECEIVING]
        self._bindings[TransferWallet.RECEIVING] = sending

    async def restore_last_used(self, role: TransferWallet, chain: str) -> Optional[WalletBinding]:
        """Silently reconnect the wallet last used for the chain's context.

        Best effort: any failure leaves the role unbound and is only logged.
        """
        try:
            chain_config = self._chains.get_chain(chain)
            last_used = self._store.get(self.marker_key(chain_config.context))
            if not last_used or last_used in self._restore_skip:
                return None
            if self._wallet_options is None:
                return None

            options = await self._wallet_options(chain_config)
            match = next((option for option in options if option.name == last_used), None)
            if match is None:
                return None
            return await self.connect(role, chain_config.key, match)
        except Exception as exc:
            self._logger.info("Could not restore last used wallet for %s on %s: %s", role, chain, exc)
            return None

    async def restore_sessions(
        self,
        from_chain: Optional[str],
        to_chain: Optional[str],
    ) -> Dict[TransferWallet, Optional[WalletBinding]]:
        """Restore both roles for the currently selected chains."""
        restored: Dict[TransferWallet, Optional[WalletBinding]] = {}
        if from_chain:
            restored[TransferWallet.SENDING] = await self.restore_last_used(TransferWallet.SENDING, from_chain)
        if to_chain:
            restored[TransferWallet.RECEIVING] = await self.restore_last_used(TransferWallet.RECEIVING, to_chain)
        return restored

    def close(self) -> None:
        """Detach every listener and drop all bindings."""
        for role in list(self._bindings):
            self._release(role)

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _release(self, role: TransferWallet) -> None:
        previous = self._bindings[role]
        if previous is None:
            return
        if previous.subscription is not None:
            previous.subscription.unsubscribe()
        self._bindings[role] = None

    def _emit(self, event: Dict[str, Any]) -> None:
        for hook in self._hooks:
            try:
                hook(event)
            except Exception as exc:
                self._logger.warning("Wallet event hook failed for %s: %s", event.get("type"), exc)
