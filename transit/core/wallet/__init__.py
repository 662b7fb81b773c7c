"""
Wallet Sessions

Tracks the connected sending/receiving wallets:
- WalletSessionRegistry: connect, swap, restore and provider event handling
- WalletMarkerStore: persisted last-used wallet per chain context

Usage:
    from transit.core.wallet import TransferWallet, WalletSessionRegistry

    registry = WalletSessionRegistry(wallet_options=fetch_wallet_options)
    await registry.connect(TransferWallet.SENDING, "Ethereum", wallet_data)

    # On app start, silently reconnect the wallets used last time
    await registry.restore_sessions("Ethereum", "Solana")
"""

from .models import (
    SendTransactionResult,
    Subscription,
    TransferWallet,
    Wallet,
    WalletBinding,
    WalletData,
    WalletEvent,
    WalletState,
    is_wallet_ready,
    map_wallets,
)
from .registry import WalletSessionRegistry
from .storage import (
    InMemoryWalletMarkerStore,
    JsonFileWalletMarkerStore,
    WalletMarkerStore,
    create_marker_store,
    wallet_marker_key,
)

__all__ = [
    # Models
    "SendTransactionResult",
    "Subscription",
    "TransferWallet",
    "Wallet",
    "WalletBinding",
    "WalletData",
    "WalletEvent",
    "WalletState",
    "is_wallet_ready",
    "map_wallets",
    # Registry
    "WalletSessionRegistry",
    # Storage
    "InMemoryWalletMarkerStore",
    "JsonFileWalletMarkerStore",
    "WalletMarkerStore",
    "create_marker_store",
    "wallet_marker_key",
]
