"""
Transaction Execution Layer

Dispatches wallet operations to the adapter matching a chain's context:
- ChainDispatcher: sign & send, switch chain, watch asset, disconnect
- AdapterRegistry: lazily imported, memoized per-context adapters

Usage:
    from transit.core.execution import ChainDispatcher, UnsignedTransaction
    from transit.core.wallet import TransferWallet

    dispatcher = ChainDispatcher(wallet_registry)
    tx_id = await dispatcher.sign_and_send(
        "Ethereum",
        UnsignedTransaction(chain="Ethereum", transaction={"to": "0x...", "data": "0x..."}),
        TransferWallet.SENDING,
    )
"""

from .dispatcher import (
    DEFAULT_ADAPTERS,
    SIGNING_CONTEXTS,
    SWITCHING_CONTEXTS,
    AdapterRegistry,
    ChainDispatcher,
)
from .models import AssetInfo, UnsignedTransaction

__all__ = [
    # Models
    "AssetInfo",
    "UnsignedTransaction",
    # Dispatcher
    "AdapterRegistry",
    "ChainDispatcher",
    "DEFAULT_ADAPTERS",
    "SIGNING_CONTEXTS",
    "SWITCHING_CONTEXTS",
]
