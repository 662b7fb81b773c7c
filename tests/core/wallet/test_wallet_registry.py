"""
Tests for the wallet session registry: binding, provider events, swap and
last-used wallet restore.
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from transit.core.bridge.chain_registry import ChainRegistry
from transit.core.bridge.models import NetworkInfo
from transit.core.chain_types import ChainContext
from transit.core.errors import UnknownChainError
from transit.core.wallet import (
    InMemoryWalletMarkerStore,
    SendTransactionResult,
    TransferWallet,
    Wallet,
    WalletData,
    WalletSessionRegistry,
    WalletState,
    map_wallets,
)

EVM_ADDRESS = "0x1111111111111111111111111111111111111111"
SOLANA_ADDRESS = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


class FakeWallet(Wallet):
    """Wallet provider stub that emits events to registered listeners."""

    def __init__(
        self,
        name: str = "MetaMask",
        address: str = EVM_ADDRESS,
        connect_error: Optional[Exception] = None,
        state: WalletState = WalletState.INSTALLED,
    ):
        self.name = name
        self.address = address
        self.chain_id: Any = None
        self.connect_error = connect_error
        self.state = state
        self.listeners: Dict[str, List] = defaultdict(list)
        self.connect_calls: List[Any] = []
        self.disconnect_calls = 0

    def get_name(self) -> str:
        return self.name

    def get_icon(self) -> str:
        return f"{self.name.lower()}.svg"

    def get_address(self) -> Optional[str]:
        return self.address

    def get_network_info(self) -> NetworkInfo:
        return NetworkInfo(chain_id=self.chain_id)

    def get_wallet_state(self) -> WalletState:
        return self.state

    async def connect(self, *, chain_id=None) -> None:
        if self.connect_error is not None:
            raise self.connect_error
        self.connect_calls.append(chain_id)
        self.chain_id = chain_id

    async def disconnect(self) -> None:
        self.disconnect_calls += 1
        await self.emit("disconnect")

    def on(self, event, listener) -> None:
        self.listeners[event].append(listener)

    def off(self, event, listener) -> None:
        self.listeners[event].remove(listener)

    async def emit(self, event: str, *args) -> None:
        for listener in list(self.listeners[event]):
            await listener(*args)

    async def sign_and_send_transaction(self, request):
        return SendTransactionResult(id="0x")

    def listener_count(self) -> int:
        return sum(len(listeners) for listeners in self.listeners.values())


def _data(wallet: FakeWallet, context: ChainContext = ChainContext.ETH) -> WalletData:
    return WalletData(name=wallet.get_name(), type=context, wallet=wallet)


def _registry(store=None, **kwargs) -> WalletSessionRegistry:
    return WalletSessionRegistry(
        ChainRegistry.default(),
        store=store if store is not None else InMemoryWalletMarkerStore(),
        storage_prefix="transit",
        **kwargs,
    )


# =============================================================================
# connect
# =============================================================================


class TestConnect:
    @pytest.mark.asyncio
    async def test_connect_binds_and_persists_marker(self):
        store = InMemoryWalletMarkerStore()
        registry = _registry(store)
        wallet = FakeWallet()

        binding = await registry.connect(TransferWallet.SENDING, "Polygon", _data(wallet))

        assert wallet.connect_calls == [137]
        assert binding.address == EVM_ADDRESS
        assert binding.chain == "Polygon"
        assert registry.get_wallet(TransferWallet.SENDING) is wallet
        assert registry.get_address(TransferWallet.SENDING) == EVM_ADDRESS
        assert registry.get(TransferWallet.RECEIVING) is None
        assert store.snapshot() == {"transit:wallet:Ethereum": "MetaMask"}
        assert binding.subscription.active is True
        assert binding.to_dict()["type"] == "Ethereum"

    @pytest.mark.asyncio
    async def test_rebinding_role_detaches_previous_listeners(self):
        registry = _registry()
        first = FakeWallet(name="MetaMask")
        second = FakeWallet(name="Rabby")

        await registry.connect(TransferWallet.SENDING, "Ethereum", _data(first))
        await registry.connect(TransferWallet.SENDING, "Ethereum", _data(second))

        assert first.listener_count() == 0
        assert second.listener_count() == 2
        assert registry.get_wallet(TransferWallet.SENDING) is second

    @pytest.mark.asyncio
    async def test_repeated_connects_do_not_accumulate_listeners(self):
        registry = _registry()
        wallet = FakeWallet()

        for _ in range(3):
            await registry.connect(TransferWallet.SENDING, "Ethereum", _data(wallet))

        assert wallet.listener_count() == 2

    @pytest.mark.asyncio
    async def test_connect_failure_propagates_and_leaves_role_empty(self):
        registry = _registry()
        wallet = FakeWallet(connect_error=RuntimeError("user closed popup"))

        with pytest.raises(RuntimeError):
            await registry.connect(TransferWallet.SENDING, "Ethereum", _data(wallet))

        assert registry.get(TransferWallet.SENDING) is None

    @pytest.mark.asyncio
    async def test_connect_unknown_chain(self):
        registry = _registry()

        with pytest.raises(UnknownChainError):
            await registry.connect(TransferWallet.SENDING, "Fantom", _data(FakeWallet()))

    @pytest.mark.asyncio
    async def test_connect_notifies_event_hooks(self):
        registry = _registry()
        hook = MagicMock()
        registry.add_event_hook(hook)

        await registry.connect(TransferWallet.RECEIVING, "Solana", _data(FakeWallet(name="Phantom"), ChainContext.SOLANA))

        hook.assert_called_once_with(
            {
                "type": "wallet.connect",
                "details": {"side": "receiving", "chain": "Solana", "wallet": "phantom"},
            }
        )

    @pytest.mark.asyncio
    async def test_failing_hook_does_not_break_connect(self):
        registry = _registry()
        registry.add_event_hook(MagicMock(side_effect=ValueError("boom")))

        binding = await registry.connect(TransferWallet.SENDING, "Ethereum", _data(FakeWallet()))

        assert registry.get(TransferWallet.SENDING) is binding


# =============================================================================
# Provider events
# =============================================================================


class TestProviderEvents:
    @pytest.mark.asyncio
    async def test_disconnect_event_clears_role_and_marker(self):
        store = InMemoryWalletMarkerStore()
        registry = _registry(store)
        wallet = FakeWallet()
        await registry.connect(TransferWallet.SENDING, "Ethereum", _data(wallet))

        await wallet.emit("disconnect")

        assert registry.get(TransferWallet.SENDING) is None
        assert store.snapshot() == {}
        assert wallet.listener_count() == 0

    @pytest.mark.asyncio
    async def test_empty_accounts_triggers_single_disconnect(self):
        store = InMemoryWalletMarkerStore()
        registry = _registry(store)
        wallet = FakeWallet()
        await registry.connect(TransferWallet.SENDING, "Ethereum", _data(wallet))

        await wallet.emit("accountsChanged", [])

        assert wallet.disconnect_calls == 1
        assert registry.get(TransferWallet.SENDING) is None
        assert "transit:wallet:Ethereum" not in store.snapshot()

    @pytest.mark.asyncio
    async def test_changed_first_account_triggers_disconnect(self):
        registry = _registry()
        wallet = FakeWallet()
        await registry.connect(TransferWallet.SENDING, "Ethereum", _data(wallet))

        await wallet.emit("accountsChanged", ["0x2222222222222222222222222222222222222222"])

        assert wallet.disconnect_calls == 1
        assert registry.get(TransferWallet.SENDING) is None

    @pytest.mark.asyncio
    async def test_same_first_account_keeps_binding(self):
        registry = _registry()
        wallet = FakeWallet()
        await registry.connect(TransferWallet.SENDING, "Ethereum", _data(wallet))

        await wallet.emit("accountsChanged", [EVM_ADDRESS, "0x2222222222222222222222222222222222222222"])

        assert wallet.disconnect_calls == 0
        assert registry.get_wallet(TransferWallet.SENDING) is wallet

    @pytest.mark.asyncio
    async def test_disconnect_after_swap_clears_the_holding_role(self):
        registry = _registry()
        sender = FakeWallet(name="MetaMask")
        receiver = FakeWallet(name="Phantom", address=SOLANA_ADDRESS)
        await registry.connect(TransferWallet.SENDING, "Ethereum", _data(sender))
        await registry.connect(TransferWallet.RECEIVING, "Solana", _data(receiver, ChainContext.SOLANA))

        registry.swap()
        await sender.emit("disconnect")

        assert registry.get(TransferWallet.RECEIVING) is None
        assert registry.get_wallet(TransferWallet.SENDING) is receiver


# =============================================================================
# swap / close
# =============================================================================


@pytest.mark.asyncio
async def test_swap_is_an_involution():
    registry = _registry()
    sender = FakeWallet(name="MetaMask")
    receiver = FakeWallet(name="Phantom", address=SOLANA_ADDRESS)
    await registry.connect(TransferWallet.SENDING, "Ethereum", _data(sender))
    await registry.connect(TransferWallet.RECEIVING, "Solana", _data(receiver, ChainContext.SOLANA))
    sending = registry.get(TransferWallet.SENDING)
    receiving = registry.get(TransferWallet.RECEIVING)

    registry.swap()
    assert registry.get(TransferWallet.SENDING) is receiving
    assert registry.get(TransferWallet.RECEIVING) is sending

    registry.swap()
    assert registry.get(TransferWallet.SENDING) is sending
    assert registry.get(TransferWallet.RECEIVING) is receiving


@pytest.mark.asyncio
async def test_swap_with_one_empty_role():
    registry = _registry()
    wallet = FakeWallet()
    await registry.connect(TransferWallet.SENDING, "Ethereum", _data(wallet))

    registry.swap()

    assert registry.get(TransferWallet.SENDING) is None
    assert registry.get_wallet(TransferWallet.RECEIVING) is wallet


@pytest.mark.asyncio
async def test_close_detaches_all_listeners():
    registry = _registry()
    sender = FakeWallet(name="MetaMask")
    receiver = FakeWallet(name="Phantom", address=SOLANA_ADDRESS)
    await registry.connect(TransferWallet.SENDING, "Ethereum", _data(sender))
    await registry.connect(TransferWallet.RECEIVING, "Solana", _data(receiver, ChainContext.SOLANA))

    registry.close()

    assert sender.listener_count() == 0
    assert receiver.listener_count() == 0
    assert registry.get(TransferWallet.SENDING) is None
    assert registry.get(TransferWallet.RECEIVING) is None


def test_accepted_chains_by_context():
    registry = _registry()

    assert registry.accepted_chains(ChainContext.COSMOS) == ["Osmosis", "Injective"]
    assert "Solana" not in registry.accepted_chains(ChainContext.ETH)


# =============================================================================
# restore_last_used
# =============================================================================


class TestRestoreLastUsed:
    @pytest.mark.asyncio
    async def test_restores_marked_wallet(self):
        wallet = FakeWallet(name="MetaMask")
        store = InMemoryWalletMarkerStore({"transit:wallet:Ethereum": "MetaMask"})
        options = AsyncMock(return_value=[_data(FakeWallet(name="Rabby")), _data(wallet)])
        registry = _registry(store, wallet_options=options)

        binding = await registry.restore_last_used(TransferWallet.SENDING, "Base")

        assert binding is not None
        assert registry.get_wallet(TransferWallet.SENDING) is wallet
        assert wallet.connect_calls == [8453]
        assert options.await_args.args[0].key == "Base"

    @pytest.mark.asyncio
    async def test_skips_handshake_wallets(self):
        store = InMemoryWalletMarkerStore({"transit:wallet:Ethereum": "WalletConnect"})
        options = AsyncMock(return_value=[_data(FakeWallet(name="WalletConnect"))])
        registry = _registry(store, wallet_options=options, restore_skip=["WalletConnect"])

        assert await registry.restore_last_used(TransferWallet.SENDING, "Ethereum") is None
        options.assert_not_awaited()
        assert registry.get(TransferWallet.SENDING) is None

    @pytest.mark.asyncio
    async def test_no_marker_means_no_restore(self):
        options = AsyncMock(return_value=[])
        registry = _registry(wallet_options=options)

        assert await registry.restore_last_used(TransferWallet.RECEIVING, "Solana") is None
        options.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_marker_for_missing_wallet(self):
        store = InMemoryWalletMarkerStore({"transit:wallet:Solana": "Backpack"})
        options = AsyncMock(return_value=[_data(FakeWallet(name="Phantom"), ChainContext.SOLANA)])
        registry = _registry(store, wallet_options=options)

        assert await registry.restore_last_used(TransferWallet.RECEIVING, "Solana") is None

    @pytest.mark.asyncio
    async def test_connect_failure_is_swallowed(self):
        wallet = FakeWallet(connect_error=RuntimeError("locked"))
        store = InMemoryWalletMarkerStore({"transit:wallet:Ethereum": "MetaMask"})
        registry = _registry(store, wallet_options=AsyncMock(return_value=[_data(wallet)]))

        assert await registry.restore_last_used(TransferWallet.SENDING, "Ethereum") is None
        assert registry.get(TransferWallet.SENDING) is None

    @pytest.mark.asyncio
    async def test_unknown_chain_is_swallowed(self):
        registry = _registry(wallet_options=AsyncMock(return_value=[]))

        assert await registry.restore_last_used(TransferWallet.SENDING, "Fantom") is None

    @pytest.mark.asyncio
    async def test_restore_sessions_for_both_roles(self):
        sender = FakeWallet(name="MetaMask")
        receiver = FakeWallet(name="Phantom", address=SOLANA_ADDRESS)
        store = InMemoryWalletMarkerStore(
            {"transit:wallet:Ethereum": "MetaMask", "transit:wallet:Solana": "Phantom"}
        )

        async def options(chain):
            if chain.context == ChainContext.SOLANA:
                return [_data(receiver, ChainContext.SOLANA)]
            return [_data(sender)]

        registry = _registry(store, wallet_options=options)

        restored = await registry.restore_sessions("Ethereum", "Solana")

        assert restored[TransferWallet.SENDING].wallet is sender
        assert restored[TransferWallet.RECEIVING].wallet is receiver


# =============================================================================
# map_wallets
# =============================================================================


def test_map_wallets_dedupes_and_skips():
    wallets = [
        FakeWallet(name="MetaMask"),
        FakeWallet(name="MetaMask"),
        FakeWallet(name="OKX Wallet"),
        FakeWallet(name="Rabby", state=WalletState.NOT_DETECTED),
    ]

    options = map_wallets(wallets, ChainContext.COSMOS, skip=["OKX Wallet"])

    assert [option.name for option in options] == ["MetaMask", "Rabby"]
    assert options[0].wallet is wallets[0]
    assert options[0].icon == "metamask.svg"
    assert options[0].is_ready is True
    assert options[1].is_ready is False
    assert all(option.type == ChainContext.COSMOS for option in options)
