"""
Wallet handle interface and session models.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Sequence

from ..bridge.models import NetworkInfo
from ..chain_types import ChainContext, ChainId
from ..errors import WalletNotSupportedError

Listener = Callable[..., Awaitable[None]]


class TransferWallet(str, Enum):
    """Role a wallet plays in a transfer."""

    SENDING = "sending"
    RECEIVING = "receiving"


class WalletEvent(str, Enum):
    """Provider-driven events the session registry listens to."""

    DISCONNECT = "disconnect"
    ACCOUNTS_CHANGED = "accountsChanged"


class WalletState(str, Enum):
    UNSUPPORTED = "Unsupported"
    NOT_DETECTED = "NotDetected"
    LOADABLE = "Loadable"
    INSTALLED = "Installed"


@dataclass
class SendTransactionResult:
    id: str
    data: Any = None


class Wallet(ABC):
    """A connectable wallet provider (browser extension, mobile bridge, ...).

    Listeners are async callables; providers await them in emission order.
    """

    @abstractmethod
    def get_name(self) -> str:
        pass

    def get_icon(self) -> str:
        return ""

    @abstractmethod
    def get_address(self) -> Optional[str]:
        pass

    @abstractmethod
    def get_network_info(self) -> NetworkInfo:
        pass

    def get_wallet_state(self) -> WalletState:
        return WalletState.INSTALLED

    @abstractmethod
    async def connect(self, *, chain_id: Optional[ChainId] = None) -> None:
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        pass

    @abstractmethod
    def on(self, event: str, listener: Listener) -> None:
        pass

    @abstractmethod
    def off(self, event: str, listener: Listener) -> None:
        pass

    @abstractmethod
    async def sign_and_send_transaction(self, request: Dict[str, Any]) -> SendTransactionResult:
        pass

    async def switch_chain(self, chain_id: ChainId) -> None:
        raise WalletNotSupportedError(f"{self.get_name()} cannot switch chains", operation="switchChain")

    async def watch_asset(self, asset: Dict[str, Any]) -> None:
        raise WalletNotSupportedError(f"{self.get_name()} cannot watch assets", operation="watchAsset")


class Subscription:
    """Handle for the listeners installed on a wallet for one binding."""

    def __init__(self, wallet: Wallet, listeners: Dict[str, Listener]) -> None:
        self._wallet = wallet
        self._listeners = dict(listeners)
        self._active = False

    def subscribe(self) -> "Subscription":
        if not self._active:
            for event, listener in self._listeners.items():
                self._wallet.on(event, listener)
            self._active = True
        return self

    def unsubscribe(self) -> None:
        """Detach the listeners; safe to call more than once."""
        if not self._active:
            return
        for event, listener in self._listeners.items():
            self._wallet.off(event, listener)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active


@dataclass
class WalletData:
    """A wallet option offered for a chain context."""

    name: str
    type: ChainContext
    wallet: Wallet
    icon: str = ""
    is_ready: bool = True


@dataclass
class WalletBinding:
    """The wallet currently connected for a role."""

    wallet: Wallet
    name: str
    address: Optional[str]
    context: ChainContext
    chain: str
    icon: str = ""
    subscription: Optional[Subscription] = field(default=None, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "name": self.name,
            "type": self.context.value,
            "icon": self.icon,
            "chain": self.chain,
        }


def is_wallet_ready(wallet: Wallet) -> bool:
    state = wallet.get_wallet_state()
    return state not in (WalletState.UNSUPPORTED, WalletState.NOT_DETECTED)


def map_wallets(
    wallets: Iterable[Wallet],
    context: ChainContext,
    skip: Sequence[str] = (),
) -> List[WalletData]:
    """Wallet options for a context, deduplicated by name (first wins)."""
    seen: set = set()
    options: List[WalletData] = []
    for wallet in wallets:
        name = wallet.get_name()
        if name in seen or name in skip:
            continue
        seen.add(name)
        options.append(
            WalletData(
                name=name,
                type=context,
                wallet=wallet,
                icon=wallet.get_icon(),
                is_ready=is_wallet_ready(wallet),
            )
        )
    return options
