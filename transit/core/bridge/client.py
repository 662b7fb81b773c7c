"""Interfaces of the protocol clients the settlement core talks to."""

from abc import ABC, abstractmethod

from ..addresses import UniversalAddress
from ..tokens import TokenId


class TokenBridge(ABC):
    """Token bridge contract client for one chain."""

    @abstractmethod
    async def get_wrapped_asset(self, token: TokenId) -> str:
        """Address of the wrapped form of ``token`` on this bridge's chain"""
        pass

    @abstractmethod
    async def get_token_native_address(self, origin_chain: str, token_address: UniversalAddress) -> str:
        """Native address on ``origin_chain`` of a token given by its wire address"""
        pass


class BridgeContext(ABC):
    """Entry point into the bridge protocol clients, one per network."""

    @abstractmethod
    async def get_token_bridge(self, chain: str) -> TokenBridge:
        """Token bridge client for ``chain``"""
        pass

    @abstractmethod
    async def get_decimals(self, chain: str, token_address: str) -> int:
        """On-chain decimals of a token"""
        pass


class TokenAccountLookup(ABC):
    """Resolves the owning wallet of a Solana-family token account."""

    @abstractmethod
    async def get_token_account_owner(self, token_account: str) -> str:
        pass
