"""Wrapped token address resolution with a process-lifetime cache."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from ..tokens import TokenCatalog, TokenConfig, TokenId
from .client import BridgeContext


class WrappedTokenAddressCache:
    """Wrapped addresses keyed by (token key, chain).

    Entries are written once and never expire: a wrapped address for a fixed
    bridge deployment does not change.
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[str, str], str] = {}

    def get(self, token_key: str, chain: str) -> Optional[str]:
        return self._entries.get((token_key, chain))

    def set(self, token_key: str, chain: str, address: str) -> bool:
        """Store an address; returns False if the key was already populated."""
        key = (token_key, chain)
        if key in self._entries:
            return False
        self._entries[key] = address
        return True

    def seed_from_tokens(self, tokens: Iterable[TokenConfig]) -> None:
        """Load the built-in foreign asset addresses from token config."""
        for token in tokens:
            for chain, asset in token.foreign_assets.items():
                self.set(token.key, chain, asset.address)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._entries


class WrappedTokenResolver:
    """Resolves a token's address on a foreign chain.

    Three levels of priority:
    1. Built-in config (foreign assets, seeded into the cache)
    2. Cache
    3. Live token bridge lookup (written through to the cache)

    Lookup failures are never raised; they surface as ``None`` so each caller
    decides how severe a miss is.
    """

    def __init__(
        self,
        bridge: BridgeContext,
        catalog: TokenCatalog,
        *,
        cache: Optional[WrappedTokenAddressCache] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._bridge = bridge
        self._catalog = catalog
        self._logger = logger or logging.getLogger(__name__)
        if cache is None:
            cache = WrappedTokenAddressCache()
            cache.seed_from_tokens(catalog.tokens)
        self._cache = cache

    @property
    def cache(self) -> WrappedTokenAddressCache:
        return self._cache

    async def resolve(self, token: TokenConfig, chain: str) -> Optional[str]:
        cached = self._cache.get(token.key, chain)
        if cached:
            return cached

        self._logger.info("Resolving foreign address for token %s on chain %s", token.key, chain)

        token_id = self._catalog.to_token_id(token)
        try:
            token_bridge = await self._bridge.get_token_bridge(chain)
            wrapped = await token_bridge.get_wrapped_asset(token_id)
        except Exception as exc:
            self._logger.warning(
                "Wrapped asset lookup failed for %s on %s: %s", token.key, chain, exc
            )
            return None

        if not wrapped:
            return None

        self._cache.set(token.key, chain, wrapped)
        return wrapped

    def resolve_sync(self, token: TokenConfig, chain: str) -> Optional[str]:
        """Cache-only variant for call sites that must not block."""
        return self._cache.get(token.key, chain)

    async def get_decimals(self, token: TokenId, chain: str) -> int:
        return await self._bridge.get_decimals(chain, token.address)
