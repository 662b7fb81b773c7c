"""Chain registry built from the static chain table."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Set

from ..chain_types import ChainContext, ChainId, normalize_chain_id
from ..errors import UnknownChainError
from .constants import CHAIN_METADATA
from .models import ChainConfig


class ChainRegistry:
    """Chain metadata keyed by chain key, alias and wallet-reported chain id.

    Usage:
        registry = ChainRegistry.default()

        config = registry.get_chain("sol")           # Solana config
        config = registry.get_chain_by_chain_id(137)  # Polygon config
        registry.context_of("Base")                 # ChainContext.ETH
    """

    def __init__(
        self,
        chains: Iterable[ChainConfig],
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._chains: Dict[str, ChainConfig] = {}
        self._alias_to_key: Dict[str, str] = {}
        self._by_chain_id: Dict[ChainId, str] = {}

        for chain in chains:
            self._chains[chain.key] = chain
            for alias in self._generate_aliases(chain):
                # Don't overwrite existing aliases (first wins)
                if alias not in self._alias_to_key:
                    self._alias_to_key[alias] = chain.key
            chain_id = normalize_chain_id(chain.chain_id)
            if chain_id in self._by_chain_id:
                self._logger.warning(
                    "Chain id %r is shared by %s and %s; keeping %s",
                    chain_id,
                    self._by_chain_id[chain_id],
                    chain.key,
                    self._by_chain_id[chain_id],
                )
                continue
            self._by_chain_id[chain_id] = chain.key

    @classmethod
    def from_dicts(cls, rows: Iterable[Dict[str, Any]], **kwargs: Any) -> "ChainRegistry":
        return cls([ChainConfig.model_validate(row) for row in rows], **kwargs)

    @classmethod
    def default(cls) -> "ChainRegistry":
        return cls.from_dicts(CHAIN_METADATA)

    def _generate_aliases(self, chain: ChainConfig) -> Set[str]:
        """Generate all lookup aliases for a chain."""
        aliases: Set[str] = {chain.key.lower()}
        display_name = chain.display_name.lower().strip()
        if display_name:
            aliases.add(display_name)
            words = display_name.split()
            if len(words) > 1:
                aliases.add("".join(words))
        aliases.update(alias.lower().strip() for alias in chain.aliases)
        aliases.discard("")
        return aliases

    # ─────────────────────────────────────────────────────────────────────────
    # Public lookup methods
    # ─────────────────────────────────────────────────────────────────────────

    def find_chain(self, chain: str) -> Optional[ChainConfig]:
        """Look up a chain by key or alias. Returns None if not found."""
        if chain in self._chains:
            return self._chains[chain]
        key = self._alias_to_key.get(chain.lower().strip())
        return self._chains.get(key) if key else None

    def get_chain(self, chain: str) -> ChainConfig:
        """Look up a chain by key or alias, raising UnknownChainError."""
        config = self.find_chain(chain)
        if config is None:
            raise UnknownChainError(chain)
        return config

    def get_chain_by_chain_id(self, chain_id: ChainId) -> ChainConfig:
        """Look up a chain by the id a wallet reports for it."""
        key = self._by_chain_id.get(normalize_chain_id(chain_id))
        if key is None:
            raise UnknownChainError(chain_id)
        return self._chains[key]

    def context_of(self, chain: str) -> ChainContext:
        return self.get_chain(chain).context

    def accepted_chains(self, context: Optional[ChainContext] = None) -> List[str]:
        """Chain keys a wallet of ``context`` can connect to (all chains when None)."""
        if context is None:
            return list(self._chains)
        return [key for key, chain in self._chains.items() if chain.context == context]

    def is_chain_supported(self, chain: str) -> bool:
        return self.find_chain(chain) is not None

    def get_chain_name(self, chain: str) -> str:
        """Get human-readable chain name."""
        config = self.find_chain(chain)
        if config:
            return config.name
        return chain

    @property
    def chains(self) -> List[ChainConfig]:
        return list(self._chains.values())

    @property
    def chain_count(self) -> int:
        return len(self._chains)


_default_registry: Optional[ChainRegistry] = None


def get_chain_registry() -> ChainRegistry:
    """Get or create the default chain registry singleton."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ChainRegistry.default()
    return _default_registry
