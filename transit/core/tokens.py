"""
Locally configured tokens and the converter between wire token ids and them.

A ``TokenId`` is the protocol-level identity of a token: the chain it lives on
and its native address there. A ``TokenConfig`` is what the client knows about
a supported token (key, symbol, decimals, wrapped addresses on foreign chains).
``TokenCatalog`` maps in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .bridge.chain_registry import ChainRegistry, get_chain_registry
from .bridge.constants import NATIVE_TOKEN_ADDRESS, TOKEN_METADATA
from .chain_types import ChainContext, is_evm_context


@dataclass(frozen=True)
class TokenId:
    """Protocol-level token identity: (chain, native address)."""

    chain: str
    address: str

    @property
    def is_native(self) -> bool:
        return self.address == NATIVE_TOKEN_ADDRESS

    def __str__(self) -> str:
        return f"{self.chain}:{self.address}"


class TokenIdConfig(BaseModel):
    chain: str
    address: str

    def to_token_id(self) -> TokenId:
        return TokenId(chain=self.chain, address=self.address)


class ForeignAsset(BaseModel):
    address: str
    decimals: int


class TokenConfig(BaseModel):
    """A token the client supports."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    symbol: str
    native_chain: str
    token_id: Optional[TokenIdConfig] = None  # gas tokens have none
    coin_gecko_id: str = ""
    decimals: Dict[str, int] = Field(default_factory=lambda: {"default": 18})
    wrapped_asset: Optional[str] = None
    display_name: Optional[str] = None
    foreign_assets: Dict[str, ForeignAsset] = Field(default_factory=dict)

    @property
    def is_gas_token(self) -> bool:
        return self.token_id is None

    def decimals_for_context(self, context: ChainContext) -> int:
        return self.decimals.get(context.value, self.decimals.get("default", 18))


def _addresses_equal(left: str, right: str, context: ChainContext) -> bool:
    # EVM addresses are case-insensitive (checksum casing only); base58 and
    # others are case-sensitive.
    if is_evm_context(context):
        return left.lower() == right.lower()
    return left == right


class TokenCatalog:
    """Token lookup plus the reverse converter from ``TokenId`` to ``TokenConfig``."""

    def __init__(
        self,
        tokens: Iterable[TokenConfig],
        chains: Optional[ChainRegistry] = None,
    ) -> None:
        self._chains = chains or get_chain_registry()
        self._tokens: Dict[str, TokenConfig] = {token.key: token for token in tokens}

    @classmethod
    def from_dicts(cls, rows: Iterable[Dict[str, Any]], chains: Optional[ChainRegistry] = None) -> "TokenCatalog":
        return cls([TokenConfig.model_validate(row) for row in rows], chains)

    @classmethod
    def default(cls, chains: Optional[ChainRegistry] = None) -> "TokenCatalog":
        return cls.from_dicts(TOKEN_METADATA, chains)

    @property
    def chains(self) -> ChainRegistry:
        return self._chains

    @property
    def tokens(self) -> List[TokenConfig]:
        return list(self._tokens.values())

    def get(self, key: str) -> Optional[TokenConfig]:
        return self._tokens.get(key)

    def to_token_id(self, token: TokenConfig) -> TokenId:
        """Wire identity of a configured token (gas tokens use the ``native`` address)."""
        if token.token_id is not None:
            return token.token_id.to_token_id()
        return TokenId(chain=token.native_chain, address=NATIVE_TOKEN_ADDRESS)

    def find_token_config(self, token_id: TokenId) -> Optional[TokenConfig]:
        """Map a (chain, address) pair to the configured token, if any.

        Native ids are checked first, then wrapped (foreign) addresses.
        """
        chain = self._chains.find_chain(token_id.chain)
        if chain is None:
            return None
        context = chain.context

        if token_id.is_native:
            for token in self._tokens.values():
                if token.is_gas_token and token.native_chain == chain.key:
                    return token
            return None

        for token in self._tokens.values():
            if token.token_id is None:
                continue
            if token.token_id.chain == chain.key and _addresses_equal(
                token.token_id.address, token_id.address, context
            ):
                return token

        for token in self._tokens.values():
            foreign = token.foreign_assets.get(chain.key)
            if foreign and _addresses_equal(foreign.address, token_id.address, context):
                return token
        return None

    def find_by_symbol_on_chain(self, symbol: str, chain: str) -> Optional[TokenConfig]:
        for token in self._tokens.values():
            if token.symbol == symbol and token.native_chain == chain:
                return token
        return None

    def get_wrapped_token(self, token: TokenConfig) -> TokenConfig:
        """Gas tokens are bridged as their wrapped form (ETH -> WETH)."""
        if token.is_gas_token and token.wrapped_asset:
            wrapped = self._tokens.get(token.wrapped_asset)
            if wrapped is not None:
                return wrapped
        return token

    def get_token_decimals(self, chain: str, token: TokenConfig) -> int:
        """Decimals of ``token`` as it exists on ``chain``."""
        foreign = token.foreign_assets.get(chain)
        if foreign is not None:
            return foreign.decimals
        context = self._chains.context_of(chain)
        return token.decimals_for_context(context)
