"""Typed models used by the bridge subsystem."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..chain_types import ChainContext, ChainId


class ChainConfig(BaseModel):
    """Configuration of a single chain the client can bridge to or from."""

    key: str
    chain_id: ChainId
    context: ChainContext
    display_name: str = ""
    explorer_url: str = ""
    explorer_name: str = ""
    gas_token: str = ""
    automatic_relayer: bool = False
    aliases: List[str] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.display_name or self.key


class NetworkInfo(BaseModel):
    """Network a wallet reports itself connected to."""

    chain_id: Optional[ChainId] = None
