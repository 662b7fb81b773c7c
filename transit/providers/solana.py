"""
Solana JSON-RPC client used for token account lookups.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..core.bridge.client import TokenAccountLookup

logger = logging.getLogger(__name__)

SPL_TOKEN_PROGRAMS = {
    "spl-token",
    "spl-token-2022",
}


@dataclass
class SolanaRpcConfig:
    """Configuration for Solana RPC connection."""
    rpc_url: str
    commitment: str = "confirmed"
    max_retries: int = 3
    timeout_s: float = 30.0


class SolanaRpcError(Exception):
    """Error talking to a Solana RPC node."""
    pass


class SolanaRpcClient(TokenAccountLookup):
    """
    Minimal Solana RPC client.

    Usage:
        client = SolanaRpcClient(SolanaRpcConfig(
            rpc_url="https://api.mainnet-beta.solana.com"
        ))

        owner = await client.get_token_account_owner(ata_address)
    """

    def __init__(
        self,
        config: SolanaRpcConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._config.timeout_s, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _rpc_call(self, method: str, params: List[Any]) -> Dict[str, Any]:
        """POST one JSON-RPC request, retrying transport and HTTP status failures."""
        client = await self._get_client()
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        attempts = self._config.max_retries

        for attempt in range(1, attempts + 1):
            try:
                response = await client.post(self._config.rpc_url, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                failure = f"HTTP error: {exc.response.status_code}"
            except httpx.HTTPError as exc:
                failure = f"Transport error: {exc}"
            else:
                data = response.json()
                if "error" in data:
                    error = data["error"]
                    raise SolanaRpcError(f"RPC error: {error.get('message', error)}")
                return data

            if attempt == attempts:
                raise SolanaRpcError(failure)
            logger.debug("%s failed (%s), attempt %d/%d", method, failure, attempt, attempts)
            await asyncio.sleep(0.5 * attempt)

        raise SolanaRpcError("Max retries exceeded")

    async def get_account_info(self, address: str) -> Optional[Dict[str, Any]]:
        """
        Fetch parsed account info.

        Args:
            address: Account address (base58)

        Returns:
            The account ``value`` object, or None if the account does not exist
        """
        result = await self._rpc_call(
            "getAccountInfo",
            [address, {"encoding": "jsonParsed", "commitment": self._config.commitment}],
        )
        return (result.get("result") or {}).get("value")

    async def get_token_account_owner(self, token_account: str) -> str:
        """
        Owner wallet of an SPL token account.

        Raises:
            SolanaRpcError: if the account is missing or not a token account
        """
        account = await self.get_account_info(token_account)
        if account is None:
            raise SolanaRpcError(f"Account {token_account} not found")

        data = account.get("data")
        if not isinstance(data, dict) or data.get("program") not in SPL_TOKEN_PROGRAMS:
            raise SolanaRpcError(f"Account {token_account} is not a token account")

        parsed = data.get("parsed") or {}
        if parsed.get("type") != "account":
            raise SolanaRpcError(f"Account {token_account} is not a token account")

        owner = (parsed.get("info") or {}).get("owner")
        if not owner:
            raise SolanaRpcError(f"Token account {token_account} has no owner")
        return owner


_solana_client: Optional[SolanaRpcClient] = None


def get_solana_client() -> SolanaRpcClient:
    """Get or create the Solana RPC client configured from settings."""
    global _solana_client
    if _solana_client is None:
        _solana_client = SolanaRpcClient(
            SolanaRpcConfig(
                rpc_url=settings.solana_rpc_url,
                max_retries=settings.rpc_max_retries,
                timeout_s=settings.rpc_timeout_seconds,
            )
        )
    return _solana_client
