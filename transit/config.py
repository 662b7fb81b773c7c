import os

from pathlib import Path
from typing import Any, List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def model_post_init(self, __context: Any) -> None:
        """Ensure we pick up legacy environment variable aliases."""

        super().model_post_init(__context)

        if not self.solana_rpc_url:
            fallback = os.getenv("SOLANA_RPC") or os.getenv("RPC_SOLANA")
            object.__setattr__(
                self,
                "solana_rpc_url",
                fallback or "https://api.mainnet-beta.solana.com",
            )

    # Runtime
    log_level: str = Field(default="INFO", description="Logging level")
    network: str = Field(default="Mainnet", description="Wormhole network (Mainnet, Testnet, Devnet)")

    # Wallet persistence
    storage_prefix: str = Field(
        default="transit",
        description="Prefix for persisted wallet markers (<prefix>:wallet:<context>)",
    )
    wallet_marker_path: str = Field(
        default="",
        description="JSON file used to persist last-used wallets; empty keeps markers in memory",
    )
    restore_skip_wallets: List[str] = Field(
        default_factory=lambda: ["WalletConnect"],
        description="Wallets that need an external connect handshake and are never silently restored",
    )

    # RPC
    solana_rpc_url: str = Field(
        default="",
        description="Solana JSON-RPC endpoint used for token account lookups",
        validation_alias=AliasChoices("solana_rpc_url", "SOLANA_RPC_URL"),
    )
    rpc_timeout_seconds: float = Field(default=30.0, description="Timeout for JSON-RPC requests")
    rpc_max_retries: int = Field(default=3, ge=1, description="Attempts per JSON-RPC request")

    # Protocol constants
    cctp_token_symbol: str = Field(
        default="USDC",
        description="Symbol of the asset class burned and minted by CCTP transfers",
    )

    # Explorers
    wormscan_url: str = Field(default="https://wormholescan.io/#/", description="Wormholescan base URL")
    wormhole_api_url: str = Field(default="https://api.wormholescan.io/", description="Wormholescan API base URL")
    mayan_api_url: str = Field(
        default="https://explorer-api.mayan.finance",
        description="Mayan explorer API base URL",
    )

    @property
    def is_mainnet(self) -> bool:
        return self.network.lower() == "mainnet"

    @property
    def has_marker_path(self) -> bool:
        return bool(self.wallet_marker_path)


# Global settings instance
settings = Settings()
