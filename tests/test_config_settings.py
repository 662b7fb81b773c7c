from transit.config import Settings


def test_solana_rpc_url_legacy_alias(monkeypatch):
    """Solana RPC URL should load from legacy aliases when present."""

    monkeypatch.delenv("SOLANA_RPC_URL", raising=False)
    monkeypatch.setenv("SOLANA_RPC", "https://legacy.example.com")

    settings = Settings()

    assert settings.solana_rpc_url == "https://legacy.example.com"


def test_solana_rpc_url_direct_env(monkeypatch):
    """Environment-provided RPC URL remains the primary source."""

    monkeypatch.setenv("SOLANA_RPC_URL", "https://primary.example.com")
    monkeypatch.setenv("SOLANA_RPC", "https://legacy.example.com")

    settings = Settings()

    assert settings.solana_rpc_url == "https://primary.example.com"


def test_solana_rpc_url_default(monkeypatch):
    for name in ("SOLANA_RPC_URL", "SOLANA_RPC", "RPC_SOLANA"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.solana_rpc_url == "https://api.mainnet-beta.solana.com"


def test_wallet_restore_defaults(monkeypatch):
    monkeypatch.delenv("WALLET_MARKER_PATH", raising=False)
    monkeypatch.delenv("RESTORE_SKIP_WALLETS", raising=False)

    settings = Settings()

    assert settings.restore_skip_wallets == ["WalletConnect"]
    assert settings.has_marker_path is False


def test_network_flag(monkeypatch):
    monkeypatch.setenv("NETWORK", "Testnet")

    assert Settings().is_mainnet is False
