"""Tests for persisted last-used wallet markers."""

from transit.core.chain_types import ChainContext
from transit.core.wallet import (
    InMemoryWalletMarkerStore,
    JsonFileWalletMarkerStore,
    create_marker_store,
    wallet_marker_key,
)
from transit.core.wallet import storage as storage_module


def test_marker_key_format():
    assert wallet_marker_key("transit", ChainContext.SOLANA) == "transit:wallet:Solana"
    assert wallet_marker_key("app", ChainContext.ETH) == "app:wallet:Ethereum"


def test_in_memory_store_roundtrip():
    store = InMemoryWalletMarkerStore()

    store.set("transit:wallet:Sui", "Suiet")
    assert store.get("transit:wallet:Sui") == "Suiet"

    store.remove("transit:wallet:Sui")
    store.remove("transit:wallet:Sui")
    assert store.get("transit:wallet:Sui") is None


def test_json_store_persists_across_instances(tmp_path):
    path = tmp_path / "state" / "wallets.json"

    JsonFileWalletMarkerStore(path).set("transit:wallet:Ethereum", "MetaMask")

    reopened = JsonFileWalletMarkerStore(path)
    assert reopened.get("transit:wallet:Ethereum") == "MetaMask"

    reopened.remove("transit:wallet:Ethereum")
    assert JsonFileWalletMarkerStore(path).get("transit:wallet:Ethereum") is None


def test_json_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "wallets.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonFileWalletMarkerStore(path)

    assert store.get("transit:wallet:Ethereum") is None
    store.set("transit:wallet:Ethereum", "Rabby")
    assert store.get("transit:wallet:Ethereum") == "Rabby"


def test_create_marker_store_follows_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(storage_module.settings, "wallet_marker_path", "")
    assert isinstance(create_marker_store(), InMemoryWalletMarkerStore)

    monkeypatch.setattr(storage_module.settings, "wallet_marker_path", str(tmp_path / "w.json"))
    assert isinstance(create_marker_store(), JsonFileWalletMarkerStore)
