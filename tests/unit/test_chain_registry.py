"""
Tests for chain metadata lookup.
"""

import logging

import pytest

from transit.core.bridge.chain_registry import ChainRegistry, get_chain_registry
from transit.core.chain_types import ChainContext, normalize_chain_id
from transit.core.errors import DispatchErrorKind, UnknownChainError


class TestChainRegistry:
    """Test ChainRegistry lookups."""

    @pytest.fixture
    def registry(self):
        return ChainRegistry.default()

    def test_lookup_by_key_and_alias(self, registry):
        assert registry.get_chain("Solana").key == "Solana"
        assert registry.get_chain("sol").key == "Solana"
        assert registry.get_chain("MATIC").key == "Polygon"
        assert registry.get_chain("bnb smart chain").key == "Bsc"
        assert registry.get_chain("bnbsmartchain").key == "Bsc"

    def test_lookup_by_chain_id(self, registry):
        assert registry.get_chain_by_chain_id(137).key == "Polygon"
        assert registry.get_chain_by_chain_id("0x2105").key == "Base"
        assert registry.get_chain_by_chain_id("42161").key == "Arbitrum"
        assert registry.get_chain_by_chain_id("osmosis-1").key == "Osmosis"

    def test_unknown_chain(self, registry):
        assert registry.find_chain("Fantom") is None
        assert registry.is_chain_supported("Fantom") is False
        assert registry.get_chain_name("Fantom") == "Fantom"

        with pytest.raises(UnknownChainError) as exc_info:
            registry.get_chain_by_chain_id(250)
        assert exc_info.value.kind == DispatchErrorKind.UNKNOWN_CHAIN

    def test_context_of(self, registry):
        assert registry.context_of("Base") == ChainContext.ETH
        assert registry.context_of("Injective") == ChainContext.COSMOS
        assert registry.context_of("Sei") == ChainContext.SEI

    def test_accepted_chains(self, registry):
        assert registry.accepted_chains(ChainContext.SOLANA) == ["Solana"]
        assert len(registry.accepted_chains()) == registry.chain_count

    def test_get_chain_name(self, registry):
        assert registry.get_chain_name("Bsc") == "BNB Smart Chain"

    def test_duplicate_chain_id_keeps_first(self, caplog):
        rows = [
            {"key": "Ethereum", "chain_id": 1, "context": "Ethereum"},
            {"key": "EthereumFork", "chain_id": "0x1", "context": "Ethereum"},
        ]

        with caplog.at_level(logging.WARNING):
            registry = ChainRegistry.from_dicts(rows)

        assert registry.get_chain_by_chain_id(1).key == "Ethereum"
        assert registry.get_chain("EthereumFork").chain_id == "0x1"
        assert "shared by" in caplog.text

    def test_singleton(self):
        assert get_chain_registry() is get_chain_registry()


@pytest.mark.parametrize(
    "raw,expected",
    [
        (1, 1),
        ("0x89", 137),
        ("0X2105", 8453),
        ("56", 56),
        (" solana ", "solana"),
        ("osmosis-1", "osmosis-1"),
        ("0xnothex", "0xnothex"),
    ],
)
def test_normalize_chain_id(raw, expected):
    assert normalize_chain_id(raw) == expected
