"""Tests for token lookup and the TokenId -> TokenConfig converter."""

import pytest

from transit.core.bridge.chain_registry import ChainRegistry
from transit.core.tokens import TokenCatalog, TokenId


@pytest.fixture
def catalog():
    return TokenCatalog.default(ChainRegistry.default())


def test_native_token_id_maps_to_gas_token(catalog):
    token = catalog.find_token_config(TokenId("Ethereum", "native"))

    assert token.key == "ETH"
    assert token.is_gas_token


def test_evm_lookup_ignores_checksum_case(catalog):
    token = catalog.find_token_config(
        TokenId("Ethereum", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
    )

    assert token.key == "WETH"


def test_solana_lookup_is_case_sensitive(catalog):
    assert catalog.find_token_config(
        TokenId("Solana", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
    ).key == "USDCsol"
    assert catalog.find_token_config(
        TokenId("Solana", "epjfwdd5aufqssqem2qn1xzybapc8g4wegpkzwytdt1v")
    ) is None


def test_foreign_asset_maps_back_to_origin_token(catalog):
    token = catalog.find_token_config(
        TokenId("Solana", "7vfCXTUXx5WJV5JADk17DUJ4ksgau7utNKj4b963voxs")
    )

    assert token.key == "WETH"


def test_chain_aliases_are_accepted(catalog):
    token = catalog.find_token_config(
        TokenId("sol", "So11111111111111111111111111111111111111112")
    )

    assert token.key == "WSOL"


def test_unknown_chain_or_address(catalog):
    assert catalog.find_token_config(TokenId("Fantom", "native")) is None
    assert catalog.find_token_config(
        TokenId("Ethereum", "0x000000000000000000000000000000000000dEaD")
    ) is None


def test_to_token_id(catalog):
    assert catalog.to_token_id(catalog.get("SOL")) == TokenId("Solana", "native")
    assert catalog.to_token_id(catalog.get("W")) == TokenId(
        "Solana", "85VBFQZC9TZkfaptBWjvUw7YbZjy52A6mjtPGjstQAmQ"
    )


def test_get_wrapped_token(catalog):
    assert catalog.get_wrapped_token(catalog.get("ETH")).key == "WETH"
    assert catalog.get_wrapped_token(catalog.get("USDCeth")).key == "USDCeth"


@pytest.mark.parametrize(
    "chain,key,expected",
    [
        ("Ethereum", "WETH", 18),
        ("Solana", "WETH", 8),       # foreign asset decimals
        ("Polygon", "WETH", 18),
        ("Solana", "SOL", 9),
        ("Ethereum", "WSOL", 9),
        ("Sui", "WSOL", 8),          # default
        ("Ethereum", "USDCeth", 6),
    ],
)
def test_get_token_decimals(catalog, chain, key, expected):
    assert catalog.get_token_decimals(chain, catalog.get(key)) == expected


def test_find_by_symbol_on_chain(catalog):
    assert catalog.find_by_symbol_on_chain("USDC", "Solana").key == "USDCsol"
    assert catalog.find_by_symbol_on_chain("USDC", "Base").key == "USDCbase"
    assert catalog.find_by_symbol_on_chain("USDC", "Sui") is None
