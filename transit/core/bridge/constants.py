"""Static chain and token tables for the mainnet deployment."""

from typing import Any, Dict, List

NATIVE_TOKEN_ADDRESS = "native"

CHAIN_METADATA: List[Dict[str, Any]] = [
    {
        "key": "Ethereum",
        "chain_id": 1,
        "context": "Ethereum",
        "display_name": "Ethereum",
        "explorer_url": "https://etherscan.io/",
        "explorer_name": "Etherscan",
        "gas_token": "ETH",
        "automatic_relayer": True,
        "aliases": ["eth", "mainnet", "l1"],
    },
    {
        "key": "Bsc",
        "chain_id": 56,
        "context": "Ethereum",
        "display_name": "BNB Smart Chain",
        "explorer_url": "https://bscscan.com/",
        "explorer_name": "BscScan",
        "gas_token": "BNB",
        "automatic_relayer": True,
        "aliases": ["bnb", "binance"],
    },
    {
        "key": "Polygon",
        "chain_id": 137,
        "context": "Ethereum",
        "display_name": "Polygon",
        "explorer_url": "https://polygonscan.com/",
        "explorer_name": "PolygonScan",
        "gas_token": "MATIC",
        "automatic_relayer": True,
        "aliases": ["matic"],
    },
    {
        "key": "Avalanche",
        "chain_id": 43114,
        "context": "Ethereum",
        "display_name": "Avalanche",
        "explorer_url": "https://snowtrace.io/",
        "explorer_name": "Snowtrace",
        "gas_token": "AVAX",
        "automatic_relayer": True,
        "aliases": ["avax"],
    },
    {
        "key": "Arbitrum",
        "chain_id": 42161,
        "context": "Ethereum",
        "display_name": "Arbitrum",
        "explorer_url": "https://arbiscan.io/",
        "explorer_name": "Arbitrum Explorer",
        "gas_token": "ETHarbitrum",
        "automatic_relayer": True,
        "aliases": ["arb"],
    },
    {
        "key": "Optimism",
        "chain_id": 10,
        "context": "Ethereum",
        "display_name": "Optimism",
        "explorer_url": "https://optimistic.etherscan.io/",
        "explorer_name": "Optimistic Etherscan",
        "gas_token": "ETHoptimism",
        "automatic_relayer": True,
        "aliases": ["op"],
    },
    {
        "key": "Base",
        "chain_id": 8453,
        "context": "Ethereum",
        "display_name": "Base",
        "explorer_url": "https://basescan.org/",
        "explorer_name": "BaseScan",
        "gas_token": "ETHbase",
        "automatic_relayer": True,
        "aliases": [],
    },
    {
        "key": "Solana",
        "chain_id": "solana",
        "context": "Solana",
        "display_name": "Solana",
        "explorer_url": "https://solana.fm/",
        "explorer_name": "Solana Explorer",
        "gas_token": "SOL",
        "automatic_relayer": True,
        "aliases": ["sol"],
    },
    {
        "key": "Sui",
        "chain_id": "sui",
        "context": "Sui",
        "display_name": "Sui",
        "explorer_url": "https://suiscan.xyz/",
        "explorer_name": "Suiscan",
        "gas_token": "SUI",
        "automatic_relayer": True,
        "aliases": [],
    },
    {
        "key": "Aptos",
        "chain_id": "aptos",
        "context": "Aptos",
        "display_name": "Aptos",
        "explorer_url": "https://explorer.aptoslabs.com/",
        "explorer_name": "Aptos Explorer",
        "gas_token": "APT",
        "automatic_relayer": False,
        "aliases": ["apt"],
    },
    {
        "key": "Osmosis",
        "chain_id": "osmosis-1",
        "context": "Cosmos",
        "display_name": "Osmosis",
        "explorer_url": "https://www.mintscan.io/osmosis/",
        "explorer_name": "MintScan",
        "gas_token": "OSMO",
        "automatic_relayer": False,
        "aliases": ["osmo"],
    },
    {
        "key": "Injective",
        "chain_id": "injective-1",
        "context": "Cosmos",
        "display_name": "Injective",
        "explorer_url": "https://explorer.injective.network/",
        "explorer_name": "Injective Explorer",
        "gas_token": "INJ",
        "automatic_relayer": False,
        "aliases": ["inj"],
    },
    {
        "key": "Sei",
        "chain_id": "pacific-1",
        "context": "Sei",
        "display_name": "Sei",
        "explorer_url": "https://www.seiscan.app/pacific-1/",
        "explorer_name": "Seiscan",
        "gas_token": "SEI",
        "automatic_relayer": False,
        "aliases": [],
    },
]

TOKEN_METADATA: List[Dict[str, Any]] = [
    {
        "key": "ETH",
        "symbol": "ETH",
        "native_chain": "Ethereum",
        "coin_gecko_id": "ethereum",
        "decimals": {"Ethereum": 18, "default": 8},
        "wrapped_asset": "WETH",
    },
    {
        "key": "WETH",
        "symbol": "WETH",
        "native_chain": "Ethereum",
        "token_id": {"chain": "Ethereum", "address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"},
        "coin_gecko_id": "ethereum",
        "decimals": {"Ethereum": 18, "default": 8},
        "foreign_assets": {
            "Solana": {"address": "7vfCXTUXx5WJV5JADk17DUJ4ksgau7utNKj4b963voxs", "decimals": 8},
            "Polygon": {"address": "0x11CD37bb86F65419713f30673A480EA33c826872", "decimals": 18},
        },
    },
    {
        "key": "USDCeth",
        "symbol": "USDC",
        "native_chain": "Ethereum",
        "token_id": {"chain": "Ethereum", "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"},
        "coin_gecko_id": "usd-coin",
        "decimals": {"default": 6},
        "foreign_assets": {
            "Solana": {"address": "A9mUU4qviSctJVPJdBJWkb28deg915LYJKrzQ19ji3FM", "decimals": 6},
        },
    },
    {
        "key": "USDCarbitrum",
        "symbol": "USDC",
        "native_chain": "Arbitrum",
        "token_id": {"chain": "Arbitrum", "address": "0xaf88d065e77c8cC2239327C5EDb3A432268e5831"},
        "coin_gecko_id": "usd-coin",
        "decimals": {"default": 6},
    },
    {
        "key": "USDCoptimism",
        "symbol": "USDC",
        "native_chain": "Optimism",
        "token_id": {"chain": "Optimism", "address": "0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85"},
        "coin_gecko_id": "usd-coin",
        "decimals": {"default": 6},
    },
    {
        "key": "USDCbase",
        "symbol": "USDC",
        "native_chain": "Base",
        "token_id": {"chain": "Base", "address": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"},
        "coin_gecko_id": "usd-coin",
        "decimals": {"default": 6},
    },
    {
        "key": "USDCavax",
        "symbol": "USDC",
        "native_chain": "Avalanche",
        "token_id": {"chain": "Avalanche", "address": "0xB97EF9Ef8734C71904D8002F8b6Bc66Dd9c48a6E"},
        "coin_gecko_id": "usd-coin",
        "decimals": {"default": 6},
    },
    {
        "key": "USDCpolygon",
        "symbol": "USDC",
        "native_chain": "Polygon",
        "token_id": {"chain": "Polygon", "address": "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359"},
        "coin_gecko_id": "usd-coin",
        "decimals": {"default": 6},
    },
    {
        "key": "USDCsol",
        "symbol": "USDC",
        "native_chain": "Solana",
        "token_id": {"chain": "Solana", "address": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"},
        "coin_gecko_id": "usd-coin",
        "decimals": {"default": 6},
    },
    {
        "key": "SOL",
        "symbol": "SOL",
        "native_chain": "Solana",
        "coin_gecko_id": "solana",
        "decimals": {"Solana": 9, "default": 8},
        "wrapped_asset": "WSOL",
    },
    {
        "key": "WSOL",
        "symbol": "WSOL",
        "native_chain": "Solana",
        "token_id": {"chain": "Solana", "address": "So11111111111111111111111111111111111111112"},
        "coin_gecko_id": "solana",
        "decimals": {"Solana": 9, "default": 8},
        "foreign_assets": {
            "Ethereum": {"address": "0xD31a59c85aE9D8edEFeC411D448f90841571b89c", "decimals": 9},
        },
    },
    {
        "key": "W",
        "symbol": "W",
        "native_chain": "Solana",
        "token_id": {"chain": "Solana", "address": "85VBFQZC9TZkfaptBWjvUw7YbZjy52A6mjtPGjstQAmQ"},
        "coin_gecko_id": "wormhole",
        "decimals": {"default": 6},
    },
    {
        "key": "Wethereum",
        "symbol": "W",
        "native_chain": "Ethereum",
        "token_id": {"chain": "Ethereum", "address": "0xB0fFa8000886e57F86dd5264b9582b2Ad87b2b91"},
        "coin_gecko_id": "wormhole",
        "decimals": {"default": 18},
    },
]
