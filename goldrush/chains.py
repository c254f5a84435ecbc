"""Chain names accepted by the API for commonly used networks."""

from __future__ import annotations

from enum import Enum


class Chain(str, Enum):
    ETH_MAINNET = "eth-mainnet"
    ETH_SEPOLIA = "eth-sepolia"
    MATIC_MAINNET = "matic-mainnet"
    BSC_MAINNET = "bsc-mainnet"
    BSC_TESTNET = "bsc-testnet"
    AVALANCHE_MAINNET = "avalanche-mainnet"
    AVALANCHE_FUJI = "avalanche-fuji"
    ARBITRUM_MAINNET = "arbitrum-mainnet"
    OPTIMISM_MAINNET = "optimism-mainnet"
    BASE_MAINNET = "base-mainnet"
    BASE_SEPOLIA = "base-sepolia-testnet"
    BTC_MAINNET = "btc-mainnet"

    def __str__(self) -> str:
        return self.value
