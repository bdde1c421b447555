"""Adapters for the services the gateway forwards to."""

from walletgate.upstream.base import UpstreamClient
from walletgate.upstream.coingecko import CoinGeckoClient
from walletgate.upstream.helius import HeliusClient
from walletgate.upstream.jupiter import JupiterClient
from walletgate.upstream.rpc import RpcNodeClient

__all__ = [
    "UpstreamClient",
    "CoinGeckoClient",
    "HeliusClient",
    "JupiterClient",
    "RpcNodeClient",
]
