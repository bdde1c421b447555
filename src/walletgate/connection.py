"""RPC endpoint resolution.

Selects the credentialed Helius endpoint when an API key is configured.
Without one, the configured RpcFallbackPolicy decides between the public
Solana RPC (permissive) and failing closed (strict).
"""

import logging
from dataclasses import dataclass

from walletgate.config import RpcFallbackPolicy, Settings
from walletgate.errors import ConfigError

logger = logging.getLogger(__name__)

HELIUS_RPC_HOST = "helius-rpc.com"

PUBLIC_RPC_URLS = {
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
    "testnet": "https://api.testnet.solana.com",
    "devnet": "https://api.devnet.solana.com",
}


@dataclass(frozen=True)
class Endpoint:
    """A resolved RPC endpoint."""

    url: str
    credentialed: bool

    @property
    def redacted_url(self) -> str:
        """URL safe for logging."""
        if "api-key=" in self.url:
            return self.url.split("api-key=", 1)[0] + "api-key=***"
        return self.url


class ConnectionResolver:
    """Resolves the RPC endpoint for the configured network."""

    def __init__(self, settings: Settings):
        self.network = settings.solana_network
        self.credential = settings.helius_api_key.strip()
        self.policy = settings.rpc_fallback_policy

    def resolve(self) -> Endpoint:
        """Return the endpoint to use for RPC calls.

        Raises:
            ConfigError: no credential and the policy is strict
        """
        if self.credential:
            endpoint = Endpoint(
                url=f"https://{self.network}.{HELIUS_RPC_HOST}/?api-key={self.credential}",
                credentialed=True,
            )
            logger.debug("Using Helius RPC: %s", endpoint.redacted_url)
            return endpoint

        if self.policy == RpcFallbackPolicy.STRICT:
            raise ConfigError("missing credential")

        url = PUBLIC_RPC_URLS.get(self.network, PUBLIC_RPC_URLS["devnet"])
        logger.warning("Using public Solana RPC (rate limited): %s", url)
        return Endpoint(url=url, credentialed=False)
