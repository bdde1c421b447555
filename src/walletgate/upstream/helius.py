"""Helius balances API adapter.

API docs: https://docs.helius.dev/solana-apis/balances-api
"""

import logging
from urllib.parse import quote

from walletgate.upstream.base import DEFAULT_TIMEOUT, UpstreamClient

logger = logging.getLogger(__name__)

HELIUS_API_TEMPLATE = "https://api-{network}.helius.xyz/v0"


class HeliusClient(UpstreamClient):
    """Token balance indexer backed by Helius."""

    name = "helius"

    def __init__(self, network: str, api_key: str, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(timeout=timeout)
        self.api_key = api_key
        self.base_url = HELIUS_API_TEMPLATE.format(network=network)

    async def get_balances(self, address: str) -> dict:
        """Fetch native and token balances held by ``address``.

        Returns the decoded body; a non-object body is returned as an empty
        dict so callers only have to look for the ``tokens`` key.
        """
        response = await self._request(
            "GET",
            f"{self.base_url}/addresses/{quote(address, safe='')}/balances",
            params={"api-key": self.api_key},
        )

        if not response.is_success:
            logger.warning(f"Helius balances error: HTTP {response.status_code}")

        data = self._parse_json(response)
        return data if isinstance(data, dict) else {}
