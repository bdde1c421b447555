"""Jupiter DEX aggregator adapter for Solana.

API docs: https://station.jup.ag/docs/apis/swap-api
"""

import logging
from typing import Any

from walletgate.errors import UpstreamError
from walletgate.upstream.base import DEFAULT_TIMEOUT, UpstreamClient

logger = logging.getLogger(__name__)

# Jupiter API endpoints
JUPITER_API_V6 = "https://quote-api.jup.ag/v6"

DEFAULT_SLIPPAGE_BPS = 50


class JupiterClient(UpstreamClient):
    """Quote and swap-transaction builder backed by Jupiter.

    Jupiter aggregates liquidity from Raydium, Orca and other Solana DEXes.
    Quotes are passed around opaquely; the transaction it returns is
    unsigned and is signed by the user's wallet.
    """

    name = "jupiter"

    def __init__(self, base_url: str = JUPITER_API_V6, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(timeout=timeout)
        self.base_url = base_url.rstrip("/")

    async def get_quote(
        self,
        input_mint: str,
        output_mint: str,
        amount: str,
        slippage_bps: Any = DEFAULT_SLIPPAGE_BPS,
    ) -> dict:
        """Get a swap quote. Parameters are forwarded verbatim."""
        response = await self._request(
            "GET",
            f"{self.base_url}/quote",
            params={
                "inputMint": input_mint,
                "outputMint": output_mint,
                "amount": amount,
                "slippageBps": slippage_bps,
            },
        )

        if not response.is_success:
            logger.warning(f"Jupiter quote error: {response.status_code} - {response.text}")

        return self._expect_object(self._parse_json(response), "quote")

    async def build_swap_transaction(self, quote_response: Any, user_public_key: str) -> dict:
        """Materialize an unsigned swap transaction from a quote."""
        response = await self._request(
            "POST",
            f"{self.base_url}/swap",
            json={
                "quoteResponse": quote_response,
                "userPublicKey": user_public_key,
                "wrapAndUnwrapSol": True,
            },
        )

        if not response.is_success:
            logger.warning(f"Jupiter swap error: {response.status_code} - {response.text}")

        return self._expect_object(self._parse_json(response), "swap")

    def _expect_object(self, data: Any, what: str) -> dict:
        if not isinstance(data, dict):
            raise UpstreamError(f"Malformed Jupiter {what} response", upstream=self.name)
        return data
