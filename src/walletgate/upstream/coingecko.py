"""CoinGecko price oracle adapter."""

import logging
from typing import Optional

from walletgate.upstream.base import DEFAULT_TIMEOUT, UpstreamClient

logger = logging.getLogger(__name__)

COINGECKO_API = "https://api.coingecko.com/api/v3"


class CoinGeckoClient(UpstreamClient):
    """Simple price lookups against CoinGecko."""

    name = "coingecko"

    def __init__(self, base_url: str = COINGECKO_API, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(timeout=timeout)
        self.base_url = base_url.rstrip("/")

    async def get_simple_price(self, asset_id: str, vs_currency: str = "usd") -> Optional[float]:
        """Get the price of ``asset_id`` in ``vs_currency``.

        Returns None when the oracle has no price for the asset.
        """
        response = await self._request(
            "GET",
            f"{self.base_url}/simple/price",
            params={"ids": asset_id, "vs_currencies": vs_currency},
        )
        data = self._parse_json(response)

        asset = data.get(asset_id) if isinstance(data, dict) else None
        price = asset.get(vs_currency) if isinstance(asset, dict) else None

        if isinstance(price, bool) or not isinstance(price, (int, float)):
            if price is not None:
                logger.warning(f"Ignoring non-numeric {asset_id} price: {price!r}")
            return None
        return price
