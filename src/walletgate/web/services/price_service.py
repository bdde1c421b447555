"""Price service for the native asset."""

import logging
from typing import Optional

from walletgate.config import Settings
from walletgate.upstream.coingecko import CoinGeckoClient

logger = logging.getLogger(__name__)

# CoinGecko asset id of the native asset
NATIVE_ASSET_ID = "solana"


class PriceService:
    """Fetches the USD price of SOL."""

    def __init__(self, settings: Settings):
        self._oracle = CoinGeckoClient(
            base_url=settings.coingecko_api_url,
            timeout=settings.upstream_timeout,
        )

    async def get_native_asset_price_usd(self) -> Optional[float]:
        """Return the SOL/USD price, or None if the oracle has none."""
        price = await self._oracle.get_simple_price(NATIVE_ASSET_ID, "usd")
        if price is None:
            logger.info("Price oracle returned no SOL/USD price")
        return price
