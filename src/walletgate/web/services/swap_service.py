"""Swap service.

Two stateless steps the client drives: fetch a quote, then turn that quote
into an unsigned transaction. The backend NEVER signs or broadcasts, and it
does not check that a quote is still fresh; that is Jupiter's call.
"""

import logging
from typing import Any, Optional

from walletgate.config import Settings
from walletgate.errors import SwapRouteError, ValidationError
from walletgate.upstream.jupiter import DEFAULT_SLIPPAGE_BPS, JupiterClient

logger = logging.getLogger(__name__)


class SwapService:
    """Non-custodial swap service backed by Jupiter."""

    def __init__(self, settings: Settings):
        self._router = JupiterClient(
            base_url=settings.jupiter_api_url,
            timeout=settings.upstream_timeout,
        )

    async def get_quote(
        self,
        input_mint: Optional[str],
        output_mint: Optional[str],
        amount: Optional[str],
        slippage_bps: Any = DEFAULT_SLIPPAGE_BPS,
    ) -> dict:
        """Get a swap quote.

        Raises:
            ValidationError: a required parameter is missing
            SwapRouteError: Jupiter answered with an ``error``
        """
        if not input_mint or not output_mint or not amount:
            raise ValidationError("Missing required parameters: inputMint, outputMint, amount")

        logger.info(f"Quote request: {amount} {input_mint} -> {output_mint}")
        data = await self._router.get_quote(input_mint, output_mint, amount, slippage_bps)

        if data.get("error"):
            logger.info(f"Jupiter rejected quote: {data['error']}")
            raise SwapRouteError(str(data["error"]))

        return data

    async def build_swap_transaction(
        self, quote_response: Any, user_public_key: Optional[str]
    ) -> str:
        """Build an unsigned swap transaction for ``user_public_key``.

        Returns:
            Base64 serialized transaction
        """
        # An empty quote object is forwarded and left for Jupiter to reject
        if quote_response in (None, "", 0) or not user_public_key:
            raise ValidationError("Missing required parameters: quoteResponse, userPublicKey")

        data = await self._router.build_swap_transaction(quote_response, user_public_key)

        swap_transaction = data.get("swapTransaction")
        if not swap_transaction:
            raise SwapRouteError(str(data.get("error") or "Swap transaction failed"))

        return swap_transaction
