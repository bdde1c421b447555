"""Swap API endpoints for the non-custodial wallet.

These endpoints return quotes and unsigned transaction data.
NO execution happens server-side - clients sign and broadcast themselves.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from walletgate.upstream.jupiter import DEFAULT_SLIPPAGE_BPS
from walletgate.web.contracts.swaps import SwapTransactionRequest, SwapTransactionResponse
from walletgate.web.dependencies import get_swap_service
from walletgate.web.services import SwapService

router = APIRouter(prefix="/swap", tags=["swaps"])


@router.get("/quote")
async def get_swap_quote(
    input_mint: Optional[str] = Query(None, alias="inputMint"),
    output_mint: Optional[str] = Query(None, alias="outputMint"),
    amount: Optional[str] = None,
    slippage_bps: str = Query(str(DEFAULT_SLIPPAGE_BPS), alias="slippageBps"),
    service: SwapService = Depends(get_swap_service),
) -> dict:
    """Get a swap route quote from Jupiter.

    The quote is returned exactly as Jupiter produced it and is meant to be
    posted back to /swap/transaction.
    """
    return await service.get_quote(input_mint, output_mint, amount, slippage_bps)


@router.post("/transaction", response_model=SwapTransactionResponse)
async def get_swap_transaction(
    request: SwapTransactionRequest,
    service: SwapService = Depends(get_swap_service),
) -> SwapTransactionResponse:
    """Build an unsigned swap transaction from a quote.

    The client must:
    1. Deserialize the base64 transaction
    2. Sign it with the user's key
    3. Broadcast it to the network

    NO signing or broadcasting happens server-side.
    """
    swap_transaction = await service.build_swap_transaction(
        request.quoteResponse, request.userPublicKey
    )
    return SwapTransactionResponse(swapTransaction=swap_transaction)
