"""Swap request and response contracts.

Quotes are upstream-defined and travel as opaque JSON; only the envelope
around them is modelled here.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class SwapTransactionRequest(BaseModel):
    """Request to build an unsigned swap transaction from a quote."""

    quoteResponse: Optional[Any] = Field(None, description="Quote returned by /swap/quote")
    userPublicKey: Optional[str] = Field(None, description="Wallet that will sign the swap")


class SwapTransactionResponse(BaseModel):
    """Unsigned, serialized swap transaction."""

    swapTransaction: str = Field(..., description="Base64 encoded unsigned transaction")
