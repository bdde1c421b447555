"""Request and response contracts for the web layer.

These Pydantic models define the API interface for the wallet extension.
"""

from walletgate.web.contracts.balances import (
    NativeBalanceResponse,
    PriceResponse,
    TokenBalancesResponse,
    TokenDescriptor,
)
from walletgate.web.contracts.rpc import JsonRpcError, JsonRpcErrorEnvelope
from walletgate.web.contracts.swaps import (
    SwapTransactionRequest,
    SwapTransactionResponse,
)

__all__ = [
    # Balance contracts
    "NativeBalanceResponse",
    "PriceResponse",
    "TokenBalancesResponse",
    "TokenDescriptor",
    # Swap contracts
    "SwapTransactionRequest",
    "SwapTransactionResponse",
    # JSON-RPC contracts
    "JsonRpcError",
    "JsonRpcErrorEnvelope",
]
