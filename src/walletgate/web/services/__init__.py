"""Web services for read-only blockchain operations.

SECURITY: These services MUST NOT:
- Access private keys or seed phrases
- Sign or broadcast transactions

These services CAN:
- Query blockchain state (balances, prices)
- Fetch quotes from the swap router
- Prepare unsigned transactions for client signing
- Relay JSON-RPC calls to the configured node
"""

from walletgate.web.services.balance_service import BalanceService
from walletgate.web.services.price_service import PriceService
from walletgate.web.services.rpc_proxy import RpcProxy
from walletgate.web.services.swap_service import SwapService

__all__ = [
    "BalanceService",
    "PriceService",
    "RpcProxy",
    "SwapService",
]
