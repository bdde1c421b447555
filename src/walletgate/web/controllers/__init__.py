"""HTTP controllers for the wallet API.

SECURITY: These controllers MUST NOT:
- Access private keys
- Sign or broadcast transactions

All operations are read-only or prepare data for client-side signing.
"""

from walletgate.web.controllers.balances import router as balances_router
from walletgate.web.controllers.rpc import router as rpc_router
from walletgate.web.controllers.swaps import router as swaps_router

__all__ = [
    "balances_router",
    "rpc_router",
    "swaps_router",
]
