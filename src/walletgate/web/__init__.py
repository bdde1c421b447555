"""Web boundary layer for the wallet extension.

SECURITY PRINCIPLES:
1. The gateway holds no private keys and signs nothing. Swap transactions
   are built by the router upstream and signed in the user's wallet.

2. Provider credentials never leave the server. The extension talks to
   these endpoints; only the gateway talks to Helius.

3. Nothing is stored. Every request is answered from upstream state.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
