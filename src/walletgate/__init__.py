"""Wallet gateway: keeps provider credentials server-side for the Solana wallet extension."""

__version__ = "0.1.0"
