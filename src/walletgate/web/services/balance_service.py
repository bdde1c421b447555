"""Balance service.

Fetches balances from chain state: the SOL balance over JSON-RPC and token
holdings from the Helius indexer. Read-only; no keys are involved.
"""

import logging
from typing import Any, Optional

from solders.pubkey import Pubkey

from walletgate.config import RpcFallbackPolicy, Settings
from walletgate.connection import ConnectionResolver
from walletgate.errors import ConfigError, InvalidAddressError
from walletgate.upstream.helius import HeliusClient
from walletgate.upstream.rpc import RpcNodeClient
from walletgate.web.contracts.balances import TokenDescriptor

logger = logging.getLogger(__name__)

LAMPORTS_PER_SOL = 1_000_000_000


def validate_address(address: str) -> Pubkey:
    """Parse a base58 public key.

    Raises:
        InvalidAddressError: the address is not a 32-byte base58 key
    """
    try:
        return Pubkey.from_string(address)
    except ValueError as e:
        raise InvalidAddressError(address) from e


def normalize_token(entry: Any) -> Optional[TokenDescriptor]:
    """Turn one indexer token entry into a TokenDescriptor.

    Entries without a mint or without usable ``decimals`` are rejected
    (None) rather than reported with a guessed magnitude.
    """
    if not isinstance(entry, dict) or not entry.get("mint"):
        logger.warning(f"Skipping token entry without mint: {entry!r}")
        return None

    decimals = entry.get("decimals")
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        logger.warning(f"Skipping token {entry['mint']}: invalid decimals {decimals!r}")
        return None

    amount = entry.get("amount") or 0
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        logger.warning(f"Skipping token {entry['mint']}: invalid amount {amount!r}")
        return None

    logo = entry.get("logo")
    return TokenDescriptor(
        mint=str(entry["mint"]),
        symbol=str(entry.get("symbol") or "Unknown"),
        name=str(entry.get("name") or "Unknown Token"),
        logo=logo if isinstance(logo, str) and logo else None,
        balance=amount / 10**decimals,
    )


class BalanceService:
    """Service for fetching wallet balances from blockchain state."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.resolver = ConnectionResolver(settings)

    async def get_native_balance(self, address: str) -> float:
        """Get the SOL balance of ``address``.

        The address is validated before any network call. Upstream failures
        propagate as UpstreamError.
        """
        validate_address(address)

        endpoint = self.resolver.resolve()
        client = RpcNodeClient(endpoint, timeout=self.settings.upstream_timeout)

        lamports = await client.get_balance(address)
        return lamports / LAMPORTS_PER_SOL

    async def get_token_balances(self, address: str) -> list[TokenDescriptor]:
        """Get all token holdings of ``address``.

        Absence of a token list is not an error: an empty list is returned.
        """
        if not self.settings.has_credential:
            if self.settings.rpc_fallback_policy == RpcFallbackPolicy.STRICT:
                raise ConfigError("missing credential")
            logger.warning("HELIUS_API_KEY not set - token balances unavailable")
            return []

        client = HeliusClient(
            network=self.settings.solana_network,
            api_key=self.settings.helius_api_key.strip(),
            timeout=self.settings.upstream_timeout,
        )
        data = await client.get_balances(address)

        entries = data.get("tokens")
        if not isinstance(entries, list):
            return []

        tokens = []
        for entry in entries:
            token = normalize_token(entry)
            if token is not None:
                tokens.append(token)

        logger.debug(f"Found {len(tokens)} token(s) for {address}")
        return tokens
