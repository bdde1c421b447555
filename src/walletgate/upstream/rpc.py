"""Solana JSON-RPC node adapter."""

import logging
from typing import Any, Optional

import httpx

from walletgate.connection import Endpoint
from walletgate.errors import UpstreamError
from walletgate.upstream.base import DEFAULT_TIMEOUT, UpstreamClient

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"


class RpcNodeClient(UpstreamClient):
    """Talks JSON-RPC to a resolved Solana RPC endpoint."""

    name = "rpc"

    def __init__(self, endpoint: Endpoint, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(timeout=timeout)
        self.endpoint = endpoint

    async def forward(self, body: bytes) -> httpx.Response:
        """POST a raw JSON-RPC body and return the upstream response as is."""
        return await self._request(
            "POST",
            self.endpoint.url,
            headers={"Content-Type": "application/json"},
            content=body,
        )

    async def call(self, method: str, params: Optional[list] = None) -> Any:
        """Invoke a single JSON-RPC method and return its ``result``."""
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "id": 1,
            "method": method,
            "params": params or [],
        }
        response = await self._request("POST", self.endpoint.url, json=payload)

        if not response.is_success:
            logger.warning(f"RPC {method} failed: HTTP {response.status_code}")
            raise UpstreamError(
                f"HTTP {response.status_code}: {response.reason_phrase}", upstream=self.name
            )

        data = self._parse_json(response)
        if not isinstance(data, dict):
            raise UpstreamError(f"Malformed {method} response", upstream=self.name)

        error = data.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise UpstreamError(message or f"{method} failed", upstream=self.name)

        return data.get("result")

    async def get_balance(self, address: str, commitment: str = "confirmed") -> int:
        """Get the balance of an account in lamports."""
        result = await self.call("getBalance", [address, {"commitment": commitment}])

        value = result.get("value") if isinstance(result, dict) else None
        if not isinstance(value, int) or isinstance(value, bool):
            raise UpstreamError("Malformed getBalance response", upstream=self.name)
        return value
