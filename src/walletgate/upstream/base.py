"""Shared HTTP plumbing for upstream service adapters."""

import logging
from typing import Any, Optional

import httpx

from walletgate.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


def describe_error(exc: Exception) -> str:
    """Human readable message for a transport failure."""
    return str(exc) or type(exc).__name__


class UpstreamClient:
    """Base class for upstream adapters.

    Each request uses a short-lived AsyncClient bounded by ``timeout``.
    Transport failures become UpstreamError; nothing is retried.
    """

    name = "upstream"

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def _get_headers(self) -> dict:
        """Get API headers."""
        return {"Accept": "application/json"}

    async def _request(
        self,
        method: str,
        url: str,
        headers: Optional[dict] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request, mapping transport failures to UpstreamError."""
        request_headers = self._get_headers()
        if headers:
            request_headers.update(headers)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.request(method, url, headers=request_headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{self.name} request failed: {type(e).__name__}: {e}")
            raise UpstreamError(describe_error(e), upstream=self.name) from e

    def _parse_json(self, response: httpx.Response) -> Any:
        """Decode a JSON body or raise UpstreamError."""
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"{self.name} returned a non-JSON body (HTTP {response.status_code})"
            )
            raise UpstreamError(
                f"Invalid JSON from {self.name} (HTTP {response.status_code})",
                upstream=self.name,
            ) from e
