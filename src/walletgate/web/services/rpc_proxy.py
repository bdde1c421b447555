"""JSON-RPC proxy.

Forwards raw JSON-RPC bodies to the resolved RPC endpoint so the extension
can use a normal Solana connection without ever seeing the provider key.

Upstream JSON-RPC errors pass through untouched. Only failures the upstream
could not express itself (transport errors, non-2xx statuses, undecodable
bodies) are turned into synthetic error envelopes, which always echo the
inbound request id.
"""

import json
import logging
from typing import Any, Union

from walletgate.config import Settings
from walletgate.connection import ConnectionResolver
from walletgate.errors import ConfigError, UpstreamError
from walletgate.upstream.rpc import RpcNodeClient
from walletgate.web.contracts.rpc import (
    INTERNAL_ERROR,
    PARSE_ERROR,
    SERVER_ERROR,
    JsonRpcErrorEnvelope,
)

logger = logging.getLogger(__name__)


def request_id_of(payload: Any) -> Any:
    """Id of a single JSON-RPC request, or None for batches and id-less calls."""
    if isinstance(payload, dict):
        return payload.get("id")
    return None


class RpcProxy:
    """Forwards JSON-RPC payloads and guarantees a JSON-RPC shaped answer."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.resolver = ConnectionResolver(settings)

    async def forward(self, body: bytes) -> Union[bytes, JsonRpcErrorEnvelope]:
        """Forward ``body`` upstream.

        Returns:
            The upstream body bytes on success, otherwise an error envelope
        """
        try:
            payload = json.loads(body)
        except ValueError:
            logger.info("Rejecting RPC proxy request with invalid JSON body")
            return JsonRpcErrorEnvelope.build(PARSE_ERROR, "Parse error")

        request_id = request_id_of(payload)

        try:
            endpoint = self.resolver.resolve()
        except ConfigError as e:
            logger.error(f"RPC proxy unavailable: {e}")
            return JsonRpcErrorEnvelope.build(INTERNAL_ERROR, e.message, request_id)

        client = RpcNodeClient(endpoint, timeout=self.settings.upstream_timeout)

        try:
            response = await client.forward(body)
        except UpstreamError as e:
            logger.error(f"Error proxying RPC request: {e}")
            return JsonRpcErrorEnvelope.build(INTERNAL_ERROR, e.message, request_id)

        if not response.is_success:
            logger.warning(f"RPC upstream returned HTTP {response.status_code}")
            return JsonRpcErrorEnvelope.build(
                SERVER_ERROR,
                f"HTTP {response.status_code}: {response.reason_phrase}",
                request_id,
            )

        try:
            json.loads(response.content)
        except ValueError:
            logger.error("RPC upstream returned a non-JSON body")
            return JsonRpcErrorEnvelope.build(
                INTERNAL_ERROR, "Invalid JSON response from RPC node", request_id
            )

        return response.content
