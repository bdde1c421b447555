"""Gateway error taxonomy.

Each error carries the HTTP status it is rendered with. Rendering happens in
one place, the exception handlers registered by ``walletgate.api.errors``.
"""

from typing import Optional


class GatewayError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(GatewayError):
    """Missing or malformed caller input."""

    status_code = 400


class InvalidAddressError(ValidationError):
    """Address is not a well-formed base58 public key."""

    def __init__(self, address: str):
        super().__init__(f"Invalid public key input: {address}")
        self.address = address


class SwapRouteError(ValidationError):
    """Swap router rejected the request with a client-correctable error."""


class UpstreamError(GatewayError):
    """Upstream transport failure or malformed upstream response."""

    status_code = 500

    def __init__(self, message: str, upstream: str = "upstream"):
        super().__init__(message)
        self.upstream = upstream


class ConfigError(GatewayError):
    """Required configuration is missing."""

    status_code = 500
