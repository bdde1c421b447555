"""Per-IP fixed window rate limiting."""

from typing import Callable

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from starlette.requests import Request
from starlette.responses import JSONResponse

from walletgate.config import Settings

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


def client_ip(request: Request, trusted_hops: int = 1) -> str:
    """Client address, trusting ``trusted_hops`` reverse proxies.

    Each trusted proxy appends the address it received the request from to
    X-Forwarded-For, so the client is ``trusted_hops`` entries back from the
    socket peer.
    """
    peer = request.client.host if request.client else "127.0.0.1"
    if trusted_hops <= 0:
        return peer

    forwarded = request.headers.get("x-forwarded-for", "")
    chain = [addr.strip() for addr in forwarded.split(",") if addr.strip()]
    chain.append(peer)
    return chain[max(len(chain) - 1 - trusted_hops, 0)]


def client_ip_key(trusted_hops: int) -> Callable[[Request], str]:
    def key(request: Request) -> str:
        return client_ip(request, trusted_hops)

    return key


def create_limiter(settings: Settings) -> Limiter:
    """One shared window per client IP across every route."""
    return Limiter(
        key_func=client_ip_key(settings.trust_proxy_hops),
        application_limits=[settings.rate_limit],
        strategy="fixed-window",
        storage_uri="memory://",
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    # Must stay sync: SlowAPIMiddleware calls it without awaiting.
    return JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE})
