"""Middleware for the gateway: CORS origin policy and security headers."""

import logging
from typing import Any, Sequence

from fastapi import Request
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.types import Receive, Scope, Send

logger = logging.getLogger(__name__)

EXTENSION_SCHEMES = ("chrome-extension", "moz-extension")

CORS_REJECTION_MESSAGE = "Not allowed by CORS"

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization", "solana-client"]

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


class ExtensionCORSMiddleware(CORSMiddleware):
    """CORS for a browser-extension backend.

    Requests without an Origin (curl, mobile apps, other servers) and
    requests from extension pages pass. Web origins must be on the
    allow-list; anything else is refused outright instead of merely
    receiving no CORS headers.
    """

    def __init__(
        self,
        app: Any,
        allowed_origins: Sequence[str] = (),
        log_rejections: bool = False,
    ) -> None:
        super().__init__(
            app,
            allow_origins=list(allowed_origins),
            allow_methods=CORS_METHODS,
            allow_headers=CORS_HEADERS,
            allow_credentials=True,
        )
        self.log_rejections = log_rejections

    def is_allowed_origin(self, origin: str) -> bool:
        scheme, separator, rest = origin.partition("://")
        if separator and rest and scheme in EXTENSION_SCHEMES:
            return True
        return super().is_allowed_origin(origin=origin)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if origin and not self.is_allowed_origin(origin=origin):
                if self.log_rejections:
                    logger.warning(f"CORS rejected origin: {origin}")
                response = JSONResponse(status_code=403, content={"error": CORS_REJECTION_MESSAGE})
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add hardening headers to every response."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
