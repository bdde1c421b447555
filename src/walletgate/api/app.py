"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from walletgate.api.errors import register_error_handlers
from walletgate.api.middleware import ExtensionCORSMiddleware, SecurityHeadersMiddleware
from walletgate.api.rate_limit import create_limiter, rate_limit_exceeded_handler
from walletgate.config import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Middleware runs outermost first: security headers, CORS, rate limit.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Wallet Gateway API",
        description="Credential-holding gateway for the Solana wallet extension",
        version="0.1.0",
    )
    app.state.settings = settings

    register_error_handlers(app)

    # Rate limiting
    app.state.limiter = create_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # CORS middleware
    app.add_middleware(
        ExtensionCORSMiddleware,
        allowed_origins=settings.cors_origins,
        log_rejections=settings.is_production,
    )

    app.add_middleware(SecurityHeadersMiddleware)

    # Register routes
    from walletgate.api.routes import health
    from walletgate.web.controllers import balances_router, rpc_router, swaps_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(balances_router, prefix="/api")
    app.include_router(swaps_router, prefix="/api")
    app.include_router(rpc_router, prefix="/api")

    return app
