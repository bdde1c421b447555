"""Main entry point - runs the gateway API."""

import logging

import uvicorn

from walletgate.api.app import create_app
from walletgate.config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()

    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info(f"HELIUS_API_KEY loaded: {'yes' if settings.has_credential else 'no'}")
    logger.info(f"Network: {settings.solana_network}")
    logger.info(f"RPC fallback policy: {settings.rpc_fallback_policy.value}")

    app = create_app(settings)

    logger.info(f"Starting API server on {settings.api_host}:{settings.port}")
    logger.info("CORS enabled for browser extensions")
    logger.info("HTTP RPC proxy available at /api/rpc")

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
        proxy_headers=False,
    )


if __name__ == "__main__":
    main()
