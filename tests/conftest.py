"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from walletgate.api.app import create_app
from walletgate.config import Settings

HELIUS_KEY = "test-helius-key"

# Hosts the adapters talk to on devnet
RPC_HOST = "devnet.helius-rpc.com"
HELIUS_API_HOST = "api-devnet.helius.xyz"
JUPITER_HOST = "quote-api.jup.ag"
COINGECKO_HOST = "api.coingecko.com"

# Valid base58 public keys
WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def make_settings(**overrides) -> Settings:
    """Settings isolated from the local environment and .env file."""
    values = {
        "solana_network": "devnet",
        "helius_api_key": HELIUS_KEY,
        "environment": "test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def test_app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_client():
    """Build clients for apps created with custom settings."""
    clients = []

    async def _make(app: FastAPI, **transport_kwargs) -> AsyncClient:
        ac = AsyncClient(transport=ASGITransport(app=app, **transport_kwargs), base_url="http://test")
        clients.append(ac)
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()
