"""Application configuration using pydantic-settings.

Every component receives a Settings instance at construction; nothing reads
the environment at request time.
"""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Origins the wallet frontends are served from
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "https://saifu-flax.vercel.app",
]


class RpcFallbackPolicy(str, Enum):
    """What to do when no RPC provider credential is configured."""

    PERMISSIVE = "permissive"  # fall back to the public, rate-limited RPC
    STRICT = "strict"  # refuse to resolve an endpoint


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Network / Provider
    # ======================
    solana_network: str = Field(
        default="devnet", description="Solana cluster (mainnet-beta, devnet, testnet)"
    )
    helius_api_key: str = Field(default="", description="Helius API key")
    rpc_fallback_policy: RpcFallbackPolicy = Field(
        default=RpcFallbackPolicy.PERMISSIVE,
        description="Behaviour when HELIUS_API_KEY is not set",
    )

    # ======================
    # Upstream APIs
    # ======================
    jupiter_api_url: str = Field(
        default="https://quote-api.jup.ag/v6", description="Jupiter swap API base URL"
    )
    coingecko_api_url: str = Field(
        default="https://api.coingecko.com/api/v3", description="CoinGecko API base URL"
    )
    upstream_timeout: float = Field(
        default=15.0, gt=0, description="Timeout in seconds for each upstream call"
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=3001, description="API server port")

    # ======================
    # CORS
    # ======================
    frontend_url: Optional[str] = Field(default=None, description="Deployed frontend origin")
    allowed_origins: str = Field(
        default="", description="Comma-separated list of extra allowed origins"
    )

    # ======================
    # Rate limiting
    # ======================
    rate_limit_max: int = Field(default=1000, gt=0, description="Requests per window per IP")
    rate_limit_window_minutes: int = Field(default=15, gt=0, description="Window length")
    trust_proxy_hops: int = Field(
        default=1, ge=0, description="Reverse proxy hops trusted for the client IP"
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def has_credential(self) -> bool:
        """Check if a non-blank provider credential is configured."""
        return bool(self.helius_api_key and self.helius_api_key.strip())

    @property
    def cors_origins(self) -> list[str]:
        """Explicit browser origins allowed to call the gateway."""
        origins = list(DEFAULT_ALLOWED_ORIGINS)
        if self.frontend_url:
            origins.append(self.frontend_url)
        origins.extend(o.strip() for o in self.allowed_origins.split(",") if o.strip())
        return origins

    @property
    def rate_limit(self) -> str:
        """Rate limit in the notation understood by slowapi."""
        return f"{self.rate_limit_max} per {self.rate_limit_window_minutes} minutes"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "network": self.solana_network,
            "helius_api_key": "***" if self.has_credential else "(not set)",
            "rpc_fallback_policy": self.rpc_fallback_policy.value,
            "cors_origins": self.cors_origins,
            "rate_limit": self.rate_limit,
            "upstream_timeout": self.upstream_timeout,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
