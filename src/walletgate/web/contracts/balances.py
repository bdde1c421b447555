"""Balance and price response contracts."""

from typing import Optional

from pydantic import BaseModel, Field


class NativeBalanceResponse(BaseModel):
    """SOL balance of an address."""

    balance: float = Field(..., description="Balance in SOL")


class TokenDescriptor(BaseModel):
    """A token held by an address."""

    mint: str = Field(..., description="Token mint address")
    symbol: str = Field(default="Unknown", description="Token symbol")
    name: str = Field(default="Unknown Token", description="Token name")
    logo: Optional[str] = Field(None, description="Token logo URL")
    balance: float = Field(..., description="Balance in human-readable units")


class TokenBalancesResponse(BaseModel):
    """All token holdings of an address."""

    tokens: list[TokenDescriptor] = Field(default_factory=list)


class PriceResponse(BaseModel):
    """USD price of the native asset, or null if the oracle has none."""

    price: Optional[float] = Field(None, description="SOL price in USD")
