"""Balance and price API endpoints.

SECURITY: These endpoints:
- Only query public blockchain data
- Never access private keys
- Never sign transactions
"""

from fastapi import APIRouter, Depends

from walletgate.web.contracts.balances import (
    NativeBalanceResponse,
    PriceResponse,
    TokenBalancesResponse,
)
from walletgate.web.dependencies import get_balance_service, get_price_service
from walletgate.web.services import BalanceService, PriceService

router = APIRouter(tags=["balances"])


@router.get("/sol-balance/{address}", response_model=NativeBalanceResponse)
async def get_sol_balance(
    address: str,
    service: BalanceService = Depends(get_balance_service),
) -> NativeBalanceResponse:
    """Get the SOL balance of a wallet address."""
    balance = await service.get_native_balance(address)
    return NativeBalanceResponse(balance=balance)


@router.get("/token-balances/{address}", response_model=TokenBalancesResponse)
async def get_token_balances(
    address: str,
    service: BalanceService = Depends(get_balance_service),
) -> TokenBalancesResponse:
    """Get all token holdings of a wallet address.

    Wallets without holdings return an empty list.
    """
    tokens = await service.get_token_balances(address)
    return TokenBalancesResponse(tokens=tokens)


@router.get("/sol-price", response_model=PriceResponse)
async def get_sol_price(
    service: PriceService = Depends(get_price_service),
) -> PriceResponse:
    """Get the SOL price in USD (null if unavailable)."""
    price = await service.get_native_asset_price_usd()
    return PriceResponse(price=price)
