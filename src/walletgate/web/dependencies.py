"""FastAPI dependencies wiring services to the app's Settings."""

from fastapi import Request

from walletgate.config import Settings
from walletgate.web.services import BalanceService, PriceService, RpcProxy, SwapService


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_balance_service(request: Request) -> BalanceService:
    return BalanceService(get_app_settings(request))


def get_price_service(request: Request) -> PriceService:
    return PriceService(get_app_settings(request))


def get_swap_service(request: Request) -> SwapService:
    return SwapService(get_app_settings(request))


def get_rpc_proxy(request: Request) -> RpcProxy:
    return RpcProxy(get_app_settings(request))
