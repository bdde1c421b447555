"""JSON-RPC proxy endpoint.

Lets the extension point a standard Solana connection at the gateway
instead of at a credentialed provider URL.
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from walletgate.web.dependencies import get_rpc_proxy
from walletgate.web.services import RpcProxy

router = APIRouter(tags=["rpc"])


@router.post("/rpc")
async def proxy_rpc(request: Request, proxy: RpcProxy = Depends(get_rpc_proxy)) -> Response:
    """Relay a JSON-RPC request to the Solana node.

    Always answers with a JSON-RPC envelope: the node's own response, or an
    error envelope echoing the request id when the node could not be reached.
    """
    result = await proxy.forward(await request.body())

    if isinstance(result, bytes):
        return Response(content=result, media_type="application/json")
    return JSONResponse(content=result.model_dump())
