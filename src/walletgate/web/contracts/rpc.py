"""JSON-RPC 2.0 envelope contracts."""

from typing import Any

from pydantic import BaseModel, Field

# Error codes used for envelopes synthesized by the proxy
PARSE_ERROR = -32700
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000


class JsonRpcError(BaseModel):
    """The ``error`` member of a JSON-RPC response."""

    code: int
    message: str


class JsonRpcErrorEnvelope(BaseModel):
    """A JSON-RPC response carrying an error."""

    jsonrpc: str = "2.0"
    error: JsonRpcError
    id: Any = Field(None, description="Id of the request this answers")

    @classmethod
    def build(cls, code: int, message: str, request_id: Any = None) -> "JsonRpcErrorEnvelope":
        return cls(error=JsonRpcError(code=code, message=message), id=request_id)
