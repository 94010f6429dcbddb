from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

PARSE_ERROR: Final = -32700
METHOD_NOT_FOUND: Final = -32601
INVALID_PARAMS: Final = -32602
INTERNAL_ERROR: Final = -32603


class RpcRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    method: str = ""
    params: Any = None
    id: StrictInt = 0

    @field_validator("method", mode="before")
    @classmethod
    def _null_method(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("id", mode="before")
    @classmethod
    def _null_id(cls, value: Any) -> Any:
        return 0 if value is None else value


class RpcErrorBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: int
    message: str


class RpcResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    result: Any = None
    error: RpcErrorBody | None = None
    id: int = 0

    @classmethod
    def success(cls, result: Any, request_id: int) -> "RpcResponse":
        return cls(result=result, id=request_id)

    @classmethod
    def failure(cls, code: int, message: str, request_id: int) -> "RpcResponse":
        return cls(error=RpcErrorBody(code=code, message=message), id=request_id)

    def to_payload(self) -> dict[str, Any]:
        # Exactly one of result/error goes on the wire.
        if self.error is not None:
            return {"error": self.error.model_dump(), "id": self.id}
        return {"result": self.result, "id": self.id}


class RpcError(Exception):
    """Raised by method handlers to answer with a JSON-RPC error envelope."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @classmethod
    def parse_error(cls) -> "RpcError":
        return cls(PARSE_ERROR, "Parse error")

    @classmethod
    def method_not_found(cls) -> "RpcError":
        return cls(METHOD_NOT_FOUND, "Method not found")

    @classmethod
    def invalid_params(cls, message: str = "Invalid params") -> "RpcError":
        return cls(INVALID_PARAMS, message)

    @classmethod
    def internal_error(cls, message: str) -> "RpcError":
        return cls(INTERNAL_ERROR, message)
