from .config import ServiceConfig, load_config
from .contracts import RpcError, RpcErrorBody, RpcRequest, RpcResponse

__all__ = [
    "ServiceConfig",
    "load_config",
    "RpcError",
    "RpcErrorBody",
    "RpcRequest",
    "RpcResponse",
]
