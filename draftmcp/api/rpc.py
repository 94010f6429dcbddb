from __future__ import annotations

"""
Shared JSON-RPC envelope handling for the draftmcp services.

Design intent:
- Decode the envelope once, dispatch on an exact method-name match.
- Answer every outcome with HTTP 200 and exactly one of result/error.
"""

import json
import logging
from typing import Any, Callable, Mapping

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from draftmcp.internal_core.config import load_config
from draftmcp.internal_core.contracts import RpcError, RpcRequest, RpcResponse

logger = logging.getLogger(__name__)

MethodHandler = Callable[[Request, Any], Any]


def decode_envelope(raw: bytes) -> RpcRequest:
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise RpcError.parse_error() from exc
    if not isinstance(payload, dict):
        raise RpcError.parse_error()
    try:
        return RpcRequest.model_validate(payload)
    except ValidationError as exc:
        raise RpcError.parse_error() from exc


def _respond(response: RpcResponse) -> JSONResponse:
    return JSONResponse(content=response.to_payload())


async def handle_rpc(request: Request, methods: Mapping[str, MethodHandler]) -> JSONResponse:
    raw = await request.body()
    try:
        envelope = decode_envelope(raw)
    except RpcError as exc:
        logger.warning("rpc_error code=%s message=%s id=0", exc.code, exc.message)
        return _respond(RpcResponse.failure(exc.code, exc.message, 0))

    logger.debug("rpc_call method=%s id=%s", envelope.method, envelope.id)
    handler = methods.get(envelope.method)
    try:
        if handler is None:
            raise RpcError.method_not_found()
        result = await run_in_threadpool(handler, request, envelope.params)
    except RpcError as exc:
        logger.warning(
            "rpc_error method=%s code=%s message=%s id=%s",
            envelope.method,
            exc.code,
            exc.message,
            envelope.id,
        )
        return _respond(RpcResponse.failure(exc.code, exc.message, envelope.id))

    return _respond(RpcResponse.success(result, envelope.id))


def create_service_app(title: str, methods: Mapping[str, MethodHandler]) -> FastAPI:
    config = load_config()
    app = FastAPI(title=title)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.DRAFTMCP_CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/mcp")
    async def mcp(request: Request) -> JSONResponse:
        return await handle_rpc(request, methods)

    return app
