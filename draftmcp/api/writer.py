from __future__ import annotations

"""
Draft writer service: writeJekyllDraft over POST /mcp (default port 8081).

Design intent:
- Validate params before touching the filesystem.
- Surface OS error text verbatim in internal-error messages.
"""

from datetime import date
from typing import Any

from fastapi import Request
from pydantic import ValidationError

from draftmcp.api.rpc import create_service_app
from draftmcp.internal_core.contracts import RpcError
from draftmcp.jekyll.models import JekyllDraft
from draftmcp.jekyll.writer import DraftWriteError, write_draft


def _resolve_today(request: Request) -> date | None:
    clock = getattr(request.app.state, "draft_today_callable", None)
    if callable(clock):
        return clock()
    return None


def _write_jekyll_draft(request: Request, params: Any) -> str:
    if params is None:
        params = {}
    if not isinstance(params, dict):
        raise RpcError.invalid_params()
    try:
        draft = JekyllDraft.model_validate(params)
    except ValidationError as exc:
        raise RpcError.invalid_params() from exc

    if not draft.has_required_fields():
        raise RpcError.invalid_params("Title and path are required")

    try:
        write_draft(draft, today=_resolve_today(request))
    except ValueError as exc:
        raise RpcError.invalid_params(str(exc)) from exc
    except DraftWriteError as exc:
        raise RpcError.internal_error(str(exc)) from exc
    return "written"


METHODS = {"writeJekyllDraft": _write_jekyll_draft}

app = create_service_app("draftmcp writer service", METHODS)
