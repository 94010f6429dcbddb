from __future__ import annotations

"""
Draft generator service: generateMarkdown over POST /mcp (default port 8080).
"""

from typing import Any

from fastapi import Request

from draftmcp.api.rpc import create_service_app
from draftmcp.note.draft import coerce_markdown_input, generate_markdown


def _generate_markdown(request: Request, params: Any) -> str:
    _ = request
    draft_input = coerce_markdown_input(params)
    return generate_markdown(draft_input.title, draft_input.notes)


METHODS = {"generateMarkdown": _generate_markdown}

app = create_service_app("draftmcp generator service", METHODS)
