from __future__ import annotations

"""
Build a markdown draft from a post title and free-form notes.

Design intent:
- Stand in for a generation backend with a literal concatenation.
- Never escape or trim caller input; output is byte-exact.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class MarkdownDraftInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    notes: str = ""


def generate_markdown(title: str, notes: str) -> str:
    return "# " + title + "\n\n" + notes


def coerce_markdown_input(params: Any) -> MarkdownDraftInput:
    """Best-effort decode of generateMarkdown params.

    Non-object payloads and non-string fields fall back to empty values
    field by field instead of failing the request.
    """
    if not isinstance(params, dict):
        return MarkdownDraftInput()
    fields = {
        name: params[name]
        for name in MarkdownDraftInput.model_fields
        if isinstance(params.get(name), str)
    }
    return MarkdownDraftInput(**fields)
