from __future__ import annotations

"""
Render Jekyll front matter and draft filenames.

Design intent:
- Keep field order fixed so output stays byte-compatible across releases.
- Quote title and summary verbatim; no YAML escaping is applied.
"""

from datetime import date
from typing import Sequence

from draftmcp.jekyll.models import JekyllDraft

FRONT_MATTER_DELIMITER = "---"


def _quoted_list(items: Sequence[str]) -> str:
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"


def _bracketed_list(items: Sequence[str]) -> str:
    # Published drafts carry the doubly-bracketed form: [["a", "b"]].
    return f"[{_quoted_list(items)}]"


def build_front_matter(draft: JekyllDraft, *, today: date | None = None) -> str:
    stamp = (today or date.today()).strftime("%Y-%m-%d")
    lines = [
        FRONT_MATTER_DELIMITER,
        "layout: post",
        f'title: "{draft.title}"',
        f"date: {stamp}",
    ]
    if draft.categories:
        lines.append(f"categories: {_bracketed_list(draft.categories)}")
    if draft.tags:
        lines.append(f"tags: {_bracketed_list(draft.tags)}")
    if draft.series:
        lines.append(f"series: {draft.series}")
    if draft.summary:
        lines.append(f'summary: "{draft.summary}"')
    lines.append(FRONT_MATTER_DELIMITER)
    return "\n".join(lines)


def sanitize_filename(title: str) -> str:
    out: list[str] = []
    for ch in title:
        if ch.isascii() and ch.isalnum():
            out.append(ch)
        elif ch == " ":
            out.append("-")
    return "".join(out)


def render_draft(draft: JekyllDraft, *, today: date | None = None) -> str:
    return build_front_matter(draft, today=today) + "\n" + draft.body
