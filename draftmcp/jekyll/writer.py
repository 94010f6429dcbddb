from __future__ import annotations

"""
Persist Jekyll drafts to disk.

Design intent:
- One file per request under <path>/_drafts, overwritten on conflict.
- Replace the target atomically so concurrent writers never leave a torn file.
"""

import logging
import os
import tempfile
from datetime import date
from pathlib import Path

from draftmcp.jekyll.formatting import render_draft, sanitize_filename
from draftmcp.jekyll.models import JekyllDraft

logger = logging.getLogger(__name__)

DRAFTS_DIRNAME = "_drafts"
DRAFT_FILE_MODE = 0o644


def _read_umask() -> int:
    # os.umask can only be read by setting it; do it once at import, before
    # request threads exist.
    current = os.umask(0)
    os.umask(current)
    return current


_PROCESS_UMASK = _read_umask()


def draft_file_mode() -> int:
    return DRAFT_FILE_MODE & ~_PROCESS_UMASK


class DraftWriteError(RuntimeError):
    """Raised when the drafts directory or the draft file cannot be written."""


def draft_filename(title: str) -> str:
    stem = sanitize_filename(title)
    if not stem:
        raise ValueError("Title must contain at least one letter, digit or space")
    return f"{stem}.md"


def write_draft(draft: JekyllDraft, *, today: date | None = None) -> Path:
    filename = draft_filename(draft.title)

    drafts_dir = Path(draft.path) / DRAFTS_DIRNAME
    try:
        drafts_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DraftWriteError(f"Failed to create drafts directory: {exc}") from exc

    target = drafts_dir / filename
    content = render_draft(draft, today=today)
    try:
        _atomic_write_text(target, content)
    except OSError as exc:
        raise DraftWriteError(f"Failed to write file: {exc}") from exc

    logger.info("Draft written to: %s", target)
    return target


def _atomic_write_text(target: Path, content: str) -> None:
    handle = tempfile.NamedTemporaryFile(
        prefix=f".{target.name}.",
        suffix=".tmp",
        dir=target.parent,
        mode="w",
        encoding="utf-8",
        newline="",
        delete=False,
    )
    tmp_path = Path(handle.name)
    try:
        with handle:
            handle.write(content)
        os.chmod(tmp_path, draft_file_mode())
        os.replace(tmp_path, target)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
