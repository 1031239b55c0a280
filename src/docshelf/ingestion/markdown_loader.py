"""Markdown and plain-text note loading."""

from __future__ import annotations

import logging
from pathlib import Path

from docshelf.config import DEFAULT_CATEGORY
from docshelf.models import Document, Loaded, LoadResult, Skipped
from docshelf.utils.files import category_for, compute_sha256, document_id_for
from docshelf.utils.text import extract_title

LOGGER = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read a note as UTF-8, tolerating a leading byte order mark."""
    return path.read_text(encoding="utf-8-sig")


def load_document(
    path: Path, root: Path, *, default_category: str = DEFAULT_CATEGORY
) -> LoadResult:
    """Load a single note file into a ``Document``.

    Unreadable, undecodable and empty files produce a ``Skipped`` result
    instead of raising.
    """
    try:
        body = read_text(path)
        sha256 = compute_sha256(path)
        stat = path.stat()
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Skipping unreadable file %s: %s", path, exc)
        return Skipped(path=path, reason=f"unreadable: {exc}")

    if not body.strip():
        LOGGER.debug("Skipping empty file %s", path)
        return Skipped(path=path, reason="empty")

    document = Document(
        id=document_id_for(path, root),
        title=extract_title(body, fallback=path.stem),
        body=body,
        category=category_for(path, root, default_category),
        path=path.relative_to(root).as_posix(),
        sha256=sha256,
        size=stat.st_size,
        mtime=stat.st_mtime,
    )
    return Loaded(document=document)
