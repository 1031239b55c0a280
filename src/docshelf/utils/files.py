"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Iterable, Iterator

from docshelf.config import DEFAULT_EXTENSIONS


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def iter_document_paths(
    root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> Iterator[Path]:
    """Yield note files under ``root`` in sorted order, skipping hidden entries."""
    suffixes = {ext.lower() for ext in extensions}
    for item in sorted(root.rglob("*")):
        if _is_hidden(item, root):
            continue
        if item.is_file() and item.suffix.lower() in suffixes:
            yield item


def document_id_for(path: Path, root: Path) -> str:
    """Derive a document id from the path relative to the corpus root."""
    return path.relative_to(root).with_suffix("").as_posix()


def category_for(path: Path, root: Path, default: str) -> str:
    """Return the top-level directory name, or ``default`` for root-level files."""
    parts = path.relative_to(root).parts
    return parts[0] if len(parts) > 1 else default


def compute_sha256(path: Path) -> str:
    """Compute SHA256 hash for a file."""
    sha = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 20), b""):
            sha.update(chunk)
    return sha.hexdigest()
