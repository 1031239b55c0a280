"""Text helpers: tokenization, titles and snippets."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

# Runs of Unicode letters or digits; underscores and punctuation split tokens.
TOKEN_PATTERN = re.compile(r"[^\W_]+")
HEADING_PATTERN = re.compile(r"^\s*#+(.*)$")


def iter_tokens(text: str, *, min_length: int = 2) -> Iterator[str]:
    """Yield lowercase alphanumeric tokens of at least ``min_length`` characters."""
    for match in TOKEN_PATTERN.finditer(text):
        token = match.group(0).lower()
        if len(token) >= min_length:
            yield token


def tokenize(text: str, *, min_length: int = 2) -> set[str]:
    """Return the distinct tokens of ``text``."""
    return set(iter_tokens(text, min_length=min_length))


def extract_title(text: str, fallback: str) -> str:
    """Return the first Markdown heading in ``text`` or ``fallback``."""
    for line in text.splitlines():
        match = HEADING_PATTERN.match(line)
        if match:
            title = match.group(1).strip()
            if title:
                return title
    return fallback


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Collapse whitespace and join lines."""
    return "\n".join(line.strip() for line in lines if line.strip())


def make_snippet(text: str, keyword: str | None = None, *, max_chars: int = 160) -> str:
    """Build a single-line excerpt of ``text`` around the first keyword hit.

    Falls back to the beginning of the text when the keyword does not occur.
    """
    flat = " ".join(normalize_whitespace(text.splitlines()).split())
    if len(flat) <= max_chars:
        return flat

    start = 0
    if keyword:
        position = flat.lower().find(keyword.strip().lower())
        if position > 0:
            start = max(position - max_chars // 4, 0)

    excerpt = flat[start : start + max_chars].strip()
    if start > 0:
        excerpt = "..." + excerpt
    if start + max_chars < len(flat):
        excerpt = excerpt + "..."
    return excerpt
