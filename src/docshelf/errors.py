"""Error types raised by DocShelf components."""

from __future__ import annotations

from pathlib import Path


class DocShelfError(Exception):
    """Base class for all DocShelf errors."""


class LoadError(DocShelfError):
    """The corpus root could not be read."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"Cannot load corpus at {root}: {reason}")
        self.root = root
        self.reason = reason


class NotFoundError(DocShelfError):
    """No document with the requested id exists."""

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"Document not found: {doc_id}")
        self.doc_id = doc_id


class InvalidQueryError(DocShelfError):
    """The search keyword is empty or otherwise unusable."""

    def __init__(self, keyword: str, reason: str = "empty keyword") -> None:
        super().__init__(f"Invalid query {keyword!r}: {reason}")
        self.keyword = keyword
        self.reason = reason


class ServiceNotReadyError(DocShelfError):
    """A query arrived before the corpus finished loading."""

    def __init__(self, state: str) -> None:
        super().__init__(f"Service is not ready (state: {state})")
        self.state = state
