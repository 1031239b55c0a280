"""Core DocShelf data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


@dataclass(slots=True, frozen=True)
class Document:
    """One loaded note file."""

    id: str
    title: str
    body: str
    category: str
    path: str
    sha256: str = ""
    size: int = 0
    mtime: float = 0.0


@dataclass(slots=True, frozen=True)
class Loaded:
    document: Document


@dataclass(slots=True, frozen=True)
class Skipped:
    path: Path
    reason: str


LoadResult = Union[Loaded, Skipped]


@dataclass(slots=True)
class LoadReport:
    """Outcome of scanning a corpus root."""

    loaded: list[Loaded] = field(default_factory=list)
    skipped: list[Skipped] = field(default_factory=list)

    def add(self, result: LoadResult) -> None:
        if isinstance(result, Loaded):
            self.loaded.append(result)
        else:
            self.skipped.append(result)


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Summary of a matching document."""

    id: str
    title: str
    category: str
    snippet: str
