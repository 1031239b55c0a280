"""In-memory document store loaded from a corpus directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

from docshelf.config import DEFAULT_CATEGORY, DEFAULT_EXTENSIONS
from docshelf.errors import LoadError, NotFoundError
from docshelf.ingestion.markdown_loader import load_document
from docshelf.models import Document, Loaded, LoadReport, Skipped
from docshelf.utils.files import iter_document_paths

LOGGER = logging.getLogger(__name__)


class DocumentStore:
    """Holds every loaded document keyed by id."""

    def __init__(
        self,
        *,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        default_category: str = DEFAULT_CATEGORY,
    ) -> None:
        self.extensions = tuple(extensions)
        self.default_category = default_category
        self.root: Path | None = None
        self._documents: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def load(self, root: Path) -> LoadReport:
        """Scan ``root`` and replace the store contents with its notes."""
        root = Path(root)
        if not root.exists():
            raise LoadError(root, "path does not exist")
        if not root.is_dir():
            raise LoadError(root, "path is not a directory")
        if not os.access(root, os.R_OK | os.X_OK):
            raise LoadError(root, "path is not readable")

        report = LoadReport()
        documents: dict[str, Document] = {}
        try:
            paths = list(iter_document_paths(root, self.extensions))
        except OSError as exc:
            raise LoadError(root, str(exc)) from exc

        for path in paths:
            result = load_document(path, root, default_category=self.default_category)
            if isinstance(result, Loaded) and result.document.id in documents:
                LOGGER.warning(
                    "Skipping %s: id %r already loaded", path, result.document.id
                )
                result = Skipped(path=path, reason="duplicate id")
            if isinstance(result, Loaded):
                documents[result.document.id] = result.document
            report.add(result)

        self.root = root
        self._documents = documents
        LOGGER.info(
            "Loaded %d documents from %s (%d skipped)",
            len(report.loaded),
            root,
            len(report.skipped),
        )
        return report

    def get(self, doc_id: str) -> Document:
        try:
            return self._documents[doc_id]
        except KeyError:
            raise NotFoundError(doc_id) from None

    def list(self, category: str | None = None) -> Iterator[Document]:
        """Yield documents in id order, optionally restricted to ``category``."""
        for doc_id in sorted(self._documents):
            document = self._documents[doc_id]
            if category is None or document.category == category:
                yield document

    def categories(self) -> list[str]:
        return sorted({document.category for document in self._documents.values()})
