"""Query interface over the document store and keyword index."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from docshelf.config import AppConfig
from docshelf.errors import InvalidQueryError, LoadError, ServiceNotReadyError
from docshelf.index.indexer import Indexer
from docshelf.index.store import DocumentStore
from docshelf.models import Document, LoadReport, SearchResult
from docshelf.utils.text import make_snippet

LOGGER = logging.getLogger(__name__)


class ServiceState(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(slots=True)
class ServiceStats:
    documents: int
    categories: int
    skipped: int
    tokens: int


def _title_key(document: Document) -> tuple[str, str]:
    return (document.title.lower(), document.id)


class QueryService:
    """High-level read-only API over a loaded corpus.

    The service starts in ``LOADING``. ``start`` loads and indexes the corpus
    once and moves to ``READY``, or to ``FAILED`` if the root cannot be read.
    """

    def __init__(
        self,
        store: DocumentStore,
        indexer: Indexer,
        *,
        snippet_chars: int = 160,
    ) -> None:
        self.store = store
        self.indexer = indexer
        self.snippet_chars = snippet_chars
        self.state = ServiceState.LOADING
        self.report: LoadReport | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "QueryService":
        store = DocumentStore(
            extensions=config.extensions, default_category=config.default_category
        )
        indexer = Indexer(min_token_length=config.min_token_length)
        return cls(store, indexer, snippet_chars=config.snippet_chars)

    def start(self, root: Path) -> LoadReport:
        if self.state is not ServiceState.LOADING:
            raise RuntimeError(f"Service already started (state: {self.state.value})")

        try:
            report = self.store.load(root)
        except LoadError:
            self.state = ServiceState.FAILED
            raise
        self.indexer.build(self.store.list())
        self.report = report
        self.state = ServiceState.READY
        return report

    @property
    def ready(self) -> bool:
        return self.state is ServiceState.READY

    def _require_ready(self) -> None:
        if self.state is not ServiceState.READY:
            raise ServiceNotReadyError(self.state.value)

    def find_by_id(self, doc_id: str) -> Document:
        self._require_ready()
        return self.store.get(doc_id)

    def search_keyword(
        self,
        keyword: str,
        *,
        category: str | None = None,
        limit: int | None = None,
    ) -> List[Document]:
        """Return documents containing ``keyword``, ordered by title."""
        self._require_ready()
        if not keyword or not keyword.strip():
            raise InvalidQueryError(keyword)

        ids = self.indexer.search(keyword.strip())
        documents = [self.store.get(doc_id) for doc_id in ids]
        if category is not None:
            documents = [doc for doc in documents if doc.category == category]
        documents.sort(key=_title_key)
        LOGGER.debug("Keyword %r matched %d documents", keyword, len(documents))
        if limit is not None:
            documents = documents[: max(limit, 0)]
        return documents

    def list_by_category(self, category: str | None) -> List[Document]:
        self._require_ready()
        return sorted(self.store.list(category), key=_title_key)

    def list_categories(self) -> List[str]:
        self._require_ready()
        return self.store.categories()

    def summarize(self, document: Document, keyword: str | None = None) -> SearchResult:
        return SearchResult(
            id=document.id,
            title=document.title,
            category=document.category,
            snippet=make_snippet(document.body, keyword, max_chars=self.snippet_chars),
        )

    def stats(self) -> ServiceStats:
        self._require_ready()
        return ServiceStats(
            documents=len(self.store),
            categories=len(self.store.categories()),
            skipped=len(self.report.skipped) if self.report else 0,
            tokens=self.indexer.tokens(),
        )
