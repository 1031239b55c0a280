"""Keyword inverted index over loaded documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from docshelf.models import Document
from docshelf.utils.text import iter_tokens, tokenize

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexStats:
    documents: int = 0
    tokens: int = 0
    postings: int = 0


class Indexer:
    """Maps normalized tokens to the ids of documents containing them."""

    def __init__(self, *, min_token_length: int = 2) -> None:
        self.min_token_length = min_token_length
        self._index: dict[str, frozenset[str]] = {}

    def build(self, documents: Iterable[Document]) -> IndexStats:
        """Index ``documents``, replacing any previous index."""
        postings: dict[str, set[str]] = {}
        stats = IndexStats()
        for document in documents:
            stats.documents += 1
            text = f"{document.title}\n{document.body}"
            for token in tokenize(text, min_length=self.min_token_length):
                postings.setdefault(token, set()).add(document.id)

        index = {token: frozenset(ids) for token, ids in postings.items()}
        stats.tokens = len(index)
        stats.postings = sum(len(ids) for ids in index.values())
        # Readers only ever see a complete index
        self._index = index
        LOGGER.info(
            "Indexed %d documents: %d tokens, %d postings",
            stats.documents,
            stats.tokens,
            stats.postings,
        )
        return stats

    def search(self, keyword: str) -> frozenset[str]:
        """Return ids of documents containing every token of ``keyword``."""
        tokens = list(dict.fromkeys(iter_tokens(keyword, min_length=self.min_token_length)))
        if not tokens:
            return frozenset()

        index = self._index
        result = index.get(tokens[0], frozenset())
        for token in tokens[1:]:
            if not result:
                break
            result = result & index.get(token, frozenset())
        return result

    def tokens(self) -> int:
        return len(self._index)
