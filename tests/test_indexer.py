"""Tests for Indexer."""

from docshelf.index.indexer import Indexer, IndexStats
from docshelf.models import Document


def _doc(doc_id: str, title: str, body: str, category: str = "misc") -> Document:
    return Document(
        id=doc_id, title=title, body=body, category=category, path=f"{doc_id}.md"
    )


DOCUMENTS = [
    _doc("patterns/singleton", "Singleton Pattern", "Only one instance exists."),
    _doc("patterns/factory", "Factory Method", "Creates an instance via a method."),
    _doc("security/csrf", "CSRF", "Spring Security blocks cross-site request forgery."),
]


class TestIndexStats:
    """Test IndexStats defaults."""

    def test_init_defaults(self):
        stats = IndexStats()
        assert stats.documents == 0
        assert stats.tokens == 0
        assert stats.postings == 0


class TestBuild:
    """Test Indexer.build."""

    def test_build_returns_stats(self):
        indexer = Indexer()
        stats = indexer.build(DOCUMENTS)

        assert stats.documents == 3
        assert stats.tokens == indexer.tokens()
        assert stats.postings >= stats.tokens

    def test_build_empty(self):
        indexer = Indexer()
        stats = indexer.build([])

        assert stats == IndexStats()
        assert indexer.search("anything") == frozenset()

    def test_build_accepts_generator(self):
        indexer = Indexer()
        indexer.build(doc for doc in DOCUMENTS)

        assert indexer.search("csrf") == {"security/csrf"}

    def test_rebuild_replaces_index(self):
        indexer = Indexer()
        indexer.build(DOCUMENTS)
        indexer.build([_doc("other/note", "Other", "Fresh content")])

        assert indexer.search("singleton") == frozenset()
        assert indexer.search("fresh") == {"other/note"}

    def test_rebuild_is_idempotent(self):
        indexer = Indexer()
        first = indexer.build(DOCUMENTS)
        second = indexer.build(DOCUMENTS)

        assert first == second


class TestSearch:
    """Test Indexer.search."""

    def setup_method(self):
        self.indexer = Indexer()
        self.indexer.build(DOCUMENTS)

    def test_title_tokens_are_indexed(self):
        assert self.indexer.search("singleton") == {"patterns/singleton"}

    def test_body_tokens_are_indexed(self):
        assert self.indexer.search("forgery") == {"security/csrf"}

    def test_case_insensitive(self):
        assert self.indexer.search("SINGLETON") == self.indexer.search("singleton")

    def test_token_in_several_documents(self):
        assert self.indexer.search("instance") == {"patterns/singleton", "patterns/factory"}

    def test_unknown_token_is_empty(self):
        assert self.indexer.search("nonexistent") == frozenset()

    def test_short_keyword_is_empty(self):
        assert self.indexer.search("a") == frozenset()

    def test_punctuation_only_is_empty(self):
        assert self.indexer.search("--") == frozenset()

    def test_keyword_is_trimmed_and_normalized(self):
        assert self.indexer.search("  Factory!  ") == {"patterns/factory"}

    def test_multi_token_keyword_matches_all_tokens(self):
        assert self.indexer.search("spring-security") == {"security/csrf"}
        assert self.indexer.search("factory-singleton") == frozenset()

    def test_every_token_finds_its_document(self):
        from docshelf.utils.text import tokenize

        for doc in DOCUMENTS:
            for token in tokenize(f"{doc.title}\n{doc.body}"):
                assert doc.id in self.indexer.search(token)

    def test_custom_min_token_length(self):
        indexer = Indexer(min_token_length=4)
        indexer.build(DOCUMENTS)

        assert indexer.search("one") == frozenset()
        assert indexer.search("only") == {"patterns/singleton"}
