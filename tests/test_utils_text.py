"""Tests for text utility functions."""

from __future__ import annotations

import pytest

from docshelf.utils.text import (
    extract_title,
    iter_tokens,
    make_snippet,
    normalize_whitespace,
    tokenize,
)


class TestTokenize:
    """Test tokenization used for indexing and querying."""

    def test_lowercases_and_splits_on_punctuation(self) -> None:
        tokens = list(iter_tokens("Spring-Security: CSRF, XSS!"))
        assert tokens == ["spring", "security", "csrf", "xss"]

    def test_drops_short_tokens(self) -> None:
        assert tokenize("a is I x of") == {"is", "of"}

    def test_custom_min_length(self) -> None:
        assert tokenize("jsp jstl el", min_length=3) == {"jsp", "jstl"}

    def test_underscore_splits_tokens(self) -> None:
        assert tokenize("SESSION_ID") == {"session", "id"}

    def test_keeps_digits_and_unicode_letters(self) -> None:
        assert tokenize("Java 17 Überblick") == {"java", "17", "überblick"}

    def test_empty_text(self) -> None:
        assert tokenize("") == set()
        assert tokenize("!!! ---") == set()


class TestExtractTitle:
    """Test extract_title function."""

    def test_first_heading(self) -> None:
        text = "intro line\n## Factory Method\n# Later"
        assert extract_title(text, "fallback") == "Factory Method"

    def test_heading_without_space(self) -> None:
        assert extract_title("#Logback", "fallback") == "Logback"

    def test_fallback_without_heading(self) -> None:
        assert extract_title("Just prose.\nMore prose.", "log4j") == "log4j"

    def test_skips_empty_heading(self) -> None:
        assert extract_title("#\n# Real Title", "fallback") == "Real Title"

    @pytest.mark.parametrize("text", ["", "   \n\n"])
    def test_blank_text(self, text: str) -> None:
        assert extract_title(text, "name") == "name"


class TestNormalizeWhitespace:
    """Test normalize_whitespace function."""

    def test_strips_and_drops_blank_lines(self) -> None:
        assert normalize_whitespace(["  a  ", "", "   ", "b"]) == "a\nb"

    def test_empty_input(self) -> None:
        assert normalize_whitespace([]) == ""


class TestMakeSnippet:
    """Test make_snippet function."""

    def test_short_text_is_flattened(self) -> None:
        assert make_snippet("# Title\n\n  body   text\n") == "# Title body text"

    def test_long_text_is_truncated(self) -> None:
        text = "word " * 100
        snippet = make_snippet(text, max_chars=40)
        assert snippet.endswith("...")
        assert len(snippet) <= 43

    def test_centers_on_keyword(self) -> None:
        text = ("filler " * 50) + "Singleton instance " + ("tail " * 50)
        snippet = make_snippet(text, "singleton", max_chars=60)
        assert snippet.startswith("...")
        assert "Singleton" in snippet

    def test_missing_keyword_uses_start(self) -> None:
        text = "start " + ("x" * 300)
        snippet = make_snippet(text, "absent", max_chars=50)
        assert snippet.startswith("start")
