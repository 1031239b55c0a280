"""Shared fixtures for DocShelf tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from docshelf.config import AppConfig
from docshelf.index.search import QueryService


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """A small notes tree with a few categories and some files to skip."""
    root = tmp_path / "notes"
    _write(
        root / "design-patterns" / "singleton.md",
        "# Singleton Pattern\n\nEnsure a class has only one instance and a global access point.\n",
    )
    _write(
        root / "design-patterns" / "observer.md",
        "# Observer Pattern\n\nSubscribers are notified when the subject changes state.\n",
    )
    _write(
        root / "spring-security" / "csrf.md",
        "# CSRF Protection\n\nSpring Security enables CSRF tokens by default.\n",
    )
    _write(
        root / "logging" / "log4j.txt",
        "Log4j configuration notes.\nUse a ConsoleAppender for local development.\n",
    )
    _write(root / "README.md", "# Java Notes\n\nIndex of all topics.\n")
    _write(root / "design-patterns" / "empty.md", "")
    _write(root / ".git" / "hidden.md", "# Hidden\n\nNever loaded.\n")
    return root


@pytest.fixture
def service(corpus: Path) -> QueryService:
    svc = QueryService.from_config(AppConfig(root=corpus))
    svc.start(corpus)
    return svc
