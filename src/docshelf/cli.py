"""Command line interface for DocShelf."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from docshelf.config import AppConfig
from docshelf.errors import InvalidQueryError, LoadError, NotFoundError
from docshelf.index.search import QueryService
from docshelf.web.app import app as web_app

EXIT_LOAD_FAILURE = 1
EXIT_INVALID_QUERY = 2
EXIT_NOT_FOUND = 3

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="DocShelf - browse and search a folder of notes")

ROOT_OPTION = typer.Option(None, "--root", "-r", help="Corpus root directory")
JSON_OPTION = typer.Option(False, "--json", help="Print machine-readable JSON")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose logging")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _start_service(root: Optional[Path]) -> QueryService:
    config = AppConfig(root=root)
    resolved_root = config.resolve_root(Path.cwd())
    service = QueryService.from_config(config)
    try:
        service.start(resolved_root)
    except LoadError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=EXIT_LOAD_FAILURE) from exc
    return service


@app.command("get-document")
def get_document(
    doc_id: str = typer.Argument(..., help="Document id, e.g. design-patterns/singleton"),
    root: Optional[Path] = ROOT_OPTION,
    as_json: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show a single document."""
    _setup_logging(verbose)
    service = _start_service(root)
    try:
        document = service.find_by_id(doc_id)
    except NotFoundError as exc:
        err_console.print(f"[red]Document not found:[/red] {escape(exc.doc_id)}")
        raise typer.Exit(code=EXIT_NOT_FOUND) from exc

    if as_json:
        console.print_json(data=asdict(document))
        return

    console.print(Text(document.title, style="bold"))
    console.print(Text(f"id: {document.id}  category: {document.category}"))
    console.print()
    # Raw body: no markup, emoji codes or hard wrapping
    console.print(Text(document.body), soft_wrap=True, emoji=False)


@app.command()
def search(
    keyword: str = typer.Argument(..., help="Keyword to look up"),
    root: Optional[Path] = ROOT_OPTION,
    category: Optional[str] = typer.Option(None, help="Restrict results to a category"),
    limit: Optional[int] = typer.Option(None, help="Maximum number of results"),
    as_json: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Find documents containing a keyword."""
    _setup_logging(verbose)
    service = _start_service(root)
    try:
        documents = service.search_keyword(keyword, category=category, limit=limit)
    except InvalidQueryError as exc:
        err_console.print(
            f"[red]Invalid query:[/red] {escape(repr(exc.keyword))} ({exc.reason})"
        )
        raise typer.Exit(code=EXIT_INVALID_QUERY) from exc

    results = [service.summarize(document, keyword) for document in documents]
    if as_json:
        console.print_json(data={"query": keyword, "results": [asdict(r) for r in results]})
        return

    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Id")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Snippet")

    for result in results:
        table.add_row(
            Text(result.id), Text(result.title), Text(result.category), Text(result.snippet)
        )

    console.print(table)


@app.command("list")
def list_documents(
    category: Optional[str] = typer.Option(None, help="Only list this category"),
    root: Optional[Path] = ROOT_OPTION,
    as_json: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List documents sorted by title."""
    _setup_logging(verbose)
    service = _start_service(root)
    documents = service.list_by_category(category)

    if as_json:
        console.print_json(
            data={
                "documents": [
                    {"id": doc.id, "title": doc.title, "category": doc.category}
                    for doc in documents
                ]
            }
        )
        return

    if not documents:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Id")
    table.add_column("Title")
    table.add_column("Category")
    for doc in documents:
        table.add_row(Text(doc.id), Text(doc.title), Text(doc.category))
    console.print(table)


@app.command("list-categories")
def list_categories(
    root: Optional[Path] = ROOT_OPTION,
    as_json: bool = JSON_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the discovered categories."""
    _setup_logging(verbose)
    service = _start_service(root)
    categories = service.list_categories()

    if as_json:
        console.print_json(data={"categories": categories})
        return

    if not categories:
        console.print("[yellow]No categories found.[/yellow]")
        return

    for name in categories:
        console.print(Text(name))


@app.command()
def stats(
    root: Optional[Path] = ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show corpus statistics."""
    _setup_logging(verbose)
    service = _start_service(root)
    summary = service.stats()
    console.print(
        f"Documents: {summary.documents}, categories: {summary.categories}, "
        f"skipped: {summary.skipped}, tokens: {summary.tokens}"
    )


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    root: Optional[Path] = ROOT_OPTION,
) -> None:
    """Start the web interface."""
    import uvicorn

    config = AppConfig(root=root)
    resolved_root = config.resolve_root(Path.cwd())
    # Load before serving so a bad root exits with the load-failure code
    service = _start_service(resolved_root)

    config.root = resolved_root
    web_app.state.config = config
    web_app.state.service = service
    console.print(
        f"Starting web interface on http://{host}:{port} "
        f"(corpus: {escape(str(resolved_root))})"
    )
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
