"""Command line interface for Second Brain."""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from secondbrain.activity import recent_activity
from secondbrain.config import AppConfig
from secondbrain.index.library import DocumentLibrary
from secondbrain.index.search import Searcher
from secondbrain.web.app import create_app


console = Console()
app = typer.Typer(help="Second Brain - browse and search your markdown notes")

DOCS_OPTION = typer.Option(None, "--docs", help="Root directory of the markdown corpus")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose logging")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(docs: Optional[Path], data: Optional[Path] = None) -> AppConfig:
    return AppConfig(docs_dir=docs, data_dir=data)


def _open_library(config: AppConfig) -> DocumentLibrary:
    root = config.resolve_docs_dir(Path.cwd())
    if not root.exists():
        console.print(f"[yellow]Corpus root {root} not found, nothing to show.[/yellow]")
    return DocumentLibrary(root)


@app.command("list")
def list_documents(
    docs: Path = DOCS_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List every document, most recently modified first."""
    _setup_logging(verbose)
    library = _open_library(_build_config(docs))
    documents = library.list_all()
    if not documents:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Words", justify="right")
    table.add_column("Modified")

    for doc in documents:
        table.add_row(doc.slug, doc.title, str(doc.word_count), doc.modified_at.strftime("%Y-%m-%d %H:%M"))

    console.print(table)


@app.command()
def tree(
    docs: Path = DOCS_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show documents grouped by folder."""
    _setup_logging(verbose)
    library = _open_library(_build_config(docs))
    folders = library.folder_tree()
    if not folders:
        console.print("[yellow]No documents found.[/yellow]")
        return

    for folder in folders:
        console.print(f"[bold]{folder.name}[/bold] ({len(folder.documents)})")
        for ref in folder.documents:
            console.print(f"  {ref.title} [dim]{ref.slug}[/dim]")


@app.command()
def show(
    slug: str = typer.Argument(..., help="Document slug, e.g. journals/2026-02-05"),
    docs: Path = DOCS_OPTION,
    raw: bool = typer.Option(False, "--raw", help="Print markdown source instead of rendering it"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Display a single document."""
    _setup_logging(verbose)
    library = _open_library(_build_config(docs))
    document = library.by_slug(slug)
    if document is None:
        console.print(f"[yellow]Document not found: {slug}[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"[bold]{document.title}[/bold] [dim]({document.folder}, {document.word_count} words)[/dim]")
    if raw:
        console.print(document.content, markup=False, highlight=False)
    else:
        console.print(Markdown(document.content))


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    docs: Path = DOCS_OPTION,
    limit: int = typer.Option(AppConfig().search_limit, help="Number of results to display"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Find documents whose title or body contains the query."""
    _setup_logging(verbose)
    config = _build_config(docs)
    searcher = Searcher(
        _open_library(config),
        limit=limit,
        excerpt_before=config.excerpt_before,
        excerpt_after=config.excerpt_after,
    )

    results = searcher.search(query)
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Document")
    table.add_column("Folder")
    table.add_column("Excerpt")

    for result in results:
        table.add_row(result.title, result.folder, result.excerpt.replace("\n", " "))

    console.print(table)


@app.command()
def activity(
    docs: Path = DOCS_OPTION,
    hours: int = typer.Option(24, help="Look-back window in hours"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List recently created or updated documents."""
    _setup_logging(verbose)
    root = _build_config(docs).resolve_docs_dir(Path.cwd())
    items = recent_activity([root], window=timedelta(hours=hours))
    if not items:
        console.print("[yellow]No recent activity.[/yellow]")
        return

    for item in items:
        console.print(f"{item.icon} {item.action} [bold]{item.details}[/bold] {item.timestamp:%Y-%m-%d %H:%M}")


@app.command()
def init(
    docs: Path = DOCS_OPTION,
    data: Path = typer.Option(None, "--data", help="Directory for JSON entity files"),
) -> None:
    """Create the data directory used by ideas, projects and trackers."""
    config = _build_config(docs, data)
    data_dir = config.ensure_data_dir(Path.cwd())
    console.print(f"Data directory ready at [bold]{data_dir}[/bold]")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    docs: Path = DOCS_OPTION,
    data: Path = typer.Option(None, "--data", help="Directory for JSON entity files"),
) -> None:
    """Start the HTTP API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - optional extra
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = _build_config(docs, data)
    root = config.resolve_docs_dir(Path.cwd())
    if not root.exists():
        console.print("[yellow]Warning: corpus root not found, document lists will be empty.[/yellow]")

    console.print(f"Starting API on http://{host}:{port} (documents: {root})")
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":  # pragma: no cover
    app()
