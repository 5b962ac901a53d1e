"""Clean Article Extractor CLI — entry-point for local use.

Usage:
    python cli/main.py --help

Commands:
    extract       → fetch a URL and print its clean article
    extract-file  → run the extractor on a local HTML file
    serve         → run the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from dataclasses import asdict

import typer

from backend.logging_config import configure_logging
from backend.scraper import Article, ExtractionError, extract, extract_page, fetch_url

app = typer.Typer(
    name="cleanread",
    help="Clean Article Extractor CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Minimum log level."),
) -> None:
    configure_logging(log_level=log_level)


def _print_article(article: Article, as_json: bool) -> None:
    if as_json:
        payload = asdict(article)
        if not payload["author"]:
            del payload["author"]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    typer.echo(f"Title  : {article.title or '(none)'}")
    typer.echo(f"Author : {article.author or '(none)'}")
    typer.echo(f"Words  : {len(article.content.split())}")
    typer.echo("")
    typer.echo(article.content)


@app.command("extract")
def extract_cmd(
    url: str = typer.Option(..., help="URL to fetch and extract."),
    as_json: bool = typer.Option(False, "--json", help="Print the article as JSON."),
) -> None:
    """Fetch a URL and print its title, author and main text."""
    try:
        article = extract_page(fetch_url(url))
    except ExtractionError as exc:
        typer.echo(f"[extract] {exc.kind.value}: {exc}", err=True)
        raise typer.Exit(1)
    _print_article(article, as_json)


@app.command("extract-file")
def extract_file_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Local HTML file."),
    as_json: bool = typer.Option(False, "--json", help="Print the article as JSON."),
) -> None:
    """Run the extractor on a saved HTML file."""
    try:
        article = extract(path.read_bytes())
    except ExtractionError as exc:
        typer.echo(f"[extract-file] {exc.kind.value}: {exc}", err=True)
        raise typer.Exit(1)
    _print_article(article, as_json)


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Interface to bind."),
    port: int = typer.Option(8080, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes (development)."),
) -> None:
    """Run the HTTP API."""
    import uvicorn  # noqa: PLC0415

    typer.echo(f"[serve] Listening on {host}:{port}")
    uvicorn.run("backend.api.app:app", host=host, port=port, reload=reload, log_config=None)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
