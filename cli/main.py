"""linkwatch CLI: entry-point for serving and one-off checks.

Usage:
    linkwatch serve SOURCES_FILE [PORT]
    linkwatch check SOURCES_FILE

    serve   → run the HTTP report service (GET / re-checks every source)
    check   → run a single pass and print the report to stdout
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkwatch.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from linkwatch.config import settings
from linkwatch.pipeline import Monitor
from linkwatch.sources import SourceListError, load_sources
from linkwatch.state import StateStore, StateStoreError

logger = logging.getLogger("linkwatch.cli")

app = typer.Typer(
    name="linkwatch",
    help="Report outbound links that are new since the last run.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_sources_or_exit(sources_file: Path) -> list[str]:
    try:
        sources = load_sources(sources_file)
    except SourceListError as exc:
        typer.echo(f"[linkwatch] {exc}", err=True)
        typer.echo("Usage: linkwatch serve SOURCES_FILE [PORT] | linkwatch check SOURCES_FILE", err=True)
        raise typer.Exit(1)
    logger.info("Loaded %d source(s) from %s", len(sources), sources_file)
    return sources


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("serve")
def serve(
    sources_file: Path = typer.Argument(..., help="File with one source URL per line."),
    port: Optional[int] = typer.Argument(None, help="Listening port (default: 8080)."),
    host: Optional[str] = typer.Option(None, help="Bind address (default from config)."),
    state_dir: Optional[Path] = typer.Option(None, help="Directory for per-source state."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Serve the new-links report over HTTP."""
    import uvicorn

    from linkwatch.api import create_app

    _configure_logging(verbose)
    sources = _load_sources_or_exit(sources_file)
    monitor = Monitor(sources, store=StateStore(state_dir))

    bind_host = host or settings.host
    bind_port = port if port is not None else settings.port
    typer.echo(f"http://localhost:{bind_port}")
    uvicorn.run(
        create_app(monitor),
        host=bind_host,
        port=bind_port,
        log_level="debug" if verbose else "info",
    )


@app.command("check")
def check(
    sources_file: Path = typer.Argument(..., help="File with one source URL per line."),
    state_dir: Optional[Path] = typer.Option(None, help="Directory for per-source state."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Run one pass over every source and print the new links."""
    from linkwatch.report import render_text

    _configure_logging(verbose)
    sources = _load_sources_or_exit(sources_file)
    monitor = Monitor(sources, store=StateStore(state_dir))

    try:
        results = monitor.check()
    except StateStoreError as exc:
        typer.echo(f"[linkwatch] {exc}", err=True)
        raise typer.Exit(1)

    for chunk in render_text(results):
        typer.echo(chunk, nl=False)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
