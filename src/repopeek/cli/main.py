"""Command-line interface for repopeek."""

import asyncio
import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from repopeek.activities.inspect import inspect_repository
from repopeek.detection.files import entry_label
from repopeek.exceptions import RepoPeekError
from repopeek.models.analysis import AnalysisResult


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)


app = typer.Typer(
    name="repopeek",
    help="Summarize public GitHub repositories.",
)


def _render_result(console: Console, result: AnalysisResult) -> None:
    console.print(f"\n[bold]{result.name}[/bold]  [green]{result.build_status}[/green]")
    console.print(f"  Framework: [cyan]{result.framework}[/cyan]")
    console.print(f"  Language:  [cyan]{result.language}[/cyan]")
    console.print(f"  .env file: {'yes' if result.has_env_file else 'no'}")

    if result.env_vars_needed:
        console.print(f"  Env vars:  {', '.join(result.env_vars_needed)}")

    for option in result.preview_options:
        marker = "[green]★[/green]" if option.is_primary else " "
        console.print(f"  {marker} {option.name}: {option.url}")

    if result.files:
        table = Table(title="Files", show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Kind")
        table.add_column("Size", justify="right")
        for entry in result.files:
            size = "" if entry.size is None else str(entry.size)
            table.add_row(entry.name, entry_label(entry), size)
        console.print(table)


@app.command()
def analyze(
    repo_url: Annotated[
        str,
        typer.Argument(help="GitHub repository URL, e.g. https://github.com/owner/repo"),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the raw JSON result."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Inspect a repository and print a summary."""
    _setup_logging(verbose)
    console = Console()

    try:
        result = asyncio.run(inspect_repository(repo_url))
    except RepoPeekError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(json.dumps(result.to_response(), indent=2))
    else:
        _render_result(console, result)


@app.command()
def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Bind address. Defaults to REPOPEEK_HOST."),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", help="Port. Defaults to REPOPEEK_PORT."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Run the HTTP analysis service."""
    from repopeek.server import run_server

    _setup_logging(verbose)
    run_server(host=host, port=port)


if __name__ == "__main__":
    app()
