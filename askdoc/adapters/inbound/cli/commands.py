"""CLI interface for askdoc."""

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import AskDocError
from ....core.services.answer_service import AnswerService
from ....core.services.chunker import split_text
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="askdoc",
    help="askdoc - answer questions about a text file using retrieval-augmented generation",
    add_completion=False,
)

console = Console()


def handle_cli_error(exc: Exception) -> None:
    """Display an error with its code; full JSON details when DEBUG=true.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=settings.debug)

    if settings.debug:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_msg = error_data["error"]["message"]
    error_code = error_data["error"].get("code", "UNKNOWN")
    console.print(f"\n[red]Error [{error_code}]:[/] {error_msg}")
    if error_data.get("cause"):
        cause = error_data["cause"]
        console.print(f"[dim]Cause: {cause['type']}: {cause['message']}[/]")
    console.print("[dim]Set DEBUG=true for full details[/]")


def get_answer_service() -> AnswerService:
    """Build the answer service from settings."""
    from ..api.deps import get_answer_service as build_service

    if not settings.google_api_key:
        console.print(
            "[red]Error:[/] Google API key not set.\n"
            "Get a free key at https://aistudio.google.com/ and set GOOGLE_API_KEY in .env"
        )
        raise typer.Exit(1)

    return build_service()


def _read_document(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[red]Error:[/] cannot read {path}: {exc.strerror or exc}")
        raise typer.Exit(1)


@app.command()
def ask(
    path: Path = typer.Argument(..., help="Path to a text file to answer from"),
    question: str = typer.Argument(..., help="Question about the file's contents"),
    show_context: bool = typer.Option(
        False, "--show-context", help="Print the ranked passages sent to the model"
    ),
) -> None:
    """Ask a single question about a text file."""
    document = _read_document(path)
    service = get_answer_service()

    try:
        with console.status("[bold green]Thinking...[/]"):
            answer = asyncio.run(service.answer(document, question))
    except AskDocError as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(Markdown(answer.text))

    if show_context:
        table = Table(title=f"Context ({len(answer.context)} of {answer.chunk_count} chunks)")
        table.add_column("Rank", justify="right")
        table.add_column("Chunk", justify="right")
        table.add_column("Score", justify="right")
        table.add_column("Excerpt")
        for rank, scored in enumerate(answer.context, 1):
            excerpt = scored.text.replace("\n", " ")
            table.add_row(
                str(rank),
                str(scored.chunk.index),
                f"{scored.score:.3f}",
                excerpt[:80] + ("..." if len(excerpt) > 80 else ""),
            )
        console.print(table)


@app.command()
def chunk(
    path: Path = typer.Argument(..., help="Path to a text file to chunk"),
    chunk_size: int = typer.Option(settings.chunk_size, help="Size of each chunk"),
    chunk_overlap: int = typer.Option(settings.chunk_overlap, help="Overlap between chunks"),
) -> None:
    """Chunk a text file and display the chunks."""
    content = _read_document(path)
    try:
        chunks = split_text(content, chunk_size, chunk_overlap)
    except AskDocError as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[bold]Generated {len(chunks)} chunks:[/]")
    for chunk in chunks:
        console.print(
            Panel.fit(
                Text(chunk.text),
                title=f"Chunk {chunk.index + 1} [{chunk.start}:{chunk.end}]",
            )
        )


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    setup_logging(level=settings.log_level, json_format=settings.log_json)
    uvicorn.run(
        "askdoc.adapters.inbound.api.main:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
