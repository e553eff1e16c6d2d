"""CLI interface for docchunk.

Typer-based command-line interface with Rich output formatting.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from docchunk import __version__
from docchunk.config import (
    CONFIG_FILE,
    DocchunkConfig,
    default_config,
    load_config,
    save_config,
)
from docchunk.exceptions import DocchunkError
from docchunk.ingest import extract_file, get_supported_extensions
from docchunk.pipeline import DocumentProcessor
from docchunk.types import ChunkingOptions

__all__ = ["app"]

app = typer.Typer(
    name="docchunk",
    help="Split text documents into bounded, position-tracked chunks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)

_PREVIEW_CHARS = 48


def _configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _resolve_config(config_path: Path | None) -> DocchunkConfig:
    """Explicit --config wins, then ./docchunk.toml, then defaults."""
    if config_path is not None:
        return load_config(config_path)
    local = Path.cwd() / CONFIG_FILE
    if local.exists():
        return load_config(local)
    return default_config()


def _preview(content: str) -> str:
    flat = " ".join(content.split())
    if len(flat) <= _PREVIEW_CHARS:
        return flat
    return flat[: _PREVIEW_CHARS - 3] + "..."


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """docchunk: document chunking for embedding and retrieval."""
    _configure_logging(verbose)


@app.command()
def version() -> None:
    """Show docchunk version."""
    console.print(f"docchunk {__version__}")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file"),
    ] = False,
) -> None:
    """Write a default docchunk.toml in the current directory."""
    path = Path.cwd() / CONFIG_FILE
    if path.exists() and not force:
        console.print(f"[yellow]{CONFIG_FILE} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        save_config(default_config(), path)
    except DocchunkError as e:
        console.print(f"[red]Failed to write config:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Wrote[/green] {path}")


@app.command()
def chunk(
    path: Annotated[
        Path,
        typer.Argument(help="File to chunk (.txt, .md or .json)"),
    ],
    strategy: Annotated[
        str | None,
        typer.Option("--strategy", "-s", help="recursive, sentence or paragraph"),
    ] = None,
    max_chunk_size: Annotated[
        int | None,
        typer.Option("--max-chunk-size", "-m", help="Maximum chunk size in characters"),
    ] = None,
    overlap_size: Annotated[
        int | None,
        typer.Option("--overlap-size", help="Overlap size in characters (advisory)"),
    ] = None,
    doc_id: Annotated[
        str | None,
        typer.Option("--doc-id", "-d", help="Document ID (default: file stem)"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a docchunk.toml"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print chunks as JSON"),
    ] = False,
) -> None:
    """Chunk a document and print the result."""
    try:
        config = _resolve_config(config_path)
        section = config.chunking
        options = ChunkingOptions(
            max_chunk_size=max_chunk_size if max_chunk_size is not None else section.max_chunk_size,
            overlap_size=overlap_size if overlap_size is not None else section.overlap_size,
            strategy=strategy or section.strategy,
        )
        content = extract_file(path, config.ingest.max_file_size)
        processor = DocumentProcessor(options, config.ingest.max_file_size)
        result = processor.process_document(content, path.name, doc_id or path.stem)
    except DocchunkError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(json.dumps([c.to_dict() for c in result.chunks], indent=2, ensure_ascii=False))
        return

    table = Table(show_header=True, box=None, padding=(0, 1))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Chars", justify="right")
    table.add_column("Preview")
    for c in result.chunks:
        table.add_row(
            str(c.chunk_index),
            str(c.start_position),
            str(c.end_position),
            str(len(c.content)),
            _preview(c.content),
        )
    console.print(table)
    console.print(
        f"\n[green]Chunked {path.name}[/green] into {result.total_chunks} chunks "
        f"({options.strategy.value})"
    )


@app.command(name="config")
def config_cmd(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a docchunk.toml"),
    ] = None,
) -> None:
    """Show the effective configuration."""
    try:
        config = _resolve_config(config_path)
    except DocchunkError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", style="bold")
    for section_name in ("chunking", "ingest"):
        for key, value in vars(getattr(config, section_name)).items():
            table.add_row(f"{section_name}.{key}", str(value))
    table.add_row("supported_extensions", ", ".join(sorted(get_supported_extensions())))
    console.print(table)
