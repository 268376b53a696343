"""CLI entry point using Typer."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rotstream.core.errors import RotstreamError
from rotstream.core.rotation import ALPHABET_SIZE

app = typer.Typer(
    name="rotstream",
    help="Stream bytes through a case-preserving Caesar rotation (ROT13 by default).",
    add_completion=False,
)


@app.command()
def main(
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Read this file instead of standard input",
    ),
    offset: Optional[int] = typer.Option(
        None, "--offset", "-o", min=0, max=ALPHABET_SIZE,
        help="Rotate by N positions instead of ROT13",
    ),
    reverse: bool = typer.Option(
        False, "--reverse", "-r", help="Invert the rotation (requires --offset)",
    ),
    buffer_size: int = typer.Option(
        io.DEFAULT_BUFFER_SIZE, "--buffer-size", min=1, help="Copy buffer size in bytes",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Report the run summary on stderr",
    ),
) -> None:
    """Rotate every letter of the input and write the result to stdout."""
    from rotstream.core.config import PipelineConfig
    from rotstream.pipelines.copy_loop import run_pipeline

    console = Console(stderr=True, highlight=False)
    config = PipelineConfig(
        path=path, offset=offset, reverse=reverse, buffer_size=buffer_size,
    )

    if verbose and config.reverse_ignored:
        console.print("[yellow]warning:[/yellow] --reverse has no effect without --offset")

    try:
        result = run_pipeline(config)
    except RotstreamError as e:
        console.print(f"[bold red]error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if verbose:
        console.print(
            f"{result.policy.describe()}: {result.bytes_copied} bytes "
            f"from {escape(result.source_name)}"
        )
