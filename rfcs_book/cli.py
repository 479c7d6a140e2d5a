"""
Command-line interface for the RFC book generator.

Uses Typer to take the source and destination directories as positional
arguments, with options overriding the YAML configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .core.errors import BookError
from .output.copier import BEST_EFFORT, FAIL_FAST
from .runner import run_build

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


@app.command()
def build(
    source: Path | None = typer.Argument(
        None, help="Directory containing the RFC documents.", show_default=False
    ),
    destination: Path | None = typer.Argument(
        None, help="Book root directory; documents are written to its src/ folder.", show_default=False
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        envvar="RFCS_BOOK_CONFIG",
        help="YAML config file.",
    ),
    best_effort: bool | None = typer.Option(
        None,
        "--best-effort/--fail-fast",
        help="Keep copying after a failed entry, or stop at the first failure.",
    ),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Generate an mdBook source tree with a SUMMARY.md index.

    Lists SOURCE, writes DESTINATION/src/SUMMARY.md linking every entry in
    byte-wise name order, and copies each entry next to it.

    Args:
        source: Directory holding the documents
        destination: Book root directory
        config: Optional path to YAML config file
        best_effort: Override the copy failure policy
        progress: Whether to show a progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    # Required arguments
    if source is None:
        _fail("source path required")
    if destination is None:
        _fail("destination path required")

    try:
        cfg = load_config(str(config) if config else None)
    except ValueError as exc:
        _fail(str(exc))

    # Override with CLI options
    if best_effort is not None:
        cfg.copy.policy = BEST_EFFORT if best_effort else FAIL_FAST
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    try:
        result = run_build(source, destination, cfg, show_progress=progress, console=console)
    except (BookError, ValueError) as exc:
        _fail(str(exc))

    if not result.ok:
        _fail(f"{len(result.failures)} entries could not be copied")
    console.print(f"Book generated: {result.dest_dir}")


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
