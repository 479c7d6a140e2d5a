"""
Build orchestration for the RFC book generator.

This module coordinates the whole build:
1. List the source directory once
2. Create the book source directory
3. Render and write SUMMARY.md
4. Copy every listed entry next to it

``generate_book`` is the reusable core and reports its outcome as a
``BookResult`` or a ``BookError``. ``run_build`` wraps it with logging,
an optional progress bar and console output for the command line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig
from .core.errors import DestinationError
from .core.types import BookResult, SourceEntry
from .input.listing import list_source_entries
from .logging_utils import log_event, open_log_file, setup_logging
from .output.copier import check_policy, copy_entries
from .output.summary import build_summary, write_summary


def generate_book(
    source_dir: Path,
    dest_root: Path,
    cfg: AppConfig | None = None,
    logger: logging.Logger | None = None,
    on_listed: Callable[[list[SourceEntry]], None] | None = None,
    on_copied: Callable[[SourceEntry], None] | None = None,
) -> BookResult:
    """Generate a book from the documents in ``source_dir``.

    The source is listed before anything is created, so a missing or
    unreadable source leaves no output behind. The same listing drives
    both the index and the copy loop.

    Args:
        source_dir: Flat directory of documents
        dest_root: Book root; the documents land in its ``src`` sub-directory
        cfg: Application configuration (defaults when None)
        logger: Optional logger for build events
        on_listed: Called once with the sorted entries before copying starts
        on_copied: Called after each entry copy attempt

    Returns:
        BookResult describing what was written. ``result.failures`` is only
        populated under the ``best_effort`` copy policy.

    Raises:
        SourceListingError: If the source directory cannot be listed
        DestinationError: If the book source directory cannot be created
        SummaryWriteError: If SUMMARY.md cannot be written
        CopyError: On the first failed copy under the ``fail_fast`` policy
        ValueError: If the configured copy policy is not supported
    """
    cfg = cfg or AppConfig()
    check_policy(cfg.copy.policy)
    dest_dir = dest_root / cfg.book.src_dir

    entries = list_source_entries(source_dir)
    log_event(
        logger,
        "Source listed",
        event="source_listed",
        source=str(source_dir),
        count=len(entries),
    )
    if on_listed is not None:
        on_listed(entries)

    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DestinationError(dest_dir, exc) from exc

    document = build_summary(entries, heading=cfg.book.heading, suffix=cfg.book.title_suffix)
    summary_path = write_summary(document, dest_dir, cfg.book.summary_filename)
    log_event(
        logger,
        "Summary written",
        event="summary_written",
        path=str(summary_path),
        count=len(document.lines),
    )

    copied, failures = copy_entries(
        entries,
        dest_dir,
        policy=cfg.copy.policy,
        logger=logger,
        on_copied=on_copied,
    )
    return BookResult(
        dest_dir=dest_dir,
        summary_path=summary_path,
        entries=entries,
        copied=copied,
        failures=failures,
    )


def run_build(
    source_dir: Path,
    dest_root: Path,
    cfg: AppConfig,
    show_progress: bool = False,
    console: Console | None = None,
) -> BookResult:
    """Run a complete build with logging and console reporting.

    Args:
        source_dir: Flat directory of documents
        dest_root: Book root directory
        cfg: Application configuration
        show_progress: Whether to display a progress bar over the copy loop
        console: Rich console for output (creates default if None)

    Returns:
        BookResult of the build
    """
    console = console or Console()
    logger = setup_logging(cfg.logging)

    def start_log_file(entries: list[SourceEntry]) -> None:
        open_log_file(logger, cfg.logging, dest_root)

    log_event(
        logger,
        "Build start",
        event="build_start",
        source=str(source_dir),
        destination=str(dest_root),
        policy=cfg.copy.policy,
    )

    if show_progress:
        progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        )
        with progress:
            copy_task = progress.add_task("Copy", total=None)

            def start_copy_task(entries: list[SourceEntry]) -> None:
                start_log_file(entries)
                progress.update(copy_task, total=len(entries))

            result = generate_book(
                source_dir,
                dest_root,
                cfg,
                logger=logger,
                on_listed=start_copy_task,
                on_copied=lambda entry: progress.advance(copy_task, 1),
            )
    else:
        result = generate_book(source_dir, dest_root, cfg, logger=logger, on_listed=start_log_file)

    log_event(
        logger,
        "Build complete",
        event="build_complete",
        destination=str(result.dest_dir),
        copied=len(result.copied),
        failed=len(result.failures),
    )
    _render_build_stats(result, console)
    return result


def _render_build_stats(result: BookResult, console: Console) -> None:
    """Display entry and copy counts, then any failed entries."""
    console.print(
        "[bold]Book summary[/bold]: "
        f"entries={len(result.entries)}, copied={len(result.copied)}, "
        f"failed={len(result.failures)}"
    )
    for failure in result.failures:
        console.print(f"[red]Copy failed[/red]: {escape(failure.name)} ({escape(str(failure.cause))})")
