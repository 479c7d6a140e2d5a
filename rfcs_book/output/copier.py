"""
Copy source entries into the book directory.

Each entry is copied byte-for-byte under its own name. Only file content is
copied; directory entries fail because the copy is not recursive.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable

from rfcs_book.core.errors import CopyError
from rfcs_book.core.types import CopyFailure, SourceEntry
from rfcs_book.logging_utils import log_event


FAIL_FAST = "fail_fast"
BEST_EFFORT = "best_effort"
COPY_POLICIES = (FAIL_FAST, BEST_EFFORT)


def check_policy(policy: str) -> None:
    """Raise ValueError if ``policy`` is not a known copy policy."""
    if policy not in COPY_POLICIES:
        raise ValueError(
            f"Unsupported copy policy: {policy}. Use one of: {', '.join(COPY_POLICIES)}"
        )


def copy_entries(
    entries: Iterable[SourceEntry],
    dest_dir: Path,
    policy: str = FAIL_FAST,
    logger: logging.Logger | None = None,
    on_copied: Callable[[SourceEntry], None] | None = None,
) -> tuple[list[str], list[CopyFailure]]:
    """Copy every entry into ``dest_dir``.

    Args:
        entries: Entries to copy, in the order they should be attempted
        dest_dir: Book source directory (must already exist)
        policy: ``fail_fast`` stops at the first failure, ``best_effort``
            attempts every entry and reports failures afterwards
        logger: Optional logger for per-entry events
        on_copied: Called after each entry is attempted, e.g. to advance a
            progress bar

    Returns:
        Tuple of (names copied, failures). Failures are only ever non-empty
        under the ``best_effort`` policy.

    Raises:
        CopyError: On the first failure under the ``fail_fast`` policy
        ValueError: If ``policy`` is not supported
    """
    check_policy(policy)

    copied: list[str] = []
    failures: list[CopyFailure] = []
    for entry in entries:
        target = dest_dir / entry.name
        try:
            shutil.copyfile(entry.path, target)
        except OSError as exc:
            log_event(
                logger,
                "Copy failed",
                level=logging.WARNING,
                event="copy_failed",
                entry=entry.name,
                path=str(entry.path),
                error=str(exc),
            )
            if policy == FAIL_FAST:
                raise CopyError(entry.name, entry.path, exc) from exc
            failures.append(CopyFailure(name=entry.name, path=entry.path, cause=exc))
        else:
            copied.append(entry.name)
            log_event(logger, "Entry copied", event="entry_copied", entry=entry.name)
        if on_copied is not None:
            on_copied(entry)
    return copied, failures
