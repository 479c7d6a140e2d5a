"""
Source directory listing.

Entries are collected once per build and reused for both the index and the
copy loop, so the two can never disagree about what the source contained.
"""

from __future__ import annotations

import os
from pathlib import Path

from rfcs_book.core.errors import SourceListingError
from rfcs_book.core.types import SourceEntry


def sort_key(name: str) -> bytes:
    """Return the byte-wise ordering key for an entry name."""
    return os.fsencode(name)


def list_source_entries(source_dir: Path) -> list[SourceEntry]:
    """List every entry directly inside ``source_dir``.

    Files and directories are both returned; nothing is filtered. The result
    is sorted by the raw bytes of each name.

    Args:
        source_dir: Directory holding the documents

    Returns:
        Entries in byte-wise name order

    Raises:
        SourceListingError: If the directory is missing, is not a directory,
            cannot be read, or holds a name that is not valid UTF-8
    """
    try:
        paths = list(source_dir.iterdir())
    except OSError as exc:
        raise SourceListingError(source_dir, exc) from exc

    entries = []
    for path in paths:
        try:
            path.name.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise SourceListingError(source_dir, exc) from exc
        entries.append(SourceEntry(name=path.name, path=path))
    entries.sort(key=lambda entry: sort_key(entry.name))
    return entries
