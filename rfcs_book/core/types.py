"""
Core data types for the RFC book generator.

This module defines the data structures passed between the stages of a build:
- SourceEntry: One item found directly inside the source directory
- SummaryLine / SummaryDocument: The in-memory SUMMARY.md index
- CopyFailure: An entry that could not be copied into the book
- BookResult: Outcome of a complete build
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SourceEntry:
    """An item discovered in the source directory.

    Attributes:
        name: Base file name of the entry
        path: Full path the entry was listed at
    """
    name: str
    path: Path


@dataclass(frozen=True)
class SummaryLine:
    """A single bullet of the generated index.

    Attributes:
        title: Display text (entry name without its ``.md`` suffix)
        link: Relative link target (the entry name)
    """
    title: str
    link: str


@dataclass
class SummaryDocument:
    """Ordered index of book entries, rendered to SUMMARY.md."""
    heading: str = "RFCS"
    lines: list[SummaryLine] = field(default_factory=list)


@dataclass
class CopyFailure:
    """An entry that failed to copy.

    Attributes:
        name: Base file name of the entry
        path: Source path that could not be copied
        cause: Underlying filesystem error
    """
    name: str
    path: Path
    cause: OSError


@dataclass
class BookResult:
    """Outcome of a book build.

    Attributes:
        dest_dir: Directory holding the generated book sources
        summary_path: Path of the written SUMMARY.md
        entries: Source entries in index order
        copied: Names of entries copied successfully
        failures: Entries that failed to copy (best-effort policy only)
    """
    dest_dir: Path
    summary_path: Path
    entries: list[SourceEntry] = field(default_factory=list)
    copied: list[str] = field(default_factory=list)
    failures: list[CopyFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
