"""
SUMMARY.md generation.

The index has a fixed shape: a heading line, a blank line, then one bullet
per entry linking to the copied file::

    # RFCS

    - [0001-example](0001-example.md)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rfcs_book.core.errors import SummaryWriteError
from rfcs_book.core.types import SourceEntry, SummaryDocument, SummaryLine


SUMMARY_FILENAME = "SUMMARY.md"
DEFAULT_HEADING = "RFCS"
DEFAULT_SUFFIX = ".md"


def entry_title(name: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Strip a single trailing ``suffix`` from ``name``.

    Names without the suffix are returned unchanged.
    """
    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def build_summary(
    entries: Iterable[SourceEntry],
    heading: str = DEFAULT_HEADING,
    suffix: str = DEFAULT_SUFFIX,
) -> SummaryDocument:
    """Build the index for ``entries``, keeping their order."""
    lines = [SummaryLine(title=entry_title(entry.name, suffix), link=entry.name) for entry in entries]
    return SummaryDocument(heading=heading, lines=lines)


def render_summary(document: SummaryDocument) -> str:
    parts = [f"# {document.heading}\n\n"]
    for line in document.lines:
        parts.append(f"- [{line.title}]({line.link})\n")
    return "".join(parts)


def write_summary(
    document: SummaryDocument,
    dest_dir: Path,
    filename: str = SUMMARY_FILENAME,
) -> Path:
    """Write the rendered index into ``dest_dir``, replacing any existing file.

    Args:
        document: Index to render
        dest_dir: Book source directory
        filename: Name of the index file

    Returns:
        Path to the written file

    Raises:
        SummaryWriteError: If the file cannot be written
    """
    summary_path = dest_dir / filename
    try:
        summary_path.write_text(render_summary(document), encoding="utf-8", newline="\n")
    except (OSError, UnicodeError) as exc:
        raise SummaryWriteError(summary_path, exc) from exc
    return summary_path
