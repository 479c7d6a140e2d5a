"""Exceptions raised while building a book."""

from __future__ import annotations

from pathlib import Path


class BookError(Exception):
    """Base class for build failures.

    Attributes:
        path: Filesystem path the failing operation targeted
        cause: Underlying ``OSError`` (or ``UnicodeError`` for names that
            are not valid UTF-8), if any
    """

    def __init__(self, message: str, path: Path, cause: OSError | UnicodeError | None = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class SourceListingError(BookError):
    """The source directory could not be listed."""

    def __init__(self, path: Path, cause: OSError | UnicodeError):
        super().__init__(f"could not list source directory {path}: {cause}", path, cause)


class DestinationError(BookError):
    """The destination directory could not be created."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"could not create destination {path}: {cause}", path, cause)


class SummaryWriteError(BookError):
    """SUMMARY.md could not be written."""

    def __init__(self, path: Path, cause: OSError | UnicodeError):
        super().__init__(f"could not write {path}: {cause}", path, cause)


class CopyError(BookError):
    """A source entry could not be copied into the book.

    Attributes:
        name: Base file name of the entry that failed
    """

    def __init__(self, name: str, path: Path, cause: OSError):
        super().__init__(f"could not copy {name}: {cause}", path, cause)
        self.name = name
