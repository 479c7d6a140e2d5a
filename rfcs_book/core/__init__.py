"""Core types and errors shared by the build stages."""

from .errors import BookError, CopyError, DestinationError, SourceListingError, SummaryWriteError
from .types import BookResult, CopyFailure, SourceEntry, SummaryDocument, SummaryLine

__all__ = [
    "BookError",
    "BookResult",
    "CopyError",
    "CopyFailure",
    "DestinationError",
    "SourceEntry",
    "SourceListingError",
    "SummaryDocument",
    "SummaryLine",
    "SummaryWriteError",
]
