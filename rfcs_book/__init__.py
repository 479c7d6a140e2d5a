"""
RFC Book Generator - mdBook source tree builder.

This package turns a flat directory of RFC documents into an mdBook
``src`` directory: every entry is copied across and indexed, in sorted
order, by a generated SUMMARY.md.

Main entry point is the ``rfcs-book-gen`` command.

Example:
    $ rfcs-book-gen text/ book/
"""

__all__ = ["__version__", "generate_book", "BookResult", "BookError"]
__version__ = "0.1.0"

from .core.errors import BookError
from .core.types import BookResult
from .runner import generate_book
