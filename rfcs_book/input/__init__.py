"""Source directory discovery."""

from .listing import list_source_entries, sort_key

__all__ = ["list_source_entries", "sort_key"]
