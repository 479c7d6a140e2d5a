"""Book output: the generated index and the copied entries."""

from .copier import BEST_EFFORT, COPY_POLICIES, FAIL_FAST, check_policy, copy_entries
from .summary import build_summary, entry_title, render_summary, write_summary

__all__ = [
    "BEST_EFFORT",
    "COPY_POLICIES",
    "FAIL_FAST",
    "build_summary",
    "check_policy",
    "copy_entries",
    "entry_title",
    "render_summary",
    "write_summary",
]
