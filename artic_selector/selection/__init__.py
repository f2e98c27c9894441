"""Cross-page selection: bulk resolution by count and per-page reconciliation."""
from .bulk import pages_needed, parse_row_count, resolve_count
from .reconciler import SelectionSet

__all__ = [
    "SelectionSet",
    "pages_needed",
    "parse_row_count",
    "resolve_count",
]
