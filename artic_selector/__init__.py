"""
ArticSelector - cross-page artwork selection

Browse the Art Institute of Chicago collection one page at a time and select
artworks across pages, including "first N" selections spanning pages that
were never displayed.
"""

__version__ = "1.0.0"

from .artic_client import ArticClient
from .errors import ArticSelectorError, InvalidInput, TransportError
from .selection import SelectionSet, resolve_count

__all__ = [
    "ArticClient",
    "ArticSelectorError",
    "InvalidInput",
    "SelectionSet",
    "TransportError",
    "resolve_count",
]
