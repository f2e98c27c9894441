"""Exceptions raised by the artwork client and the selection layer."""

from typing import Optional


class ArticSelectorError(Exception):
    """Base class for errors raised by this package."""
    pass


class TransportError(ArticSelectorError):
    """Raised when a page fetch fails.

    Covers connection errors, timeouts, non-success HTTP statuses and
    response bodies that do not match the expected payload shape.
    """

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class InvalidInput(ArticSelectorError, ValueError):
    """Raised when a bulk-selection count is not a positive integer."""
    pass
