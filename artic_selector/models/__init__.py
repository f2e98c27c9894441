"""Data schemas and validation."""
from .schemas import Artwork, ArtworksResponse, Page, Pagination

__all__ = [
    "Artwork",
    "ArtworksResponse",
    "Page",
    "Pagination",
]
