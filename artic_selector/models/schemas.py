"""Pydantic schemas for the artworks API payload.

These schemas act as contracts at the ingress point so we fail fast when
the API response changes shape. Only `id` and `pagination.total` are
required; the display fields are frequently null upstream.
"""
from typing import FrozenSet, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Artwork(BaseModel):
    """A single selectable artwork. Identity is the `id` alone."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscription: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artwork):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Pagination(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total: int = Field(ge=0)
    limit: Optional[int] = None
    offset: Optional[int] = None
    total_pages: Optional[int] = None
    current_page: Optional[int] = None


class ArtworksResponse(BaseModel):
    """Shape of `GET /artworks?page=&limit=`."""

    model_config = ConfigDict(extra="ignore")

    data: List[Artwork]
    pagination: Pagination


class Page(BaseModel):
    """One page of artworks plus the source's total count."""

    model_config = ConfigDict(frozen=True)

    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, gt=0)
    total: int = Field(default=0, ge=0)
    records: List[Artwork] = Field(default_factory=list)

    @field_validator("records")
    @classmethod
    def records_fit_page(cls, v: List[Artwork], info):
        size = info.data.get("page_size")
        if size is not None and len(v) > size:
            raise ValueError("page holds more records than page_size")
        return v

    @property
    def page_number(self) -> int:
        """1-based page number as used by the API."""
        return self.page_index + 1

    @property
    def first(self) -> int:
        """Row offset of the first record on this page."""
        return self.page_index * self.page_size

    @property
    def total_pages(self) -> int:
        if self.total <= 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def ids(self) -> FrozenSet[int]:
        return frozenset(r.id for r in self.records)
