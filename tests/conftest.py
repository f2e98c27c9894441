import asyncio
import os
import sys
from typing import Dict, List, Optional, Set

import pytest

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from artic_selector.errors import TransportError
from artic_selector.models.schemas import Artwork, Page


def make_artwork(artwork_id: int) -> Artwork:
    return Artwork(
        id=artwork_id,
        title=f"Artwork {artwork_id}",
        place_of_origin="Chicago",
        artist_display="Unknown",
        inscription=None,
        date_start=1900,
        date_end=1901,
    )


class FakeArtworksSource:
    """In-memory stand-in for the artworks API.

    Records every (page_index, page_size) request. Pages listed in
    `failing_pages` raise TransportError. Pages with a gate wait until the
    test releases them, which lets a test control response arrival order.
    """

    def __init__(self, total: int, failing_pages: Optional[Set[int]] = None):
        self.records = [make_artwork(i) for i in range(1, total + 1)]
        self.failing_pages = set(failing_pages or ())
        self.calls: List[tuple] = []
        self.gates: Dict[int, asyncio.Event] = {}

    def gate(self, page_index: int) -> asyncio.Event:
        self.gates[page_index] = asyncio.Event()
        return self.gates[page_index]

    async def fetch_page(self, page_index: int, page_size: int) -> Page:
        self.calls.append((page_index, page_size))
        gate = self.gates.get(page_index)
        if gate is not None:
            await gate.wait()
        if page_index in self.failing_pages:
            raise TransportError(f"page {page_index} unavailable", status_code=503)
        start = page_index * page_size
        return Page(
            records=self.records[start:start + page_size],
            page_index=page_index,
            page_size=page_size,
            total=len(self.records),
        )


@pytest.fixture()
def source_100():
    return FakeArtworksSource(total=100)


@pytest.fixture()
def source_42():
    return FakeArtworksSource(total=42)
