"""Resolve "select the first N artworks" into concrete records.

Pages are awaited one after another in ascending order. The loop stops as
soon as enough records are gathered, so a request for 25 rows at 10 per page
touches pages 0, 1 and 2 and nothing after.
"""

from __future__ import annotations

import math
from typing import List, Set

from artic_selector.artic_client import AsyncPageFetcher
from artic_selector.errors import InvalidInput
from artic_selector.models.schemas import Artwork
from artic_selector.utils.logger import get_logger

logger = get_logger(__name__)


def pages_needed(requested_count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    if requested_count <= 0:
        return 0
    return math.ceil(requested_count / page_size)


def parse_row_count(raw) -> int:
    """Parse the free-text row count typed by the user.

    Accepts ints and numeric strings such as " 25 " or "25.0". Anything
    non-numeric, fractional or not positive raises InvalidInput.
    """
    if isinstance(raw, bool):
        raise InvalidInput(f"not a row count: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip() if raw is not None else ""
        if not text:
            raise InvalidInput("empty row count")
        try:
            number = float(text)
        except ValueError as exc:
            raise InvalidInput(f"not a number: {raw!r}") from exc
        if not math.isfinite(number) or not number.is_integer():
            raise InvalidInput(f"not a whole number: {raw!r}")
        value = int(number)
    if value <= 0:
        raise InvalidInput(f"row count must be positive, got {value}")
    return value


async def resolve_count(
    fetch_page: AsyncPageFetcher,
    requested_count: int,
    page_size: int,
) -> List[Artwork]:
    """Return the first `requested_count` artworks in page order.

    Fewer records come back when the source holds fewer than requested.
    A TransportError from any page propagates and nothing gathered so far
    is returned.
    """
    if pages_needed(requested_count, page_size) == 0:
        return []

    gathered: List[Artwork] = []
    seen: Set[int] = set()
    size = page_size
    page_index = 0
    offset = 0
    while len(gathered) < requested_count:
        page = await fetch_page(page_index, size)
        for record in page.records:
            # backing data can shift between requests
            if record.id in seen:
                continue
            seen.add(record.id)
            gathered.append(record)
        offset += len(page.records)

        if len(gathered) >= requested_count:
            break
        if not page.records or offset >= page.total:
            logger.debug(
                "Source exhausted at page %s (%s of %s requested)",
                page_index,
                len(gathered),
                requested_count,
            )
            break
        if len(page.records) < size:
            # the source caps rows per request below `size`; continue at its size
            size = len(page.records)
            if offset % size:
                logger.warning(
                    "Short page %s at offset %s cannot be continued; returning %s of %s",
                    page_index,
                    offset,
                    len(gathered),
                    requested_count,
                )
                break
            logger.debug("Source returned %s rows per page, continuing at that size", size)
        page_index = offset // size

    logger.info("Resolved %s of %s requested artworks", min(len(gathered), requested_count), requested_count)
    return gathered[:requested_count]
