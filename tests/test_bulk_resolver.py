import asyncio

import pytest

from artic_selector.errors import InvalidInput, TransportError
from artic_selector.selection.bulk import pages_needed, parse_row_count, resolve_count
from conftest import FakeArtworksSource


def test_pages_needed():
    assert pages_needed(25, 10) == 3
    assert pages_needed(10, 10) == 1
    assert pages_needed(1, 10) == 1
    assert pages_needed(0, 10) == 0
    assert pages_needed(-3, 10) == 0
    with pytest.raises(ValueError):
        pages_needed(5, 0)


def test_count_25_fetches_three_pages_and_truncates(source_100):
    result = asyncio.run(resolve_count(source_100.fetch_page, 25, 10))

    assert source_100.calls == [(0, 10), (1, 10), (2, 10)]
    assert [r.id for r in result] == list(range(1, 26))


def test_exact_page_multiple_stops_without_extra_fetch(source_100):
    result = asyncio.run(resolve_count(source_100.fetch_page, 20, 10))
    assert len(result) == 20
    assert source_100.calls == [(0, 10), (1, 10)]


def test_request_beyond_total_returns_everything_available(source_42):
    result = asyncio.run(resolve_count(source_42.fetch_page, 1000, 10))

    assert len(result) == 42
    assert [r.id for r in result] == list(range(1, 43))
    # page 4 is short, so nothing past it is requested
    assert [c[0] for c in source_42.calls] == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("count", [0, -3])
def test_non_positive_count_fetches_nothing(source_100, count):
    assert asyncio.run(resolve_count(source_100.fetch_page, count, 10)) == []
    assert source_100.calls == []


def test_same_arguments_give_identical_results(source_100):
    first = asyncio.run(resolve_count(source_100.fetch_page, 37, 10))
    second = asyncio.run(resolve_count(source_100.fetch_page, 37, 10))
    assert [r.id for r in first] == [r.id for r in second]


def test_failure_on_any_page_discards_partial_results():
    source = FakeArtworksSource(total=100, failing_pages={1})
    with pytest.raises(TransportError):
        asyncio.run(resolve_count(source.fetch_page, 25, 10))
    assert source.calls == [(0, 10), (1, 10)]


def test_pages_are_fetched_one_at_a_time(source_100):
    in_flight = 0
    peak = 0

    async def tracking_fetch(page_index, page_size):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0)
        try:
            return await source_100.fetch_page(page_index, page_size)
        finally:
            in_flight -= 1

    asyncio.run(resolve_count(tracking_fetch, 45, 10))
    assert peak == 1
    assert [c[0] for c in source_100.calls] == [0, 1, 2, 3, 4]


def test_duplicate_ids_across_pages_are_dropped():
    source = FakeArtworksSource(total=30)
    # simulate the backing data shifting by one row between requests
    source.records = source.records[:10] + source.records[9:]

    result = asyncio.run(resolve_count(source.fetch_page, 15, 10))
    ids = [r.id for r in result]
    assert len(ids) == len(set(ids))
    assert ids == list(range(1, 16))


@pytest.mark.parametrize("raw,expected", [
    ("25", 25),
    (" 7 ", 7),
    ("10.0", 10),
    (3, 3),
])
def test_parse_row_count_accepts_positive_whole_numbers(raw, expected):
    assert parse_row_count(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "abc", "0", "-3", "2.5", "nan", None, True, -1])
def test_parse_row_count_rejects_everything_else(raw):
    with pytest.raises(InvalidInput):
        parse_row_count(raw)


class RowCappedSource(FakeArtworksSource):
    """Returns at most `cap` rows per request, like the live API's limit of 100."""

    def __init__(self, total: int, cap: int = 100):
        super().__init__(total=total)
        self.cap = cap

    async def fetch_page(self, page_index, page_size):
        page = await super().fetch_page(page_index, page_size)
        return page.model_copy(update={"records": page.records[:self.cap]})


def test_row_cap_below_page_size_still_returns_requested_count():
    source = RowCappedSource(total=1000, cap=100)

    result = asyncio.run(resolve_count(source.fetch_page, 250, 150))

    assert len(result) == 250
    assert [r.id for r in result] == list(range(1, 251))
    assert source.calls == [(0, 150), (1, 100), (2, 100)]


def test_row_cap_with_fewer_records_than_requested():
    source = RowCappedSource(total=230, cap=100)
    result = asyncio.run(resolve_count(source.fetch_page, 500, 150))
    assert [r.id for r in result] == list(range(1, 231))


def test_short_page_at_unaligned_offset_stops():
    source = FakeArtworksSource(total=100)

    async def fetch(page_index, page_size):
        page = await source.fetch_page(page_index, page_size)
        if page_index == 1:
            return page.model_copy(update={"records": page.records[:7]})
        return page

    # 17 rows fetched; continuing at 7 per page cannot land on row 18
    result = asyncio.run(resolve_count(fetch, 50, 10))
    assert [r.id for r in result] == list(range(1, 18))
    assert source.calls == [(0, 10), (1, 10)]
