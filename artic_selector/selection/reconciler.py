"""Selection set that survives page swaps.

Only one page of artworks is ever loaded, so membership can't be decided by
comparing against "all records". Every toggle from the table is scoped to
the ids of the page it came from; everything else is left alone.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Union

from artic_selector.models.schemas import Artwork


class SelectionSet:
    """Selected artworks keyed by id. Insertion order is kept for display only."""

    def __init__(self, records: Iterable[Artwork] = ()):
        self._by_id: Dict[int, Artwork] = {}
        for record in records:
            self._by_id.setdefault(record.id, record)

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Artwork]:
        return iter(list(self._by_id.values()))

    def __contains__(self, item: Union[int, Artwork]) -> bool:
        key = item.id if isinstance(item, Artwork) else item
        return key in self._by_id

    def __repr__(self) -> str:
        return f"SelectionSet(ids={sorted(self._by_id)})"

    @property
    def ids(self) -> frozenset:
        return frozenset(self._by_id)

    @property
    def records(self) -> List[Artwork]:
        return list(self._by_id.values())

    def merge_page(self, page_records: Iterable[Artwork], selected: Iterable[Artwork]) -> None:
        """Replace this page's part of the selection with `selected`.

        Records from other pages are kept. An empty `selected` deselects the
        whole page.
        """
        page_ids = {r.id for r in page_records}
        kept = {rid: rec for rid, rec in self._by_id.items() if rid not in page_ids}
        for record in selected:
            kept.setdefault(record.id, record)
        self._by_id = kept

    def merge_bulk(self, records: Iterable[Artwork]) -> int:
        """Add `records`, skipping ids already present. Returns how many were new."""
        added = 0
        for record in records:
            if record.id not in self._by_id:
                self._by_id[record.id] = record
                added += 1
        return added

    def visible(self, page_records: Iterable[Artwork]) -> List[Artwork]:
        """Selected records that appear on the given page, in page order."""
        return [r for r in page_records if r.id in self._by_id]

    def clear(self) -> None:
        self._by_id = {}
