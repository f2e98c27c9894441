"""View controller for the artworks table.

Owns the only copy of the current page and the selection set. Every handler
is a coroutine and must run on a single event loop; the Tk side talks to it
through `gui.utils.async_tasks.AsyncRunner` and reads `TableSnapshot`s.

Page requests are tagged with an increasing token. A response whose token is
no longer the latest is dropped, so a slow page 0 can never overwrite a page 1
that was requested after it.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from artic_selector.artic_client import AsyncPageFetcher
from artic_selector.errors import InvalidInput, TransportError
from artic_selector.models.schemas import Artwork, Page
from artic_selector.selection import SelectionSet, parse_row_count, resolve_count
from artic_selector.utils.logger import get_logger
from gui.state import TableSnapshot

logger = get_logger(__name__)

Listener = Callable[[TableSnapshot], None]


class ArtworkTableController:
    def __init__(self, fetch_page: AsyncPageFetcher, page_size: int = 10):
        if page_size <= 0:
            raise ValueError("page_size must be > 0")
        self._fetch_page = fetch_page
        self._page = Page(page_index=0, page_size=page_size)
        self._page_size = page_size
        self._selection = SelectionSet()
        self._listeners: List[Listener] = []
        self._request_token = 0
        self._loading = False
        self.last_error: Optional[str] = None

    # ------------------------------------------------------------------
    # Read-only accessors for the rendering layer
    # ------------------------------------------------------------------
    @property
    def records(self) -> List[Artwork]:
        return list(self._page.records)

    @property
    def selection(self) -> List[Artwork]:
        return self._selection.records

    @property
    def visible_selection(self) -> List[Artwork]:
        return self._selection.visible(self._page.records)

    @property
    def total_records(self) -> int:
        return self._page.total

    @property
    def page_index(self) -> int:
        return self._page.page_index

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def first(self) -> int:
        return self._page.first

    @property
    def total_pages(self) -> int:
        return self._page.total_pages

    def snapshot(self) -> TableSnapshot:
        return TableSnapshot(
            records=tuple(self._page.records),
            visible_selected_ids=frozenset(r.id for r in self.visible_selection),
            selected_count=len(self._selection),
            total_records=self._page.total,
            page_index=self._page.page_index,
            page_size=self._page.page_size,
            loading=self._loading,
            error=self.last_error,
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("Table listener failed")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    async def start(self) -> None:
        """Load the first page."""
        await self.on_page_changed(0, self._page_size)

    async def on_page_changed(self, page_index: int, page_size: Optional[int] = None) -> bool:
        """Fetch and display `page_index`. Returns False if the page was not applied."""
        size = page_size or self._page_size
        page_index = max(page_index, 0)
        self._request_token += 1
        token = self._request_token
        self._loading = True
        self._notify()

        try:
            page = await self._fetch_page(page_index, size)
        except TransportError as exc:
            if token != self._request_token:
                logger.debug("Ignoring failure of superseded page request %s", page_index)
                return False
            self._loading = False
            self.last_error = f"Could not load page {page_index + 1}: {exc}"
            logger.error(self.last_error)
            self._notify()
            return False
        except Exception:
            if token == self._request_token:
                self._loading = False
                self._notify()
            raise

        if token != self._request_token:
            logger.debug("Dropping stale response for page %s", page_index)
            return False

        self._page = page
        self._page_size = size
        self._loading = False
        self.last_error = None
        logger.debug("Showing page %s of %s (%s records)", page_index + 1, page.total_pages, len(page.records))
        self._notify()
        return True

    def on_selection_changed(self, selected: Iterable[Artwork]) -> None:
        """Selection array for the visible page changed (row or header checkbox)."""
        self._selection.merge_page(self._page.records, selected)
        self._notify()

    def toggle_record(self, record_id: int) -> None:
        """Flip one row on the visible page."""
        current = {r.id for r in self.visible_selection}
        if record_id in current:
            current.discard(record_id)
        else:
            current.add(record_id)
        self.on_selection_changed([r for r in self._page.records if r.id in current])

    def toggle_page(self) -> None:
        """Header checkbox: select the whole page, or clear it if already full."""
        records = self._page.records
        if records and len(self.visible_selection) == len(records):
            self.on_selection_changed([])
        else:
            self.on_selection_changed(records)

    async def on_bulk_select_requested(self, raw_count) -> int:
        """Select the first N artworks. Returns how many were newly selected.

        Invalid counts are ignored without reporting an error.
        """
        try:
            count = parse_row_count(raw_count)
        except InvalidInput as exc:
            logger.debug("Ignoring bulk selection request: %s", exc)
            return 0

        try:
            resolved = await resolve_count(self._fetch_page, count, self._page_size)
        except TransportError as exc:
            self.last_error = f"Could not select {count} rows: {exc}"
            logger.error(self.last_error)
            self._notify()
            return 0

        added = self._selection.merge_bulk(resolved)
        if len(resolved) < count:
            logger.info("Only %s artworks available for a request of %s", len(resolved), count)
        self.last_error = None
        self._notify()
        return added

    def clear_selection(self) -> None:
        self._selection.clear()
        self._notify()

    # ------------------------------------------------------------------
    # Pager helpers
    # ------------------------------------------------------------------
    def _clamp(self, page_index: int) -> int:
        last = max(self.total_pages - 1, 0)
        return min(max(page_index, 0), last)

    async def next_page(self) -> bool:
        return await self.on_page_changed(self._clamp(self.page_index + 1))

    async def previous_page(self) -> bool:
        return await self.on_page_changed(self._clamp(self.page_index - 1))

    async def first_page(self) -> bool:
        return await self.on_page_changed(0)

    async def last_page(self) -> bool:
        return await self.on_page_changed(self._clamp(self.total_pages - 1))

    async def set_page_size(self, page_size: int) -> bool:
        """Change rows per page, keeping the first visible row on screen."""
        if page_size <= 0:
            return False
        return await self.on_page_changed(self.first // page_size, page_size)
