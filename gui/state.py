"""Application state container.

`TableSnapshot` is what the controller hands to the rendering layer after
every change; views never read controller internals directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from artic_selector.models.schemas import Artwork


@dataclass(frozen=True)
class TableSnapshot:
    records: Tuple[Artwork, ...] = ()
    visible_selected_ids: FrozenSet[int] = frozenset()
    selected_count: int = 0
    total_records: int = 0
    page_index: int = 0
    page_size: int = 10
    loading: bool = False
    error: Optional[str] = None

    @property
    def first(self) -> int:
        return self.page_index * self.page_size

    @property
    def total_pages(self) -> int:
        if self.total_records <= 0:
            return 0
        return (self.total_records + self.page_size - 1) // self.page_size

    @property
    def page_fully_selected(self) -> bool:
        return bool(self.records) and all(r.id in self.visible_selected_ids for r in self.records)

