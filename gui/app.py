"""Main GUI application object.

Wires the artworks client, the table controller and the Tk view together.
Tk runs in the main thread; controller coroutines run on the AsyncRunner
loop and push snapshots back with `root.after(0, ...)`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from artic_selector.artic_client import ArticClient
from artic_selector.config import Settings, get_settings
from artic_selector.utils.logger import setup_logging
from gui.controller import ArtworkTableController
from gui.state import TableSnapshot
from gui.utils.async_tasks import AsyncRunner, as_coroutine
from gui.utils.logging import log


class ArticSelectorApp:
    """Desktop shell around one ArtworkTableController."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[ArticClient] = None):
        self.settings = settings or get_settings()
        self.client = client or ArticClient(self.settings)
        self.controller = ArtworkTableController(
            self.client.fetch_page_async,
            page_size=self.settings.page_size,
        )
        self.runner = AsyncRunner()
        self.root = None
        self.view = None

    def actions(self) -> Dict[str, Callable[..., Any]]:
        """Action name -> handler, as used by BaseView.call()."""
        c = self.controller
        return {
            "toggle_row": lambda record_id: self._submit_sync(c.toggle_record, record_id),
            "toggle_page": lambda: self._submit_sync(c.toggle_page),
            "clear_selection": lambda: self._submit_sync(c.clear_selection),
            "bulk_select": self._bulk_select,
            "first_page": lambda: self.runner.submit(c.first_page()),
            "previous_page": lambda: self.runner.submit(c.previous_page()),
            "next_page": lambda: self.runner.submit(c.next_page()),
            "last_page": lambda: self.runner.submit(c.last_page()),
            "set_page_size": lambda size: self.runner.submit(c.set_page_size(size)),
        }

    def _submit_sync(self, fn: Callable[..., Any], *args: Any):
        return self.runner.submit(as_coroutine(fn, *args))

    def _bulk_select(self, raw: str):
        def done(added: int) -> None:
            if added:
                log(f"Selected {added} more artworks")

        return self.runner.submit(self.controller.on_bulk_select_requested(raw), done)

    def _on_snapshot(self, snapshot: TableSnapshot) -> None:
        # Called on the loop thread; hop back to Tk before touching widgets
        if self.root is not None and self.view is not None:
            self.root.after(0, self.view.render, snapshot)

    def run(self) -> None:  # pragma: no cover - UI code
        """Build the window and enter the Tk event loop."""
        import tkinter as tk
        from tkinter import ttk

        from gui.theme import apply_theme
        from gui.views.artworks import ArtworksView

        self.root = tk.Tk()
        self.root.title("Artworks")
        self.root.geometry("1200x520")
        self.root.report_callback_exception = self._report_callback_exception
        apply_theme(ttk.Style(self.root))

        self.view = ArtworksView(self.root, actions=self.actions())
        self.view.pack(fill=tk.BOTH, expand=True)
        self.view.render(self.controller.snapshot())

        self.controller.subscribe(self._on_snapshot)
        self.runner.start()
        self.runner.submit(self.controller.start())
        try:
            self.root.mainloop()
        finally:
            self.runner.stop()
            self.client.close()

    def _report_callback_exception(self, exc, val, tb):  # pragma: no cover - UI code
        log(f"Unhandled UI error: {val}", logging.ERROR)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, verbose=settings.verbose)
    ArticSelectorApp(settings).run()


if __name__ == "__main__":
    main()
