"""
Artworks table view.

Features:
- One remote page at a time in a Treeview
- Checkbox column: click a row's box to toggle it, click the header to toggle the page
- "Select rows ▾" popup to select the first N artworks across pages
- Pager with first/prev/next/last and rows-per-page
"""
import tkinter as tk
from tkinter import ttk
from typing import Optional, Tuple

from artic_selector.models.schemas import Artwork
from gui.components.row_count_popup import RowCountPopup
from gui.components.status_bar import StatusBar
from gui.state import TableSnapshot
from gui.utils.tooltips import ToolTip
from gui.views.base import BaseView

CHECKED = "☑"
UNCHECKED = "☐"
PAGE_SIZES = ("10", "25", "50")

COLUMNS = (
    ("sel", "", 44),
    ("title", "Title", 240),
    ("place_of_origin", "Place of Origin", 130),
    ("artist_display", "Artist", 220),
    ("inscription", "Inscription", 200),
    ("date_start", "Date Start", 80),
    ("date_end", "Date End", 80),
)


def _cell(value) -> str:
    if value is None:
        return "—"
    return " ".join(str(value).split())


def row_values(artwork: Artwork, selected: bool) -> Tuple[str, ...]:
    """Treeview values for one artwork, checkbox first."""
    return (
        CHECKED if selected else UNCHECKED,
        _cell(artwork.title),
        _cell(artwork.place_of_origin),
        _cell(artwork.artist_display),
        _cell(artwork.inscription),
        _cell(artwork.date_start),
        _cell(artwork.date_end),
    )


class ArtworksView(BaseView):
    name = "artworks"

    def _build(self):  # pragma: no cover - UI code
        self._snapshot: Optional[TableSnapshot] = None

        # ─────────────────────────────────────────────────────────────
        # TOP: title + selection actions
        # ─────────────────────────────────────────────────────────────
        top = ttk.Frame(self, style="Main.TFrame")
        top.pack(fill=tk.X, pady=(0, 6))
        ttk.Label(top, text="Artworks", style="Header.TLabel").pack(side=tk.LEFT)

        actions = ttk.Frame(top, style="Main.TFrame")
        actions.pack(side=tk.RIGHT)
        self.select_btn = ttk.Button(actions, text="Select rows ▾")
        self.select_btn.pack(side=tk.LEFT, padx=(0, 4))
        self.popup = RowCountPopup(self.select_btn, lambda raw: self.call("bulk_select", raw))
        self.select_btn.configure(command=self.popup.toggle)
        ToolTip(self.select_btn, "Select the first N artworks, across pages")
        ttk.Button(actions, text="Clear selection", command=lambda: self.call("clear_selection")).pack(side=tk.LEFT)

        # ─────────────────────────────────────────────────────────────
        # MAIN: Treeview
        # ─────────────────────────────────────────────────────────────
        tree_frame = ttk.Frame(self, style="Main.TFrame")
        tree_frame.pack(fill=tk.BOTH, expand=True)
        self.tree = ttk.Treeview(
            tree_frame,
            columns=[c[0] for c in COLUMNS],
            show="headings",
            selectmode="none",
        )
        for col, label, width in COLUMNS:
            self.tree.heading(col, text=label)
            self.tree.column(col, width=width, anchor="center" if col == "sel" else "w", stretch=col != "sel")
        self.tree.heading("sel", text=UNCHECKED, command=lambda: self.call("toggle_page"))
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        vsb = ttk.Scrollbar(tree_frame, orient=tk.VERTICAL, command=self.tree.yview)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)
        self.tree.configure(yscrollcommand=vsb.set)
        self.tree.bind("<Button-1>", self._on_click)

        # ─────────────────────────────────────────────────────────────
        # PAGINATION
        # ─────────────────────────────────────────────────────────────
        page_bar = ttk.Frame(self, style="Main.TFrame")
        page_bar.pack(fill=tk.X, pady=(4, 0))

        for text, action in (("⏮", "first_page"), ("◀", "previous_page")):
            ttk.Button(page_bar, text=text, width=3, command=lambda a=action: self.call(a)).pack(side=tk.LEFT)
        self.page_label = ttk.Label(page_bar, text="Page 1 of 1", style="Muted.TLabel")
        self.page_label.pack(side=tk.LEFT, padx=6)
        for text, action in (("▶", "next_page"), ("⏭", "last_page")):
            ttk.Button(page_bar, text=text, width=3, command=lambda a=action: self.call(a)).pack(side=tk.LEFT)

        self.page_size_var = tk.StringVar(value=PAGE_SIZES[0])
        page_combo = ttk.Combobox(page_bar, textvariable=self.page_size_var, values=PAGE_SIZES,
                                  width=4, state="readonly")
        page_combo.pack(side=tk.RIGHT)
        page_combo.bind("<<ComboboxSelected>>", lambda _: self.call("set_page_size", int(self.page_size_var.get())))
        ttk.Label(page_bar, text="Rows:", style="Muted.TLabel").pack(side=tk.RIGHT, padx=(10, 2))

        self.status_bar = StatusBar(self)
        self.status_bar.pack(fill=tk.X, pady=(4, 0))

    # ─────────────────────────────────────────────────────────────────
    # Public interface for app.py
    # ─────────────────────────────────────────────────────────────────
    def render(self, snapshot: TableSnapshot):  # pragma: no cover - UI code
        """Redraw rows, header checkbox, pager and status from a snapshot."""
        self._snapshot = snapshot
        self.tree.delete(*self.tree.get_children())
        for artwork in snapshot.records:
            selected = artwork.id in snapshot.visible_selected_ids
            self.tree.insert("", tk.END, iid=str(artwork.id), values=row_values(artwork, selected))

        self.tree.heading("sel", text=CHECKED if snapshot.page_fully_selected else UNCHECKED)
        total_pages = max(snapshot.total_pages, 1)
        self.page_label.configure(text=f"Page {snapshot.page_index + 1} of {total_pages:,}")
        if self.page_size_var.get() != str(snapshot.page_size):
            self.page_size_var.set(str(snapshot.page_size))
        self.status_bar.update_status(snapshot)

    def _on_click(self, event):  # pragma: no cover - UI code
        if self.tree.identify_region(event.x, event.y) != "cell":
            return
        if self.tree.identify_column(event.x) != "#1":
            return
        row = self.tree.identify_row(event.y)
        if row:
            self.call("toggle_row", int(row))
