import tkinter as tk
from tkinter import ttk

from gui.state import TableSnapshot


def format_status(snapshot: TableSnapshot) -> str:
    """Left-hand status text for a snapshot."""
    if snapshot.loading:
        return "Loading…"
    if snapshot.total_records == 0:
        return "No artworks"
    start = snapshot.first + 1
    end = snapshot.first + len(snapshot.records)
    return f"Showing {start:,}–{end:,} of {snapshot.total_records:,}"


class StatusBar(ttk.Frame):
    """
    Status bar under the table.

    Displays: row range, selected count, busy indicator and the last error
    reported by the controller.
    """

    def __init__(self, parent):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))

        # Status message (left side)
        self.message_var = tk.StringVar(value="Ready")
        ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel").pack(side=tk.LEFT)

        # Error message (left, after status)
        self.error_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.error_var, style="Error.TLabel").pack(side=tk.LEFT, padx=(12, 0))

        metrics_frame = ttk.Frame(self, style="Panel.TFrame")
        metrics_frame.pack(side=tk.RIGHT)

        # Busy indicator
        self.busy_var = tk.StringVar(value="")
        ttk.Label(metrics_frame, textvariable=self.busy_var,
                  style="Muted.TLabel", width=2).pack(side=tk.RIGHT, padx=(4, 0))

        # Selected count
        self.selected_var = tk.StringVar(value="0 selected")
        ttk.Label(metrics_frame, textvariable=self.selected_var,
                  style="Muted.TLabel").pack(side=tk.RIGHT, padx=(8, 0))

    def update_status(self, snapshot: TableSnapshot):
        """Refresh from a controller snapshot."""
        self.message_var.set(format_status(snapshot))
        self.error_var.set(snapshot.error or "")
        self.busy_var.set("●" if snapshot.loading else "")
        self.selected_var.set(f"{snapshot.selected_count:,} selected")
