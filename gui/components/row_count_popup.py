"""Popup with a free-text row count and a Submit button.

Opened from the ▾ button in the selection header. Submitting hands the raw
text to the app and hides the popup whatever the outcome.
"""

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class RowCountPopup:
    def __init__(self, anchor: tk.Widget, on_submit: Callable[[str], None]):
        self.anchor = anchor
        self.on_submit = on_submit
        self.window: Optional[tk.Toplevel] = None
        self.value_var = tk.StringVar(master=anchor, value="")

    @property
    def is_open(self) -> bool:
        return self.window is not None

    def toggle(self, _event=None):
        if self.is_open:
            self.hide()
        else:
            self.show()

    def show(self):
        if self.window is not None:
            return
        x = self.anchor.winfo_rootx()
        y = self.anchor.winfo_rooty() + self.anchor.winfo_height() + 4
        self.window = win = tk.Toplevel(self.anchor)
        win.wm_overrideredirect(True)
        win.wm_geometry(f"+{x}+{y}")

        frame = ttk.Frame(win, style="Panel.TFrame", padding=8)
        frame.pack(fill=tk.BOTH, expand=True)
        ttk.Label(frame, text="Enter row count", style="Muted.TLabel").pack(anchor="w", pady=(0, 2))
        entry = ttk.Entry(frame, textvariable=self.value_var, width=18)
        entry.pack(fill=tk.X, pady=(0, 6))
        entry.bind("<Return>", lambda _e: self._submit())
        entry.bind("<Escape>", lambda _e: self.hide())
        ttk.Button(frame, text="Submit", command=self._submit).pack(anchor="e", pady=(6, 0))
        entry.focus_set()

    def hide(self, _event=None):
        win = self.window
        self.window = None
        if win is not None:
            win.destroy()

    def _submit(self):
        raw = self.value_var.get()
        try:
            self.on_submit(raw)
        finally:
            self.hide()
