import tkinter as tk

from gui.theme import ModernTheme, Theme


class ToolTip:
    """Hover hint for Tk widgets, styled from the active theme.

    Usage:
        ToolTip(button, "Select the first N artworks")
    """

    def __init__(self, widget: tk.Widget, text: str, delay: int = 400, theme: Theme = ModernTheme()):
        self.widget = widget
        self.text = text
        self.delay = delay
        self.theme = theme
        self.tipwindow = None
        self._after_id = None
        self.widget.bind("<Enter>", self._schedule, add="+")
        self.widget.bind("<Leave>", self._hide, add="+")
        self.widget.bind("<ButtonPress>", self._hide, add="+")

    def _schedule(self, _event=None):
        self._cancel()
        self._after_id = self.widget.after(self.delay, self._show)

    def _cancel(self):
        if self._after_id:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def _show(self):
        self._after_id = None
        if self.tipwindow or not self.text:
            return
        x = self.widget.winfo_rootx()
        y = self.widget.winfo_rooty() - 30
        self.tipwindow = tw = tk.Toplevel(self.widget)
        tw.wm_overrideredirect(True)
        tw.wm_geometry(f"+{x}+{max(y, 0)}")
        tk.Label(
            tw,
            text=self.text,
            background=self.theme.primary_color,
            foreground=self.theme.background_color,
            font=(self.theme.font_family, 9),
            padx=6,
            pady=3,
        ).pack()

    def _hide(self, _event=None):
        self._cancel()
        tw, self.tipwindow = self.tipwindow, None
        if tw:
            tw.destroy()
