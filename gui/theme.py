"""Theme primitives for the artworks table.

`apply_theme` registers the ttk style names the views refer to
(Main.TFrame, Panel.TFrame, Header.TLabel, Muted.TLabel, Error.TLabel).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    primary_color: str = "#1f2937"  # slate-800
    accent_color: str = "#3b82f6"  # blue-500
    background_color: str = "#ffffff"
    muted_color: str = "#6b7280"  # gray-500
    error_color: str = "#dc2626"  # red-600
    font_family: str = "Inter"


@dataclass(frozen=True)
class ModernTheme(Theme):
    """A slightly more opinionated default theme."""

    name: str = "Modern"
    background_color: str = "#f8fafc"  # slate-50
    accent_color: str = "#2563eb"  # blue-600


def apply_theme(style, theme: Theme = ModernTheme()) -> None:  # pragma: no cover - UI code
    """Configure a ttk.Style with the named styles used across views."""
    base_font = (theme.font_family, 10)
    style.configure("Main.TFrame", background=theme.background_color)
    style.configure("Panel.TFrame", background=theme.background_color)
    style.configure("TLabel", background=theme.background_color, foreground=theme.primary_color, font=base_font)
    style.configure("Header.TLabel", font=(theme.font_family, 14, "bold"), foreground=theme.primary_color,
                    background=theme.background_color)
    style.configure("Muted.TLabel", foreground=theme.muted_color, background=theme.background_color, font=base_font)
    style.configure("Error.TLabel", foreground=theme.error_color, background=theme.background_color, font=base_font)
    style.configure("Treeview", rowheight=26, font=base_font)
    style.configure("Treeview.Heading", font=(theme.font_family, 10, "bold"))
    style.map("Treeview", background=[("selected", theme.accent_color)])
