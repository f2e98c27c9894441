"""Base class for GUI views.

A view is a ttk.Frame that builds its widgets in `_build` and forwards user
actions to the app through `call(action, *args)`.
"""

from __future__ import annotations

from tkinter import ttk
from typing import Any, Callable, Dict, Optional


class BaseView(ttk.Frame):
    name: str = "base"

    def __init__(self, parent, actions: Optional[Dict[str, Callable[..., Any]]] = None, **kwargs):
        kwargs.setdefault("style", "Main.TFrame")
        kwargs.setdefault("padding", 10)
        super().__init__(parent, **kwargs)
        self.actions = actions or {}
        self._build()

    def _build(self):  # pragma: no cover - overridden
        pass

    def call(self, action: str, *args: Any) -> Any:
        handler = self.actions.get(action)
        if handler is None:
            raise KeyError(f"No handler registered for action '{action}'")
        return handler(*args)
