"""List screen view: a two-column table with a refresh button.

The view renders rows handed to it and emits refresh/appear/select callbacks
to the list view model. It holds no loading state of its own.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional, Tuple


class ListView(ttk.Frame):
    """Title/subtitle table with a refresh toolbar and a status line."""

    def __init__(self, parent, *, title: str = "", **kwargs):
        """Build toolbar + table.

        Args:
            parent: Notebook parent widget.
            title: Heading shown in the toolbar.
            **kwargs: Additional frame options forwarded to ``ttk.Frame``.
        """
        super().__init__(parent, **kwargs)

        toolbar = ttk.Frame(self)
        toolbar.pack(side=tk.TOP, fill=tk.X, padx=4, pady=4)

        ttk.Label(toolbar, text=title, font=("TkDefaultFont", 12, "bold")).pack(side=tk.LEFT)
        self.btn_refresh = ttk.Button(toolbar, text="Refresh", command=self._on_refresh_click)
        self.btn_refresh.pack(side=tk.RIGHT)
        self.progress = ttk.Progressbar(toolbar, mode="indeterminate", length=80)

        self.tree = ttk.Treeview(
            self,
            columns=("title", "subtitle"),
            show="headings",
            selectmode="browse",
            height=14,
        )
        self.tree.heading("title", text="Title")
        self.tree.heading("subtitle", text="Details")
        self.tree.column("title", width=260, anchor=tk.W, stretch=True)
        self.tree.column("subtitle", width=360, anchor=tk.W, stretch=True)

        vsb = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)

        self.status_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_var, foreground="#a33").pack(
            side=tk.BOTTOM, fill=tk.X, padx=4, pady=(0, 4)
        )
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)

        self.on_refresh: Optional[Callable[[], None]] = None
        self.on_appear: Optional[Callable[[], None]] = None
        self.on_select: Optional[Callable[[int], None]] = None

        self.tree.bind("<<TreeviewSelect>>", self._on_select_changed)
        self.bind("<Map>", self._on_map)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_rows(self, rows: List[Tuple[str, str]]) -> None:
        """Replace all rows; row ``iid`` is the row index."""
        self.tree.delete(*self.tree.get_children())
        for index, (title, subtitle) in enumerate(rows):
            self.tree.insert("", tk.END, iid=str(index), values=(title, subtitle))
        self.status_var.set("")

    def set_refreshing(self, refreshing: bool) -> None:
        if refreshing:
            self.progress.pack(side=tk.RIGHT, padx=6)
            self.progress.start(12)
            self.btn_refresh.configure(state="disabled")
        else:
            self.progress.stop()
            self.progress.pack_forget()
            self.btn_refresh.configure(state="normal")

    def show_error(self, message: str) -> None:
        self.status_var.set(message)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_refresh_click(self) -> None:
        if self.on_refresh:
            self.on_refresh()

    def _on_map(self, _event=None) -> None:
        if self.on_appear:
            self.on_appear()

    def _on_select_changed(self, _event=None) -> None:
        selection = self.tree.selection()
        if not selection or not self.on_select:
            return
        self.tree.selection_remove(*selection)
        self.on_select(int(selection[0]))


__all__ = ["ListView"]
