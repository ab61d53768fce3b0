"""
MainWindowView
---------------
Tkinter main window for the list client. View code only: no loading logic.

- Notebook tabs: Friends, Transfers (nested Sent / Received), Cards
- Status bar at the bottom for short feedback messages
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk


class MainWindowView(tk.Tk):
    """Top-level application window hosting one notebook tab per list."""

    def __init__(self) -> None:
        super().__init__()

        self.title("iACC")
        self.geometry("720x520")
        self.minsize(520, 360)

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.tabs = ttk.Notebook(self)
        self.tabs.grid(row=0, column=0, sticky="nsew", padx=8, pady=(8, 4))

        self.tab_friends = ttk.Frame(self.tabs)
        self.tab_transfers = ttk.Notebook(self.tabs)
        self.tab_cards = ttk.Frame(self.tabs)
        self.tabs.add(self.tab_friends, text="Friends")
        self.tabs.add(self.tab_transfers, text="Transfers")
        self.tabs.add(self.tab_cards, text="Cards")

        self.tab_sent = ttk.Frame(self.tab_transfers)
        self.tab_received = ttk.Frame(self.tab_transfers)
        self.tab_transfers.add(self.tab_sent, text="Sent")
        self.tab_transfers.add(self.tab_received, text="Received")

        self.status_message_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_message_var, anchor=tk.W).grid(
            row=1, column=0, sticky="ew", padx=8, pady=(0, 6)
        )

    def set_status_message(self, text: str) -> None:
        """Update the short status message shown in the status bar."""
        self.status_message_var.set(text)

    def show_toast(self, message: str) -> None:
        self.status_message_var.set(message)
