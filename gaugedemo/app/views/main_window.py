"""
MainWindowView
--------------
Tkinter main window for the gauge demo. This file contains **only View
code**: layout containers, keyboard shortcuts, and the status bar. The gauge
and the input panel are created by the app and mounted into the hosts below.

Layout:
  * Centered gauge host (fixed-size canvas lives there)
  * Input host anchored to the bottom
  * StatusBar with a short message
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .theme import apply_modern_theme


class MainWindowView(tk.Tk):
    """Top-level application window (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        on_start: OnVoid = None,
        on_reset: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()
        self.title("Gauge Demo")
        self.geometry("420x560")
        self.minsize(360, 480)
        apply_modern_theme(self)

        self._on_start = on_start
        self._on_reset = on_reset
        self._on_close = on_close

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.gauge_host = ttk.Frame(self)
        self.gauge_host.grid(row=0, column=0)

        self.input_host = ttk.Frame(self)
        self.input_host.grid(row=1, column=0, pady=(8, 16))

        self._build_statusbar(self)

        self.bind("<Control-Return>", lambda e: self._on_start and self._on_start())
        self.bind("<Escape>", lambda e: self._on_reset and self._on_reset())
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var, style="Subtle.TLabel").grid(
            row=0, column=0, sticky="w"
        )

    # ------------------------------------------------------------------
    # Public API (called by the app)
    # ------------------------------------------------------------------
    def set_status_message(self, text: str) -> None:
        """Update the short status message shown in the status bar."""
        self.status_message_var.set(text)

    def show_toast(self, message: str, level: str = "info") -> None:
        """
        Lightweight user feedback in the statusbar.
        level is currently informational.
        """
        self.status_message_var.set(message)

    def mount_gauge(self, view: tk.Widget) -> None:
        view.pack(padx=16, pady=16)

    def mount_input_panel(self, view: tk.Widget) -> None:
        view.pack(fill="x")

    def _handle_close(self) -> None:
        if self._on_close:
            self._on_close()
        self.destroy()


if __name__ == "__main__":
    win = MainWindowView()
    win.mainloop()
