"""Shared visual theme for the gauge demo views.

The module centralizes ttk style tokens so the window, the input panel, and
the gauge render with one look without carrying styling logic in each view.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BACKGROUND = "#f3f5f9"
CARD_BACKGROUND = "#ffffff"
TEXT = "#1f2937"
COUNTER_FONT = ("TkDefaultFont", 40, "bold")


def apply_modern_theme(root: tk.Misc) -> None:
    """Apply a cohesive ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    border = "#d9dfeb"
    primary = "#2457ff"
    muted = "#64748b"

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BACKGROUND)

    style.configure(".", background=BACKGROUND, foreground=TEXT)
    style.configure("TFrame", background=BACKGROUND)
    style.configure("Card.TFrame", background=CARD_BACKGROUND, relief="flat", borderwidth=1)
    style.configure("TLabel", background=BACKGROUND, foreground=TEXT)
    style.configure("Subtle.TLabel", background=BACKGROUND, foreground=muted)

    style.configure(
        "TButton",
        padding=(10, 6),
        background=CARD_BACKGROUND,
        bordercolor=border,
        relief="flat",
    )
    style.map("TButton", background=[("active", "#edf2ff")])
    style.configure("Primary.TButton", background=primary, foreground="#ffffff", bordercolor=primary)
    style.map("Primary.TButton", background=[("active", "#1b45ce")])

    style.configure("TEntry", fieldbackground="#ffffff", bordercolor=border)
