"""
InputPanelView
--------------
Bottom panel with the two text inputs (target progress, duration in seconds)
and the Start / Reset buttons. No parsing happens here: raw text goes to the
view model through `on_change(field_id, value)`.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional

from .view_utils import safe_call

OnVoid = Optional[Callable[[], None]]
OnChange = Optional[Callable[[str, str], None]]

FIELDS = (
    ("progress", "Enter progress"),
    ("duration", "Enter duration"),
)


class InputPanelView(ttk.Frame):
    """Vertical stack: progress entry, duration entry, action buttons."""

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_change: OnChange = None,
        on_start: OnVoid = None,
        on_reset: OnVoid = None,
    ) -> None:
        super().__init__(parent, width=300)
        self._on_change = on_change
        self._on_start = on_start
        self._on_reset = on_reset
        self._vars: Dict[str, tk.StringVar] = {}

        self.columnconfigure(0, weight=1)
        row = 0
        for field_id, caption in FIELDS:
            ttk.Label(self, text=caption, style="Subtle.TLabel").grid(
                row=row, column=0, sticky="w"
            )
            var = tk.StringVar(value="")
            var.trace_add("write", lambda *_a, fid=field_id: self._emit_change(fid))
            entry = ttk.Entry(self, textvariable=var, width=32)
            entry.grid(row=row + 1, column=0, sticky="ew", pady=(0, 8))
            entry.bind("<Return>", lambda _e: safe_call(self._on_start))
            self._vars[field_id] = var
            row += 2

        buttons = ttk.Frame(self)
        buttons.grid(row=row, column=0, pady=(4, 0))
        ttk.Button(
            buttons,
            text="Start animation",
            style="Primary.TButton",
            command=lambda: safe_call(self._on_start),
        ).pack(side="left", padx=(0, 6))
        ttk.Button(buttons, text="Reset", command=lambda: safe_call(self._on_reset)).pack(
            side="left"
        )

    # ------------------------------------------------------------------
    def _emit_change(self, field_id: str) -> None:
        safe_call(self._on_change, field_id, self._vars[field_id].get())
