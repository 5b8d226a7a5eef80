"""
GaugeView
---------
Canvas widget that renders the circular progress gauge: a light track arc,
the colored progress stroke drawn over it, and the counter label in the
middle. This is a pure View with public setters; all animation state lives in
the view model.

Usage (from the app):
- call `apply(dto)` with the DTO produced by `GaugeVM`
- or use `set_stroke(fraction, color)` / `set_counter_text(text)` directly
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Mapping, Optional

from ...domain.entities import ColorStop
from ...domain.gauge_geometry import arc_points, flatten
from ...domain.settings import GaugeSettings
from .theme import BACKGROUND, COUNTER_FONT, TEXT


class GaugeView(ttk.Frame):
    """Track + progress stroke + centered counter label."""

    def __init__(self, parent: tk.Widget, *, settings: Optional[GaugeSettings] = None) -> None:
        super().__init__(parent)
        self._settings = settings or GaugeSettings()
        size = self._settings.gauge_size
        self._center = (size / 2.0, size / 2.0)

        self._canvas = tk.Canvas(
            self, width=size, height=size, highlightthickness=0, bg=BACKGROUND
        )
        self._canvas.pack()

        track = flatten(self._points(1.0))
        self._track_id = self._canvas.create_line(
            *track,
            fill=self._track_color(),
            width=self._settings.line_width,
            capstyle=tk.ROUND,
            joinstyle=tk.ROUND,
        )
        # Progress stroke starts hidden; coords are replaced on each update.
        self._progress_id = self._canvas.create_line(
            0, 0, 0, 0,
            width=self._settings.line_width,
            capstyle=tk.ROUND,
            joinstyle=tk.ROUND,
            state="hidden",
        )
        self._label_id = self._canvas.create_text(
            *self._center, text="0", font=COUNTER_FONT, fill=TEXT
        )

    # ------------------------------------------------------------------
    def apply(self, dto: Mapping[str, object]) -> None:
        """Render a GaugeVM DTO (``counter_text``, ``stroke_fraction``, ``stroke_color``)."""
        self.set_stroke(float(dto.get("stroke_fraction") or 0.0), dto.get("stroke_color"))
        self.set_counter_text(str(dto.get("counter_text", "0")))

    def set_stroke(self, fraction: float, color: Optional[object]) -> None:
        points = self._points(fraction)
        if len(points) < 2 or not color:
            self._canvas.itemconfigure(self._progress_id, state="hidden")
            return
        self._canvas.coords(self._progress_id, *flatten(points))
        self._canvas.itemconfigure(self._progress_id, fill=str(color), state="normal")

    def set_counter_text(self, text: str) -> None:
        self._canvas.itemconfigure(self._label_id, text=text)

    # ------------------------------------------------------------------
    def _points(self, fraction: float):
        return arc_points(
            self._center,
            self._settings.radius,
            self._settings.arc_start_deg,
            self._settings.arc_sweep_deg,
            fraction,
        )

    def _track_color(self) -> str:
        return ColorStop.from_name(self._settings.track_color).to_hex()


if __name__ == "__main__":
    root = tk.Tk()
    view = GaugeView(root)
    view.pack(padx=16, pady=16)
    view.apply({"counter_text": "42", "stroke_fraction": 0.42, "stroke_color": "#5a8000"})
    root.mainloop()
