from __future__ import annotations

"""Polyline geometry for the gauge arc in screen coordinates (y axis down)."""

import math
from typing import List, Tuple

import numpy as np

Point = Tuple[float, float]


def arc_points(
    center: Point,
    radius: float,
    start_deg: float,
    sweep_deg: float,
    fraction: float = 1.0,
    segments: int = 72,
) -> List[Point]:
    """Return points along the first ``fraction`` of an arc.

    Angles grow clockwise on screen, starting at 3 o'clock. An empty list is
    returned for a non-positive fraction so callers can skip drawing.
    """
    fraction = min(1.0, float(fraction))
    if fraction <= 0.0:
        return []
    count = max(2, int(math.ceil(segments * fraction)) + 1)
    angles = np.radians(start_deg + sweep_deg * fraction * np.linspace(0.0, 1.0, count))
    xs = center[0] + radius * np.cos(angles)
    ys = center[1] + radius * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def flatten(points: List[Point]) -> List[float]:
    """Flatten ``[(x, y), ...]`` into the coordinate list Tk canvas items take."""
    return [coordinate for point in points for coordinate in point]


__all__ = ["Point", "arc_points", "flatten"]
