"""Discrete color ramps for the progress stroke.

Entry ``i`` of a ramp is ``start + (end - start) * (i / scale)``. The scale
defaults to :data:`PERCENT_SCALE` because gauge progress is a percentage: a
ramp for 40 % progress stops at 40 % of the way from ``start`` to ``end``
instead of stretching the full gradient over a partial arc.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .entities import ColorRamp, ColorStop
from .errors import InvalidArgument

PERCENT_SCALE = 100

ColorLike = Union[ColorStop, Sequence[float]]


def _as_stop(color: ColorLike) -> ColorStop:
    if isinstance(color, ColorStop):
        return color
    return ColorStop.from_components(color)


def interpolate_color(start: ColorLike, end: ColorLike, t: float) -> ColorStop:
    """Blend two colors channel by channel; missing components count as 0."""
    return _as_stop(start).blend(_as_stop(end), t)


def build(
    start: ColorLike,
    end: ColorLike,
    steps: int,
    *,
    scale: int = PERCENT_SCALE,
) -> ColorRamp:
    """Build the ``steps + 1`` entry ramp for one animation run.

    Raises:
        InvalidArgument: ``steps`` is negative or larger than ``scale``, or
            ``scale`` is not positive.
    """
    if steps < 0:
        raise InvalidArgument(f"steps must be >= 0, got {steps}.")
    if scale <= 0:
        raise InvalidArgument(f"scale must be > 0, got {scale}.")
    if steps > scale:
        raise InvalidArgument(f"steps must be <= {scale}, got {steps}.")

    origin = np.asarray(_as_stop(start).as_tuple(), dtype=float)
    delta = np.asarray(_as_stop(end).as_tuple(), dtype=float) - origin
    factors = np.arange(int(steps) + 1, dtype=float) / float(scale)
    rows = origin + np.outer(factors, delta)
    return ColorRamp(tuple(ColorStop(*(float(value) for value in row)) for row in rows))


__all__ = ["PERCENT_SCALE", "build", "interpolate_color"]
