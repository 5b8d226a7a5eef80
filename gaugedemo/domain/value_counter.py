"""Time to integer mapping for the counter label.

The counter is a one-shot linear count from ``start`` to ``end`` over
``duration`` seconds. Values are rounded half away from zero, so ``2.5``
becomes ``3`` and ``-2.5`` becomes ``-3``.
"""

from __future__ import annotations

import math


def is_terminal(elapsed: float, duration: float) -> bool:
    """Return True once the run has reached (or never had) a positive duration."""
    return duration <= 0 or elapsed >= duration


def progress_fraction(elapsed: float, duration: float) -> float:
    """Linear time fraction in ``[0, 1]``; terminal runs report ``1.0``."""
    if is_terminal(elapsed, duration):
        return 1.0
    return max(0.0, elapsed / duration)


def round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return int(-magnitude if value < 0 else magnitude)


def sample(elapsed: float, start: int, end: int, duration: float) -> int:
    """Counter value after ``elapsed`` seconds.

    Returns ``end`` when the run is terminal (``duration <= 0`` counts as
    instant completion, not an error); the caller is expected to stop
    sampling at that point. ``end < start`` counts down.
    """
    if is_terminal(elapsed, duration):
        return end
    fraction = elapsed / duration
    value = start + fraction * (end - start)
    return round_half_away(value)


__all__ = ["is_terminal", "progress_fraction", "round_half_away", "sample"]
