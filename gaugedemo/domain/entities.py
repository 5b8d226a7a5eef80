from __future__ import annotations

"""Domain value objects shared by the interpolation core, view models, and views."""

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from matplotlib import colors as mcolors

RGBA = Tuple[float, float, float, float]


@dataclass(frozen=True)
class ColorStop:
    """Immutable RGBA color with float components.

    Components are conceptually in ``[0, 1]`` but are not clamped on
    construction, so blends computed outside that range survive until a view
    asks for :meth:`clamped` or :meth:`to_hex`.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_components(cls, components: Sequence[float]) -> "ColorStop":
        """Build a stop from up to four components, padding missing ones with 0."""
        values = [float(value) for value in list(components)[:4]]
        values.extend([0.0] * (4 - len(values)))
        return cls(*values)

    @classmethod
    def from_name(cls, name: str) -> "ColorStop":
        """Resolve a color name or ``#rrggbb[aa]`` string through matplotlib."""
        try:
            rgba = mcolors.to_rgba(name)
        except ValueError as exc:
            raise ValueError(f"Unknown color: {name!r}") from exc
        return cls(*rgba)

    def as_tuple(self) -> RGBA:
        return (self.red, self.green, self.blue, self.alpha)

    def clamped(self) -> "ColorStop":
        return ColorStop(*(min(1.0, max(0.0, value)) for value in self.as_tuple()))

    def to_hex(self) -> str:
        """Return a Tk-compatible ``#rrggbb`` string (alpha dropped)."""
        return mcolors.to_hex(self.clamped().as_tuple(), keep_alpha=False)

    def blend(self, other: "ColorStop", t: float) -> "ColorStop":
        """Channel-wise linear blend ``self + (other - self) * t`` (t unclamped)."""
        return ColorStop(
            *(
                start + (end - start) * t
                for start, end in zip(self.as_tuple(), other.as_tuple())
            )
        )

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())


@dataclass(frozen=True)
class ColorRamp:
    """Ordered, read-only sequence of color stops built once per run."""

    stops: Tuple[ColorStop, ...]

    def __post_init__(self) -> None:
        if not self.stops:
            raise ValueError("ColorRamp requires at least one stop.")

    def __len__(self) -> int:
        return len(self.stops)

    def __getitem__(self, index: int) -> ColorStop:
        return self.stops[index]

    def __iter__(self) -> Iterator[ColorStop]:
        return iter(self.stops)

    @property
    def first(self) -> ColorStop:
        return self.stops[0]

    @property
    def last(self) -> ColorStop:
        return self.stops[-1]

    def at(self, t: float) -> ColorStop:
        """Color at normalized time ``t``.

        Stops are treated as evenly spaced keyframes over ``[0, 1]`` and the
        color between two neighbours is blended linearly.
        """
        if t >= 1.0 or len(self.stops) == 1:
            return self.last
        if t <= 0.0:
            return self.first
        position = t * (len(self.stops) - 1)
        index = int(math.floor(position))
        return self.stops[index].blend(self.stops[index + 1], position - index)


@dataclass(frozen=True)
class AnimationRun:
    """State of the single active animation, owned by the driver."""

    start_value: int
    end_value: int
    duration: float
    """Run length in seconds; ``<= 0`` completes on the first tick."""
    start_timestamp: float
    """Clock reading taken when the run was armed."""
    ramp: ColorRamp

    def elapsed(self, now: float) -> float:
        return now - self.start_timestamp


@dataclass(frozen=True)
class Sample:
    """Per-tick output delivered to the host; never stored by the core."""

    counter_value: int
    stroke_fraction: float
    stroke_color: Optional[ColorStop]
    finished: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.stroke_fraction <= 1.0:
            raise ValueError("Sample.stroke_fraction must be within [0, 1].")


__all__ = ["AnimationRun", "ColorRamp", "ColorStop", "RGBA", "Sample"]
