"""Domain package exports for value objects and the interpolation core."""

from .color_ramp import PERCENT_SCALE, build, interpolate_color
from .entities import AnimationRun, ColorRamp, ColorStop, Sample
from .errors import GaugeError, InvalidArgument
from .settings import GaugeSettings
from .value_counter import sample

__all__ = [
    "AnimationRun",
    "ColorRamp",
    "ColorStop",
    "GaugeError",
    "GaugeSettings",
    "InvalidArgument",
    "PERCENT_SCALE",
    "Sample",
    "build",
    "interpolate_color",
    "sample",
]
