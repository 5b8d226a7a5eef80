from __future__ import annotations

"""Typed runtime settings for the gauge demo."""

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from matplotlib import colors as mcolors

from .color_ramp import PERCENT_SCALE

ENV_PREFIX = "GAUGEDEMO_"


@dataclass(frozen=True)
class GaugeSettings:
    """Gauge look and animation defaults.

    Angles follow screen conventions: degrees clockwise from 3 o'clock. The
    defaults draw a 270 degree arc that opens at the bottom.
    """

    frame_interval_ms: int = 16
    default_duration_s: int = 1
    default_progress: int = 100
    max_progress: int = 100
    start_color: str = "red"
    end_color: str = "lime"
    track_color: str = "#aaaaaa"
    line_width: int = 20
    gauge_size: int = 200
    radius: int = 92
    arc_start_deg: int = 135
    arc_sweep_deg: int = 270

    def __post_init__(self) -> None:
        if self.frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be positive.")
        if not 0 < self.max_progress <= PERCENT_SCALE:
            raise ValueError(f"max_progress must be within (0, {PERCENT_SCALE}].")
        if not 0 <= self.default_progress <= self.max_progress:
            raise ValueError("default_progress must be within [0, max_progress].")
        for name in ("start_color", "end_color", "track_color"):
            value = getattr(self, name)
            if not mcolors.is_color_like(value):
                raise ValueError(f"{name} is not a valid color: {value!r}.")

    @classmethod
    def from_mapping(
        cls, payload: Mapping[str, Any], base: Optional["GaugeSettings"] = None
    ) -> "GaugeSettings":
        """Apply flat ``{field: value}`` overrides on top of ``base`` (or defaults)."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")
        known = {item.name: item for item in fields(cls)}
        unknown = set(payload) - set(known)
        if unknown:
            raise ValueError(
                f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}"
            )
        updates: Dict[str, Any] = {}
        for key, raw in payload.items():
            default = getattr(cls, key)
            if isinstance(default, int):
                updates[key] = _coerce_int(key, raw)
            else:
                updates[key] = _coerce_str(key, raw)
        return replace(base or cls(), **updates)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GaugeSettings":
        """Read ``GAUGEDEMO_<FIELD>`` overrides, e.g. ``GAUGEDEMO_FRAME_INTERVAL_MS=33``."""
        env = os.environ if environ is None else environ
        payload = {}
        for item in fields(cls):
            value = env.get(ENV_PREFIX + item.name.upper())
            if value is not None and value.strip():
                payload[item.name] = value
        return cls.from_mapping(payload)

    def to_dict(self) -> dict:
        return asdict(self)


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    raise ValueError(f"{name} must be an integer.")


def _coerce_str(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string.")
    return value.strip()


__all__ = ["ENV_PREFIX", "GaugeSettings"]
