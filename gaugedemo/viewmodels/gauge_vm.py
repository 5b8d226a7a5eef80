from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from ..domain.entities import Sample
from ..domain.settings import GaugeSettings
from ..usecases.animation_driver import AnimationDriver

GaugeDTO = Dict[str, object]

_log = logging.getLogger(__name__)


@dataclass
class GaugeVM:
    """Owns the input text state and turns driver samples into gauge DTOs.

    Malformed input never surfaces as an error: it falls back to the
    configured defaults (duration 1 s, progress 100).
    """

    settings: GaugeSettings = field(default_factory=GaugeSettings)
    on_update_gauge: Optional[Callable[[GaugeDTO], None]] = None
    on_status: Optional[Callable[[str], None]] = None
    driver: Optional[AnimationDriver] = None

    progress_text: str = ""
    duration_text: str = ""
    counter_text: str = "0"
    stroke_fraction: float = 0.0
    stroke_color: Optional[str] = None
    running: bool = False

    def bind_driver(self, driver: AnimationDriver) -> None:
        self.driver = driver

    def set_field(self, field_id: str, value: str) -> None:
        if field_id == "progress":
            self.progress_text = value
        elif field_id == "duration":
            self.duration_text = value
        else:
            raise KeyError(f"Unknown field: {field_id}")

    # ------------------------------------------------------------------
    # Input parsing
    # ------------------------------------------------------------------
    def parse_progress(self, text: Optional[str]) -> int:
        """Integer target in ``[0, max_progress]``; default when malformed."""
        value = self._parse_int(text, self.settings.default_progress)
        clamped = min(self.settings.max_progress, max(0, value))
        if clamped != value:
            _log.info("Progress %d clamped to %d", value, clamped)
        return clamped

    def parse_duration(self, text: Optional[str]) -> float:
        """Whole seconds; default when malformed. ``<= 0`` completes instantly."""
        return float(self._parse_int(text, self.settings.default_duration_s))

    def resolve_inputs(self) -> Tuple[int, float]:
        return self.parse_progress(self.progress_text), self.parse_duration(self.duration_text)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def cmd_start(self) -> None:
        if self.driver is None:
            raise RuntimeError("GaugeVM has no animation driver bound.")
        target, duration = self.resolve_inputs()
        self.driver.start(0, target, duration)
        self._show_initial_state()
        self.running = True
        self._status(f"Animating to {target} over {duration:g}s")

    def cmd_reset(self) -> None:
        if self.driver is None:
            raise RuntimeError("GaugeVM has no animation driver bound.")
        self.driver.reset()

    # ------------------------------------------------------------------
    # Driver hooks
    # ------------------------------------------------------------------
    def apply_sample(self, sample: Sample) -> None:
        """Consume one driver sample and fan it out to the gauge view."""
        if not isinstance(sample, Sample):
            raise TypeError("GaugeVM.apply_sample requires a Sample.")
        self.counter_text = str(sample.counter_value)
        self.stroke_fraction = sample.stroke_fraction
        self.stroke_color = sample.stroke_color.to_hex() if sample.stroke_color else None
        self.running = not sample.finished
        self._emit()

    def apply_completed(self, sample: Sample) -> None:
        self._status(f"Done: {sample.counter_value}")

    def apply_reset(self) -> None:
        self._show_initial_state()
        self._status("Reset.")

    def to_dto(self) -> GaugeDTO:
        return {
            "counter_text": self.counter_text,
            "stroke_fraction": self.stroke_fraction,
            "stroke_color": self.stroke_color,
            "running": self.running,
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _show_initial_state(self) -> None:
        self.counter_text = "0"
        self.stroke_fraction = 0.0
        self.stroke_color = None
        self.running = False
        self._emit()

    def _emit(self) -> None:
        if self.on_update_gauge:
            self.on_update_gauge(self.to_dto())

    def _status(self, message: str) -> None:
        if self.on_status:
            self.on_status(message)

    @staticmethod
    def _parse_int(text: Optional[str], default: int) -> int:
        if text is None:
            return default
        token = text.strip()
        if not token:
            return default
        try:
            return int(token)
        except ValueError:
            _log.debug("Unparseable input %r, using default %d", text, default)
            return default
