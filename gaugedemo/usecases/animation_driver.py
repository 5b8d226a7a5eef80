from __future__ import annotations

"""Driver owning the single active gauge animation, without UI concerns."""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Optional

from gaugedemo.domain import color_ramp, value_counter
from gaugedemo.domain.color_ramp import ColorLike, PERCENT_SCALE
from gaugedemo.domain.entities import AnimationRun, Sample
from gaugedemo.domain.ports import Clock, TickSource

_log = logging.getLogger(__name__)


def _noop(*_: object, **__: object) -> None:
    """Default no-op callback used for hooks."""


class DriverState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass
class DriverHooks:
    """Optional callbacks fired by the driver; all run on the tick thread."""

    on_sample: Callable[[Sample], None] = _noop
    on_completed: Callable[[Sample], None] = _noop
    on_reset: Callable[[], None] = _noop

    def __post_init__(self) -> None:
        self.on_sample = self.on_sample or _noop
        self.on_completed = self.on_completed or _noop
        self.on_reset = self.on_reset or _noop


class AnimationDriver:
    """Owns at most one :class:`AnimationRun` and turns ticks into samples.

    Idle -> ``start`` -> Running -> (elapsed >= duration) -> Idle. Starting
    while Running drops the old run before the new one is installed, and
    ``reset`` from Idle does nothing.
    """

    def __init__(
        self,
        tick_source: TickSource,
        *,
        start_color: ColorLike,
        end_color: ColorLike,
        clock: Clock = time.monotonic,
        hooks: Optional[DriverHooks] = None,
        ramp_scale: int = PERCENT_SCALE,
    ) -> None:
        self._tick_source = tick_source
        self._start_color = start_color
        self._end_color = end_color
        self._clock = clock
        self._ramp_scale = ramp_scale
        self.hooks = hooks or DriverHooks()
        self._run: Optional[AnimationRun] = None

    @property
    def state(self) -> DriverState:
        return DriverState.RUNNING if self._run is not None else DriverState.IDLE

    @property
    def is_running(self) -> bool:
        return self._run is not None

    @property
    def current_run(self) -> Optional[AnimationRun]:
        return self._run

    def start(self, start_value: int, end_value: int, duration: float) -> AnimationRun:
        """Arm a new run, replacing any run in flight.

        The ramp is built before any state changes, so an invalid ``end_value``
        raises :class:`~gaugedemo.domain.errors.InvalidArgument` and leaves the
        current run untouched.
        """
        ramp = color_ramp.build(
            self._start_color, self._end_color, end_value, scale=self._ramp_scale
        )
        if self._run is not None:
            _log.debug("Replacing active run %s -> %s", self._run.end_value, end_value)
            self._detach()

        run = AnimationRun(
            start_value=int(start_value),
            end_value=int(end_value),
            duration=float(duration),
            start_timestamp=self._clock(),
            ramp=ramp,
        )
        self._run = run
        self._tick_source.subscribe(partial(self._handle_tick, run))
        _log.info(
            "Animation started: %d -> %d over %.3fs", run.start_value, run.end_value, run.duration
        )
        return run

    def reset(self) -> None:
        """Stop the active run and ask the host to show the initial state."""
        if self._run is None:
            return
        self._detach()
        _log.info("Animation reset")
        self.hooks.on_reset()

    def tick(self) -> Optional[Sample]:
        """Process one tick for the active run (no-op while Idle)."""
        if self._run is None:
            return None
        return self._handle_tick(self._run)

    def sample_at(self, run: AnimationRun, elapsed: float) -> Sample:
        """Pure mapping from elapsed time to the sample shown for ``run``."""
        t = value_counter.progress_fraction(elapsed, run.duration)
        target_fraction = run.end_value / float(self._ramp_scale)
        stroke_fraction = min(1.0, max(0.0, t * target_fraction))
        return Sample(
            counter_value=value_counter.sample(
                elapsed, run.start_value, run.end_value, run.duration
            ),
            stroke_fraction=stroke_fraction,
            stroke_color=run.ramp.at(t),
            finished=value_counter.is_terminal(elapsed, run.duration),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _handle_tick(self, run: AnimationRun) -> Optional[Sample]:
        if run is not self._run:
            _log.debug("Ignoring tick for replaced run (end=%d)", run.end_value)
            return None

        sample = self.sample_at(run, run.elapsed(self._clock()))
        if sample.finished:
            self._detach()
            _log.info("Animation completed at %d", sample.counter_value)
            self.hooks.on_sample(sample)
            self.hooks.on_completed(sample)
            return sample

        self.hooks.on_sample(sample)
        return sample

    def _detach(self) -> None:
        self._tick_source.unsubscribe()
        self._run = None


__all__ = ["AnimationDriver", "DriverHooks", "DriverState"]
