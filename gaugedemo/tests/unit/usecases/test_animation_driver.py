from __future__ import annotations

from typing import Callable, List, Optional
from unittest.mock import MagicMock

import pytest

from gaugedemo.domain.entities import ColorStop, Sample
from gaugedemo.domain.errors import InvalidArgument
from gaugedemo.usecases.animation_driver import AnimationDriver, DriverHooks, DriverState

RED = ColorStop(1.0, 0.0, 0.0, 1.0)
GREEN = ColorStop(0.0, 1.0, 0.0, 1.0)


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTickSource:
    def __init__(self) -> None:
        self.callback: Optional[Callable[[], object]] = None
        self.history: List[Callable[[], object]] = []
        self.unsubscribe_calls = 0

    @property
    def is_subscribed(self) -> bool:
        return self.callback is not None

    def subscribe(self, callback) -> None:
        self.callback = callback
        self.history.append(callback)

    def unsubscribe(self) -> None:
        self.callback = None
        self.unsubscribe_calls += 1

    def fire(self):
        assert self.callback is not None, "no subscriber"
        return self.callback()


def _make_driver(hooks: Optional[DriverHooks] = None):
    clock = FakeClock()
    ticks = FakeTickSource()
    driver = AnimationDriver(ticks, start_color=RED, end_color=GREEN, clock=clock, hooks=hooks)
    return driver, ticks, clock


def test_start_arms_run_and_subscribes() -> None:
    driver, ticks, clock = _make_driver()

    run = driver.start(0, 40, 2.0)

    assert driver.state is DriverState.RUNNING
    assert driver.is_running
    assert driver.current_run is run
    assert run.start_timestamp == clock.now
    assert len(run.ramp) == 41
    assert ticks.is_subscribed


def test_ramp_length_ignores_start_value() -> None:
    driver, _, _ = _make_driver()
    run = driver.start(30, 60, 1.0)
    assert len(run.ramp) == 61


def test_tick_emits_interpolated_sample() -> None:
    samples: List[Sample] = []
    driver, ticks, clock = _make_driver(DriverHooks(on_sample=samples.append))
    driver.start(0, 100, 5.0)

    clock.advance(2.5)
    sample = ticks.fire()

    assert samples == [sample]
    assert sample.counter_value == 50
    assert sample.stroke_fraction == pytest.approx(0.5)
    assert sample.stroke_color.as_tuple() == pytest.approx((0.5, 0.5, 0.0, 1.0))
    assert not sample.finished
    assert driver.is_running


def test_stroke_fraction_tracks_percentage_target() -> None:
    driver, ticks, clock = _make_driver()
    driver.start(0, 40, 2.0)

    clock.advance(1.0)
    assert ticks.fire().stroke_fraction == pytest.approx(0.2)

    clock.advance(1.0)
    final = ticks.fire()
    assert final.stroke_fraction == pytest.approx(0.4)
    assert final.stroke_color.as_tuple() == pytest.approx((0.6, 0.4, 0.0, 1.0))


def test_terminal_tick_emits_end_and_detaches() -> None:
    completed = MagicMock()
    samples: List[Sample] = []
    driver, ticks, clock = _make_driver(
        DriverHooks(on_sample=samples.append, on_completed=completed)
    )
    driver.start(0, 100, 5.0)

    clock.advance(5.0)
    sample = ticks.fire()

    assert sample.counter_value == 100
    assert sample.finished
    assert sample.stroke_fraction == 1.0
    assert sample.stroke_color == GREEN
    assert driver.state is DriverState.IDLE
    assert driver.current_run is None
    assert not ticks.is_subscribed
    completed.assert_called_once_with(sample)
    assert samples == [sample]
    assert driver.tick() is None


def test_non_positive_duration_finishes_on_first_tick() -> None:
    driver, ticks, _ = _make_driver()
    driver.start(0, 75, 0.0)

    sample = ticks.fire()

    assert sample.counter_value == 75
    assert sample.finished
    assert driver.state is DriverState.IDLE


def test_many_ticks_before_completion_stay_monotonic() -> None:
    samples: List[Sample] = []
    driver, ticks, clock = _make_driver(DriverHooks(on_sample=samples.append))
    driver.start(0, 100, 3.0)

    while driver.is_running:
        clock.advance(3.0 / 1000)
        ticks.fire()

    counters = [s.counter_value for s in samples]
    fractions = [s.stroke_fraction for s in samples]
    assert counters == sorted(counters)
    assert fractions == sorted(fractions)
    assert counters[-1] == 100
    assert samples[-1].finished
    assert sum(1 for s in samples if s.finished) == 1
    assert all(0 <= value <= 100 for value in counters)


def test_restart_cancels_prior_run() -> None:
    samples: List[Sample] = []
    driver, ticks, clock = _make_driver(DriverHooks(on_sample=samples.append))
    driver.start(0, 50, 5.0)
    clock.advance(1.0)
    ticks.fire()
    stale_callback = ticks.history[0]

    driver.start(0, 80, 3.0)
    emitted_before = len(samples)

    assert ticks.unsubscribe_calls == 1
    assert stale_callback() is None
    assert len(samples) == emitted_before

    clock.advance(3.0)
    final = ticks.fire()
    assert final.counter_value == 80
    assert all(s.counter_value <= 80 for s in samples[emitted_before:])


def test_failed_start_keeps_current_run() -> None:
    driver, ticks, _ = _make_driver()
    run = driver.start(0, 50, 5.0)

    with pytest.raises(InvalidArgument):
        driver.start(0, -1, 5.0)

    assert driver.current_run is run
    assert ticks.is_subscribed
    assert ticks.unsubscribe_calls == 0


def test_reset_from_running_notifies_once() -> None:
    on_reset = MagicMock()
    driver, ticks, clock = _make_driver(DriverHooks(on_reset=on_reset))
    driver.start(0, 100, 5.0)
    clock.advance(1.0)
    ticks.fire()

    driver.reset()
    driver.reset()

    on_reset.assert_called_once_with()
    assert driver.state is DriverState.IDLE
    assert not ticks.is_subscribed
    assert ticks.unsubscribe_calls == 1


def test_reset_from_idle_is_noop() -> None:
    on_reset = MagicMock()
    driver, ticks, _ = _make_driver(DriverHooks(on_reset=on_reset))

    driver.reset()
    driver.reset()

    on_reset.assert_not_called()
    assert ticks.unsubscribe_calls == 0
    assert driver.state is DriverState.IDLE


def test_completion_hook_may_start_next_run() -> None:
    driver, ticks, clock = _make_driver()
    driver.hooks.on_completed = lambda _sample: driver.start(0, 10, 1.0)
    driver.start(0, 20, 1.0)

    clock.advance(1.0)
    ticks.fire()

    assert driver.is_running
    assert driver.current_run.end_value == 10
    assert ticks.is_subscribed


def test_hooks_default_to_noop() -> None:
    hooks = DriverHooks(on_sample=None, on_completed=None, on_reset=None)  # type: ignore[arg-type]
    driver, ticks, clock = _make_driver(hooks)
    driver.start(0, 10, 1.0)
    clock.advance(2.0)

    assert ticks.fire().finished
