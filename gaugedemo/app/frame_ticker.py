"""Frame clock that drives the gauge animation from the Tk event loop.

The app passes Tk ``after`` and ``after_cancel`` callables into this class so
the pending frame token is tracked in one place and canceled safely when the
animation completes, restarts, or the window closes.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.ports import TickCallback

ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]

_log = logging.getLogger(__name__)


class FrameTicker:
    """Repeating tick source built on a UI scheduler (for example Tk)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn, interval_ms: int = 16) -> None:
        """Store schedule/cancel functions and the frame interval.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
            interval_ms: Delay between ticks; values below 1 are raised to 1.
        """
        self._schedule = schedule
        self._cancel = cancel
        self._interval_ms = max(1, int(interval_ms))
        self._callback: Optional[TickCallback] = None
        self._token: Optional[str] = None
        self._generation = 0

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def is_subscribed(self) -> bool:
        return self._callback is not None

    @property
    def pending_token(self) -> Optional[str]:
        """Return the scheduler token of the next frame, if one is pending."""
        return self._token

    def subscribe(self, callback: TickCallback) -> None:
        """Replace the current subscriber and schedule its first tick."""
        self.unsubscribe()
        self._generation += 1
        self._callback = callback
        self._arm()

    def unsubscribe(self) -> None:
        """Drop the subscriber and cancel the pending frame, if any."""
        self._callback = None
        token, self._token = self._token, None
        if token is None:
            return
        try:
            self._cancel(token)
        except Exception:
            _log.debug("after_cancel failed for token %s", token, exc_info=True)

    # ------------------------------------------------------------------
    def _arm(self) -> None:
        self._token = self._schedule(self._interval_ms, self._fire)

    def _fire(self) -> None:
        self._token = None
        callback = self._callback
        if callback is None:
            return
        generation = self._generation
        try:
            callback()
        except Exception:
            _log.exception("Frame callback failed")
        finally:
            # The callback may have unsubscribed (run completed) or resubscribed.
            if self._callback is callback and self._generation == generation and self._token is None:
                self._arm()


__all__ = ["FrameTicker"]
