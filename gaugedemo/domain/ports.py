from __future__ import annotations
from typing import Callable, Protocol

Clock = Callable[[], float]
TickCallback = Callable[[], None]


class TickSource(Protocol):
    """Display-refresh callback source (Tk ``after`` loop, test fakes).

    At most one callback is subscribed at a time. Ticks are delivered one at a
    time on the UI thread; the cadence is up to the host.
    """

    @property
    def is_subscribed(self) -> bool: ...
    def subscribe(self, callback: TickCallback) -> None: ...
    def unsubscribe(self) -> None: ...
